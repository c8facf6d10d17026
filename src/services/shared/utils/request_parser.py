from typing import TypeVar

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from services.shared.domain.exception import ValidationException

M = TypeVar("M", bound=BaseModel)


def read_json_body(event: APIGatewayProxyEvent) -> dict:
    """リクエストボディを JSON オブジェクトとして読み出す"""
    if not event.body:
        return {}
    try:
        body = event.json_body
    except ValueError as e:
        raise ValidationException(["Request body must be valid JSON"]) from e
    if not isinstance(body, dict):
        raise ValidationException(["Request body must be a JSON object"])
    return body


def path_parameter(event: APIGatewayProxyEvent, name: str) -> str | None:
    """パスパラメータを取り出す（空文字は None 扱い）"""
    value = (event.path_parameters or {}).get(name)
    return value or None


def parse_model(model: type[M], payload: object) -> M:
    """pydantic モデルで検証し、失敗時は ValidationException に変換する"""
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationException([_format_error(err) for err in e.errors()]) from e


def _format_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message
