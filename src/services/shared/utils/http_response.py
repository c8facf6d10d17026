import json

from services.shared.domain.exception import (
    DomainException,
    DuplicateResourceException,
    MalformedIdException,
    ResourceNotFoundException,
    ValidationException,
)

from .environment import is_production

_STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (ValidationException, 400),
    (MalformedIdException, 400),
    (DuplicateResourceException, 400),
    (ResourceNotFoundException, 404),
]


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def success_response(status_code: int, message: str | None = None, **fields) -> dict:
    """成功レスポンス {success: true, message?, data?, ...} を生成する"""
    body: dict = {"success": True}
    if message is not None:
        body["message"] = message
    body.update(fields)
    return api_response(status_code, body)


def error_response(
    status_code: int, message: str, errors: list[str] | None = None
) -> dict:
    """失敗レスポンス {success: false, message, errors?} を生成する"""
    body: dict = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return api_response(status_code, body)


def domain_error_response(error: DomainException) -> dict:
    """ドメイン例外を HTTP ステータスに変換する"""
    status_code = 400
    for exception_type, code in _STATUS_CODES:
        if isinstance(error, exception_type):
            status_code = code
            break

    if isinstance(error, ValidationException):
        return error_response(status_code, error.message, error.errors)
    return error_response(status_code, str(error))


def internal_error_response(message: str, error: Exception) -> dict:
    """500 レスポンスを生成する

    本番環境以外では元の例外メッセージを error に含める。
    """
    body: dict = {"success": False, "message": message}
    if not is_production():
        body["error"] = str(error)
    return api_response(500, body)
