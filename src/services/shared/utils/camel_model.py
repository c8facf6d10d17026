from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """キーを camelCase で受け渡しするモデルの基底クラス"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def dump(self) -> dict:
        """camelCase・JSON 互換の dict に変換する"""
        return self.model_dump(by_alias=True, mode="json")
