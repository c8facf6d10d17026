from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar
from uuid import uuid4

from ..exception import MalformedIdException

_ID_PATTERN = re.compile(r"[0-9a-f]{32}")


@dataclass(frozen=True)
class OpaqueId:
    """ストアが払い出す不透明ID（32桁の16進小文字）の基底クラス

    形式が一致しない値は MalformedIdException とする。
    """

    LABEL: ClassVar[str] = "ID"

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _ID_PATTERN.fullmatch(self.value):
            raise MalformedIdException(f"Invalid {self.LABEL} format")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls):
        """新しいIDを払い出す"""
        return cls(value=uuid4().hex)
