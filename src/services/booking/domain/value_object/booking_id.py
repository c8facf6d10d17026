from dataclasses import dataclass

from services.shared.domain import OpaqueId

DISPLAY_CODE_PREFIX = "TV"


@dataclass(frozen=True)
class BookingId(OpaqueId):
    """予約ID（Value Object）"""

    LABEL = "booking ID"

    @property
    def display_code(self) -> str:
        """画面表示用の予約番号（TV + IDの末尾8文字）"""
        return f"{DISPLAY_CODE_PREFIX}{self.value[-8:]}"
