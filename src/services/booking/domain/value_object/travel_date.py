from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class TravelDate:
    """旅行日（時刻は持たない）"""

    value: date

    @classmethod
    def from_string(cls, s: str) -> TravelDate:
        """YYYY-MM-DD または ISO 8601 日時から生成（日時は日付に切り捨て）"""
        try:
            return cls(value=date.fromisoformat(s))
        except ValueError:
            pass
        try:
            return cls(value=datetime.fromisoformat(s.replace("Z", "+00:00")).date())
        except ValueError as e:
            raise ValueError(f"Invalid travel date: {s}") from e

    def __str__(self) -> str:
        return self.value.isoformat()

    def is_before(self, day: date) -> bool:
        return self.value < day
