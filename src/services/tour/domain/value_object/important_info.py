from __future__ import annotations

from dataclasses import asdict, dataclass, replace

from services.tour.domain.value_object.section_fields import pick_text

FIELDS = ("booking_cutoff", "refund_policy", "health_advisory", "safety_measures")


@dataclass(frozen=True)
class ImportantInfo:
    """予約前に確認すべき注意事項"""

    booking_cutoff: str = ""
    refund_policy: str = ""
    health_advisory: str = ""
    safety_measures: str = ""

    @classmethod
    def from_input(cls, data: dict | None) -> ImportantInfo:
        return cls().merge(data or {})

    def merge(self, changes: dict) -> ImportantInfo:
        return replace(self, **pick_text(changes, FIELDS))

    def to_dict(self) -> dict:
        return asdict(self)
