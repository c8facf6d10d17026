from __future__ import annotations

from dataclasses import dataclass, field, replace

from services.tour.domain.value_object.section_fields import pick_lists, pick_text


@dataclass(frozen=True)
class TourRequirements:
    """参加条件（体力・必要書類・持ち物）"""

    physical_level: str = ""
    fitness_level: str = ""
    documents: tuple[str, ...] = field(default_factory=tuple)
    packing_list: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_input(cls, data: dict | None) -> TourRequirements:
        return cls().merge(data or {})

    def merge(self, changes: dict) -> TourRequirements:
        return replace(
            self,
            **pick_text(changes, ("physical_level", "fitness_level")),
            **pick_lists(changes, ("documents", "packing_list")),
        )

    def to_dict(self) -> dict:
        return {
            "physical_level": self.physical_level,
            "fitness_level": self.fitness_level,
            "documents": list(self.documents),
            "packing_list": list(self.packing_list),
        }
