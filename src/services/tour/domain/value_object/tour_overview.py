from __future__ import annotations

from dataclasses import dataclass, field, replace

from services.tour.domain.enum import Difficulty
from services.tour.domain.value_object.section_fields import pick_lists, pick_text

INVALID_DIFFICULTY_MESSAGE = "Difficulty must be easy, moderate, or difficult"


def _difficulty(value: object) -> Difficulty:
    if not value:
        return Difficulty.EASY
    try:
        return Difficulty(value)
    except ValueError as e:
        raise ValueError(INVALID_DIFFICULTY_MESSAGE) from e


@dataclass(frozen=True)
class TourOverview:
    """ツアー概要

    見どころ・催行人数・難易度・対象年齢・ベストシーズン・対応言語。
    """

    highlights: tuple[str, ...] = field(default_factory=tuple)
    group_size: str = ""
    difficulty: Difficulty = Difficulty.EASY
    age_range: str = ""
    best_season: str = ""
    languages: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_input(cls, data: dict | None) -> TourOverview:
        return cls().merge(data or {})

    def merge(self, changes: dict) -> TourOverview:
        """入力にあるキーだけを上書きした概要を返す"""
        values: dict = {
            **pick_text(changes, ("group_size", "age_range", "best_season")),
            **pick_lists(changes, ("highlights", "languages")),
        }
        if "difficulty" in changes:
            values["difficulty"] = _difficulty(changes["difficulty"])
        return replace(self, **values)

    def to_dict(self) -> dict:
        return {
            "highlights": list(self.highlights),
            "group_size": self.group_size,
            "difficulty": self.difficulty.value,
            "age_range": self.age_range,
            "best_season": self.best_season,
            "languages": list(self.languages),
        }
