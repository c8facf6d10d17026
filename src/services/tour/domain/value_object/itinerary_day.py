from __future__ import annotations

from dataclasses import dataclass, field

from services.shared.utils.validators import clean_strings


@dataclass(frozen=True)
class ItineraryDay:
    """旅程の1日分"""

    day: int
    title: str
    description: str = ""
    activities: tuple[str, ...] = field(default_factory=tuple)
    meals: str = ""
    accommodation: str = ""

    def __post_init__(self) -> None:
        if self.day < 1:
            raise ValueError("Itinerary day must be 1 or greater")


def build_itinerary(entries: list[dict]) -> list[ItineraryDay]:
    """入力された旅程から空の日を除き、1..N で振り直す

    タイトル・説明・アクティビティのいずれも無い日は捨てる。
    """
    kept = [
        entry
        for entry in entries
        if isinstance(entry, dict)
        and (
            entry.get("title")
            or entry.get("description")
            or clean_strings(entry.get("activities"))
        )
    ]
    return [
        ItineraryDay(
            day=index,
            title=entry.get("title") or f"Day {index}",
            description=entry.get("description") or "",
            activities=tuple(clean_strings(entry.get("activities"))),
            meals=entry.get("meals") or "",
            accommodation=entry.get("accommodation") or "",
        )
        for index, entry in enumerate(kept, start=1)
    ]
