from __future__ import annotations

from dataclasses import dataclass

from services.tour.domain.entity import Tour
from services.tour.domain.entity.tour import COVER_PLACEHOLDER_IMAGE
from services.tour.domain.enum import Category, Region

TOUR_NOT_FOUND = "Tour not found"
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class TourSummary:
    """予約・保存済みツアーに結合するツアー概要

    参照先のツアーが削除済みの場合は missing() の代替値を使う。
    """

    id: str | None
    title: str
    price: int
    description: str
    duration: str
    image: str
    category: str
    region: str

    @classmethod
    def of(cls, tour: Tour) -> TourSummary:
        return cls(
            id=str(tour.id),
            title=tour.title,
            price=int(tour.price),
            description=tour.description,
            duration=tour.duration,
            image=tour.cover_image,
            category=tour.category.value,
            region=tour.region.value,
        )

    @classmethod
    def missing(cls) -> TourSummary:
        return cls(
            id=None,
            title=TOUR_NOT_FOUND,
            price=0,
            description="",
            duration=NOT_AVAILABLE,
            image=COVER_PLACEHOLDER_IMAGE,
            category=Category.HERITAGE.value,
            region=Region.NORTH.value,
        )

    @classmethod
    def resolve(cls, tour: Tour | None) -> TourSummary:
        return cls.of(tour) if tour is not None else cls.missing()
