from datetime import date, datetime

from services.shared.domain import AggregateRoot, Price, TourId, UserId
from services.shared.utils.validators import clean_strings
from services.tour.domain.entity.rating import Rating
from services.tour.domain.enum import Category, Region
from services.tour.domain.service.rating_aggregator import recompute_aggregate
from services.tour.domain.value_object import (
    ImportantInfo,
    ItineraryDay,
    RatingScore,
    RatingSummary,
    TourDetails,
    TourOverview,
    TourPricing,
    TourRequirements,
    build_available_dates,
    build_itinerary,
)

DEFAULT_TOUR_IMAGE = "https://via.placeholder.com/600x400?text=Tour+Image"
COVER_PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x200"
DEFAULT_MAX_PARTICIPANTS = 20


class Tour(AggregateRoot[TourId]):
    """ツアー集約

    評価（Rating）は集約内に保持し、評価一覧が変わるたびに
    平均点と件数を recompute_aggregate で再計算する。
    """

    def __init__(
        self,
        id: TourId,
        title: str,
        description: str,
        price: Price,
        duration: str,
        created_at: datetime,
        updated_at: datetime | None = None,
        detailed_description: str = "",
        image: str = DEFAULT_TOUR_IMAGE,
        images: list[str] | None = None,
        region: Region = Region.NORTH,
        category: Category = Category.HERITAGE,
        destination: str = "",
        overview: TourOverview | None = None,
        included: list[str] | None = None,
        excluded: list[str] | None = None,
        itinerary: list[ItineraryDay] | None = None,
        requirements: TourRequirements | None = None,
        pricing: TourPricing | None = None,
        important_info: ImportantInfo | None = None,
        available_dates: list[date] | None = None,
        max_participants: int = DEFAULT_MAX_PARTICIPANTS,
        current_participants: int = 0,
        ratings: list[Rating] | None = None,
        is_active: bool = True,
    ) -> None:
        super().__init__(id)
        if max_participants < 1:
            raise ValueError("Max participants must be at least 1")
        if current_participants < 0:
            raise ValueError("Current participants cannot be negative")

        self._title = title
        self._description = description
        self._detailed_description = detailed_description
        self._price = price
        self._duration = duration
        self._image = image
        self._images = list(images or [])
        self._region = region
        self._category = category
        self._destination = destination
        self._overview = overview or TourOverview()
        self._included = list(included or [])
        self._excluded = list(excluded or [])
        self._itinerary = list(itinerary or [])
        self._requirements = requirements or TourRequirements()
        self._pricing = pricing or TourPricing(base_price=int(price))
        self._important_info = important_info or ImportantInfo()
        self._available_dates = list(available_dates or [])
        self._max_participants = max_participants
        self._current_participants = current_participants
        self._ratings = list(ratings or [])
        self._is_active = is_active
        self._created_at = created_at
        self._updated_at = updated_at or created_at
        self._rating_summary = recompute_aggregate(self._ratings)

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        return self._description

    @property
    def detailed_description(self) -> str:
        return self._detailed_description

    @property
    def price(self) -> Price:
        return self._price

    @property
    def duration(self) -> str:
        return self._duration

    @property
    def image(self) -> str:
        return self._image

    @property
    def images(self) -> list[str]:
        return list(self._images)

    @property
    def cover_image(self) -> str:
        """一覧表示用の画像（images の先頭、無ければプレースホルダ）"""
        return self._images[0] if self._images else COVER_PLACEHOLDER_IMAGE

    @property
    def region(self) -> Region:
        return self._region

    @property
    def category(self) -> Category:
        return self._category

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def overview(self) -> TourOverview:
        return self._overview

    @property
    def included(self) -> list[str]:
        return list(self._included)

    @property
    def excluded(self) -> list[str]:
        return list(self._excluded)

    @property
    def itinerary(self) -> list[ItineraryDay]:
        return list(self._itinerary)

    @property
    def requirements(self) -> TourRequirements:
        return self._requirements

    @property
    def pricing(self) -> TourPricing:
        return self._pricing

    @property
    def important_info(self) -> ImportantInfo:
        return self._important_info

    @property
    def available_dates(self) -> list[date]:
        return list(self._available_dates)

    @property
    def max_participants(self) -> int:
        return self._max_participants

    @property
    def current_participants(self) -> int:
        return self._current_participants

    @property
    def ratings(self) -> list[Rating]:
        return list(self._ratings)

    @property
    def rating_summary(self) -> RatingSummary:
        return self._rating_summary

    @property
    def average_rating(self) -> float:
        return self._rating_summary.average

    @property
    def total_ratings(self) -> int:
        return self._rating_summary.count

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def rating_of(self, user_id: UserId) -> Rating | None:
        """ユーザーの評価を返す（未評価なら None）"""
        for rating in self._ratings:
            if rating.user_id == user_id:
                return rating
        return None

    def rate(
        self, user_id: UserId, score: RatingScore, review: str, rated_at: datetime
    ) -> bool:
        """評価を登録する

        同じユーザーの評価があれば同じ位置で上書きし、無ければ末尾に追加する。

        Returns:
            bool: 既存の評価を上書きした場合 True
        """
        existing = self.rating_of(user_id)
        if existing is not None:
            existing.revise(score, review, rated_at)
        else:
            self._ratings.append(
                Rating(user_id=user_id, score=score, review=review, date=rated_at)
            )
        self._rating_summary = recompute_aggregate(self._ratings)
        self._updated_at = rated_at
        return existing is not None

    def revise(self, changes: TourDetails, updated_at: datetime) -> None:
        """カタログ情報を部分更新する（評価と集計値は変更しない）"""
        if changes.get("title"):
            self._title = changes["title"].strip()
        if changes.get("description"):
            self._description = changes["description"].strip()
        if changes.get("detailed_description") is not None:
            self._detailed_description = changes["detailed_description"].strip()
        if changes.get("price") is not None:
            self._price = Price(amount=changes["price"])
        if changes.get("duration"):
            self._duration = changes["duration"].strip()
        if changes.get("image"):
            self._image = changes["image"].strip()
        if "images" in changes:
            self._images = clean_strings(changes["images"])
        if changes.get("region"):
            self._region = Region(changes["region"])
        if changes.get("category"):
            self._category = Category(changes["category"])
        if changes.get("destination") is not None:
            self._destination = changes["destination"].strip()
        if changes.get("overview"):
            self._overview = self._overview.merge(changes["overview"])
        if "included" in changes:
            self._included = clean_strings(changes["included"])
        if "excluded" in changes:
            self._excluded = clean_strings(changes["excluded"])
        if isinstance(changes.get("itinerary"), list):
            self._itinerary = build_itinerary(changes["itinerary"])
        if changes.get("requirements"):
            self._requirements = self._requirements.merge(changes["requirements"])
        if changes.get("pricing"):
            self._pricing = self._pricing.merge(changes["pricing"], int(self._price))
        if changes.get("important_info"):
            self._important_info = self._important_info.merge(
                changes["important_info"]
            )
        if "available_dates" in changes:
            self._available_dates = build_available_dates(changes["available_dates"])
        if changes.get("max_participants") is not None:
            if changes["max_participants"] < 1:
                raise ValueError("Max participants must be at least 1")
            self._max_participants = changes["max_participants"]
        if changes.get("is_active") is not None:
            self._is_active = changes["is_active"]
        self._updated_at = updated_at
