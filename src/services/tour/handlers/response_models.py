from __future__ import annotations

from datetime import date, datetime

from pydantic import Field

from services.shared.utils import CamelModel
from services.tour.applications.get_tour_ratings import RatingWithUser
from services.tour.domain.entity import Rating, Tour


class ItineraryDayData(CamelModel):
    day: int
    title: str
    description: str
    activities: list[str]
    meals: str
    accommodation: str


class TourOverviewData(CamelModel):
    highlights: list[str]
    group_size: str
    difficulty: str
    age_range: str
    best_season: str
    languages: list[str]


class TourRequirementsData(CamelModel):
    physical_level: str
    fitness_level: str
    documents: list[str]
    packing_list: list[str]


class DiscountData(CamelModel):
    name: str
    percentage: int
    description: str


class TourPricingData(CamelModel):
    base_price: int
    discounts: list[DiscountData]
    payment_policy: str
    cancellation_policy: str


class ImportantInfoData(CamelModel):
    booking_cutoff: str
    refund_policy: str
    health_advisory: str
    safety_measures: str


class RatingData(CamelModel):
    """評価データのレスポンスモデル"""

    user_id: str
    rating: int
    review: str
    date: datetime


class RaterData(CamelModel):
    id: str = Field(serialization_alias="_id")
    name: str
    email: str


class RatingWithUserData(RatingData):
    """評価者の名前・メールアドレスを結合した評価データ"""

    user: RaterData | None


class TourData(CamelModel):
    """ツアーデータのレスポンスモデル"""

    id: str = Field(serialization_alias="_id")
    title: str
    description: str
    detailed_description: str
    price: int
    duration: str
    image: str
    images: list[str]
    region: str
    category: str
    destination: str
    overview: TourOverviewData
    included: list[str]
    excluded: list[str]
    itinerary: list[ItineraryDayData]
    requirements: TourRequirementsData
    pricing: TourPricingData
    important_info: ImportantInfoData
    available_dates: list[date]
    max_participants: int
    current_participants: int
    ratings: list[RatingData]
    average_rating: float
    total_ratings: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


def to_rating_data(rating: Rating) -> dict:
    return _rating(rating).dump()


def _rating(rating: Rating) -> RatingData:
    return RatingData(
        user_id=str(rating.user_id),
        rating=int(rating.score),
        review=rating.review,
        date=rating.date,
    )


def to_rating_with_user_data(entry: RatingWithUser) -> dict:
    """評価者を結合した評価データに変換する（削除済みユーザーは null）"""
    user = entry.user
    return RatingWithUserData(
        user_id=str(entry.rating.user_id),
        rating=int(entry.rating.score),
        review=entry.rating.review,
        date=entry.rating.date,
        user=(
            RaterData(id=str(user.id), name=user.name, email=user.email)
            if user is not None
            else None
        ),
    ).dump()


def to_tour_data(tour: Tour) -> dict:
    """Tour エンティティをレスポンス辞書に変換する"""
    return TourData(
        id=str(tour.id),
        title=tour.title,
        description=tour.description,
        detailed_description=tour.detailed_description,
        price=int(tour.price),
        duration=tour.duration,
        image=tour.image,
        images=tour.images,
        region=tour.region.value,
        category=tour.category.value,
        destination=tour.destination,
        overview=TourOverviewData(**tour.overview.to_dict()),
        included=tour.included,
        excluded=tour.excluded,
        itinerary=[
            ItineraryDayData(
                day=day.day,
                title=day.title,
                description=day.description,
                activities=list(day.activities),
                meals=day.meals,
                accommodation=day.accommodation,
            )
            for day in tour.itinerary
        ],
        requirements=TourRequirementsData(**tour.requirements.to_dict()),
        pricing=TourPricingData(**tour.pricing.to_dict()),
        important_info=ImportantInfoData(**tour.important_info.to_dict()),
        available_dates=tour.available_dates,
        max_participants=tour.max_participants,
        current_participants=tour.current_participants,
        ratings=[_rating(rating) for rating in tour.ratings],
        average_rating=tour.average_rating,
        total_ratings=tour.total_ratings,
        is_active=tour.is_active,
        created_at=tour.created_at,
        updated_at=tour.updated_at,
    ).dump()
