from pydantic import Field

from services.shared.utils import CamelModel
from services.tour.domain.value_object import TourDetails


class ItineraryDayRequest(CamelModel):
    """旅程1日分の入力スキーマ（day は保存時に振り直す）"""

    title: str | None = None
    description: str | None = None
    activities: list[str | None] = Field(default_factory=list)
    meals: str | None = None
    accommodation: str | None = None


class TourOverviewRequest(CamelModel):
    highlights: list[str | None] | None = None
    group_size: str | None = Field(default=None, examples=["2-12 people"])
    difficulty: str | None = Field(default=None, examples=["easy", "moderate"])
    age_range: str | None = None
    best_season: str | None = None
    languages: list[str | None] | None = None


class TourRequirementsRequest(CamelModel):
    physical_level: str | None = None
    fitness_level: str | None = None
    documents: list[str | None] | None = None
    packing_list: list[str | None] | None = None


class DiscountRequest(CamelModel):
    name: str | None = None
    percentage: int | None = Field(default=None, description="割引率（0〜100）")
    description: str | None = None


class TourPricingRequest(CamelModel):
    base_price: int | None = None
    discounts: list[DiscountRequest] | None = None
    payment_policy: str | None = None
    cancellation_policy: str | None = None


class ImportantInfoRequest(CamelModel):
    booking_cutoff: str | None = None
    refund_policy: str | None = None
    health_advisory: str | None = None
    safety_measures: str | None = None


class TourRequest(CamelModel):
    """ツアー登録・更新リクエストスキーマ

    null が送られたリスト項目（images / included / excluded など）は空リストとして扱う。
    """

    title: str | None = None
    description: str | None = None
    detailed_description: str | None = None
    price: int | None = Field(default=None, description="料金（非負の整数）")
    duration: str | None = Field(default=None, examples=["5 Days / 4 Nights"])
    image: str | None = None
    images: list[str | None] | None = None
    region: str | None = Field(default=None, examples=["north", "south"])
    category: str | None = Field(default=None, examples=["heritage", "beach"])
    destination: str | None = None
    overview: TourOverviewRequest | None = None
    included: list[str | None] | None = None
    excluded: list[str | None] | None = None
    itinerary: list[ItineraryDayRequest] | None = None
    requirements: TourRequirementsRequest | None = None
    pricing: TourPricingRequest | None = None
    important_info: ImportantInfoRequest | None = None
    available_dates: list[str | None] | None = Field(
        default=None, examples=[["2026-03-01", "2026-04-15"]]
    )
    max_participants: int | None = None
    is_active: bool | None = None

    def to_details(self) -> TourDetails:
        """送られてきた項目だけを TourDetails に詰める（null も送られた値として残す）"""
        details: TourDetails = self.model_dump(exclude_unset=True)
        return details


class RateTourRequest(CamelModel):
    """ツアー評価リクエストスキーマ"""

    user_id: str = Field(..., min_length=1, description="評価者のユーザーID")
    rating: int = Field(..., description="評価点（1〜5）")
    review: str | None = ""
