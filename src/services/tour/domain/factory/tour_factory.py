from datetime import datetime

from services.shared.domain import Price, TourId
from services.shared.utils.validators import clean_strings
from services.tour.domain.entity.tour import (
    DEFAULT_MAX_PARTICIPANTS,
    DEFAULT_TOUR_IMAGE,
    Tour,
)
from services.tour.domain.enum import Category, Region
from services.tour.domain.value_object import (
    ImportantInfo,
    TourDetails,
    TourOverview,
    TourPricing,
    TourRequirements,
    build_available_dates,
    build_itinerary,
)

REQUIRED_FIELDS_MESSAGE = "Please provide title, description, price, and duration"


class TourFactory:
    """ツアー集約のファクトリ

    - ID の払い出し
    - 入力の整形（前後空白の除去、空要素の除去、旅程の振り直し）
    - 既定値の補完（概要・参加条件・料金詳細・注意事項を含む）
    """

    def create(self, details: TourDetails, created_at: datetime) -> Tour:
        """新規ツアーを生成する

        Raises:
            ValueError: 必須項目の欠落、または値が不正な場合
        """
        title = (details.get("title") or "").strip()
        description = (details.get("description") or "").strip()
        duration = (details.get("duration") or "").strip()
        price = details.get("price")
        if not title or not description or not duration or price is None:
            raise ValueError(REQUIRED_FIELDS_MESSAGE)

        region = Region(details.get("region") or Region.NORTH.value)
        category = Category(details.get("category") or Category.HERITAGE.value)
        image = (details.get("image") or "").strip()
        detailed_description = (details.get("detailed_description") or "").strip()
        max_participants = details.get("max_participants")
        if max_participants is None:
            max_participants = DEFAULT_MAX_PARTICIPANTS

        return Tour(
            id=TourId.generate(),
            title=title,
            description=description,
            detailed_description=detailed_description or description,
            price=Price(amount=price),
            duration=duration,
            image=image or DEFAULT_TOUR_IMAGE,
            images=clean_strings(details.get("images")),
            region=region,
            category=category,
            destination=details.get("destination") or f"{region.value} India",
            included=clean_strings(details.get("included")),
            excluded=clean_strings(details.get("excluded")),
            overview=TourOverview.from_input(details.get("overview")),
            itinerary=build_itinerary(details.get("itinerary") or []),
            requirements=TourRequirements.from_input(details.get("requirements")),
            pricing=TourPricing.from_input(details.get("pricing"), price),
            important_info=ImportantInfo.from_input(details.get("important_info")),
            available_dates=build_available_dates(details.get("available_dates")),
            max_participants=max_participants,
            is_active=True,
            created_at=created_at,
        )
