from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.shared.domain import (
    DuplicateResourceException,
    Price,
    TourId,
    UserId,
)
from services.shared.infrastructure.dynamodb import from_iso, query_all, to_iso
from services.shared.utils.environment import table_name as default_table_name
from services.tour.domain.entity import Rating, Tour
from services.tour.domain.entity.tour import DEFAULT_MAX_PARTICIPANTS
from services.tour.domain.enum import Category, Region
from services.tour.domain.repository import TourRepository
from services.tour.domain.value_object import (
    ImportantInfo,
    ItineraryDay,
    RatingScore,
    TourOverview,
    TourPricing,
    TourRequirements,
    build_available_dates,
)

SORT_KEY = "TOUR"


class DynamoDBTourRepository(TourRepository):
    """DynamoDBを使用したTourRepository の具象実装

    評価一覧はツアーアイテムに埋め込み、ツアー単位で丸ごと書き込む。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or default_table_name()
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, tour: Tour) -> None:
        """新規ツアーを保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(tour),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"Tour already exists: {tour.id}")
            raise

    def find_by_id(self, tour_id: TourId) -> Tour | None:
        response = self.table.get_item(
            Key={"PK": f"TOUR#{tour_id}", "SK": SORT_KEY},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all_active(self) -> list[Tour]:
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("TOURS"),
            FilterExpression=Attr("is_active").eq(True),
            ScanIndexForward=False,
        )
        return [self._to_entity(item) for item in items]

    def find_active_by_category(self, category: Category) -> list[Tour]:
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("TOURS"),
            FilterExpression=Attr("is_active").eq(True)
            & Attr("category").eq(category.value),
            ScanIndexForward=False,
        )
        return [self._to_entity(item) for item in items]

    def update(self, tour: Tour) -> None:
        """ツアーを丸ごと上書きする（同時更新は後勝ち）"""
        self.table.put_item(Item=self._to_item(tour))

    def delete(self, tour_id: TourId) -> None:
        self.table.delete_item(Key={"PK": f"TOUR#{tour_id}", "SK": SORT_KEY})

    def _to_item(self, tour: Tour) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        return {
            "PK": f"TOUR#{tour.id}",
            "SK": SORT_KEY,
            "entity_type": "TOUR",
            "tour_id": str(tour.id),
            "title": tour.title,
            "description": tour.description,
            "detailed_description": tour.detailed_description,
            "price": int(tour.price),
            "duration": tour.duration,
            "image": tour.image,
            "images": tour.images,
            "region": tour.region.value,
            "category": tour.category.value,
            "destination": tour.destination,
            "overview": tour.overview.to_dict(),
            "included": tour.included,
            "excluded": tour.excluded,
            "itinerary": [
                {
                    "day": day.day,
                    "title": day.title,
                    "description": day.description,
                    "activities": list(day.activities),
                    "meals": day.meals,
                    "accommodation": day.accommodation,
                }
                for day in tour.itinerary
            ],
            "requirements": tour.requirements.to_dict(),
            "pricing": tour.pricing.to_dict(),
            "important_info": tour.important_info.to_dict(),
            "available_dates": [d.isoformat() for d in tour.available_dates],
            "max_participants": tour.max_participants,
            "current_participants": tour.current_participants,
            "ratings": [
                {
                    "user_id": str(rating.user_id),
                    "rating": int(rating.score),
                    "review": rating.review,
                    "date": to_iso(rating.date),
                }
                for rating in tour.ratings
            ],
            "average_rating": Decimal(str(tour.average_rating)),
            "total_ratings": tour.total_ratings,
            "is_active": tour.is_active,
            "created_at": to_iso(tour.created_at),
            "updated_at": to_iso(tour.updated_at),
            "GSI1PK": "TOURS",
            "GSI1SK": f"{to_iso(tour.created_at)}#{tour.id}",
        }

    def _to_entity(self, item: dict) -> Tour:
        """DynamoDB アイテムをドメインエンティティに変換する

        平均点と件数は保存値を使わず、評価一覧から再計算される。
        """
        price = int(item["price"])
        return Tour(
            id=TourId(value=item["tour_id"]),
            title=item["title"],
            description=item["description"],
            detailed_description=item.get("detailed_description", ""),
            price=Price(amount=price),
            duration=item["duration"],
            image=item["image"],
            images=list(item.get("images", [])),
            region=Region(item["region"]),
            category=Category(item["category"]),
            destination=item.get("destination", ""),
            overview=TourOverview.from_input(item.get("overview")),
            included=list(item.get("included", [])),
            excluded=list(item.get("excluded", [])),
            itinerary=[
                ItineraryDay(
                    day=int(day["day"]),
                    title=day.get("title", ""),
                    description=day.get("description", ""),
                    activities=tuple(day.get("activities", [])),
                    meals=day.get("meals", ""),
                    accommodation=day.get("accommodation", ""),
                )
                for day in item.get("itinerary", [])
            ],
            requirements=TourRequirements.from_input(item.get("requirements")),
            pricing=_pricing_from_item(item.get("pricing"), price),
            important_info=ImportantInfo.from_input(item.get("important_info")),
            available_dates=build_available_dates(item.get("available_dates")),
            max_participants=int(
                item.get("max_participants", DEFAULT_MAX_PARTICIPANTS)
            ),
            current_participants=int(item.get("current_participants", 0)),
            ratings=[
                Rating(
                    user_id=UserId(value=rating["user_id"]),
                    score=RatingScore(value=int(rating["rating"])),
                    review=rating.get("review", ""),
                    date=from_iso(rating["date"]),
                )
                for rating in item.get("ratings", [])
            ],
            is_active=bool(item.get("is_active", True)),
            created_at=from_iso(item["created_at"]),
            updated_at=from_iso(item["updated_at"]),
        )


def _pricing_from_item(data: dict | None, price: int) -> TourPricing:
    """DynamoDB の数値（Decimal）を整数に戻してから料金詳細を組み立てる"""
    if not data:
        return TourPricing.from_input(None, price)
    return TourPricing.from_input(
        {
            **data,
            "base_price": int(data.get("base_price") or 0),
            "discounts": [
                {**discount, "percentage": int(discount.get("percentage") or 0)}
                for discount in data.get("discounts", [])
            ],
        },
        price,
    )
