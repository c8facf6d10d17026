from datetime import date

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.shared.domain import (
    DuplicateResourceException,
    Price,
    ResourceNotFoundException,
    TourId,
    UserId,
)
from services.shared.infrastructure.dynamodb import from_iso, query_all, to_iso
from services.shared.utils.environment import table_name as default_table_name

SORT_KEY = "BOOKING"


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    - GSI1: 全予約（作成日時順）
    - GSI2: ユーザー別の予約（作成日時順）
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or default_table_name()
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        created_at = to_iso(booking.created_at)
        item = {
            "PK": f"BOOKING#{booking.id}",
            "SK": SORT_KEY,
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "user_id": str(booking.user_id),
            "tour_id": str(booking.tour_id),
            "participants": booking.participants,
            "travel_date": booking.travel_date.isoformat(),
            "booking_date": to_iso(booking.booking_date),
            "total_price": int(booking.total_price),
            "status": booking.status.value,
            "special_requirements": booking.special_requirements,
            "contact_number": booking.contact_number,
            "email": booking.email,
            "created_at": created_at,
            "updated_at": to_iso(booking.updated_at),
            "GSI1PK": "BOOKINGS",
            "GSI1SK": f"{created_at}#{booking.id}",
            "GSI2PK": f"USER#{booking.user_id}",
            "GSI2SK": f"BOOKING#{created_at}#{booking.id}",
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException("Duplicate booking found")
            raise

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": SORT_KEY},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        items = query_all(
            self.table,
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq(f"USER#{user_id}")
            & Key("GSI2SK").begins_with("BOOKING#"),
            ScanIndexForward=False,
        )
        return [self._to_entity(item) for item in items]

    def find_all(self) -> list[Booking]:
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("BOOKINGS"),
            ScanIndexForward=False,
        )
        return [self._to_entity(item) for item in items]

    def update_status(self, booking: Booking) -> None:
        """予約のステータスを更新する"""
        try:
            self.table.update_item(
                Key={"PK": f"BOOKING#{booking.id}", "SK": SORT_KEY},
                UpdateExpression="SET #status = :status, updated_at = :updated_at",
                ExpressionAttributeNames={"#status": "status"},
                ExpressionAttributeValues={
                    ":status": booking.status.value,
                    ":updated_at": to_iso(booking.updated_at),
                },
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ResourceNotFoundException("Booking not found")
            raise

    def delete(self, booking_id: BookingId) -> None:
        try:
            self.table.delete_item(
                Key={"PK": f"BOOKING#{booking_id}", "SK": SORT_KEY},
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ResourceNotFoundException("Booking not found")
            raise

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=item["booking_id"]),
            user_id=UserId(value=item["user_id"]),
            tour_id=TourId(value=item["tour_id"]),
            participants=int(item["participants"]),
            travel_date=date.fromisoformat(item["travel_date"]),
            booking_date=from_iso(item["booking_date"]),
            total_price=Price(amount=int(item["total_price"])),
            status=BookingStatus(item["status"]),
            special_requirements=item.get("special_requirements", ""),
            contact_number=item.get("contact_number", ""),
            email=item.get("email", ""),
            created_at=from_iso(item["created_at"]),
            updated_at=from_iso(item["updated_at"]),
        )
