import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.saved.domain.entity import SavedTour
from services.saved.domain.repository import SavedTourRepository
from services.saved.domain.value_object import SavedTourKey
from services.shared.domain import DuplicateResourceException, TourId, UserId
from services.shared.infrastructure.dynamodb import from_iso, query_all, to_iso
from services.shared.utils.environment import table_name as default_table_name

SORT_KEY_PREFIX = "SAVED#"


class DynamoDBSavedTourRepository(SavedTourRepository):
    """DynamoDBを使用したSavedTourRepository の具象実装

    ユーザーのパーティション（USER#<id>）にツアーごとの項目を置く。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or default_table_name()
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, saved_tour: SavedTour) -> None:
        item = {
            **self._key(saved_tour.id),
            "entity_type": "SAVED_TOUR",
            "user_id": str(saved_tour.user_id),
            "tour_id": str(saved_tour.tour_id),
            "created_at": to_iso(saved_tour.created_at),
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("SK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException("Tour already saved")
            raise

    def find_by_id(self, key: SavedTourKey) -> SavedTour | None:
        response = self.table.get_item(Key=self._key(key), ConsistentRead=True)
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_user_id(self, user_id: UserId) -> list[SavedTour]:
        items = query_all(
            self.table,
            KeyConditionExpression=Key("PK").eq(f"USER#{user_id}")
            & Key("SK").begins_with(SORT_KEY_PREFIX),
        )
        return [self._to_entity(item) for item in items]

    def delete(self, key: SavedTourKey) -> bool:
        response = self.table.delete_item(Key=self._key(key), ReturnValues="ALL_OLD")
        return "Attributes" in response

    def _key(self, key: SavedTourKey) -> dict:
        return {"PK": f"USER#{key.user_id}", "SK": f"{SORT_KEY_PREFIX}{key.tour_id}"}

    def _to_entity(self, item: dict) -> SavedTour:
        """DynamoDB アイテムをエンティティに変換する"""
        return SavedTour(
            id=SavedTourKey(
                user_id=UserId(value=item["user_id"]),
                tour_id=TourId(value=item["tour_id"]),
            ),
            created_at=from_iso(item["created_at"]),
        )
