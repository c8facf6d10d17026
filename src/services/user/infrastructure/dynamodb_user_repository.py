import boto3

from services.shared.domain import UserId
from services.shared.utils.environment import table_name as default_table_name
from services.user.domain.entity import User
from services.user.domain.repository import UserRepository


class DynamoDBUserRepository(UserRepository):
    """DynamoDB に認証サービスが書き込んだユーザープロフィールを読む"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or default_table_name()
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, user_id: UserId) -> User | None:
        response = self.table.get_item(
            Key={"PK": f"USER#{user_id}", "SK": "PROFILE"},
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def _to_entity(self, item: dict) -> User:
        """DynamoDB アイテムをエンティティに変換する"""
        return User(
            id=UserId(value=item["user_id"]),
            name=item.get("name", ""),
            email=item.get("email", ""),
            phone=item.get("phone", ""),
        )
