from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from services.shared.domain import DuplicateResourceException, UserId
from services.tour.domain.enum import Category
from services.tour.domain.value_object import RatingScore
from services.tour.infrastructure.dynamodb_tour_repository import (
    DynamoDBTourRepository,
)


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "PutItem")


@pytest.fixture
def mock_table():
    with patch(
        "services.tour.infrastructure.dynamodb_tour_repository.boto3.resource"
    ) as mock_resource:
        table = MagicMock()
        mock_resource.return_value.Table.return_value = table
        yield table


class TestDynamoDBTourRepository:
    """DynamoDBTourRepository のテスト（boto3 はモック）"""

    def test_save_writes_keys_and_guards_insert(self, mock_table, create_tour):
        tour = create_tour()

        DynamoDBTourRepository(table_name="test-table").save(tour)

        kwargs = mock_table.put_item.call_args.kwargs
        item = kwargs["Item"]
        assert item["PK"] == f"TOUR#{tour.id}"
        assert item["SK"] == "TOUR"
        assert item["GSI1PK"] == "TOURS"
        assert item["GSI1SK"].endswith(f"#{tour.id}")
        assert "ConditionExpression" in kwargs

    def test_save_conditional_failure_becomes_duplicate(self, mock_table, create_tour):
        mock_table.put_item.side_effect = _client_error(
            "ConditionalCheckFailedException"
        )

        with pytest.raises(DuplicateResourceException):
            DynamoDBTourRepository(table_name="test-table").save(create_tour())

    def test_other_client_errors_propagate(self, mock_table, create_tour):
        mock_table.put_item.side_effect = _client_error(
            "ProvisionedThroughputExceededException"
        )

        with pytest.raises(ClientError):
            DynamoDBTourRepository(table_name="test-table").save(create_tour())

    def test_round_trip_recomputes_aggregate(self, mock_table, create_tour, now):
        tour = create_tour()
        tour.rate(UserId(value="a" * 32), RatingScore(3), "ok", now)
        tour.rate(UserId(value="b" * 32), RatingScore(5), "", now)
        repository = DynamoDBTourRepository(table_name="test-table")

        repository.update(tour)
        item = mock_table.put_item.call_args.kwargs["Item"]
        # 保存済みの集計値が壊れていても読み込み時に再計算される
        item["average_rating"] = Decimal("1.0")
        item["total_ratings"] = 99
        mock_table.get_item.return_value = {"Item": item}

        loaded = repository.find_by_id(tour.id)

        assert loaded.average_rating == 4.0
        assert loaded.total_ratings == 2
        assert loaded.rating_of(UserId(value="a" * 32)).review == "ok"

    def test_find_by_id_returns_none_when_missing(self, mock_table, tour_id):
        mock_table.get_item.return_value = {}

        assert DynamoDBTourRepository(table_name="test-table").find_by_id(tour_id) is None

    def test_find_active_by_category_follows_pagination(
        self, mock_table, create_tour
    ):
        repository = DynamoDBTourRepository(table_name="test-table")
        repository.update(create_tour(category=Category.BEACH))
        item = mock_table.put_item.call_args.kwargs["Item"]
        mock_table.query.side_effect = [
            {"Items": [item], "LastEvaluatedKey": {"PK": "x"}},
            {"Items": [item]},
        ]

        tours = repository.find_active_by_category(Category.BEACH)

        assert len(tours) == 2
        assert mock_table.query.call_count == 2
        second_call = mock_table.query.call_args_list[1].kwargs
        assert second_call["ExclusiveStartKey"] == {"PK": "x"}
        assert second_call["IndexName"] == "GSI1"

    def test_detail_sections_round_trip(self, mock_table, create_tour, now):
        tour = create_tour(price=1000)
        tour.revise(
            {
                "overview": {"highlights": ["Fort"], "difficulty": "moderate"},
                "pricing": {"discounts": [{"name": "Early bird", "percentage": 10}]},
                "available_dates": ["2026-03-01"],
            },
            updated_at=now,
        )
        repository = DynamoDBTourRepository(table_name="test-table")

        repository.update(tour)
        item = mock_table.put_item.call_args.kwargs["Item"]
        assert item["overview"]["difficulty"] == "moderate"
        assert item["available_dates"] == ["2026-03-01"]
        # DynamoDB は数値を Decimal で返す
        item["pricing"]["base_price"] = Decimal("1000")
        item["pricing"]["discounts"][0]["percentage"] = Decimal("10")
        mock_table.get_item.return_value = {"Item": item}

        loaded = repository.find_by_id(tour.id)

        assert loaded.overview == tour.overview
        assert loaded.pricing == tour.pricing
        assert loaded.available_dates == tour.available_dates

    def test_items_without_detail_sections_get_defaults(
        self, mock_table, create_tour
    ):
        repository = DynamoDBTourRepository(table_name="test-table")
        repository.update(create_tour(price=1000))
        item = mock_table.put_item.call_args.kwargs["Item"]
        for key in ("overview", "requirements", "pricing", "important_info"):
            del item[key]
        mock_table.get_item.return_value = {"Item": item}

        loaded = repository.find_by_id(create_tour().id)

        assert loaded.pricing.base_price == 1000
        assert loaded.overview.difficulty.value == "easy"
