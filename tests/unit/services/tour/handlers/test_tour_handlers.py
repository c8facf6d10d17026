import json
from unittest.mock import MagicMock

import pytest

from services.tour.applications.create_tour import CreateTourService
from services.tour.applications.get_tour import GetTourService
from services.tour.applications.list_tours import ListToursService
from services.tour.applications.rate_tour import RateTourService
from services.tour.applications.update_tour import UpdateTourService
from services.tour.domain.factory import TourFactory
from services.tour.handlers import (
    create_tour,
    get_tour,
    list_by_category,
    rate,
    update_tour,
)

USER_ID = "a1b2c3d4e5f60718293a4b5c6d7e8f90"


def _body(response: dict) -> dict:
    return json.loads(response["body"])


class TestCreateTourHandler:
    def test_returns_201_with_camel_case_tour(
        self, monkeypatch, tour_repository, clock, api_event, lambda_context
    ):
        monkeypatch.setattr(
            create_tour,
            "service",
            CreateTourService(tour_repository, TourFactory(), clock=clock),
        )
        event = api_event(
            method="POST",
            body=json.dumps(
                {
                    "title": "Varanasi Ghats",
                    "description": "Evening aarti",
                    "price": 9000,
                    "duration": "2 Days",
                    "category": "spiritual",
                    "maxParticipants": 12,
                }
            ),
        )

        response = create_tour.lambda_handler(event, lambda_context)

        body = _body(response)
        assert response["statusCode"] == 201
        assert body["message"] == "Tour created successfully"
        assert body["data"]["maxParticipants"] == 12
        assert body["data"]["averageRating"] == 0
        assert len(body["data"]["_id"]) == 32

    def test_missing_fields_return_400(
        self, monkeypatch, tour_repository, api_event, lambda_context
    ):
        monkeypatch.setattr(
            create_tour, "service", CreateTourService(tour_repository, TourFactory())
        )

        response = create_tour.lambda_handler(
            api_event(method="POST", body=json.dumps({"title": "x"})), lambda_context
        )

        assert response["statusCode"] == 400
        assert _body(response)["success"] is False


    def test_detail_sections_use_camel_case(
        self, monkeypatch, tour_repository, clock, api_event, lambda_context
    ):
        monkeypatch.setattr(
            create_tour,
            "service",
            CreateTourService(tour_repository, TourFactory(), clock=clock),
        )
        event = api_event(
            method="POST",
            body=json.dumps(
                {
                    "title": "Hampi",
                    "description": "Ruins",
                    "price": 7000,
                    "duration": "3 Days",
                    "overview": {"groupSize": "2-10", "languages": ["English", ""]},
                    "requirements": {"packingList": ["Hat"]},
                    "pricing": {"discounts": [{"name": "Student", "percentage": 10}]},
                    "importantInfo": {"bookingCutoff": "3 days before"},
                    "availableDates": ["2026-11-01"],
                }
            ),
        )

        data = _body(create_tour.lambda_handler(event, lambda_context))["data"]

        assert data["overview"] == {
            "highlights": [],
            "groupSize": "2-10",
            "difficulty": "easy",
            "ageRange": "",
            "bestSeason": "",
            "languages": ["English"],
        }
        assert data["requirements"]["packingList"] == ["Hat"]
        assert data["pricing"]["basePrice"] == 7000
        assert data["pricing"]["discounts"] == [
            {"name": "Student", "percentage": 10, "description": ""}
        ]
        assert data["importantInfo"]["bookingCutoff"] == "3 days before"
        assert data["availableDates"] == ["2026-11-01"]

    def test_discount_over_100_returns_400(
        self, monkeypatch, tour_repository, api_event, lambda_context
    ):
        monkeypatch.setattr(
            create_tour, "service", CreateTourService(tour_repository, TourFactory())
        )
        body = {
            "title": "Hampi",
            "description": "Ruins",
            "price": 7000,
            "duration": "3 Days",
            "pricing": {"discounts": [{"name": "Too much", "percentage": 150}]},
        }

        response = create_tour.lambda_handler(
            api_event(method="POST", body=json.dumps(body)), lambda_context
        )

        assert response["statusCode"] == 400
        assert _body(response)["errors"] == [
            "Discount percentage must be between 0 and 100"
        ]


class TestUpdateTourHandler:
    @pytest.fixture(autouse=True)
    def _service(self, monkeypatch, tour_repository, clock):
        monkeypatch.setattr(
            update_tour, "service", UpdateTourService(tour_repository, clock=clock)
        )

    def _put(self, api_event, lambda_context, tour_id, payload: dict) -> dict:
        event = api_event(
            method="PUT",
            path_parameters={"tourId": str(tour_id)},
            body=json.dumps(payload),
        )
        return update_tour.lambda_handler(event, lambda_context)

    def test_null_lists_clear_existing_values(
        self, tour_repository, create_tour, api_event, lambda_context
    ):
        tour = create_tour(images=["a.jpg", "b.jpg"])
        tour_repository.save(tour)

        response = self._put(
            api_event, lambda_context, tour.id, {"images": None, "excluded": None}
        )

        assert response["statusCode"] == 200
        assert _body(response)["data"]["images"] == []
        assert tour_repository.find_by_id(tour.id).images == []

    def test_zero_max_participants_returns_400(
        self, tour_repository, create_tour, api_event, lambda_context
    ):
        tour = create_tour()
        tour_repository.save(tour)

        response = self._put(api_event, lambda_context, tour.id, {"maxParticipants": 0})

        assert response["statusCode"] == 400

    def test_overview_is_merged(
        self, tour_repository, create_tour, api_event, lambda_context
    ):
        tour = create_tour()
        tour_repository.save(tour)
        self._put(
            api_event,
            lambda_context,
            tour.id,
            {"overview": {"highlights": ["Fort"], "bestSeason": "Winter"}},
        )

        response = self._put(
            api_event, lambda_context, tour.id, {"overview": {"difficulty": "moderate"}}
        )

        overview = _body(response)["data"]["overview"]
        assert overview["highlights"] == ["Fort"]
        assert overview["bestSeason"] == "Winter"
        assert overview["difficulty"] == "moderate"


class TestGetTourHandler:
    def test_malformed_id_returns_400(self, api_event, lambda_context):
        response = get_tour.lambda_handler(
            api_event(path_parameters={"tourId": "nope"}), lambda_context
        )

        assert response["statusCode"] == 400
        assert _body(response)["message"] == "Invalid tour ID format"

    def test_unknown_tour_returns_404(
        self, monkeypatch, tour_repository, api_event, lambda_context, tour_id
    ):
        monkeypatch.setattr(get_tour, "service", GetTourService(tour_repository))

        response = get_tour.lambda_handler(
            api_event(path_parameters={"tourId": str(tour_id)}), lambda_context
        )

        assert response["statusCode"] == 404

    def test_unexpected_error_returns_500(
        self, monkeypatch, api_event, lambda_context, tour_id
    ):
        broken = MagicMock()
        broken.get.side_effect = RuntimeError("table missing")
        monkeypatch.setattr(get_tour, "service", broken)
        monkeypatch.setenv("ENVIRONMENT", "development")

        response = get_tour.lambda_handler(
            api_event(path_parameters={"tourId": str(tour_id)}), lambda_context
        )

        assert response["statusCode"] == 500
        assert _body(response)["error"] == "table missing"


class TestListByCategoryHandler:
    def test_invalid_category_returns_400(
        self, monkeypatch, tour_repository, api_event, lambda_context
    ):
        monkeypatch.setattr(
            list_by_category, "service", ListToursService(tour_repository)
        )

        response = list_by_category.lambda_handler(
            api_event(path_parameters={"category": "space"}), lambda_context
        )

        assert response["statusCode"] == 400


class TestRateHandler:
    def test_add_then_update_rating(
        self, monkeypatch, tour_repository, create_tour, clock, api_event, lambda_context
    ):
        tour = create_tour()
        tour_repository.save(tour)
        monkeypatch.setattr(
            rate, "service", RateTourService(repository=tour_repository, clock=clock)
        )

        def _rate(score: int) -> dict:
            event = api_event(
                method="POST",
                path_parameters={"tourId": str(tour.id)},
                body=json.dumps({"userId": USER_ID, "rating": score, "review": ""}),
            )
            return rate.lambda_handler(event, lambda_context)

        first = _body(_rate(4))
        second = _body(_rate(2))

        assert first["message"] == "Rating added successfully"
        assert second["message"] == "Rating updated successfully"
        assert second["data"]["averageRating"] == 2.0
        assert second["data"]["totalRatings"] == 1
        assert second["data"]["rating"]["userId"] == USER_ID

    def test_out_of_range_rating_returns_400(
        self, monkeypatch, tour_repository, api_event, lambda_context, tour_id
    ):
        monkeypatch.setattr(rate, "service", RateTourService(tour_repository))
        event = api_event(
            method="POST",
            path_parameters={"tourId": str(tour_id)},
            body=json.dumps({"userId": USER_ID, "rating": 9}),
        )

        response = rate.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
