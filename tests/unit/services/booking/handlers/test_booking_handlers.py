import json

import pytest

from services.booking.applications.booking_view import BookingViewAssembler
from services.booking.applications.create_booking import CreateBookingService
from services.booking.applications.delete_booking import DeleteBookingService
from services.booking.applications.list_bookings import ListBookingsService
from services.booking.applications.update_booking_status import (
    UpdateBookingStatusService,
)
from services.booking.domain.factory import BookingFactory
from services.booking.handlers import (
    create_booking,
    delete_booking,
    list_bookings,
    list_user_bookings,
    update_booking_status,
)

USER_ID = "a1b2c3d4e5f60718293a4b5c6d7e8f90"
TOUR_ID = "0f1e2d3c4b5a69788796a5b4c3d2e1f0"


def _body(response: dict) -> dict:
    return json.loads(response["body"])


@pytest.fixture
def seeded(tour_repository, user_repository, create_tour, create_user):
    tour_repository.save(create_tour(price=1000, images=["https://img/1.jpg"]))
    user_repository.add(create_user())


@pytest.fixture
def assembler(tour_repository, user_repository):
    return BookingViewAssembler(tour_repository, user_repository)


class TestCreateBookingHandler:
    @pytest.fixture(autouse=True)
    def _service(
        self, monkeypatch, booking_repository, tour_repository, user_repository, clock
    ):
        monkeypatch.setattr(
            create_booking,
            "service",
            CreateBookingService(
                booking_repository=booking_repository,
                tour_repository=tour_repository,
                user_repository=user_repository,
                factory=BookingFactory(),
                clock=clock,
            ),
        )

    def _post(self, api_event, lambda_context, payload: dict) -> dict:
        event = api_event(method="POST", path="/bookings", body=json.dumps(payload))
        return create_booking.lambda_handler(event, lambda_context)

    def test_created_view_has_dual_names(self, seeded, api_event, lambda_context):
        response = self._post(
            api_event,
            lambda_context,
            {
                "user": USER_ID,
                "tour": TOUR_ID,
                "travelers": 3,
                "travelDate": "2026-02-01",
                "specialRequests": "Vegetarian",
            },
        )

        body = _body(response)
        data = body["data"]
        assert response["statusCode"] == 201
        assert body["message"] == "Booking created successfully"
        assert data["participants"] == data["travelers"] == 3
        assert data["totalPrice"] == data["totalAmount"] == 3000
        assert data["status"] == "confirmed"
        assert data["tourImage"] == "https://img/1.jpg"
        assert data["userPhone"] == "9876543210"
        assert data["specialRequirements"] == "Vegetarian"
        assert data["travelDate"] == "2026-02-01"
        assert len(data["_id"]) == 32

    def test_validation_failure_lists_all_errors(self, api_event, lambda_context):
        response = self._post(
            api_event, lambda_context, {"participants": 11, "email": "bad"}
        )

        body = _body(response)
        assert response["statusCode"] == 400
        assert body["message"] == "Validation failed"
        assert body["errors"] == [
            "User ID is required",
            "Tour ID is required",
            "Maximum 10 travelers allowed",
            "Travel date is required",
            "Valid email is required",
        ]

    def test_type_errors_are_reported_with_other_violations(
        self, api_event, lambda_context
    ):
        response = self._post(
            api_event,
            lambda_context,
            {"participants": "many", "contactNumber": ["98765"], "email": 42},
        )

        body = _body(response)
        assert response["statusCode"] == 400
        assert body["errors"] == [
            "User ID is required",
            "Tour ID is required",
            "Number of travelers must be a whole number",
            "Travel date is required",
            "Contact number must be 10 digits",
            "Valid email is required",
        ]

    def test_unknown_tour_returns_404(self, api_event, lambda_context):
        response = self._post(
            api_event,
            lambda_context,
            {"userId": USER_ID, "tourId": TOUR_ID, "travelDate": "2026-02-01"},
        )

        assert response["statusCode"] == 404
        assert _body(response)["message"] == "Tour not found"


class TestListBookingHandlers:
    def test_all_bookings_include_counts_and_code(
        self,
        monkeypatch,
        seeded,
        booking_repository,
        assembler,
        create_booking,
        api_event,
        lambda_context,
    ):
        booking = create_booking()
        booking_repository.save(booking)
        monkeypatch.setattr(
            list_bookings,
            "service",
            ListBookingsService(booking_repository, assembler),
        )

        body = _body(list_bookings.lambda_handler(api_event(), lambda_context))

        assert body["count"] == 1
        assert body["confirmedCount"] == 1
        item = body["data"][0]
        assert item["bookingId"] == booking.id.display_code
        assert item["userName"] == "Asha"
        assert item["tourDuration"] == "5 Days / 4 Nights"
        assert item["specialRequests"] == ""

    def test_user_bookings_nest_placeholder_tour(
        self,
        monkeypatch,
        booking_repository,
        assembler,
        create_booking,
        api_event,
        lambda_context,
    ):
        booking_repository.save(create_booking())
        monkeypatch.setattr(
            list_user_bookings,
            "service",
            ListBookingsService(booking_repository, assembler),
        )

        response = list_user_bookings.lambda_handler(
            api_event(path_parameters={"userId": USER_ID}), lambda_context
        )

        tour = _body(response)["data"][0]["tour"]
        assert response["statusCode"] == 200
        assert tour["_id"] is None
        assert tour["title"] == "Tour not found"
        assert tour["image"] == "https://via.placeholder.com/300x200"

    def test_user_bookings_without_user_id(self, api_event, lambda_context):
        response = list_user_bookings.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 400
        assert _body(response)["message"] == "User ID is required"


class TestBookingStatusHandlers:
    def test_update_status(
        self,
        monkeypatch,
        booking_repository,
        create_booking,
        clock,
        api_event,
        lambda_context,
    ):
        booking = create_booking()
        booking_repository.save(booking)
        monkeypatch.setattr(
            update_booking_status,
            "service",
            UpdateBookingStatusService(booking_repository, clock=clock),
        )
        event = api_event(
            method="PUT",
            path_parameters={"id": str(booking.id)},
            body=json.dumps({"status": "completed"}),
        )

        response = update_booking_status.lambda_handler(event, lambda_context)

        body = _body(response)
        assert response["statusCode"] == 200
        assert body["message"] == "Booking completed successfully"
        assert body["data"]["_id"] == str(booking.id)
        assert body["data"]["status"] == "completed"
        assert "updatedAt" in body["data"]

    @pytest.mark.parametrize(
        "status", ["archived", ["confirmed"], {"value": "completed"}]
    )
    def test_update_invalid_status_returns_400(
        self,
        monkeypatch,
        booking_repository,
        create_booking,
        api_event,
        lambda_context,
        status,
    ):
        booking = create_booking()
        booking_repository.save(booking)
        monkeypatch.setattr(
            update_booking_status,
            "service",
            UpdateBookingStatusService(booking_repository),
        )
        event = api_event(
            method="PUT",
            path_parameters={"id": str(booking.id)},
            body=json.dumps({"status": status}),
        )

        response = update_booking_status.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
        assert _body(response)["message"].startswith("Invalid status.")

    def test_delete_twice(
        self, monkeypatch, booking_repository, create_booking, api_event, lambda_context
    ):
        booking = create_booking()
        booking_repository.save(booking)
        monkeypatch.setattr(
            delete_booking, "service", DeleteBookingService(booking_repository)
        )
        event = api_event(method="DELETE", path_parameters={"id": str(booking.id)})

        first = delete_booking.lambda_handler(event, lambda_context)
        second = delete_booking.lambda_handler(event, lambda_context)

        assert first["statusCode"] == 200
        assert _body(first)["message"] == "Booking deleted successfully"
        assert second["statusCode"] == 404
