import pytest

from services.booking.applications.booking_view import BookingViewAssembler
from services.booking.applications.delete_booking import DeleteBookingService
from services.booking.applications.get_booking import GetBookingService
from services.booking.applications.update_booking_status import (
    UpdateBookingStatusService,
)
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId
from services.shared.domain import ResourceNotFoundException, ValidationException

UNKNOWN_BOOKING = BookingId(value="9" * 32)


class TestUpdateBookingStatusService:
    """UpdateBookingStatusService のテスト"""

    def test_updates_status_and_timestamp(
        self, booking_repository, create_booking, clock
    ):
        booking = create_booking()
        booking_repository.save(booking)
        clock.advance(hours=2)

        updated = UpdateBookingStatusService(booking_repository, clock=clock).update(
            booking.id, "cancelled"
        )

        assert updated.status == BookingStatus.CANCELLED
        assert updated.updated_at == clock()
        assert booking_repository.stored_status[booking.id] == BookingStatus.CANCELLED

    def test_invalid_status_leaves_stored_status_unchanged(
        self, booking_repository, create_booking
    ):
        booking = create_booking()
        booking_repository.save(booking)

        with pytest.raises(ValidationException) as exc_info:
            UpdateBookingStatusService(booking_repository).update(booking.id, "archived")

        assert exc_info.value.message.startswith("Invalid status.")
        assert booking_repository.stored_status[booking.id] == BookingStatus.CONFIRMED

    def test_invalid_status_is_checked_before_lookup(self, mock_repository):
        with pytest.raises(ValidationException):
            UpdateBookingStatusService(mock_repository).update(UNKNOWN_BOOKING, None)

        mock_repository.find_by_id.assert_not_called()

    def test_unknown_booking(self, booking_repository):
        with pytest.raises(ResourceNotFoundException, match="Booking not found"):
            UpdateBookingStatusService(booking_repository).update(
                UNKNOWN_BOOKING, "completed"
            )


class TestDeleteBookingService:
    def test_delete_then_get_raises_not_found(
        self, booking_repository, tour_repository, user_repository, create_booking
    ):
        booking = create_booking()
        booking_repository.save(booking)
        assembler = BookingViewAssembler(tour_repository, user_repository)

        DeleteBookingService(booking_repository).delete(booking.id)

        with pytest.raises(ResourceNotFoundException):
            GetBookingService(booking_repository, assembler).get(booking.id)

    def test_delete_unknown_booking(self, booking_repository):
        with pytest.raises(ResourceNotFoundException):
            DeleteBookingService(booking_repository).delete(UNKNOWN_BOOKING)
