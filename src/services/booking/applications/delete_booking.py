from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.shared.domain import ResourceNotFoundException


class DeleteBookingService:
    """予約削除のユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def delete(self, booking_id: BookingId) -> None:
        if not self._repository.exists(booking_id):
            raise ResourceNotFoundException("Booking not found")
        self._repository.delete(booking_id)
