from services.booking.applications.booking_view import BookingView, BookingViewAssembler
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.shared.domain import ResourceNotFoundException


class GetBookingService:
    """予約詳細取得のユースケース"""

    def __init__(
        self, repository: BookingRepository, assembler: BookingViewAssembler
    ) -> None:
        self._repository = repository
        self._assembler = assembler

    def get(self, booking_id: BookingId) -> BookingView:
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException("Booking not found")
        return self._assembler.assemble([booking])[0]
