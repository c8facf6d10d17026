from collections.abc import Callable
from datetime import datetime

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import INVALID_STATUS_MESSAGE, is_valid_status
from services.booking.domain.value_object import BookingId
from services.shared.domain import ResourceNotFoundException, ValidationException
from services.shared.utils.clock import utc_now


class UpdateBookingStatusService:
    """予約ステータス更新のユースケース

    遷移の制約は無く、4つのステータス間で自由に変更できる。
    """

    def __init__(
        self,
        repository: BookingRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def update(self, booking_id: BookingId, status: object) -> Booking:
        if not is_valid_status(status):
            raise ValidationException([INVALID_STATUS_MESSAGE], INVALID_STATUS_MESSAGE)

        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException("Booking not found")

        booking.change_status(BookingStatus(status), updated_at=self._clock())
        self._repository.update_status(booking)
        return booking
