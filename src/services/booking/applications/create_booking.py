from collections.abc import Callable
from datetime import datetime

from services.booking.applications.booking_view import BookingView, UserSummary
from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import validate_booking_details
from services.booking.domain.value_object import BookingDetails
from services.shared.domain import (
    ResourceNotFoundException,
    TourId,
    UserId,
    ValidationException,
)
from services.shared.utils import get_logger
from services.shared.utils.clock import utc_now
from services.tour.applications.tour_summary import TourSummary
from services.tour.domain.repository import TourRepository
from services.user.domain.repository import UserRepository

logger = get_logger()


class CreateBookingService:
    """ツアー予約作成のユースケース

    検証 → ツアー取得 → ユーザー取得 → 予約保存 を順に行う。
    トランザクションでは囲まないため、取得後に参照先が削除される可能性は残る。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        tour_repository: TourRepository,
        user_repository: UserRepository,
        factory: BookingFactory,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._booking_repository = booking_repository
        self._tour_repository = tour_repository
        self._user_repository = user_repository
        self._factory = factory
        self._clock = clock

    def create(self, details: BookingDetails) -> BookingView:
        """予約を作成する

        Raises:
            ValidationException: 入力に違反がある場合（すべての違反を含む）
            MalformedIdException: ツアーID・ユーザーIDの形式が不正な場合
            ResourceNotFoundException: ツアーまたはユーザーが存在しない場合
        """
        booked_at = self._clock()

        errors = validate_booking_details(details, today=booked_at.date())
        if errors:
            raise ValidationException(errors)

        tour_id = TourId(value=details["tour_id"])
        user_id = UserId(value=details["user_id"])

        tour = self._tour_repository.find_by_id(tour_id)
        if tour is None:
            raise ResourceNotFoundException("Tour not found")

        user = self._user_repository.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException("User not found")

        booking = self._factory.create(details, tour, user, booked_at=booked_at)
        self._booking_repository.save(booking)

        logger.info(
            "Booking created",
            extra={
                "booking_id": str(booking.id),
                "tour_id": str(tour_id),
                "participants": booking.participants,
                "total_price": int(booking.total_price),
            },
        )
        return BookingView(
            booking=booking, tour=TourSummary.of(tour), user=UserSummary.of(user)
        )
