from datetime import date, datetime

from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId
from services.shared.domain import AggregateRoot, Price, TourId, UserId

MIN_PARTICIPANTS = 1
MAX_PARTICIPANTS = 10


class Booking(AggregateRoot[BookingId]):
    """ツアー予約

    合計金額は作成時のツアー料金から確定し、以後は再計算しない。
    """

    def __init__(
        self,
        id: BookingId,
        user_id: UserId,
        tour_id: TourId,
        participants: int,
        travel_date: date,
        booking_date: datetime,
        total_price: Price,
        status: BookingStatus = BookingStatus.CONFIRMED,
        special_requirements: str = "",
        contact_number: str = "",
        email: str = "",
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> None:
        super().__init__(id)
        if not MIN_PARTICIPANTS <= participants <= MAX_PARTICIPANTS:
            raise ValueError(
                f"Participants must be between {MIN_PARTICIPANTS} "
                f"and {MAX_PARTICIPANTS}"
            )

        self._user_id = user_id
        self._tour_id = tour_id
        self._participants = participants
        self._travel_date = travel_date
        self._booking_date = booking_date
        self._total_price = total_price
        self._status = status
        self._special_requirements = special_requirements
        self._contact_number = contact_number
        self._email = email
        self._created_at = created_at or booking_date
        self._updated_at = updated_at or self._created_at

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def tour_id(self) -> TourId:
        return self._tour_id

    @property
    def participants(self) -> int:
        return self._participants

    @property
    def travel_date(self) -> date:
        return self._travel_date

    @property
    def booking_date(self) -> datetime:
        return self._booking_date

    @property
    def total_price(self) -> Price:
        return self._total_price

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def special_requirements(self) -> str:
        return self._special_requirements

    @property
    def contact_number(self) -> str:
        return self._contact_number

    @property
    def email(self) -> str:
        return self._email

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def is_confirmed(self) -> bool:
        return self._status == BookingStatus.CONFIRMED

    def change_status(self, status: BookingStatus, updated_at: datetime) -> None:
        """ステータスを変更する（どのステータスからでも変更可能）"""
        self._status = status
        self._updated_at = updated_at
