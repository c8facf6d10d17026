"""予約の表示用ビュー

予約は Tour / User を ID でしか参照しないため、一覧表示では参照先を引き当てて結合する。
参照先が削除されていても一覧取得は失敗させず、代替値で埋める。

- ツアー: TourSummary.missing() を参照
- ユーザー: name="User not found", email="N/A", phone="N/A"
"""

from __future__ import annotations

from dataclasses import dataclass

from services.booking.domain.entity import Booking
from services.shared.domain import TourId, UserId
from services.tour.applications.tour_summary import NOT_AVAILABLE, TourSummary
from services.tour.domain.repository import TourRepository
from services.user.domain.entity import User
from services.user.domain.repository import UserRepository

USER_NOT_FOUND = "User not found"


@dataclass(frozen=True)
class UserSummary:
    """予約に結合するユーザー概要"""

    id: str | None
    name: str
    email: str
    phone: str

    @classmethod
    def of(cls, user: User) -> UserSummary:
        return cls(id=str(user.id), name=user.name, email=user.email, phone=user.phone)

    @classmethod
    def missing(cls) -> UserSummary:
        return cls(id=None, name=USER_NOT_FOUND, email=NOT_AVAILABLE, phone=NOT_AVAILABLE)

    @classmethod
    def resolve(cls, user: User | None) -> UserSummary:
        return cls.of(user) if user is not None else cls.missing()


@dataclass(frozen=True)
class BookingView:
    booking: Booking
    tour: TourSummary
    user: UserSummary


class BookingViewAssembler:
    """予約に Tour / User の概要を結合する（同じ ID は1度だけ引く）"""

    def __init__(
        self, tour_repository: TourRepository, user_repository: UserRepository
    ) -> None:
        self._tour_repository = tour_repository
        self._user_repository = user_repository

    def assemble(self, bookings: list[Booking]) -> list[BookingView]:
        tours: dict[TourId, TourSummary] = {}
        users: dict[UserId, UserSummary] = {}
        views: list[BookingView] = []

        for booking in bookings:
            if booking.tour_id not in tours:
                tours[booking.tour_id] = TourSummary.resolve(
                    self._tour_repository.find_by_id(booking.tour_id)
                )
            if booking.user_id not in users:
                users[booking.user_id] = UserSummary.resolve(
                    self._user_repository.find_by_id(booking.user_id)
                )
            views.append(
                BookingView(
                    booking=booking,
                    tour=tours[booking.tour_id],
                    user=users[booking.user_id],
                )
            )
        return views
