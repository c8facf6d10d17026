from dataclasses import dataclass

from services.booking.applications.booking_view import BookingView, BookingViewAssembler
from services.booking.domain.repository import BookingRepository
from services.shared.domain import UserId


@dataclass(frozen=True)
class BookingList:
    views: list[BookingView]

    @property
    def count(self) -> int:
        return len(self.views)

    @property
    def confirmed_count(self) -> int:
        return sum(1 for view in self.views if view.booking.is_confirmed)


class ListBookingsService:
    """予約一覧のユースケース（新しい順、参照切れは代替値で埋める）"""

    def __init__(
        self, repository: BookingRepository, assembler: BookingViewAssembler
    ) -> None:
        self._repository = repository
        self._assembler = assembler

    def list_all(self) -> BookingList:
        return BookingList(views=self._assembler.assemble(self._repository.find_all()))

    def list_for_user(self, user_id: UserId) -> BookingList:
        bookings = self._repository.find_by_user_id(user_id)
        return BookingList(views=self._assembler.assemble(bookings))
