from abc import abstractmethod

from services.booking.domain.entity.booking import Booking
from services.booking.domain.value_object import BookingId
from services.shared.domain import Repository, UserId


class BookingRepository(Repository[Booking, BookingId]):
    """予約リポジトリのインターフェース"""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """予約を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        """ユーザーの予約を新しい順に返す"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """すべての予約を新しい順に返す"""
        raise NotImplementedError

    @abstractmethod
    def update_status(self, booking: Booking) -> None:
        """予約のステータスと更新日時を保存する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: BookingId) -> None:
        """予約を削除する"""
        raise NotImplementedError
