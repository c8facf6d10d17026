from datetime import datetime

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingDetails, BookingId, TravelDate
from services.tour.domain.entity import Tour
from services.user.domain.entity import User


class BookingFactory:
    """ツアー予約エンティティのファクトリ

    - ID の払い出し
    - 合計金額の確定（ツアー料金 × 人数）
    - 連絡先の補完（未指定ならユーザーの登録値）
    """

    def create(
        self,
        details: BookingDetails,
        tour: Tour,
        user: User,
        booked_at: datetime,
    ) -> Booking:
        """検証済みの入力から新規予約を生成する

        Args:
            details: validate_booking_details を通過した入力
            tour: 予約対象のツアー
            user: 予約するユーザー
            booked_at: 予約日時

        Returns:
            Booking: 生成された予約エンティティ（既定は CONFIRMED）
        """
        participants = details["participants"]

        return Booking(
            id=BookingId.generate(),
            user_id=user.id,
            tour_id=tour.id,
            participants=participants,
            travel_date=TravelDate.from_string(details["travel_date"]).value,
            booking_date=booked_at,
            total_price=tour.price.multiply(participants),
            status=BookingStatus(details["status"] or BookingStatus.CONFIRMED.value),
            special_requirements=details["special_requirements"],
            contact_number=details["contact_number"] or user.phone or "",
            email=details["email"] or user.email,
            created_at=booked_at,
        )
