from __future__ import annotations

from datetime import date, datetime

from pydantic import Field

from services.booking.applications.booking_view import BookingView
from services.booking.domain.entity import Booking
from services.shared.utils import CamelModel
from services.tour.applications.tour_summary import NOT_AVAILABLE, TourSummary


class BookingTourData(CamelModel):
    """予約に結合したツアー概要"""

    id: str | None = Field(serialization_alias="_id")
    title: str
    price: int
    description: str
    duration: str
    image: str
    category: str
    region: str


class _BookingBaseData(CamelModel):
    id: str = Field(serialization_alias="_id")
    tour_id: str | None
    tour_title: str
    participants: int
    travelers: int
    travel_date: date
    booking_date: datetime
    total_price: int
    total_amount: int
    status: str
    contact_number: str
    created_at: datetime


class CreatedBookingData(_BookingBaseData):
    """予約作成レスポンス"""

    tour_price: int
    tour_duration: str
    tour_image: str
    user_id: str | None
    user_name: str
    user_email: str
    user_phone: str
    special_requirements: str


class BookingListItemData(_BookingBaseData):
    """全予約一覧（管理者向け）の1件"""

    booking_id: str
    tour_duration: str
    user_id: str | None
    user_name: str
    user_email: str
    user_phone: str
    special_requests: str
    email: str


class UserBookingData(_BookingBaseData):
    """ユーザー別予約一覧の1件（ツアー概要をネストする）"""

    booking_id: str
    tour: BookingTourData
    special_requirements: str
    email: str


class BookingStatusData(CamelModel):
    id: str = Field(serialization_alias="_id")
    status: str
    updated_at: datetime


def _base_fields(booking: Booking, tour: TourSummary) -> dict:
    total = int(booking.total_price)
    return {
        "id": str(booking.id),
        "tour_id": tour.id,
        "tour_title": tour.title,
        "participants": booking.participants,
        "travelers": booking.participants,
        "travel_date": booking.travel_date,
        "booking_date": booking.booking_date,
        "total_price": total,
        "total_amount": total,
        "status": booking.status.value,
        "created_at": booking.created_at,
    }


def to_created_booking_data(view: BookingView) -> dict:
    booking, tour, user = view.booking, view.tour, view.user
    return CreatedBookingData(
        **_base_fields(booking, tour),
        tour_price=tour.price,
        tour_duration=tour.duration,
        tour_image=tour.image,
        user_id=user.id,
        user_name=user.name,
        user_email=user.email,
        user_phone=user.phone,
        special_requirements=booking.special_requirements,
        contact_number=booking.contact_number,
    ).dump()


def to_booking_list_item_data(view: BookingView) -> dict:
    """全予約一覧用に変換する（連絡先が空ならユーザーの登録値で補う）"""
    booking, tour, user = view.booking, view.tour, view.user
    return BookingListItemData(
        **_base_fields(booking, tour),
        booking_id=booking.id.display_code,
        tour_duration=tour.duration,
        user_id=user.id,
        user_name=user.name,
        user_email=user.email,
        user_phone=user.phone,
        special_requests=booking.special_requirements,
        contact_number=booking.contact_number or user.phone or NOT_AVAILABLE,
        email=booking.email or user.email or NOT_AVAILABLE,
    ).dump()


def to_user_booking_data(view: BookingView) -> dict:
    booking, tour = view.booking, view.tour
    return UserBookingData(
        **_base_fields(booking, tour),
        booking_id=booking.id.display_code,
        tour=BookingTourData(
            id=tour.id,
            title=tour.title,
            price=tour.price,
            description=tour.description,
            duration=tour.duration,
            image=tour.image,
            category=tour.category,
            region=tour.region,
        ),
        special_requirements=booking.special_requirements,
        contact_number=booking.contact_number or NOT_AVAILABLE,
        email=booking.email or NOT_AVAILABLE,
    ).dump()


def to_booking_status_data(booking: Booking) -> dict:
    return BookingStatusData(
        id=str(booking.id),
        status=booking.status.value,
        updated_at=booking.updated_at,
    ).dump()
