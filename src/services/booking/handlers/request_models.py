from typing import Any

from pydantic import Field, model_validator

from services.booking.domain.value_object import BookingDetails
from services.shared.utils import CamelModel

_EMPTY = (None, "")


def _first_present(*values: Any) -> Any:
    for value in values:
        if value not in _EMPTY:
            return value
    return None


def _coerce_participants(value: Any) -> Any:
    """数字のみの文字列は整数として扱う（それ以外はそのまま検証へ回す）"""
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return value


def _coerce_contact_number(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class CreateBookingRequest(CamelModel):
    """予約作成リクエストスキーマ

    旧クライアントの別名を受け付ける。
    - user / tour → userId / tourId
    - travelers → participants（未指定なら 1）
    - specialRequests → specialRequirements

    型の検証は validate_booking_details に任せ、違反をまとめて返せるようにする。
    """

    user_id: Any = None
    tour_id: Any = None
    participants: Any = Field(default=None, description="参加人数（1〜10）")
    travel_date: Any = Field(default=None, examples=["2026-12-01"])
    special_requirements: str = ""
    contact_number: Any = None
    email: Any = None
    status: Any = "confirmed"

    @model_validator(mode="before")
    @classmethod
    def normalize_aliases(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        participants = _first_present(data.get("participants"), data.get("travelers"))
        special_requirements = _first_present(
            data.get("specialRequirements"), data.get("specialRequests")
        )
        return {
            "userId": _first_present(data.get("userId"), data.get("user")),
            "tourId": _first_present(data.get("tourId"), data.get("tour")),
            "participants": 1
            if participants is None
            else _coerce_participants(participants),
            "travelDate": data.get("travelDate"),
            "specialRequirements": ""
            if special_requirements is None
            else str(special_requirements),
            "contactNumber": _coerce_contact_number(data.get("contactNumber")),
            "email": data.get("email"),
            "status": data.get("status", "confirmed"),
        }

    def to_details(self) -> BookingDetails:
        return BookingDetails(
            user_id=self.user_id,
            tour_id=self.tour_id,
            participants=self.participants,
            travel_date=self.travel_date,
            special_requirements=self.special_requirements,
            contact_number=self.contact_number,
            email=self.email,
            status=self.status,
        )


class UpdateBookingStatusRequest(CamelModel):
    """予約ステータス更新リクエストスキーマ（値の検証はユースケース側）"""

    status: Any = None
