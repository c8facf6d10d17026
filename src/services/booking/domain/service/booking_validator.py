from datetime import date

from services.booking.domain.entity.booking import MAX_PARTICIPANTS, MIN_PARTICIPANTS
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingDetails, TravelDate
from services.shared.utils.validators import is_valid_email, is_valid_phone

INVALID_STATUS_MESSAGE = (
    "Invalid status. Must be: pending, confirmed, cancelled, or completed"
)


def is_valid_status(status: object) -> bool:
    return isinstance(status, str) and status in {s.value for s in BookingStatus}


def _is_whole_number(value: object) -> bool:
    # bool は int のサブクラスなので除外する
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_id(value: object, label: str) -> str | None:
    if value is None or value == "":
        return f"{label} is required"
    if not isinstance(value, str):
        return f"{label} is invalid"
    return None


def validate_booking_details(details: BookingDetails, today: date) -> list[str]:
    """予約入力を検証し、違反メッセージをすべて返す（違反なしなら空リスト）

    JSON の型違いもここで検出するため、型エラーと他の違反がまとめて返る。
    ID の存在確認はここでは行わない（ストアへの問い合わせは検証後）。
    """
    errors: list[str] = []

    for key, label in (("user_id", "User ID"), ("tour_id", "Tour ID")):
        error = _validate_id(details[key], label)
        if error:
            errors.append(error)

    participants = details["participants"]
    if participants is not None and not _is_whole_number(participants):
        errors.append("Number of travelers must be a whole number")
    elif participants is None or participants < MIN_PARTICIPANTS:
        errors.append("At least 1 traveler is required")
    elif participants > MAX_PARTICIPANTS:
        errors.append(f"Maximum {MAX_PARTICIPANTS} travelers allowed")

    travel_date = details["travel_date"]
    if not travel_date:
        errors.append("Travel date is required")
    elif not isinstance(travel_date, str):
        errors.append("Travel date is invalid")
    else:
        try:
            if TravelDate.from_string(travel_date).is_before(today):
                errors.append("Travel date cannot be in the past")
        except ValueError:
            errors.append("Travel date is invalid")

    contact_number = details["contact_number"]
    if contact_number and not (
        isinstance(contact_number, str) and is_valid_phone(contact_number)
    ):
        errors.append("Contact number must be 10 digits")

    email = details["email"]
    if email and not (isinstance(email, str) and is_valid_email(email)):
        errors.append("Valid email is required")

    if details["status"] is not None and not is_valid_status(details["status"]):
        errors.append(INVALID_STATUS_MESSAGE)

    return errors
