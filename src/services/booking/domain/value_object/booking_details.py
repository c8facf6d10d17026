from typing import Any, TypedDict


class BookingDetails(TypedDict):
    """予約作成の正規化済み入力データ

    participants / travelers などの別名はリクエストモデル側で解決済み。
    JSON の型は未検証のまま渡り、validate_booking_details が検査する。
    """

    user_id: Any
    tour_id: Any
    participants: Any
    travel_date: Any
    special_requirements: str
    contact_number: Any
    email: Any
    status: Any
