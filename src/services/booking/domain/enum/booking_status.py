from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス（遷移の制約は設けない）"""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
