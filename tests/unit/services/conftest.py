import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

# ハンドラモジュールは import 時に boto3 の Table を生成するため先に設定する
os.environ.setdefault("TABLE_NAME", "test-table")
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "tour-booking-test")

from services.booking.domain.entity import Booking  # noqa: E402
from services.booking.domain.enum import BookingStatus  # noqa: E402
from services.booking.domain.repository import BookingRepository  # noqa: E402
from services.booking.domain.value_object import BookingId  # noqa: E402
from services.saved.domain.entity import SavedTour  # noqa: E402
from services.saved.domain.repository import SavedTourRepository  # noqa: E402
from services.saved.domain.value_object import SavedTourKey  # noqa: E402
from services.shared.domain import (  # noqa: E402
    DuplicateResourceException,
    Price,
    ResourceNotFoundException,
    TourId,
    UserId,
)
from services.tour.domain.entity import Tour  # noqa: E402
from services.tour.domain.enum import Category, Region  # noqa: E402
from services.tour.domain.repository import TourRepository  # noqa: E402
from services.user.domain.entity import User  # noqa: E402
from services.user.domain.repository import UserRepository  # noqa: E402

NOW = datetime(2026, 1, 10, 9, 0, tzinfo=timezone.utc)

TOUR_ID = "0f1e2d3c4b5a69788796a5b4c3d2e1f0"
USER_ID = "a1b2c3d4e5f60718293a4b5c6d7e8f90"
OTHER_USER_ID = "ffeeddccbbaa99887766554433221100"
BOOKING_ID = "1234567890abcdef1234567890abcdef"


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def clock():
    """固定時刻を返す clock（advance で時刻を進められる）"""

    class _Clock:
        def __init__(self) -> None:
            self.current = NOW

        def __call__(self) -> datetime:
            return self.current

        def advance(self, **kwargs) -> None:
            self.current = self.current + timedelta(**kwargs)

    return _Clock()


# ---------------------------------------------------------------------------
# Factories as fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def tour_id():
    return TourId(value=TOUR_ID)


@pytest.fixture
def user_id():
    return UserId(value=USER_ID)


@pytest.fixture
def create_tour():
    """Tour を生成する Factory fixture"""

    def _factory(
        tour_id: str = TOUR_ID,
        title: str = "Golden Triangle",
        price: int = 1000,
        category: Category = Category.HERITAGE,
        region: Region = Region.NORTH,
        images: list[str] | None = None,
        is_active: bool = True,
        created_at: datetime = NOW,
    ) -> Tour:
        return Tour(
            id=TourId(value=tour_id),
            title=title,
            description="Delhi, Agra and Jaipur",
            price=Price(amount=price),
            duration="5 Days / 4 Nights",
            images=images,
            category=category,
            region=region,
            is_active=is_active,
            created_at=created_at,
        )

    return _factory


@pytest.fixture
def create_user():
    """User を生成する Factory fixture"""

    def _factory(
        user_id: str = USER_ID,
        name: str = "Asha",
        email: str = "asha@example.com",
        phone: str = "9876543210",
    ) -> User:
        return User(id=UserId(value=user_id), name=name, email=email, phone=phone)

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        booking_id: str = BOOKING_ID,
        user_id: str = USER_ID,
        tour_id: str = TOUR_ID,
        participants: int = 2,
        total_price: int = 2000,
        status: BookingStatus = BookingStatus.CONFIRMED,
        created_at: datetime = NOW,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            user_id=UserId(value=user_id),
            tour_id=TourId(value=tour_id),
            participants=participants,
            travel_date=(created_at + timedelta(days=30)).date(),
            booking_date=created_at,
            total_price=Price(amount=total_price),
            status=status,
            contact_number="9876543210",
            email="asha@example.com",
            created_at=created_at,
        )

    return _factory


@pytest.fixture
def booking_details():
    """予約作成入力（BookingDetails）を生成する Factory fixture"""

    def _factory(**overrides) -> dict:
        details = {
            "user_id": USER_ID,
            "tour_id": TOUR_ID,
            "participants": 3,
            "travel_date": "2026-02-01",
            "special_requirements": "",
            "contact_number": None,
            "email": None,
            "status": "confirmed",
        }
        details.update(overrides)
        return details

    return _factory


# ---------------------------------------------------------------------------
# In-memory repositories
# ---------------------------------------------------------------------------


class InMemoryTourRepository(TourRepository):
    def __init__(self) -> None:
        self.items: dict[TourId, Tour] = {}

    def save(self, tour: Tour) -> None:
        if tour.id in self.items:
            raise DuplicateResourceException("Duplicate tour found")
        self.items[tour.id] = tour

    def find_by_id(self, tour_id: TourId) -> Tour | None:
        return self.items.get(tour_id)

    def find_all_active(self) -> list[Tour]:
        tours = [tour for tour in self.items.values() if tour.is_active]
        return sorted(tours, key=lambda tour: tour.created_at, reverse=True)

    def find_active_by_category(self, category: Category) -> list[Tour]:
        return [tour for tour in self.find_all_active() if tour.category == category]

    def update(self, tour: Tour) -> None:
        self.items[tour.id] = tour

    def delete(self, tour_id: TourId) -> None:
        self.items.pop(tour_id, None)


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self.items: dict[UserId, User] = {}

    def add(self, user: User) -> None:
        self.items[user.id] = user

    def find_by_id(self, user_id: UserId) -> User | None:
        return self.items.get(user_id)


class InMemoryBookingRepository(BookingRepository):
    def __init__(self) -> None:
        self.items: dict[BookingId, Booking] = {}
        self.stored_status: dict[BookingId, BookingStatus] = {}

    def save(self, booking: Booking) -> None:
        if booking.id in self.items:
            raise DuplicateResourceException("Duplicate booking found")
        self.items[booking.id] = booking
        self.stored_status[booking.id] = booking.status

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        return self.items.get(booking_id)

    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        return [b for b in self.find_all() if b.user_id == user_id]

    def find_all(self) -> list[Booking]:
        return sorted(self.items.values(), key=lambda b: b.created_at, reverse=True)

    def update_status(self, booking: Booking) -> None:
        if booking.id not in self.items:
            raise ResourceNotFoundException("Booking not found")
        self.stored_status[booking.id] = booking.status

    def delete(self, booking_id: BookingId) -> None:
        if self.items.pop(booking_id, None) is None:
            raise ResourceNotFoundException("Booking not found")
        self.stored_status.pop(booking_id, None)


class InMemorySavedTourRepository(SavedTourRepository):
    def __init__(self) -> None:
        self.items: dict[SavedTourKey, SavedTour] = {}

    def save(self, saved_tour: SavedTour) -> None:
        if saved_tour.id in self.items:
            raise DuplicateResourceException("Tour already saved")
        self.items[saved_tour.id] = saved_tour

    def find_by_id(self, key: SavedTourKey) -> SavedTour | None:
        return self.items.get(key)

    def find_by_user_id(self, user_id: UserId) -> list[SavedTour]:
        return [s for s in self.items.values() if s.user_id == user_id]

    def delete(self, key: SavedTourKey) -> bool:
        return self.items.pop(key, None) is not None


@pytest.fixture
def tour_repository():
    return InMemoryTourRepository()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def booking_repository():
    return InMemoryBookingRepository()


@pytest.fixture
def saved_tour_repository():
    return InMemorySavedTourRepository()


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


# ---------------------------------------------------------------------------
# Lambda
# ---------------------------------------------------------------------------


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway プロキシイベントを生成する Factory fixture"""

    def _factory(
        body: str | None = None,
        path_parameters: dict | None = None,
        method: str = "GET",
        path: str = "/",
    ) -> dict:
        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "queryStringParameters": None,
            "pathParameters": path_parameters,
            "requestContext": {"requestId": "test-request"},
            "body": body,
            "isBase64Encoded": False,
        }

    return _factory
