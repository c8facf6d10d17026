from services.booking.domain.enum import BookingStatus
from services.booking.domain.factory import BookingFactory


class TestBookingFactory:
    """BookingFactory のテスト"""

    def test_total_price_is_snapshot_of_tour_price(
        self, create_tour, create_user, booking_details, now
    ):
        tour = create_tour(price=1000)

        booking = BookingFactory().create(
            booking_details(participants=3), tour, create_user(), booked_at=now
        )

        assert int(booking.total_price) == 3000
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.booking_date == now

    def test_contact_defaults_to_user_profile(
        self, create_tour, create_user, booking_details, now
    ):
        user = create_user(phone="9000000001", email="profile@example.com")

        booking = BookingFactory().create(
            booking_details(), create_tour(), user, booked_at=now
        )

        assert booking.contact_number == "9000000001"
        assert booking.email == "profile@example.com"

    def test_explicit_contact_wins(self, create_tour, create_user, booking_details, now):
        booking = BookingFactory().create(
            booking_details(contact_number="9111111111", email="trip@example.com"),
            create_tour(),
            create_user(),
            booked_at=now,
        )

        assert booking.contact_number == "9111111111"
        assert booking.email == "trip@example.com"

    def test_status_override(self, create_tour, create_user, booking_details, now):
        booking = BookingFactory().create(
            booking_details(status="pending"), create_tour(), create_user(), booked_at=now
        )

        assert booking.status == BookingStatus.PENDING
