from .booking import Booking as Booking
