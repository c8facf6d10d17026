from .booking_details import BookingDetails as BookingDetails
from .booking_id import BookingId as BookingId
from .travel_date import TravelDate as TravelDate
