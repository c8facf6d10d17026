from .booking_validator import INVALID_STATUS_MESSAGE as INVALID_STATUS_MESSAGE
from .booking_validator import is_valid_status as is_valid_status
from .booking_validator import validate_booking_details as validate_booking_details
