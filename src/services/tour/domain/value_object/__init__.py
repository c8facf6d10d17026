from .available_dates import build_available_dates as build_available_dates
from .important_info import ImportantInfo as ImportantInfo
from .itinerary_day import ItineraryDay as ItineraryDay
from .itinerary_day import build_itinerary as build_itinerary
from .rating_score import RatingScore as RatingScore
from .rating_summary import RatingSummary as RatingSummary
from .tour_details import TourDetails as TourDetails
from .tour_overview import TourOverview as TourOverview
from .tour_pricing import Discount as Discount
from .tour_pricing import TourPricing as TourPricing
from .tour_requirements import TourRequirements as TourRequirements
