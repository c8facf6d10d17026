from .entity import Rating as Rating
from .entity import Tour as Tour
from .enum import Category as Category
from .enum import Difficulty as Difficulty
from .enum import Region as Region
from .factory import TourFactory as TourFactory
from .repository import TourRepository as TourRepository
from .service import recompute_aggregate as recompute_aggregate
from .value_object import ItineraryDay as ItineraryDay
from .value_object import RatingScore as RatingScore
from .value_object import RatingSummary as RatingSummary
from .value_object import TourDetails as TourDetails
