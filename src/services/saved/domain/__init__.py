from .entity import SavedTour as SavedTour
from .repository import SavedTourRepository as SavedTourRepository
from .value_object import SavedTourKey as SavedTourKey
