from .tour_factory import TourFactory as TourFactory
