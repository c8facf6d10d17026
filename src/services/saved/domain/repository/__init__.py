from .saved_tour_repository import SavedTourRepository as SavedTourRepository
