from .saved_tour import SavedTour as SavedTour
