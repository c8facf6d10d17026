from .saved_tour_key import SavedTourKey as SavedTourKey
