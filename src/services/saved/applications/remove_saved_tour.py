from services.saved.domain.repository import SavedTourRepository
from services.saved.domain.value_object import SavedTourKey
from services.shared.domain import ResourceNotFoundException, TourId, UserId


class RemoveSavedTourService:
    """保存済みツアー削除のユースケース"""

    def __init__(self, repository: SavedTourRepository) -> None:
        self._repository = repository

    def remove(self, user_id: UserId, tour_id: TourId) -> None:
        if not self._repository.delete(SavedTourKey(user_id=user_id, tour_id=tour_id)):
            raise ResourceNotFoundException("Saved tour not found")
