from services.shared.domain import ResourceNotFoundException, TourId
from services.tour.domain.entity import Tour
from services.tour.domain.repository import TourRepository


class GetTourService:
    """ツアー詳細取得のユースケース"""

    def __init__(self, repository: TourRepository) -> None:
        self._repository = repository

    def get(self, tour_id: TourId) -> Tour:
        tour = self._repository.find_by_id(tour_id)
        if tour is None:
            raise ResourceNotFoundException("Tour not found")
        return tour
