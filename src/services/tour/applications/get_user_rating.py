from services.shared.domain import ResourceNotFoundException, TourId, UserId
from services.tour.domain.entity import Rating
from services.tour.domain.repository import TourRepository


class GetUserRatingService:
    """ユーザーのツアー評価取得のユースケース"""

    def __init__(self, repository: TourRepository) -> None:
        self._repository = repository

    def get(self, tour_id: TourId, user_id: UserId) -> Rating | None:
        """評価を返す（未評価はエラーではなく None）"""
        tour = self._repository.find_by_id(tour_id)
        if tour is None:
            raise ResourceNotFoundException("Tour not found")
        return tour.rating_of(user_id)
