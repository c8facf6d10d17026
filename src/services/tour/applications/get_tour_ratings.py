from dataclasses import dataclass

from services.shared.domain import ResourceNotFoundException, TourId, UserId
from services.tour.domain.entity import Rating
from services.tour.domain.repository import TourRepository
from services.tour.domain.value_object import RatingSummary
from services.user.domain.entity import User
from services.user.domain.repository import UserRepository


@dataclass(frozen=True)
class RatingWithUser:
    """評価と評価者（削除済みなら None）"""

    rating: Rating
    user: User | None


@dataclass(frozen=True)
class TourRatings:
    ratings: list[RatingWithUser]
    summary: RatingSummary


class GetTourRatingsService:
    """ツアーの評価一覧取得のユースケース"""

    def __init__(
        self, tour_repository: TourRepository, user_repository: UserRepository
    ) -> None:
        self._tour_repository = tour_repository
        self._user_repository = user_repository

    def get(self, tour_id: TourId) -> TourRatings:
        tour = self._tour_repository.find_by_id(tour_id)
        if tour is None:
            raise ResourceNotFoundException("Tour not found")

        users: dict[UserId, User | None] = {}
        for rating in tour.ratings:
            if rating.user_id not in users:
                users[rating.user_id] = self._user_repository.find_by_id(rating.user_id)

        return TourRatings(
            ratings=[
                RatingWithUser(rating=rating, user=users[rating.user_id])
                for rating in tour.ratings
            ],
            summary=tour.rating_summary,
        )
