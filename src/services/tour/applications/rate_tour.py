from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from services.shared.domain import (
    ResourceNotFoundException,
    TourId,
    UserId,
    ValidationException,
)
from services.shared.utils import get_logger
from services.shared.utils.clock import utc_now
from services.tour.domain.entity import Rating, Tour
from services.tour.domain.repository import TourRepository
from services.tour.domain.value_object import RatingScore

logger = get_logger()


@dataclass(frozen=True)
class RateTourResult:
    """評価登録の結果"""

    tour: Tour
    rating: Rating
    updated: bool


class RateTourService:
    """ツアー評価のユースケース

    読み込み → 評価の追加/上書き → 丸ごと保存、をトランザクション無しで行う。
    同じツアーへの同時評価は後から保存した側が勝つ。
    """

    def __init__(
        self,
        repository: TourRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def rate(
        self, tour_id: TourId, user_id: UserId, rating: int, review: str = ""
    ) -> RateTourResult:
        """ツアーを評価する"""
        try:
            score = RatingScore(value=rating)
        except ValueError as e:
            raise ValidationException([str(e)]) from e

        tour = self._repository.find_by_id(tour_id)
        if tour is None:
            raise ResourceNotFoundException("Tour not found")

        updated = tour.rate(user_id, score, review or "", rated_at=self._clock())
        self._repository.update(tour)

        logger.info(
            "Tour rated",
            extra={
                "tour_id": str(tour_id),
                "user_id": str(user_id),
                "updated": updated,
                "average_rating": tour.average_rating,
            },
        )
        return RateTourResult(tour=tour, rating=tour.rating_of(user_id), updated=updated)
