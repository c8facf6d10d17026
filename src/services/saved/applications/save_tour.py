from collections.abc import Callable
from datetime import datetime

from services.saved.applications.saved_tour_view import SavedTourView
from services.saved.domain.entity import SavedTour
from services.saved.domain.repository import SavedTourRepository
from services.saved.domain.value_object import SavedTourKey
from services.shared.domain import (
    DuplicateResourceException,
    ResourceNotFoundException,
    TourId,
    UserId,
)
from services.shared.utils import get_logger
from services.shared.utils.clock import utc_now
from services.tour.applications.tour_summary import TourSummary
from services.tour.domain.repository import TourRepository

logger = get_logger()


class SaveTourService:
    """ツアー保存のユースケース

    事前に重複を確認するが、確認と書き込みの間の競合は条件付き書き込みで検出する。
    """

    def __init__(
        self,
        saved_tour_repository: SavedTourRepository,
        tour_repository: TourRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._saved_tour_repository = saved_tour_repository
        self._tour_repository = tour_repository
        self._clock = clock

    def save(self, user_id: UserId, tour_id: TourId) -> SavedTourView:
        """ツアーを保存する

        Raises:
            DuplicateResourceException: 既に保存済みの場合
            ResourceNotFoundException: ツアーが存在しない場合
        """
        key = SavedTourKey(user_id=user_id, tour_id=tour_id)
        if self._saved_tour_repository.exists(key):
            raise DuplicateResourceException("Tour already saved")

        tour = self._tour_repository.find_by_id(tour_id)
        if tour is None:
            raise ResourceNotFoundException("Tour not found")

        saved_tour = SavedTour(id=key, created_at=self._clock())
        self._saved_tour_repository.save(saved_tour)

        logger.info(
            "Tour saved", extra={"user_id": str(user_id), "tour_id": str(tour_id)}
        )
        return SavedTourView(
            tour_id=tour_id, tour=TourSummary.of(tour), saved_at=saved_tour.created_at
        )
