from collections.abc import Callable
from datetime import datetime

from services.shared.domain import (
    ResourceNotFoundException,
    TourId,
    ValidationException,
)
from services.shared.utils.clock import utc_now
from services.tour.domain.entity import Tour
from services.tour.domain.repository import TourRepository
from services.tour.domain.value_object import TourDetails


class UpdateTourService:
    """ツアー更新のユースケース"""

    def __init__(
        self,
        repository: TourRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def update(self, tour_id: TourId, changes: TourDetails) -> Tour:
        tour = self._repository.find_by_id(tour_id)
        if tour is None:
            raise ResourceNotFoundException("Tour not found")

        try:
            tour.revise(changes, updated_at=self._clock())
        except ValueError as e:
            raise ValidationException([str(e)]) from e

        self._repository.update(tour)
        return tour
