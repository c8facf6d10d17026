from collections.abc import Callable
from datetime import datetime

from services.shared.domain import ValidationException
from services.shared.utils import get_logger
from services.shared.utils.clock import utc_now
from services.tour.domain.entity import Tour
from services.tour.domain.factory import TourFactory
from services.tour.domain.repository import TourRepository
from services.tour.domain.value_object import TourDetails

logger = get_logger()


class CreateTourService:
    """ツアー登録のユースケース"""

    def __init__(
        self,
        repository: TourRepository,
        factory: TourFactory,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._clock = clock

    def create(self, details: TourDetails) -> Tour:
        """ツアーを登録する"""
        try:
            tour = self._factory.create(details, created_at=self._clock())
        except ValueError as e:
            raise ValidationException([str(e)]) from e

        self._repository.save(tour)
        logger.info("Tour created", extra={"tour_id": str(tour.id)})
        return tour
