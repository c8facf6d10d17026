from services.shared.domain import ResourceNotFoundException, TourId
from services.tour.domain.repository import TourRepository


class DeleteTourService:
    """ツアー削除のユースケース

    予約・保存済みツアーからの参照は残る（読み取り時にプレースホルダで補う）。
    """

    def __init__(self, repository: TourRepository) -> None:
        self._repository = repository

    def delete(self, tour_id: TourId) -> None:
        if not self._repository.exists(tour_id):
            raise ResourceNotFoundException("Tour not found")
        self._repository.delete(tour_id)
