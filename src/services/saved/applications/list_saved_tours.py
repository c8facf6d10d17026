from services.saved.applications.saved_tour_view import SavedTourView
from services.saved.domain.repository import SavedTourRepository
from services.shared.domain import UserId
from services.tour.applications.tour_summary import TourSummary
from services.tour.domain.repository import TourRepository


class ListSavedToursService:
    """保存済みツアー一覧のユースケース

    保存日時の新しい順に返す。削除済みツアーは代替値の概要になる。
    """

    def __init__(
        self,
        saved_tour_repository: SavedTourRepository,
        tour_repository: TourRepository,
    ) -> None:
        self._saved_tour_repository = saved_tour_repository
        self._tour_repository = tour_repository

    def list(self, user_id: UserId) -> list[SavedTourView]:
        saved_tours = sorted(
            self._saved_tour_repository.find_by_user_id(user_id),
            key=lambda saved: saved.created_at,
            reverse=True,
        )
        return [
            SavedTourView(
                tour_id=saved.tour_id,
                tour=TourSummary.resolve(
                    self._tour_repository.find_by_id(saved.tour_id)
                ),
                saved_at=saved.created_at,
            )
            for saved in saved_tours
        ]
