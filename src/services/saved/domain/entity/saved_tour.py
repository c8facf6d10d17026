from datetime import datetime

from services.saved.domain.value_object import SavedTourKey
from services.shared.domain import AggregateRoot, TourId, UserId


class SavedTour(AggregateRoot[SavedTourKey]):
    """ユーザーが「あとで見る」に保存したツアー

    ユーザーとツアーの組ごとに高々1件。
    """

    def __init__(self, id: SavedTourKey, created_at: datetime) -> None:
        super().__init__(id)
        self._created_at = created_at

    @property
    def user_id(self) -> UserId:
        return self.id.user_id

    @property
    def tour_id(self) -> TourId:
        return self.id.tour_id

    @property
    def created_at(self) -> datetime:
        return self._created_at
