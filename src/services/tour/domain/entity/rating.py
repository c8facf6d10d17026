from datetime import datetime

from services.shared.domain import Entity, UserId
from services.tour.domain.value_object import RatingScore


class Rating(Entity[UserId]):
    """ツアー評価（Tour 集約内のエンティティ、ユーザーごとに1件）"""

    def __init__(
        self, user_id: UserId, score: RatingScore, review: str, date: datetime
    ) -> None:
        super().__init__(user_id)
        self._score = score
        self._review = review
        self._date = date

    @property
    def user_id(self) -> UserId:
        return self._id

    @property
    def score(self) -> RatingScore:
        return self._score

    @property
    def review(self) -> str:
        return self._review

    @property
    def date(self) -> datetime:
        return self._date

    def revise(self, score: RatingScore, review: str, date: datetime) -> None:
        """評価を上書きする"""
        self._score = score
        self._review = review
        self._date = date
