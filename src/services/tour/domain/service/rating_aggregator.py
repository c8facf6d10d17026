from collections.abc import Iterable

from services.tour.domain.entity.rating import Rating
from services.tour.domain.value_object import RatingSummary


def recompute_aggregate(ratings: Iterable[Rating]) -> RatingSummary:
    """評価一覧から平均点と件数を算出する（評価が無ければ 0 件・平均 0）"""
    scores = [rating.score.value for rating in ratings]
    if not scores:
        return RatingSummary.empty()
    return RatingSummary(average=sum(scores) / len(scores), count=len(scores))
