from dataclasses import dataclass

from services.shared.domain import TourId, UserId


@dataclass(frozen=True)
class SavedTourKey:
    """保存済みツアーの識別子（ユーザーとツアーの組）"""

    user_id: UserId
    tour_id: TourId
