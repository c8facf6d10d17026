from dataclasses import dataclass
from datetime import datetime

from services.shared.domain import TourId
from services.tour.applications.tour_summary import TourSummary


@dataclass(frozen=True)
class SavedTourView:
    """保存済みツアーの表示用ビュー

    ツアーが削除済みでも tour_id は保存時の値を返す（一覧からの削除に使う）。
    """

    tour_id: TourId
    tour: TourSummary
    saved_at: datetime
