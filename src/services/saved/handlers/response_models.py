from datetime import datetime

from pydantic import Field

from services.saved.applications.saved_tour_view import SavedTourView
from services.shared.utils import CamelModel


class SavedTourData(CamelModel):
    """保存済みツアーのレスポンスモデル"""

    id: str = Field(serialization_alias="_id")
    title: str
    description: str
    price: int
    duration: str
    image: str
    category: str
    region: str
    saved_at: datetime


def to_saved_tour_data(view: SavedTourView) -> dict:
    tour = view.tour
    return SavedTourData(
        id=str(view.tour_id),
        title=tour.title,
        description=tour.description,
        price=tour.price,
        duration=tour.duration,
        image=tour.image,
        category=tour.category,
        region=tour.region,
        saved_at=view.saved_at,
    ).dump()
