from pydantic import Field

from services.shared.utils import CamelModel


class SaveTourRequest(CamelModel):
    """ツアー保存リクエストスキーマ"""

    user_id: str = Field(..., min_length=1)
    tour_id: str = Field(..., min_length=1)
