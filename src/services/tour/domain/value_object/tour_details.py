from typing import TypedDict


class TourDetails(TypedDict, total=False):
    """ツアー作成・更新の入力データ構造

    作成時は title / description / price / duration が必須。
    更新時は指定されたキーだけを反映する。
    overview / requirements / pricing / important_info は
    指定されたサブキーだけを既存値にマージする。
    """

    title: str
    description: str
    detailed_description: str
    price: int
    duration: str
    image: str
    images: list[str] | None
    region: str
    category: str
    destination: str
    overview: dict
    included: list[str] | None
    excluded: list[str] | None
    itinerary: list[dict]
    requirements: dict
    pricing: dict
    important_info: dict
    available_dates: list[str] | None
    max_participants: int
    is_active: bool
