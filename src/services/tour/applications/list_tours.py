from services.shared.domain import ValidationException
from services.tour.domain.entity import Tour
from services.tour.domain.enum import Category
from services.tour.domain.repository import TourRepository


class ListToursService:
    """ツアー一覧のユースケース（公開中のみ、新しい順）"""

    def __init__(self, repository: TourRepository) -> None:
        self._repository = repository

    def list_active(self) -> list[Tour]:
        return self._repository.find_all_active()

    def list_by_category(self, category: str) -> list[Tour]:
        try:
            resolved = Category(category)
        except ValueError as e:
            allowed = ", ".join(c.value for c in Category)
            raise ValidationException(
                [f"Invalid category. Must be one of: {allowed}"]
            ) from e
        return self._repository.find_active_by_category(resolved)
