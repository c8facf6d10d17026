from __future__ import annotations

from dataclasses import dataclass, field, replace

from services.shared.utils.validators import clean_text
from services.tour.domain.value_object.section_fields import pick_text

MIN_PERCENTAGE = 0
MAX_PERCENTAGE = 100
INVALID_PERCENTAGE_MESSAGE = "Discount percentage must be between 0 and 100"


@dataclass(frozen=True)
class Discount:
    """割引（名称と割引率）"""

    name: str
    percentage: int = 0
    description: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.percentage, bool) or not isinstance(self.percentage, int):
            raise ValueError(INVALID_PERCENTAGE_MESSAGE)
        if not MIN_PERCENTAGE <= self.percentage <= MAX_PERCENTAGE:
            raise ValueError(INVALID_PERCENTAGE_MESSAGE)


def build_discounts(entries: object) -> tuple[Discount, ...]:
    """名称の無い割引を除いて Discount に変換する"""
    if not isinstance(entries, list):
        return ()
    return tuple(
        Discount(
            name=clean_text(entry["name"]),
            percentage=0 if entry.get("percentage") is None else entry["percentage"],
            description=clean_text(entry.get("description")),
        )
        for entry in entries
        if isinstance(entry, dict) and clean_text(entry.get("name"))
    )


@dataclass(frozen=True)
class TourPricing:
    """料金詳細

    base_price が未設定（0）のときはツアー料金で補う。
    """

    base_price: int = 0
    discounts: tuple[Discount, ...] = field(default_factory=tuple)
    payment_policy: str = ""
    cancellation_policy: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.base_price, bool) or not isinstance(self.base_price, int):
            raise ValueError("Base price must be an integer")
        if self.base_price < 0:
            raise ValueError("Base price cannot be negative")

    @classmethod
    def from_input(cls, data: dict | None, price: int) -> TourPricing:
        return cls().merge(data or {}, price)

    def merge(self, changes: dict, price: int) -> TourPricing:
        """入力にあるキーだけを上書きし、基本料金を補った料金詳細を返す"""
        values: dict = pick_text(changes, ("payment_policy", "cancellation_policy"))
        if changes.get("base_price") is not None:
            values["base_price"] = changes["base_price"]
        if "discounts" in changes:
            values["discounts"] = build_discounts(changes["discounts"])

        pricing = replace(self, **values)
        if not pricing.base_price and price:
            pricing = replace(pricing, base_price=price)
        return pricing

    def to_dict(self) -> dict:
        return {
            "base_price": self.base_price,
            "discounts": [
                {
                    "name": discount.name,
                    "percentage": discount.percentage,
                    "description": discount.description,
                }
                for discount in self.discounts
            ],
            "payment_policy": self.payment_policy,
            "cancellation_policy": self.cancellation_policy,
        }
