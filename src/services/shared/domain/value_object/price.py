from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Price:
    """料金（通貨の最小単位を持たない非負の整数）"""

    amount: int

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError("Price must be an integer")
        if self.amount < 0:
            raise ValueError("Price cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)

    def __int__(self) -> int:
        return self.amount

    def multiply(self, quantity: int) -> Price:
        """数量を掛けた料金を返す"""
        if quantity < 0:
            raise ValueError("Quantity cannot be negative")
        return Price(amount=self.amount * quantity)
