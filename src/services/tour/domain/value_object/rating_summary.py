from dataclasses import dataclass


@dataclass(frozen=True)
class RatingSummary:
    """評価の集計値（平均点と件数）"""

    average: float
    count: int

    @classmethod
    def empty(cls) -> "RatingSummary":
        return cls(average=0.0, count=0)
