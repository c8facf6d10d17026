from dataclasses import dataclass

MIN_SCORE = 1
MAX_SCORE = 5


@dataclass(frozen=True)
class RatingScore:
    """評価点（1〜5 の整数）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Rating must be an integer between 1 and 5")
        if not MIN_SCORE <= self.value <= MAX_SCORE:
            raise ValueError("Rating must be an integer between 1 and 5")

    def __int__(self) -> int:
        return self.value
