from enum import Enum


class Difficulty(str, Enum):
    """ツアーの難易度"""

    EASY = "easy"
    MODERATE = "moderate"
    DIFFICULT = "difficult"
