from enum import Enum


class Category(str, Enum):
    """ツアーのカテゴリ"""

    HERITAGE = "heritage"
    ADVENTURE = "adventure"
    BEACH = "beach"
    WELLNESS = "wellness"
    CULTURAL = "cultural"
    SPIRITUAL = "spiritual"
