from .category import Category as Category
from .difficulty import Difficulty as Difficulty
from .region import Region as Region
