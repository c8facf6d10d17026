from enum import Enum


class Region(str, Enum):
    """ツアーの地域"""

    NORTH = "north"
    SOUTH = "south"
    WEST = "west"
    EAST = "east"
    CENTRAL = "central"
