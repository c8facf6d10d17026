from .rating import Rating as Rating
from .tour import Tour as Tour
