from .opaque_id import OpaqueId as OpaqueId
from .price import Price as Price
from .tour_id import TourId as TourId
from .user_id import UserId as UserId
