from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    MalformedIdException as MalformedIdException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    ValidationException as ValidationException,
)
from .repository import Repository as Repository
from .value_object import (
    OpaqueId as OpaqueId,
)
from .value_object import (
    Price as Price,
)
from .value_object import (
    TourId as TourId,
)
from .value_object import (
    UserId as UserId,
)
