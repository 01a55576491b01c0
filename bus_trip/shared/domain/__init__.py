from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BookingAlreadyExistsException as BookingAlreadyExistsException,
)
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    InvalidInputException as InvalidInputException,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .repository import IdSequence as IdSequence
from .repository import Repository as Repository
from .value_object import (
    CommissionPercent as CommissionPercent,
)
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    EmailAddress as EmailAddress,
)
from .value_object import (
    IsoDateTime as IsoDateTime,
)
from .value_object import (
    Money as Money,
)
from .value_object import (
    TripDate as TripDate,
)
