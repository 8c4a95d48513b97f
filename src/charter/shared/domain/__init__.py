from .entity import AggregateRoot as AggregateRoot
from .entity import DomainEvent as DomainEvent
from .entity import Entity as Entity
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    CollaboratorUnavailableException as CollaboratorUnavailableException,
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
    InvalidTransitionException as InvalidTransitionException,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .repository import ReadOnlyRepository as ReadOnlyRepository
from .repository import Repository as Repository
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    IsoDateTime as IsoDateTime,
)
from .value_object import (
    Money as Money,
)
from .value_object import (
    round_half_up as round_half_up,
)
