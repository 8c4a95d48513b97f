from .exceptions import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exceptions import (
    CollaboratorUnavailableException as CollaboratorUnavailableException,
)
from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exceptions import (
    InvalidInputException as InvalidInputException,
)
from .exceptions import (
    InvalidTransitionException as InvalidTransitionException,
)
from .exceptions import (
    OptimisticLockException as OptimisticLockException,
)
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
