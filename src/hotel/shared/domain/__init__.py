from .entity import Entity as Entity
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    InvalidOperationException as InvalidOperationException,
)
from .repository import Repository as Repository
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    CustomerId as CustomerId,
)
from .value_object import (
    Money as Money,
)
