"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   └── ValidationError
    │       ├── InvalidPaginationError
    │       ├── InvalidFieldError
    │       └── UnknownAssociationError
    └── InfrastructureError          (infrastructure.py)
        └── UnsupportedDialectError

Store failures (``sqlalchemy.exc.SQLAlchemyError`` and driver errors)
are not part of this hierarchy and propagate as raised.
"""

from generic_sqla.kernel.errors.base import BaseError
from generic_sqla.kernel.errors.domain import (
    DomainError,
    InvalidFieldError,
    InvalidPaginationError,
    UnknownAssociationError,
    ValidationError,
)
from generic_sqla.kernel.errors.infrastructure import (
    InfrastructureError,
    UnsupportedDialectError,
)

__all__ = [
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidFieldError",
    "InvalidPaginationError",
    "UnknownAssociationError",
    "UnsupportedDialectError",
    "ValidationError",
]
