"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvariantViolationError
    │   ├── ValidationError
    │   │   └── UnknownPermissionError
    │   └── NotFoundError
    └── ApplicationError         (application.py)
        ├── UnauthorizedError
        └── ForbiddenError

A denied permission check is *not* an error: evaluators return ``False``.
Only guards translate a denial into :class:`ForbiddenError`.
"""

from ddfinance_access.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    UnauthorizedError,
)
from ddfinance_access.kernel.errors.base import BaseError
from ddfinance_access.kernel.errors.domain import (
    DomainError,
    InvariantViolationError,
    NotFoundError,
    UnknownPermissionError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "InvariantViolationError",
    "NotFoundError",
    "UnauthorizedError",
    "UnknownPermissionError",
    "ValidationError",
]
