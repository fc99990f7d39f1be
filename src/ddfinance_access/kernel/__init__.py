"""Kernel – framework-agnostic access-control building blocks."""

from ddfinance_access.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    InvariantViolationError,
    NotFoundError,
    UnauthorizedError,
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
