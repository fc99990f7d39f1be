"""Domain errors – catalog lookups and startup invariants."""

from __future__ import annotations

from typing import Any

from ddfinance_access.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is broken."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A structural invariant of the permission model does not hold."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def fields(self) -> dict[str, Any]:
        return {"errors": self.errors}


class UnknownPermissionError(ValidationError):
    """A permission name is not part of the closed catalog."""

    default_code = "unknown_permission"

    def __init__(self, name: object, **kwargs: Any) -> None:
        super().__init__(
            f"Unknown permission {name!r}",
            errors=[{"field": "permission", "value": str(name)}],
            **kwargs,
        )
        self.name = name


class NotFoundError(DomainError):
    """An entity needed to build a resource reference does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier

    def fields(self) -> dict[str, Any]:
        identifier = None if self.identifier is None else str(self.identifier)
        return {"resource": self.resource, "identifier": identifier}


__all__ = [
    "DomainError",
    "InvariantViolationError",
    "NotFoundError",
    "UnknownPermissionError",
    "ValidationError",
]
