"""Application-layer errors raised by permission guards."""

from __future__ import annotations

from typing import Any

from ddfinance_access.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """No authenticated principal is available."""

    default_code = "unauthorized"


class ForbiddenError(ApplicationError):
    """The principal is not allowed to perform the requested action.

    ``permission`` names the :class:`PermissionKind` that was checked and
    ``resource`` describes the target entity (``"client:42"``), if any.
    """

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Access denied",
        *,
        permission: str | None = None,
        resource: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.permission = permission
        self.resource = resource

    def fields(self) -> dict[str, Any]:
        return {"permission": self.permission, "resource": self.resource}


__all__ = [
    "ApplicationError",
    "ForbiddenError",
    "UnauthorizedError",
]
