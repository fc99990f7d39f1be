"""Kernel security – SecurityContext using contextvars."""

from __future__ import annotations

import contextlib
import contextvars
from typing import Iterator

from ddfinance_access.kernel.errors import UnauthorizedError
from ddfinance_access.kernel.security.principal import Principal

_VAR: contextvars.ContextVar[Principal | None] = contextvars.ContextVar(
    "_access_principal", default=None
)


class SecurityContext:
    """Holds the acting :class:`Principal` for the current request.

    Backed by :mod:`contextvars`, so each thread and asyncio task sees its own
    principal. The evaluators never read it; only guards do.
    """

    @staticmethod
    def get_current() -> Principal | None:
        return _VAR.get()

    @staticmethod
    def set_current(principal: Principal | None) -> contextvars.Token[Principal | None]:
        """Set the current principal and return a reset token."""
        return _VAR.set(principal)

    @staticmethod
    def reset(token: contextvars.Token[Principal | None]) -> None:
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        _VAR.set(None)

    @staticmethod
    def require() -> Principal:
        """Return the current principal or raise ``UnauthorizedError``."""
        principal = _VAR.get()
        if principal is None:
            raise UnauthorizedError("No authenticated principal in context")
        return principal

    @staticmethod
    @contextlib.contextmanager
    def bound(principal: Principal) -> Iterator[Principal]:
        """Make *principal* current for the duration of a ``with`` block."""
        token = _VAR.set(principal)
        try:
            yield principal
        finally:
            _VAR.reset(token)


__all__ = ["SecurityContext"]
