"""Root error class for the ddfinance-access error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error renders to the same JSON envelope, used both as the HTTP body
    by the FastAPI adapter and as log fields by the guards::

        {"code": "forbidden", "message": "...", "detail": {},
         "permission": "EDIT_CLIENT", "resource": "client:42"}

    Subclasses add their own top-level keys by overriding :meth:`fields`.

    Args:
        message: Human-readable description.
        code: Machine-readable slug; defaults to the class' ``default_code``.
        detail: Free-form extra context that must stay JSON-serialisable.
        cause: Exception that triggered this one; chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def fields(self) -> dict[str, Any]:
        """Structured top-level fields; ``None`` values are left out."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        payload.update({k: v for k, v in self.fields().items() if v is not None})
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Flat keyword arguments for a structlog call.

        ``code`` is renamed ``error_code`` and ``message`` is dropped, so the
        fields never clash with the event name or the logger's own keys.
        """
        fields = {k: v for k, v in self.fields().items() if v is not None}
        return {"error_code": self.code, **fields}

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
