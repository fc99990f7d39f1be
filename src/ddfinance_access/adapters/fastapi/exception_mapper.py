"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fastapi.responses import JSONResponse

from ddfinance_access.kernel.errors import (
    BaseError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


class FastAPIExceptionMapper:
    """Register access-control error → HTTP status mappings on a FastAPI app.

    Error body schema::

        {"code": "forbidden", "message": "...", "detail": {"permission": "..."}}

    Mappings
    --------
    ``ValidationError``   → 400
    ``UnauthorizedError`` → 401
    ``ForbiddenError``    → 403
    ``NotFoundError``     → 404
    """

    def __init__(self) -> None:
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (UnauthorizedError, 401),
            (ForbiddenError, 403),
            (NotFoundError, 404),
        ]

    @property
    def mappings(self) -> dict[type[Exception], int]:
        return dict(self._map)

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        for exc_type, status in self._map:
            app.add_exception_handler(exc_type, self._make_handler(status))

    @staticmethod
    def _make_handler(status: int) -> Callable[[Any, Exception], JSONResponse]:
        def handler(request: Any, exc: Exception) -> JSONResponse:  # noqa: ARG001
            if isinstance(exc, BaseError):
                body = exc.to_dict()
            else:
                body = {"code": "error", "message": str(exc), "detail": {}}
            headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
            return JSONResponse(status_code=status, content=body, headers=headers)

        return handler


__all__ = ["FastAPIExceptionMapper"]
