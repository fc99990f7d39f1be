"""Observability – get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger wrapping the stdlib logger *name*.

    Output goes through :mod:`logging`, so until the application attaches a
    handler (see :meth:`JsonLoggerFactory.configure`) records stop at the
    package's ``NullHandler`` and nothing is written.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    return structlog.wrap_logger(logging.getLogger(name), **initial_values)


__all__ = ["get_logger"]
