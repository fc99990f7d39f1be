"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    ``_prefix`` namespaces the environment: field ``log_level`` of a class
    with prefix ``ACCESS`` is read from ``ACCESS_LOG_LEVEL``. Subclasses
    validate and normalise their fields in :meth:`_validate`, which runs on
    every construction, whether from the environment or from code.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to validate or normalise fields."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        if not cls._prefix:
            return field_name.upper()
        return f"{cls._prefix}_{field_name}".upper()

    def as_env(self) -> dict[str, Any]:
        """Current values keyed by environment variable, for startup logs."""
        return {self.env_key(f.name): getattr(self, f.name) for f in dataclasses.fields(self)}


__all__ = ["Settings"]
