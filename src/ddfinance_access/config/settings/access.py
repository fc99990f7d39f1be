"""Config settings – AccessControlSettings and wiring helpers."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from ddfinance_access.config.settings.base import Settings
from ddfinance_access.config.validation import InvalidSettingValueError
from ddfinance_access.kernel.security.evaluator import UserPermissionEvaluator
from ddfinance_access.kernel.security.role_policy import RolePolicy
from ddfinance_access.observability.logging import JsonLoggerFactory, get_logger

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class AccessControlSettings(Settings):
    """Settings read from ``ACCESS_*`` environment variables.

    ``log_denials`` switches the ``access.denied`` DEBUG events off for hot
    paths; it never changes a decision.
    """

    _prefix: ClassVar[str] = "ACCESS"

    log_level: str = "INFO"
    log_json: bool = True
    log_denials: bool = True

    def _validate(self) -> None:
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, "not a logging level name", allowed=_LOG_LEVELS
            )
        self.log_level = level


def configure_logging(settings: AccessControlSettings) -> None:
    """Install the structlog chain and log the effective settings once."""
    JsonLoggerFactory.configure(level=settings.log_level, json_output=settings.log_json)
    get_logger(__name__).info("access.settings", **settings.as_env())


def build_evaluator(
    settings: AccessControlSettings,
    policy: RolePolicy | None = None,
) -> UserPermissionEvaluator:
    """Return an evaluator honouring *settings* (denial logging on or off)."""
    return UserPermissionEvaluator(policy, log_denials=settings.log_denials)


__all__ = ["AccessControlSettings", "build_evaluator", "configure_logging"]
