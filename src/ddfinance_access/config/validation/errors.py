"""Config validation errors.

Both concrete errors name the offending setting by its environment variable
(``ACCESS_LOG_LEVEL``) when raised by a loader and by its field name
(``log_level``) when raised by a settings class' own validation.
"""
from __future__ import annotations

from typing import Any

from ddfinance_access.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration is invalid or could not be loaded; fatal at startup."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing; "
            f"export it or add it to the .env file"
        )
        self.setting_name = setting_name

    def fields(self) -> dict[str, Any]:
        return {"setting": self.setting_name}


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used; ``allowed`` lists valid values when finite."""

    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        allowed: tuple[str, ...] | None = None,
    ) -> None:
        super().__init__(f"Setting '{setting_name}' has invalid value {value!r}: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        self.allowed = allowed

    def fields(self) -> dict[str, Any]:
        return {
            "setting": self.setting_name,
            "reason": self.reason,
            "allowed": None if self.allowed is None else list(self.allowed),
        }


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
