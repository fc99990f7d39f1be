"""Config – 12-factor settings for the access-control core."""

from ddfinance_access.config.settings import (
    AccessControlSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
    build_evaluator,
    configure_logging,
)
from ddfinance_access.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "AccessControlSettings",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "build_evaluator",
    "configure_logging",
]
