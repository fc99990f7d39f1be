"""Config settings – env-based configuration."""
from ddfinance_access.config.settings.base import Settings
from ddfinance_access.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from ddfinance_access.config.settings.access import (
    AccessControlSettings,
    build_evaluator,
    configure_logging,
)

__all__ = [
    "AccessControlSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
    "build_evaluator",
    "configure_logging",
]
