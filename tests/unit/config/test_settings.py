"""Unit tests for AccessControlSettings and the env loaders."""

from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

import pytest
import structlog

from ddfinance_access.config import (
    AccessControlSettings,
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
    build_evaluator,
    configure_logging,
)
from ddfinance_access.kernel.security import PermissionKind, Principal, Role, RolePolicy

_VARS = ("ACCESS_LOG_LEVEL", "ACCESS_LOG_JSON", "ACCESS_LOG_DENIALS")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # set-then-delete registers every key for restore, including keys a
    # .env file loads behind monkeypatch's back
    for name in _VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


# ---------------------------------------------------------------------------
# AccessControlSettings
# ---------------------------------------------------------------------------


class TestAccessControlSettings:
    def test_defaults(self) -> None:
        s = AccessControlSettings()
        assert (s.log_level, s.log_json, s.log_denials) == ("INFO", True, True)

    def test_level_is_normalised(self) -> None:
        assert AccessControlSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_level(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            AccessControlSettings(log_level="LOUD")
        assert info.value.setting_name == "log_level"
        body = info.value.to_dict()
        assert body["setting"] == "log_level"
        assert "DEBUG" in body["allowed"]

    def test_invalid_setting_is_config_error(self) -> None:
        assert issubclass(InvalidSettingValueError, ConfigError)
        assert issubclass(MissingRequiredSettingError, ConfigError)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_defaults_when_unset(self) -> None:
        s = EnvSettingsLoader().load(AccessControlSettings)
        assert s == AccessControlSettings()

    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACCESS_LOG_LEVEL", "warning")
        monkeypatch.setenv("ACCESS_LOG_JSON", "no")
        monkeypatch.setenv("ACCESS_LOG_DENIALS", "0")
        s = EnvSettingsLoader().load(AccessControlSettings)
        assert s.log_level == "WARNING"
        assert s.log_json is False
        assert s.log_denials is False

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_truthy_values(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("ACCESS_LOG_JSON", raw)
        assert EnvSettingsLoader().load(AccessControlSettings).log_json is True

    def test_invalid_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACCESS_LOG_DENIALS", "maybe")
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader().load(AccessControlSettings)
        assert info.value.setting_name == "ACCESS_LOG_DENIALS"

    def test_invalid_level_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACCESS_LOG_LEVEL", "chatty")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(AccessControlSettings)

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        @dataclasses.dataclass
        class Needs(Settings):
            _prefix: ClassVar[str] = "NEEDS"
            token: str

        monkeypatch.delenv("NEEDS_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as info:
            EnvSettingsLoader().load(Needs)
        assert info.value.setting_name == "NEEDS_TOKEN"


class TestEnvKeys:
    def test_prefixed_key(self) -> None:
        assert AccessControlSettings.env_key("log_level") == "ACCESS_LOG_LEVEL"

    def test_unprefixed_key(self) -> None:
        assert Settings.env_key("token") == "TOKEN"

    def test_as_env(self) -> None:
        assert AccessControlSettings(log_level="debug").as_env() == {
            "ACCESS_LOG_LEVEL": "DEBUG",
            "ACCESS_LOG_JSON": True,
            "ACCESS_LOG_DENIALS": True,
        }

    def test_missing_error_names_variable(self) -> None:
        err = MissingRequiredSettingError("NEEDS_TOKEN")
        assert "NEEDS_TOKEN" in err.message
        assert err.to_dict()["setting"] == "NEEDS_TOKEN"


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("ACCESS_LOG_LEVEL=error\nACCESS_LOG_DENIALS=off\n")
        s = DotenvSettingsLoader(str(env_file)).load(AccessControlSettings)
        assert s.log_level == "ERROR"
        assert s.log_denials is False

    def test_environment_wins_without_override(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("ACCESS_LOG_LEVEL=error\n")
        monkeypatch.setenv("ACCESS_LOG_LEVEL", "debug")
        assert DotenvSettingsLoader(str(env_file)).load(AccessControlSettings).log_level == "DEBUG"


# ---------------------------------------------------------------------------
# Wiring helpers
# ---------------------------------------------------------------------------


class TestBuildEvaluator:
    def test_respects_log_denials(self) -> None:
        evaluator = build_evaluator(AccessControlSettings(log_denials=False))
        with structlog.testing.capture_logs() as logs:
            assert evaluator.has_permission(Principal(1, Role.GUEST), PermissionKind.VIEW_CLIENTS) is False
        assert logs == []

    def test_uses_given_policy(self) -> None:
        policy = RolePolicy()
        assert build_evaluator(AccessControlSettings(), policy).policy is policy


class TestConfigureLogging:
    def setup_method(self) -> None:
        root = logging.getLogger()
        self._handlers = list(root.handlers)
        self._level = root.level

    def teardown_method(self) -> None:
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)
        structlog.reset_defaults()

    def test_sets_root_level_and_handler(self) -> None:
        configure_logging(AccessControlSettings(log_level="warning", log_json=False))
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
