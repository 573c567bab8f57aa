"""Тесты групп настроек и базового класса."""

from __future__ import annotations

import pytest

from dcon.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from dcon.settings.groups import AppSettings, DockerSettings, LoggingSettings


def test_app_settings_defaults_and_set() -> None:
    settings = AppSettings()
    assert settings.get("theme") == "light"
    assert settings.get("language") == "en"
    assert settings.get("log_lines") == 50
    settings.set("theme", "dark")
    assert settings.get("theme") == "dark"


def test_app_settings_invalid_value_raises() -> None:
    settings = AppSettings()
    with pytest.raises(SettingsValidationError):
        settings.set("theme", "blue")
    with pytest.raises(SettingsValidationError):
        settings.set("log_lines", 0)
    with pytest.raises(SettingsValidationError):
        settings.set("log_lines", "100")


def test_docker_settings_accepts_none_base_url() -> None:
    settings = DockerSettings()
    assert settings.get("base_url") is None
    settings.set("base_url", "unix:///run/user/1000/docker.sock")
    settings.set("base_url", None)
    with pytest.raises(SettingsValidationError):
        settings.set("timeout_sec", 0)


def test_logging_settings_ranges() -> None:
    settings = LoggingSettings()
    settings.set("max_file_size_mb", 100)
    with pytest.raises(SettingsValidationError):
        settings.set("max_archived_files", 0)
    with pytest.raises(SettingsValidationError):
        settings.set("level", "TRACE")


def test_from_dict_skips_unknown_keys_and_reset() -> None:
    settings = AppSettings()
    settings.from_dict({"theme": "dark", "log_lines": 200, "obsolete": True})
    assert settings.to_dict() == {"theme": "dark", "language": "en", "log_lines": 200}
    settings.reset_to_defaults()
    assert settings.get("theme") == "light"


def test_unknown_key_raises_not_found() -> None:
    settings = AppSettings()
    with pytest.raises(SettingsNotFoundError):
        settings.get("unknown")
    with pytest.raises(SettingsNotFoundError):
        settings.set("unknown", 1)
