"""Тесты импорта старого shell-конфига."""

from __future__ import annotations

from pathlib import Path

import pytest

from dcon.settings.exceptions import SettingsMigrationError
from dcon.settings.migration import SettingsMigration
from dcon.settings.registry import SettingsRegistry


def test_parse_legacy_config_handles_export_and_comments() -> None:
    text = "\n".join(
        [
            "# dcon settings",
            "export THEME=dark",
            'LOG_LINES="200"  # tail size',
            "garbage line",
            "",
        ]
    )
    assert SettingsMigration.parse_legacy_config(text) == {"THEME": "dark", "LOG_LINES": "200"}


def test_legacy_config_imported_on_first_start(tmp_path: Path) -> None:
    legacy = tmp_path / "config"
    legacy.write_text("THEME=Dark\nLOG_LINES=75\n", encoding="utf-8")
    config_path = tmp_path / "config.json"

    registry = SettingsRegistry(config_path, legacy_path=legacy)
    registry.load_from_disk()

    assert registry.get_value("app", "theme") == "dark"
    assert registry.get_value("app", "log_lines") == 75
    assert config_path.exists()


def test_invalid_legacy_values_are_skipped(tmp_path: Path) -> None:
    legacy = tmp_path / "config"
    legacy.write_text("THEME=neon\nLOG_LINES=many\n", encoding="utf-8")
    registry = SettingsRegistry(tmp_path / "config.json")

    assert SettingsMigration.import_legacy_config(registry, legacy) == 0
    assert registry.get_value("app", "theme") == "light"
    assert registry.get_value("app", "log_lines") == 50


def test_existing_json_wins_over_legacy(tmp_path: Path) -> None:
    legacy = tmp_path / "config"
    legacy.write_text("THEME=dark\n", encoding="utf-8")
    config_path = tmp_path / "config.json"
    config_path.write_text('{"app": {"theme": "light"}}', encoding="utf-8")

    registry = SettingsRegistry(config_path, legacy_path=legacy)
    registry.load_from_disk()
    assert registry.get_value("app", "theme") == "light"


def test_unreadable_legacy_file_raises(tmp_path: Path) -> None:
    registry = SettingsRegistry(tmp_path / "config.json")
    with pytest.raises(SettingsMigrationError):
        SettingsMigration.import_legacy_config(registry, tmp_path / "missing")
