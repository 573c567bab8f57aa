"""Тесты путей каталога состояния."""

from __future__ import annotations

from pathlib import Path

import pytest

from dcon.utils.paths import CONFIG_DIR_NAME, resolve_base_dir


def test_default_base_dir_in_home(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("DCON_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert resolve_base_dir() == tmp_path / ".docker-selector"


def test_dcon_home_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DCON_HOME", str(tmp_path))
    assert resolve_base_dir() == tmp_path / CONFIG_DIR_NAME
