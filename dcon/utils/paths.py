"""Централизованное описание путей приложения."""

from __future__ import annotations

import os
from pathlib import Path

# CONFIG_DIR_NAME: каталог состояния, совместимый с прежним shell-скриптом
CONFIG_DIR_NAME = ".docker-selector"

FAVORITES_FILE_NAME = "favorites"
HISTORY_FILE_NAME = "history"
CONFIG_FILE_NAME = "config.json"
LEGACY_CONFIG_FILE_NAME = "config"


def resolve_base_dir() -> Path:
    """Возвращает каталог состояния с учётом переменной DCON_HOME."""

    home_dir = Path(os.environ.get("DCON_HOME", Path.home()))
    return home_dir / CONFIG_DIR_NAME
