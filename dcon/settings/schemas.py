"""Схема config.json: версия формата и состав групп."""

from __future__ import annotations

from typing import Tuple, Type

from dcon.settings.groups import AppSettings, DockerSettings, LoggingSettings, SettingsGroup

SCHEMA_VERSION = "1.0.0"

# порядок групп совпадает с порядком секций в файле
GROUP_TYPES: Tuple[Type[SettingsGroup], ...] = (AppSettings, DockerSettings, LoggingSettings)
