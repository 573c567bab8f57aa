"""Импорт старого shell-конфига (THEME=..., LOG_LINES=...) в config.json."""

from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Dict, Tuple

from dcon.settings.exceptions import SettingsError, SettingsMigrationError

if TYPE_CHECKING:  # pragma: no cover
    from dcon.settings.registry import SettingsRegistry

LegacyConverter = Callable[[str], Any]


def _to_theme(raw: str) -> str:
    return raw.strip().lower()


def _to_int(raw: str) -> int:
    return int(raw.strip())


class SettingsMigration:
    """Переносит переменные старого формата в группы настроек."""

    # имя переменной -> (группа, ключ, преобразователь)
    LEGACY_KEYS: Dict[str, Tuple[str, str, LegacyConverter]] = {
        "THEME": ("app", "theme", _to_theme),
        "LOG_LINES": ("app", "log_lines", _to_int),
    }
    _logger = logging.getLogger(__name__)

    @staticmethod
    def parse_legacy_config(text: str) -> Dict[str, str]:
        """Разбирает строки вида ``[export] KEY=value``; комментарии игнорируются."""

        result: Dict[str, str] = {}
        for raw_line in text.splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            if line.startswith("export "):
                line = line[len("export ") :].strip()
            key, _, value = line.partition("=")
            try:
                parts = shlex.split(value, comments=True)
            except ValueError:
                parts = [value.strip()]
            result[key.strip()] = parts[0] if parts else ""
        return result

    @classmethod
    def import_legacy_config(cls, registry: "SettingsRegistry", legacy_path: Path) -> int:
        """Применяет известные переменные к реестру, возвращает число перенесённых."""

        try:
            variables = cls.parse_legacy_config(legacy_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise SettingsMigrationError(legacy_path, str(exc)) from exc

        imported = 0
        for name, (group, key, converter) in cls.LEGACY_KEYS.items():
            if name not in variables:
                continue
            try:
                registry.set_value(group, key, converter(variables[name]))
            except (ValueError, SettingsError) as exc:
                cls._logger.warning("Legacy setting %s=%r ignored: %s", name, variables[name], exc)
                continue
            imported += 1
        cls._logger.info("Imported %s legacy settings from %s", imported, legacy_path)
        return imported
