"""Реестр настроек приложения, загружаемый один раз при старте."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dcon.settings.exceptions import SettingsIOError, SettingsNotFoundError, SettingsValidationError
from dcon.settings.groups import SettingsGroup
from dcon.settings.migration import SettingsMigration
from dcon.settings.schemas import GROUP_TYPES, SCHEMA_VERSION

_MISSING = object()


class SettingsRegistry:
    """Все группы настроек и их синхронизация с config.json.

    Секции файла, которым не соответствует ни одна группа (например,
    ``version``), сохраняются как есть и записываются обратно при сохранении.
    """

    def __init__(self, config_path: Path, legacy_path: Optional[Path] = None) -> None:
        self._path = config_path
        self._legacy_path = legacy_path
        self._groups: Dict[str, SettingsGroup] = {
            group_type.name: group_type() for group_type in GROUP_TYPES
        }
        self._extra: Dict[str, Any] = {"version": SCHEMA_VERSION}
        self._logger = logging.getLogger(__name__)

    @property
    def config_path(self) -> Path:
        return self._path

    def get_group(self, group: str) -> SettingsGroup:
        settings = self._groups.get(group)
        if settings is None:
            raise SettingsNotFoundError(group)
        return settings

    def get_value(self, group: str, key: str, default: Any = _MISSING) -> Any:
        """Значение настройки; default подставляется вместо неизвестного ключа."""

        try:
            return self.get_group(group).get(key)
        except SettingsNotFoundError:
            if default is _MISSING:
                raise
            return default

    def set_value(self, group: str, key: str, value: Any) -> None:
        settings = self.get_group(group)
        previous = settings.get(key)
        settings.set(key, value)
        self._logger.info("Setting %s changed: %r -> %r", settings.qualified(key), previous, value)

    def as_dict(self) -> Dict[str, Any]:
        payload = dict(self._extra)
        for name, settings in self._groups.items():
            payload[name] = settings.to_dict()
        return payload

    # --------------------------------------------------------------- storage
    def save_to_disk(self, path: Optional[Path] = None) -> None:
        target = path or self._path
        text = json.dumps(self.as_dict(), indent=2, ensure_ascii=False)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text + "\n", encoding="utf-8")
        except OSError as exc:
            raise SettingsIOError(target, str(exc)) from exc

    def load_from_disk(self, path: Optional[Path] = None) -> None:
        """Читает config.json.

        При первом запуске файла нет: переносятся значения старого shell-конфига
        (если он есть), и результат сразу записывается в config.json.
        """

        target = path or self._path
        if not target.exists():
            if self._legacy_path is not None and self._legacy_path.exists():
                SettingsMigration.import_legacy_config(self, self._legacy_path)
            self._logger.info("Settings file %s is missing, writing defaults", target)
            self.save_to_disk(target)
            return

        content = self._read_json(target)
        self.reset_to_defaults()
        for name, settings in self._groups.items():
            section = content.pop(name, {})
            if not isinstance(section, dict):
                raise SettingsIOError(target, f"section '{name}' must be an object")
            settings.from_dict(section)
        self._extra = {"version": SCHEMA_VERSION, **content}
        self.validate()
        self._logger.debug("Settings loaded from %s", target)

    def validate(self) -> bool:
        """Повторно проверяет все значения всех групп."""

        for settings in self._groups.values():
            for key, value in settings.to_dict().items():
                is_valid, error = settings.validate(key, value)
                if not is_valid:
                    raise SettingsValidationError(key=settings.qualified(key), value=value, reason=error)
        return True

    def reset_to_defaults(self) -> None:
        for settings in self._groups.values():
            settings.reset_to_defaults()

    @staticmethod
    def _read_json(target: Path) -> Dict[str, Any]:
        try:
            content = json.loads(target.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsIOError(target, str(exc)) from exc
        if not isinstance(content, dict):
            raise SettingsIOError(target, "top-level JSON value must be an object")
        return content
