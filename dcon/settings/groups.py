"""Группы настроек config.json.

Каждая группа объявляет таблицу полей: значение по умолчанию и валидатор.
Значения хранятся в экземпляре и меняются только через `set`, поэтому в
группе не может оказаться непроверенного значения.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional

from dcon.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from dcon.settings.validators import (
    CompositeValidator,
    EnumValidator,
    RangeValidator,
    TypeValidator,
    ValidationResult,
    Validator,
)

THEMES = ("light", "dark")
LANGUAGES = ("en", "ru")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _bounded_int(min_value: int, max_value: int) -> Validator:
    return CompositeValidator([TypeValidator(int), RangeValidator(min_value, max_value)])


@dataclass(frozen=True, slots=True)
class SettingField:
    """Ключ группы: значение по умолчанию и необязательная проверка."""

    default: Any
    validator: Optional[Validator] = None

    def check(self, value: Any) -> ValidationResult:
        if self.validator is None:
            return True, ""
        return self.validator.validate(value)


class SettingsGroup:
    """Секция config.json; подклассы задают `name` и `fields`."""

    name: ClassVar[str] = ""
    fields: ClassVar[Mapping[str, SettingField]] = {}

    def __init__(self) -> None:
        self._values: Dict[str, Any] = {}
        self.reset_to_defaults()

    def _field(self, key: str) -> SettingField:
        try:
            return self.fields[key]
        except KeyError:
            raise SettingsNotFoundError(self.name, key) from None

    def qualified(self, key: str) -> str:
        return f"{self.name}.{key}"

    def get(self, key: str) -> Any:
        self._field(key)
        return self._values[key]

    def validate(self, key: str, value: Any) -> ValidationResult:
        return self._field(key).check(value)

    def set(self, key: str, value: Any) -> None:
        """Проверяет и сохраняет значение; ошибка проверки не меняет группу."""

        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(key=self.qualified(key), value=value, reason=error)
        self._values[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return {key: self._values[key] for key in self.fields}

    def from_dict(self, data: Mapping[str, Any]) -> None:
        """Применяет известные ключи; устаревшие ключи файла пропускаются."""

        for key in self.fields:
            if key in data:
                self.set(key, data[key])

    def reset_to_defaults(self) -> None:
        self._values = {key: field.default for key, field in self.fields.items()}


class AppSettings(SettingsGroup):
    """Оформление и поведение интерактивного режима."""

    name = "app"
    fields = {
        "theme": SettingField("light", EnumValidator(THEMES)),
        "language": SettingField("en", EnumValidator(LANGUAGES)),
        "log_lines": SettingField(50, _bounded_int(1, 100000)),
    }


class DockerSettings(SettingsGroup):
    """Подключение к Docker engine; base_url None означает окружение (DOCKER_HOST)."""

    name = "docker"
    fields = {
        "base_url": SettingField(None, TypeValidator((str, type(None)))),
        "timeout_sec": SettingField(60, _bounded_int(1, 600)),
    }


class LoggingSettings(SettingsGroup):
    name = "logging"
    fields = {
        "enabled": SettingField(True, TypeValidator(bool)),
        "level": SettingField("INFO", EnumValidator(LOG_LEVELS)),
        "max_file_size_mb": SettingField(1, _bounded_int(1, 1000)),
        "max_archived_files": SettingField(3, _bounded_int(1, 50)),
    }
