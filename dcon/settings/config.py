"""Неизменяемая конфигурация, собираемая один раз при запуске."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dcon.settings.registry import SettingsRegistry
from dcon.utils.paths import FAVORITES_FILE_NAME, HISTORY_FILE_NAME


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Значения, которые нужны рендереру, консоли и хранилищам."""

    base_dir: Path
    theme: str = "light"
    language: str = "en"
    log_lines: int = 50
    docker_base_url: Optional[str] = None
    docker_timeout_sec: int = 60

    @property
    def favorites_path(self) -> Path:
        return self.base_dir / FAVORITES_FILE_NAME

    @property
    def history_path(self) -> Path:
        return self.base_dir / HISTORY_FILE_NAME

    @classmethod
    def from_settings(cls, settings: SettingsRegistry, base_dir: Path) -> "AppConfig":
        return cls(
            base_dir=base_dir,
            theme=settings.get_value("app", "theme"),
            language=settings.get_value("app", "language"),
            log_lines=settings.get_value("app", "log_lines"),
            docker_base_url=settings.get_value("docker", "base_url"),
            docker_timeout_sec=settings.get_value("docker", "timeout_sec"),
        )
