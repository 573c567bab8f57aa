"""Исключения слоя доступа к Docker."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class DockerAPIError(Exception):
    """Базовая ошибка обращения к Docker engine с поддержкой контекста."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


class RuntimeUnavailableError(DockerAPIError):
    """Docker engine недоступен; работа дальше невозможна."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Docker is not running or not accessible: {reason}", context={"reason": reason})


class ContainerNotFoundError(DockerAPIError):
    """Контейнер с указанным именем не запущен."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Container '{name}' not found among running containers", context={"name": name})


class ActionFailedError(DockerAPIError):
    """Действие над контейнером завершилось ошибкой."""

    def __init__(self, name: str, action: str, reason: str) -> None:
        self.name = name
        self.action = action
        self.reason = reason
        super().__init__(
            f"Action '{action}' failed for container '{name}': {reason}",
            context={"name": name, "action": action, "reason": reason},
        )
