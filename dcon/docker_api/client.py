"""Обёртка над docker-py с безопасной инициализацией."""

from __future__ import annotations

import logging
from typing import Any, Optional

import docker
from docker.errors import DockerException
from requests.exceptions import RequestException

from dcon.docker_api.exceptions import RuntimeUnavailableError
from dcon.utils.helpers import normalize_socket_path

LOGGER = logging.getLogger(__name__)


class DockerClientWrapper:
    """Управляет созданием и использованием docker API client."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: int = 60,
        raw_client: Any | None = None,
    ) -> None:
        self.base_url = normalize_socket_path(base_url) if base_url else None
        self.timeout = timeout
        self._client = raw_client or self._create_client()

    def _create_client(self) -> Any:
        try:
            if self.base_url:
                return docker.DockerClient(base_url=self.base_url, timeout=self.timeout)
            return docker.from_env(timeout=self.timeout)
        except (DockerException, RequestException) as exc:
            LOGGER.error("Docker client init error via %s: %s", self.base_url or "environment", exc)
            raise RuntimeUnavailableError(str(exc)) from exc

    def get_raw_client(self) -> Any:
        """Возвращает внутренний docker client."""

        return self._client

    def ping(self) -> bool:
        """Проверяет доступность Docker."""

        try:
            self._client.ping()
            return True
        except (DockerException, RequestException) as exc:
            LOGGER.error("Docker ping failed: %s", exc)
            return False

    def close(self) -> None:
        close = getattr(self._client, "close", None)
        if callable(close):
            close()
