"""Высокоуровневый шлюз к Docker engine для интерактивной сессии.

Класс объединяет `DockerClientWrapper`, функции из `dcon.docker_api.containers`
и запуск сеансов docker CLI, переводя все сбои в исключения семейства
`DockerAPIError`.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from dcon.docker_api import containers, sessions
from dcon.docker_api.client import DockerClientWrapper
from dcon.docker_api.exceptions import ActionFailedError, DockerAPIError, RuntimeUnavailableError
from dcon.docker_api.models import ContainerDetails
from dcon.settings.config import AppConfig

LOGGER = logging.getLogger(__name__)


class RuntimeGateway:
    """Тонкий интерфейс к контейнерам: список, inspect, сеансы, restart."""

    def __init__(self, client: DockerClientWrapper, *, base_url: Optional[str] = None) -> None:
        self._client = client
        self._env = sessions.build_cli_env(base_url or client.base_url)

    @classmethod
    def connect(cls, config: AppConfig) -> "RuntimeGateway":
        """Создаёт клиент и проверяет, что Docker отвечает."""

        client = DockerClientWrapper(config.docker_base_url, timeout=config.docker_timeout_sec)
        gateway = cls(client, base_url=config.docker_base_url)
        gateway.ping()
        return gateway

    def ping(self) -> None:
        if not self._client.ping():
            raise RuntimeUnavailableError("ping failed")

    # ------------------------------------------------------------------- data
    def list_running(self) -> List[str]:
        try:
            return containers.list_running_names(self._client)
        except DockerAPIError as exc:
            raise RuntimeUnavailableError(exc.message) from exc

    def inspect(self, name: str) -> ContainerDetails:
        return containers.inspect_container(self._client, name)

    def port_mappings(self, name: str) -> List[str]:
        return self.inspect(name).ports

    def port_summary(self, name: str) -> str:
        return containers.summarize_ports(self.inspect(name))

    def fetch_logs(self, name: str, tail: int, *, timestamps: bool = True) -> str:
        return containers.fetch_logs(self._client, name, tail=tail, timestamps=timestamps)

    # --------------------------------------------------------------- sessions
    def detect_shell(self, name: str) -> str:
        return containers.detect_shell(self._client, name)

    def exec_interactive(self, name: str, shell: str) -> int:
        try:
            return sessions.run_interactive(sessions.exec_command(name, shell), self._env)
        except sessions.SessionLaunchError as exc:
            raise ActionFailedError(name, "exec", str(exc)) from exc

    def stream_logs(self, name: str, tail: int, *, follow: bool = True, timestamps: bool = True) -> int:
        args = sessions.logs_command(name, tail=tail, follow=follow, timestamps=timestamps)
        try:
            return sessions.run_attached(args, self._env)
        except sessions.SessionLaunchError as exc:
            raise ActionFailedError(name, "logs", str(exc)) from exc

    def stream_stats(self, name: str) -> int:
        try:
            return sessions.run_attached(sessions.stats_command(name), self._env)
        except sessions.SessionLaunchError as exc:
            raise ActionFailedError(name, "stats", str(exc)) from exc

    # ---------------------------------------------------------------- actions
    def restart(self, name: str) -> None:
        try:
            containers.restart_container(self._client, name)
        except ActionFailedError:
            raise
        except DockerAPIError as exc:
            raise ActionFailedError(name, "restart", exc.message) from exc
        LOGGER.info("Container %s restarted", name)

    def close(self) -> None:
        self._client.close()
