"""Сборка и запуск интерактивного приложения dcon."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from dcon.docker_api.exceptions import RuntimeUnavailableError
from dcon.docker_api.gateway import RuntimeGateway
from dcon.i18n.translator import translate
from dcon.session.entry import EntryResolver
from dcon.session.state_machine import Session
from dcon.settings.config import AppConfig
from dcon.storage.favorites import FavoritesStore
from dcon.storage.history import HistoryStore
from dcon.ui.console import Terminal

LOGGER = logging.getLogger(__name__)

EXIT_RUNTIME_UNAVAILABLE = 1
EXIT_INTERRUPTED = 130

GatewayFactory = Callable[[AppConfig], RuntimeGateway]


class RunnableApp(Protocol):
    """Интерфейс приложения, которое можно запустить и получить код возврата."""

    def run(self, target: Optional[str] = None) -> int:  # pragma: no cover - протокол
        """Запускает сессию и возвращает код завершения."""


@dataclass
class CLIApp:
    """Интерактивное приложение: снимок контейнеров, затем EntryResolver."""

    config: AppConfig
    terminal: Terminal
    gateway_factory: GatewayFactory = RuntimeGateway.connect

    def run(self, target: Optional[str] = None) -> int:
        try:
            gateway = self.gateway_factory(self.config)
        except RuntimeUnavailableError:
            self.terminal.error(translate("errors.runtime_unavailable"))
            return EXIT_RUNTIME_UNAVAILABLE

        try:
            snapshot = gateway.list_running()
            LOGGER.info("Snapshot taken: %s running containers", len(snapshot))
            session = Session(
                gateway=gateway,
                favorites=FavoritesStore(self.config.favorites_path),
                history=HistoryStore(self.config.history_path),
                terminal=self.terminal,
                config=self.config,
                snapshot=tuple(snapshot),
            )
            return EntryResolver(session).run(target)
        except RuntimeUnavailableError:
            self.terminal.error(translate("errors.container_list"))
            return EXIT_RUNTIME_UNAVAILABLE
        except KeyboardInterrupt:
            self.terminal.line()
            return EXIT_INTERRUPTED
        finally:
            gateway.close()


def create_application(config: AppConfig, terminal: Optional[Terminal] = None) -> RunnableApp:
    """Фабрика CLI приложения."""

    return CLIApp(config=config, terminal=terminal or Terminal(config.theme))
