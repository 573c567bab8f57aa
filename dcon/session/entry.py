"""Определение начального состояния по аргументам командной строки."""

from __future__ import annotations

import logging
from typing import Optional

from dcon.i18n.translator import translate
from dcon.selection.actions import ActionOutcome
from dcon.selection.matcher import AmbiguousMatch, NoMatch, resolve
from dcon.session.state_machine import Session
from dcon.ui import views

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1


class EntryResolver:
    """Без аргумента открывается список, с аргументом ищется контейнер по имени."""

    def __init__(self, session: Session) -> None:
        self._session = session
        self._terminal = session.terminal

    def run(self, target: Optional[str] = None) -> int:
        snapshot = self._session.snapshot
        if not snapshot:
            self._terminal.info(translate("entry.no_containers"))
            return EXIT_OK
        if target is None:
            return self._run_without_target()
        return self._run_with_target(target)

    def _run_without_target(self) -> int:
        snapshot = self._session.snapshot
        if len(snapshot) == 1:
            only = snapshot[0]
            self._terminal.info(translate("entry.single", name=only))
            if not self._terminal.confirm(translate("entry.single_confirm")):
                LOGGER.info("User declined to open the only running container %s", only)
                return EXIT_OK
            self._session.action_menu(only)
            return EXIT_OK
        self._session.run()
        return EXIT_OK

    def _run_with_target(self, target: str) -> int:
        snapshot = self._session.snapshot
        result = resolve(target, snapshot)
        if isinstance(result, NoMatch):
            self._terminal.error(translate("entry.not_found", name=target))
            views.show_available(self._terminal, snapshot)
            return EXIT_NOT_FOUND
        if isinstance(result, AmbiguousMatch):
            self._terminal.info(translate("selection.multiple", token=target))
            self._session.run(result.names)
            return EXIT_OK
        key = "entry.found" if result.exact else "entry.found_partial"
        self._terminal.success(translate(key, name=result.name))
        self._open_menu(result.name)
        return EXIT_OK

    def _open_menu(self, name: str) -> None:
        """Меню действий; при возврате назад открывается полный список."""

        if self._session.action_menu(name) is ActionOutcome.RETURN_TO_MENU:
            self._session.run()
