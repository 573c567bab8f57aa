"""Интерактивный цикл: список ⇄ меню действий ⇄ избранное/история ⇄ выход.

Снимок контейнеров берётся один раз при запуске и не обновляется, даже
после перезапуска контейнера. Каждое выполненное действие сначала
записывается в историю, затем выполняется.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from dcon.docker_api.exceptions import DockerAPIError
from dcon.docker_api.gateway import RuntimeGateway
from dcon.docker_api.containers import summarize_ports
from dcon.docker_api.models import ContainerRow
from dcon.i18n.translator import translate
from dcon.selection.actions import ActionKind, ActionOutcome, parse_action
from dcon.selection.exceptions import (
    AmbiguousTargetError,
    InvalidListingInputError,
    InvalidMenuChoiceError,
    SelectionError,
)
from dcon.selection.matcher import AmbiguousMatch, NoMatch, resolve
from dcon.settings.config import AppConfig
from dcon.storage.favorites import FavoritesStore
from dcon.storage.history import HistoryStore
from dcon.ui import views
from dcon.ui.console import Terminal
from dcon.ui.table import render_table
from dcon.utils.helpers import uptime_from_started_at

LOGGER = logging.getLogger(__name__)

QUIT_TOKENS = frozenset({"q", "Q", "quit", "exit"})
DETAIL_TOKENS = frozenset({"d", "D", "detailed"})
FAVORITES_TOKENS = frozenset({"f", "F", "favorites"})
HISTORY_TOKENS = frozenset({"h", "H", "history"})
# только ASCII-цифры
NUMBER_PATTERN = re.compile(r"[0-9]+")


class SessionState(str, Enum):
    LISTING = "listing"
    ACTION_MENU = "action_menu"
    FAVORITES_VIEW = "favorites_view"
    HISTORY_VIEW = "history_view"
    TERMINAL = "terminal"


@dataclass(frozen=True, slots=True)
class Transition:
    """Следующее состояние и, для меню действий, выбранный контейнер."""

    state: SessionState
    container: Optional[str] = None


@dataclass(slots=True)
class ViewState:
    """Состояние экрана списка в пределах одной сессии."""

    containers: Tuple[str, ...]
    detailed: bool = False

    def toggle_detailed(self) -> bool:
        self.detailed = not self.detailed
        return self.detailed


@dataclass(slots=True)
class Session:
    """Связывает шлюз Docker, хранилища и терминал в один интерактивный цикл."""

    gateway: RuntimeGateway
    favorites: FavoritesStore
    history: HistoryStore
    terminal: Terminal
    config: AppConfig
    snapshot: Tuple[str, ...] = ()
    _handlers: Dict[ActionKind, Callable[[str], None]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.snapshot = tuple(self.snapshot)
        self._handlers = {
            ActionKind.EXEC: self._exec_shell,
            ActionKind.LOGS: self._follow_logs,
            ActionKind.STATS: self._live_stats,
            ActionKind.INFO: self._show_info,
            ActionKind.PORTS: self._show_ports,
            ActionKind.RESTART: self._restart,
            ActionKind.FAVORITE: self._toggle_favorite,
            ActionKind.LOGS_STATIC: self._static_logs,
        }

    # ------------------------------------------------------------ transitions
    def handle_listing_input(self, view: ViewState, raw: str) -> Transition:
        """Переход из состояния списка; ошибки ввода поднимаются как SelectionError."""

        choice = raw.strip()
        if choice in QUIT_TOKENS:
            return Transition(SessionState.TERMINAL)
        if choice in DETAIL_TOKENS:
            view.toggle_detailed()
            return Transition(SessionState.LISTING)
        if choice in FAVORITES_TOKENS:
            return Transition(SessionState.FAVORITES_VIEW)
        if choice in HISTORY_TOKENS:
            return Transition(SessionState.HISTORY_VIEW)
        if not choice:
            raise InvalidListingInputError(choice, len(view.containers))
        if NUMBER_PATTERN.fullmatch(choice):
            number = int(choice)
            if 1 <= number <= len(view.containers):
                return Transition(SessionState.ACTION_MENU, view.containers[number - 1])
            raise InvalidListingInputError(choice, len(view.containers))

        result = resolve(choice, view.containers)
        if isinstance(result, NoMatch):
            raise InvalidListingInputError(choice, len(view.containers))
        if isinstance(result, AmbiguousMatch):
            raise AmbiguousTargetError(choice, result.names)
        return Transition(SessionState.ACTION_MENU, result.name)

    def parse_menu_choice(self, raw: str) -> ActionKind:
        kind = parse_action(raw)
        if kind is None:
            raise InvalidMenuChoiceError(raw)
        return kind

    # ------------------------------------------------------------------ loops
    def run(self, containers: Optional[Sequence[str]] = None) -> None:
        """Цикл экрана списка; завершается по q или по концу ввода."""

        view = ViewState(tuple(containers) if containers is not None else self.snapshot)
        while True:
            self._show_listing(view)
            try:
                raw = self.terminal.prompt(translate("listing.prompt"))
            except EOFError:
                raw = "q"
            try:
                transition = self.handle_listing_input(view, raw)
            except AmbiguousTargetError as exc:
                views.show_candidates(self.terminal, exc.user_input, exc.candidates)
                self.terminal.line(translate("selection.more_specific"))
                continue
            except InvalidListingInputError as exc:
                self._warn_invalid_listing(exc)
                continue
            except SelectionError as exc:
                self.terminal.warning(exc.message)
                continue

            if transition.state is SessionState.TERMINAL:
                self.terminal.line(translate("listing.goodbye"))
                return
            if transition.state is SessionState.LISTING:
                key = "listing.switched_detailed" if view.detailed else "listing.switched_simple"
                self.terminal.info(translate(key))
            elif transition.state is SessionState.FAVORITES_VIEW:
                self.favorites_view()
            elif transition.state is SessionState.HISTORY_VIEW:
                self.history_view()
            elif transition.state is SessionState.ACTION_MENU and transition.container:
                self.terminal.success(translate("selection.selected", name=transition.container))
                self.action_menu(transition.container)

    def action_menu(self, name: str) -> ActionOutcome:
        """Показывает меню и выполняет выбранное действие."""

        views.show_action_menu(self.terminal, name)
        while True:
            try:
                raw = self.terminal.prompt(translate("menu.prompt"))
            except EOFError:
                self.terminal.line()
                return ActionOutcome.RETURN_TO_MENU
            try:
                kind = self.parse_menu_choice(raw)
            except InvalidMenuChoiceError:
                self.terminal.line(translate("menu.invalid"))
                continue
            return self.dispatch(name, kind)

    def dispatch(self, name: str, kind: ActionKind) -> ActionOutcome:
        """Выполняет действие; долгие действия возвращают COMPLETED."""

        if kind is ActionKind.BACK:
            return ActionOutcome.RETURN_TO_MENU
        self.history.record(name, kind.value)
        LOGGER.info("Dispatching %s for container %s", kind.value, name)
        handler = self._handlers[kind]
        try:
            if kind.is_long_running:
                try:
                    handler(name)
                except KeyboardInterrupt:
                    self.terminal.line()
                    self.terminal.info(translate("action.interrupted"))
                return ActionOutcome.COMPLETED
            handler(name)
        except DockerAPIError as exc:
            self.terminal.error(translate("action.failed", action=kind.value, reason=exc.message))
        self.terminal.pause()
        return ActionOutcome.RETURN_TO_MENU

    def favorites_view(self) -> None:
        names = self.favorites.list()
        if not names:
            self.terminal.info(translate("favorites.empty"))
            self.terminal.pause()
            return
        views.show_favorites(self.terminal, names, frozenset(self.snapshot))
        try:
            choice = self.terminal.prompt(translate("favorites.prompt"))
        except EOFError:
            self.terminal.line()
            return
        if not NUMBER_PATTERN.fullmatch(choice):
            return
        selected = self.favorites.get(int(choice))
        if selected is None:
            return
        if selected in self.snapshot:
            self.action_menu(selected)
            return
        self.terminal.warning(translate("favorites.not_running_warning", name=selected))
        self.terminal.pause()

    def history_view(self) -> None:
        entries = self.history.list(limit=views.HISTORY_PREVIEW_LIMIT)
        if not entries:
            self.terminal.info(translate("history.empty"))
        else:
            views.show_history(self.terminal, entries)
        self.terminal.pause()

    # --------------------------------------------------------------- rendering
    def build_rows(self, containers: Sequence[str], detailed: bool) -> List[ContainerRow]:
        """Строки таблицы; в подробном режиме по каждому контейнеру делается inspect."""

        if not detailed:
            return [ContainerRow(name=name) for name in containers]
        rows = []
        for name in containers:
            try:
                details = self.gateway.inspect(name)
            except DockerAPIError as exc:
                LOGGER.warning("Cannot inspect %s for the table: %s", name, exc.message)
                rows.append(ContainerRow(name=name))
                continue
            rows.append(
                ContainerRow(
                    name=name,
                    ip_address=details.ip_address,
                    uptime=uptime_from_started_at(details.started_at),
                    ports=summarize_ports(details),
                )
            )
        return rows

    def _show_listing(self, view: ViewState) -> None:
        favorites = frozenset(self.favorites.list())
        table = render_table(self.build_rows(view.containers, view.detailed), view.detailed, favorites)
        views.show_listing(
            self.terminal,
            table,
            detailed=view.detailed,
            has_favorites=bool(favorites),
        )

    def _warn_invalid_listing(self, exc: InvalidListingInputError) -> None:
        if NUMBER_PATTERN.fullmatch(exc.user_input) or not exc.user_input:
            self.terminal.warning(translate("listing.invalid_number", count=exc.count))
        else:
            self.terminal.warning(translate("listing.no_match", token=exc.user_input))

    # ----------------------------------------------------------------- actions
    def _exec_shell(self, name: str) -> None:
        shell = self.gateway.detect_shell(name)
        self.terminal.success(translate("action.exec.connecting", name=name, shell=shell))
        status = self.gateway.exec_interactive(name, shell)
        LOGGER.info("Shell session in %s finished with status %s", name, status)

    def _follow_logs(self, name: str) -> None:
        self.terminal.info(translate("action.logs.follow", name=name))
        self.gateway.stream_logs(name, self.config.log_lines, follow=True, timestamps=True)

    def _live_stats(self, name: str) -> None:
        self.terminal.info(translate("action.stats", name=name))
        self.gateway.stream_stats(name)

    def _show_info(self, name: str) -> None:
        details = self.gateway.inspect(name)
        views.show_info(self.terminal, details, self.gateway.port_summary(name))

    def _show_ports(self, name: str) -> None:
        mappings = self.gateway.port_mappings(name)
        views.show_ports(self.terminal, name, mappings, self.gateway.inspect(name).exposed_ports)

    def _restart(self, name: str) -> None:
        self.terminal.warning(translate("action.restart.started", name=name))
        self.gateway.restart(name)
        self.terminal.success(translate("action.restart.done"))

    def _toggle_favorite(self, name: str) -> None:
        if self.favorites.toggle(name):
            self.terminal.success(translate("action.favorite.added", name=name))
        else:
            self.terminal.success(translate("action.favorite.removed", name=name))

    def _static_logs(self, name: str) -> None:
        self.terminal.info(translate("action.logs.static", name=name, lines=self.config.log_lines))
        self.terminal.write(self.gateway.fetch_logs(name, self.config.log_lines, timestamps=True))
