"""Текстовые экраны: список, меню действий, информация, избранное, история."""

from __future__ import annotations

from typing import AbstractSet, Sequence

from dcon.docker_api.models import ContainerDetails
from dcon.i18n.translator import translate
from dcon.selection.actions import MENU_ORDER
from dcon.storage.history import HistoryEntry
from dcon.ui.console import Terminal
from dcon.utils.helpers import NOT_AVAILABLE

ENV_PREVIEW_LIMIT = 10
HISTORY_PREVIEW_LIMIT = 10


def quick_help_lines() -> list[str]:
    return [
        translate("listing.help.title"),
        translate("listing.help.line1"),
        translate("listing.help.line2"),
    ]


def show_listing(terminal: Terminal, table: str, *, detailed: bool, has_favorites: bool) -> None:
    """Заголовок, таблица и подсказка по командам."""

    terminal.header(translate("listing.title"))
    terminal.line()
    terminal.line(table)
    if detailed and has_favorites:
        terminal.line()
        terminal.line(translate("listing.favorite_legend"))
    terminal.line()
    terminal.lines(quick_help_lines())
    terminal.line()


def show_candidates(terminal: Terminal, token: str, names: Sequence[str]) -> None:
    terminal.info(translate("selection.multiple", token=token))
    terminal.lines(f"  - {name}" for name in names)


def show_available(terminal: Terminal, names: Sequence[str]) -> None:
    terminal.line(translate("entry.available"))
    terminal.lines(f"  - {name}" for name in names)


def show_action_menu(terminal: Terminal, name: str) -> None:
    terminal.line()
    terminal.header(translate("menu.title", name=name))
    for number, kind in enumerate(MENU_ORDER, start=1):
        terminal.line(f"{number}. {translate(f'menu.item.{kind.value}')}")
    terminal.line()


def show_info(terminal: Terminal, details: ContainerDetails, ports_summary: str) -> None:
    """Подробности docker inspect; из переменных окружения выводятся первые десять."""

    terminal.header(translate("info.title", name=details.name))
    terminal.line()
    networks = " ".join(details.networks) or NOT_AVAILABLE
    terminal.lines(
        [
            f"{translate('info.image'):<10} {details.image}",
            f"{translate('info.status'):<10} {details.status}",
            f"{translate('info.started'):<10} {details.started_at}",
            f"{translate('info.ip'):<10} {details.ip_address}",
            f"{translate('info.networks'):<10} {networks}",
            f"{translate('info.ports'):<10} {ports_summary}",
        ]
    )
    terminal.line()
    terminal.line(f"{translate('info.memory_limit'):<13} {details.memory_limit}")
    terminal.line(f"{translate('info.cpu_limit'):<13} {details.cpu_limit}")
    terminal.line()
    terminal.info(translate("info.env_title", limit=ENV_PREVIEW_LIMIT))
    terminal.lines(details.env_vars[:ENV_PREVIEW_LIMIT])


def show_ports(
    terminal: Terminal, name: str, mappings: Sequence[str], exposed_ports: Sequence[str]
) -> None:
    terminal.header(translate("ports.title", name=name))
    terminal.line()
    if mappings:
        terminal.lines(mappings)
    else:
        terminal.line(translate("ports.none"))
    terminal.line()
    if exposed_ports:
        terminal.line(translate("ports.exposed", ports=" ".join(exposed_ports)))


def show_favorites(terminal: Terminal, names: Sequence[str], running: AbstractSet[str]) -> None:
    terminal.header(translate("favorites.title"))
    terminal.line()
    for number, name in enumerate(names, start=1):
        state_key = "favorites.running" if name in running else "favorites.not_running"
        terminal.line(f"{number:2d}. {name} ({translate(state_key)})")
    terminal.line()


def show_history(terminal: Terminal, entries: Sequence[HistoryEntry]) -> None:
    terminal.header(translate("history.title"))
    terminal.line()
    terminal.line(
        f"{translate('history.time'):<19} {translate('history.container'):<25} "
        f"{translate('history.action')}"
    )
    terminal.line(f"{'-' * 19} {'-' * 25} {'-' * 8}")
    for entry in entries[:HISTORY_PREVIEW_LIMIT]:
        terminal.line(f"{entry.timestamp:<19} {entry.container_name:<25} {entry.action}")
    terminal.line()
