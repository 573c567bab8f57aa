"""Действия над выбранным контейнером и разбор их псевдонимов."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class ActionKind(str, Enum):
    """Действие меню; значение пишется в историю."""

    EXEC = "exec"
    LOGS = "logs"
    STATS = "stats"
    INFO = "info"
    PORTS = "ports"
    RESTART = "restart"
    FAVORITE = "favorite"
    LOGS_STATIC = "logs-static"
    BACK = "back"

    @property
    def is_long_running(self) -> bool:
        """Действия 1-3 занимают терминал до выхода пользователя."""

        return self in (ActionKind.EXEC, ActionKind.LOGS, ActionKind.STATS)


class ActionOutcome(str, Enum):
    """Результат диспетчеризации действия."""

    COMPLETED = "completed"
    RETURN_TO_MENU = "return_to_menu"


MENU_ORDER = (
    ActionKind.EXEC,
    ActionKind.LOGS,
    ActionKind.STATS,
    ActionKind.INFO,
    ActionKind.PORTS,
    ActionKind.RESTART,
    ActionKind.FAVORITE,
    ActionKind.LOGS_STATIC,
)

_ALIASES: Dict[str, ActionKind] = {
    "exec": ActionKind.EXEC,
    "shell": ActionKind.EXEC,
    "logs": ActionKind.LOGS,
    "log": ActionKind.LOGS,
    "stats": ActionKind.STATS,
    "stat": ActionKind.STATS,
    "info": ActionKind.INFO,
    "ports": ActionKind.PORTS,
    "port": ActionKind.PORTS,
    "restart": ActionKind.RESTART,
    "fav": ActionKind.FAVORITE,
    "favorite": ActionKind.FAVORITE,
    "logs-static": ActionKind.LOGS_STATIC,
    "b": ActionKind.BACK,
    "B": ActionKind.BACK,
    "back": ActionKind.BACK,
}
_ALIASES.update({str(number): kind for number, kind in enumerate(MENU_ORDER, start=1)})


def parse_action(selector: str) -> Optional[ActionKind]:
    """Возвращает ActionKind для номера 1-8 или ключевого слова, иначе None."""

    return _ALIASES.get(selector.strip())
