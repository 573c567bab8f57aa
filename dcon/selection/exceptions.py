"""Восстановимые ошибки выбора контейнера и пункта меню."""

from __future__ import annotations

import logging
from typing import Sequence

LOGGER = logging.getLogger(__name__)


class SelectionError(Exception):
    """Базовая ошибка ввода; сессия остаётся в текущем состоянии."""

    def __init__(self, message: str, user_input: str) -> None:
        self.message = message
        self.user_input = user_input
        super().__init__(message)
        LOGGER.debug("%s | input=%r", message, user_input)


class InvalidListingInputError(SelectionError):
    """Ввод в списке контейнеров не распознан."""

    def __init__(self, user_input: str, count: int) -> None:
        self.count = count
        super().__init__(f"Invalid listing input {user_input!r} (1-{count} expected)", user_input)


class InvalidMenuChoiceError(SelectionError):
    """Неизвестный пункт меню действий."""

    def __init__(self, user_input: str) -> None:
        super().__init__(f"Invalid menu choice {user_input!r}", user_input)


class AmbiguousTargetError(SelectionError):
    """Токен подходит к нескольким контейнерам."""

    def __init__(self, user_input: str, candidates: Sequence[str]) -> None:
        self.candidates = tuple(candidates)
        super().__init__(
            f"Token {user_input!r} matches {len(self.candidates)} containers",
            user_input,
        )
