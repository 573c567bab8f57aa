"""Разбор пользовательского ввода: поиск контейнеров и выбор действий."""

from .actions import ActionKind, ActionOutcome, parse_action
from .matcher import AmbiguousMatch, MatchResult, NoMatch, UniqueMatch, resolve

__all__ = [
    "ActionKind",
    "ActionOutcome",
    "AmbiguousMatch",
    "MatchResult",
    "NoMatch",
    "UniqueMatch",
    "parse_action",
    "resolve",
]
