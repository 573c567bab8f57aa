"""Сопоставление введённого токена с именами контейнеров.

Сначала ищется точное совпадение, затем вхождение подстроки. Сравнение
регистрозависимое: `Web` не найдёт `web-server`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union


@dataclass(frozen=True, slots=True)
class NoMatch:
    """Ни одно имя не подошло."""

    token: str


@dataclass(frozen=True, slots=True)
class UniqueMatch:
    """Найден ровно один контейнер."""

    name: str
    exact: bool = True


@dataclass(frozen=True, slots=True)
class AmbiguousMatch:
    """Токен входит в несколько имён; порядок совпадает с порядком пула."""

    token: str
    names: Tuple[str, ...]


MatchResult = Union[NoMatch, UniqueMatch, AmbiguousMatch]


def resolve(token: str, pool: Sequence[str]) -> MatchResult:
    """Находит контейнер по токену: точное совпадение всегда побеждает."""

    if not token:
        return NoMatch(token)
    if token in pool:
        return UniqueMatch(token, exact=True)
    hits = tuple(name for name in pool if token in name)
    if not hits:
        return NoMatch(token)
    if len(hits) == 1:
        return UniqueMatch(hits[0], exact=False)
    return AmbiguousMatch(token, hits)
