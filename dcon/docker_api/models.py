"""Структуры данных, описывающие контейнеры в рамках сессии."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from dcon.utils.helpers import NOT_AVAILABLE


@dataclass(slots=True)
class ContainerDetails:
    """Результат docker inspect, приведённый к плоскому виду."""

    name: str
    ip_address: str = NOT_AVAILABLE
    image: str = NOT_AVAILABLE
    status: str = NOT_AVAILABLE
    started_at: str = NOT_AVAILABLE
    ports: List[str] = field(default_factory=list)  # строки в стиле `docker port`
    exposed_ports: List[str] = field(default_factory=list)
    memory_limit: str = NOT_AVAILABLE
    cpu_limit: str = NOT_AVAILABLE
    env_vars: List[str] = field(default_factory=list)
    networks: List[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ContainerRow:
    """Строка таблицы; пересчитывается при каждой отрисовке."""

    name: str
    ip_address: str = NOT_AVAILABLE
    uptime: str = NOT_AVAILABLE
    ports: str = NOT_AVAILABLE
