"""ASCII-таблица контейнеров с шириной колонок по фактическим данным.

Ширина каждой колонки: max(минимум, min(максимум, самое длинное значение)).
Имена и порты длиннее ширины обрезаются с многоточием, порты перед
измерением сокращаются до стрелочной записи.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Callable, Dict, List, Optional, Sequence, Tuple

from dcon.docker_api.models import ContainerRow
from dcon.i18n.translator import translate
from dcon.utils.helpers import abbreviate_ports, truncate_name, truncate_ports

NAME_MAX_WIDTH = 50
PORTS_MAX_WIDTH = 50
FAVORITE_MARKER = "*"


@dataclass(frozen=True, slots=True)
class ColumnDefinition:
    """Описание одной колонки таблицы."""

    key: str
    header_key: str
    min_width: int
    max_width: Optional[int] = None

    @property
    def header(self) -> str:
        return translate(self.header_key)


INDEX_COLUMN = ColumnDefinition("index", "table.header.index", 3)
NAME_COLUMN = ColumnDefinition("name", "table.header.name", 15, NAME_MAX_WIDTH)
IP_COLUMN = ColumnDefinition("ip", "table.header.ip", 10)
UPTIME_COLUMN = ColumnDefinition("uptime", "table.header.uptime", 6)
PORTS_COLUMN = ColumnDefinition("ports", "table.header.ports", 5, PORTS_MAX_WIDTH)
FAVORITE_COLUMN = ColumnDefinition("favorite", "table.header.favorite", 1, 1)

SIMPLE_COLUMNS: Tuple[ColumnDefinition, ...] = (INDEX_COLUMN, NAME_COLUMN)
DETAILED_COLUMNS: Tuple[ColumnDefinition, ...] = (
    INDEX_COLUMN,
    NAME_COLUMN,
    IP_COLUMN,
    UPTIME_COLUMN,
    PORTS_COLUMN,
    FAVORITE_COLUMN,
)


@dataclass(frozen=True, slots=True)
class TableLayout:
    """Рассчитанные ширины колонок для одной отрисовки."""

    columns: Tuple[ColumnDefinition, ...]
    widths: Tuple[int, ...]

    @property
    def detailed(self) -> bool:
        return len(self.columns) > len(SIMPLE_COLUMNS)

    def width_of(self, key: str) -> int:
        for column, width in zip(self.columns, self.widths):
            if column.key == key:
                return width
        raise KeyError(key)

    def rule(self) -> str:
        return "+" + "+".join("-" * (width + 2) for width in self.widths) + "+"

    def format_row(self, cells: Sequence[str]) -> str:
        padded = (f"{cell:<{width}}" for cell, width in zip(cells, self.widths))
        return "| " + " | ".join(padded) + " |"


_MEASURES: Dict[str, Callable[[int, ContainerRow], str]] = {
    "index": lambda number, row: str(number),
    "name": lambda number, row: row.name,
    "ip": lambda number, row: row.ip_address,
    "uptime": lambda number, row: row.uptime,
    "ports": lambda number, row: abbreviate_ports(row.ports),
    "favorite": lambda number, row: FAVORITE_MARKER,
}


def compute_layout(rows: Sequence[ContainerRow], detailed: bool) -> TableLayout:
    """Чистая функция: ширины колонок по текущему набору строк."""

    columns = DETAILED_COLUMNS if detailed else SIMPLE_COLUMNS
    widths: List[int] = []
    for column in columns:
        measure = _MEASURES[column.key]
        observed = max((len(measure(number, row)) for number, row in enumerate(rows, 1)), default=0)
        if column.max_width is not None:
            observed = min(observed, column.max_width)
        widths.append(max(column.min_width, len(column.header), observed))
    return TableLayout(columns=columns, widths=tuple(widths))


def render_cells(
    number: int, row: ContainerRow, layout: TableLayout, favorites: AbstractSet[str]
) -> List[str]:
    cells: List[str] = []
    for column, width in zip(layout.columns, layout.widths):
        if column.key == "index":
            cells.append(str(number))
        elif column.key == "name":
            cells.append(truncate_name(row.name, width))
        elif column.key == "ip":
            cells.append(row.ip_address)
        elif column.key == "uptime":
            cells.append(row.uptime)
        elif column.key == "ports":
            cells.append(truncate_ports(abbreviate_ports(row.ports), width))
        elif column.key == "favorite":
            cells.append(FAVORITE_MARKER if row.name in favorites else " ")
    return cells


def render_table(
    rows: Sequence[ContainerRow],
    detailed: bool,
    favorites: AbstractSet[str] = frozenset(),
) -> str:
    """Возвращает таблицу целиком: рамка, заголовок, строки, нижняя рамка."""

    layout = compute_layout(rows, detailed)
    lines = [
        layout.rule(),
        layout.format_row([column.header for column in layout.columns]),
        layout.rule(),
    ]
    for number, row in enumerate(rows, 1):
        lines.append(layout.format_row(render_cells(number, row, layout, favorites)))
    lines.append(layout.rule())
    return "\n".join(lines)
