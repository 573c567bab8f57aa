"""Журнал последних действий: новые записи сверху, не более 20 строк."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from dcon.storage.files import read_lines, replace_lines

HISTORY_LIMIT = 20
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
FIELD_SEPARATOR = "|"


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """Одна запись журнала."""

    timestamp: str
    container_name: str
    action: str

    def to_line(self) -> str:
        return FIELD_SEPARATOR.join((self.timestamp, self.container_name, self.action))

    @classmethod
    def from_line(cls, line: str) -> Optional["HistoryEntry"]:
        parts = line.split(FIELD_SEPARATOR)
        if len(parts) != 3:
            return None
        timestamp, container_name, action = (part.strip() for part in parts)
        return cls(timestamp=timestamp, container_name=container_name, action=action)


class HistoryStore:
    """Хранит историю в файле `timestamp|container|action`."""

    def __init__(
        self,
        file_path: Path,
        *,
        limit: int = HISTORY_LIMIT,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._file_path = file_path
        self._limit = limit
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def record(self, container_name: str, action: str) -> HistoryEntry:
        """Добавляет запись в начало и отбрасывает всё старше лимита."""

        entry = HistoryEntry(
            timestamp=self._clock().strftime(TIMESTAMP_FORMAT),
            container_name=container_name,
            action=action,
        )
        previous = read_lines(self._file_path)[: self._limit - 1]
        replace_lines(self._file_path, [entry.to_line(), *previous])
        self._logger.debug("History recorded: %s %s", container_name, action)
        return entry

    def list(self, limit: Optional[int] = None) -> List[HistoryEntry]:
        """Записи от новых к старым."""

        entries: List[HistoryEntry] = []
        for line in read_lines(self._file_path):
            entry = HistoryEntry.from_line(line)
            if entry is None:
                self._logger.warning("Skipping malformed history line: %r", line)
                continue
            entries.append(entry)
        entries = entries[: self._limit]
        if limit is not None:
            return entries[:limit]
        return entries
