"""Избранные контейнеры: по одному имени на строку, в порядке добавления."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from dcon.storage.files import read_lines, replace_lines


class FavoritesStore:
    """Упорядоченное множество имён; каждое изменение перезаписывает файл целиком."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._logger = logging.getLogger(__name__)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def list(self) -> List[str]:
        """Возвращает имена в порядке файла без повторов."""

        names: List[str] = []
        for line in read_lines(self._file_path):
            name = line.strip()
            if name not in names:
                names.append(name)
        return names

    def is_favorite(self, name: str) -> bool:
        return name in self.list()

    def get(self, index: int) -> Optional[str]:
        """Имя по номеру, начиная с 1."""

        names = self.list()
        if 1 <= index <= len(names):
            return names[index - 1]
        return None

    def add(self, name: str) -> bool:
        """Добавляет имя; False, если оно уже было в избранном."""

        names = self.list()
        if name in names:
            self._logger.warning("Container %s is already in favorites", name)
            return False
        names.append(name)
        replace_lines(self._file_path, names)
        self._logger.info("Favorite added: %s", name)
        return True

    def remove(self, name: str) -> bool:
        """Удаляет имя; отсутствие имени не считается ошибкой."""

        names = self.list()
        if name not in names:
            return False
        replace_lines(self._file_path, [item for item in names if item != name])
        self._logger.info("Favorite removed: %s", name)
        return True

    def toggle(self, name: str) -> bool:
        """Переключает принадлежность к избранному и возвращает новое состояние."""

        if self.is_favorite(name):
            self.remove(name)
            return False
        self.add(name)
        return True
