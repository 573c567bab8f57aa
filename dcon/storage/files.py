"""Общие операции с построчными файлами состояния."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List


def read_lines(path: Path) -> List[str]:
    """Возвращает непустые строки файла; отсутствующий файл считается пустым."""

    if not path.exists():
        return []
    return [line for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


def replace_lines(path: Path, lines: Iterable[str]) -> None:
    """Записывает строки во временный файл и атомарно подменяет исходный."""

    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    content = "".join(f"{line}\n" for line in lines)
    tmp_path.write_text(content, encoding="utf-8")
    os.replace(tmp_path, path)
