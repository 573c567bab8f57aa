"""Простой переводчик строк интерфейса."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

LOGGER = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
STRINGS_DIR = Path(__file__).parent / "strings"

_translations: Dict[str, str] = {}


def available_languages() -> list[str]:
    return sorted(path.stem for path in STRINGS_DIR.glob("*.json"))


def set_language(language: str) -> None:
    """Загружает JSON переводы; неизвестный язык заменяется английским."""

    global _translations
    if language not in available_languages():
        LOGGER.warning("Language %r is not available, falling back to %s", language, DEFAULT_LANGUAGE)
        language = DEFAULT_LANGUAGE
    file_path = STRINGS_DIR / f"{language}.json"
    _translations = json.loads(file_path.read_text(encoding="utf-8"))


def translate(key: str, **kwargs: Any) -> str:
    """Возвращает перевод ключа, подставляя именованные параметры."""

    template = _translations.get(key, key)
    if not kwargs:
        return template
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        LOGGER.warning("Cannot format translation %r with %s", key, sorted(kwargs))
        return template


set_language(DEFAULT_LANGUAGE)
