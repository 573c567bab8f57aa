"""Тесты переводчика строк интерфейса."""

from __future__ import annotations

import json
from typing import Iterator

import pytest

from dcon.i18n import translator


@pytest.fixture(autouse=True)
def restore_language() -> Iterator[None]:
    yield
    translator.set_language("en")


def test_available_languages() -> None:
    assert translator.available_languages() == ["en", "ru"]


def test_translate_formats_parameters() -> None:
    assert translator.translate("entry.found", name="web") == "Found container: web"


def test_unknown_key_returns_key() -> None:
    assert translator.translate("missing.key") == "missing.key"


def test_switch_to_russian() -> None:
    translator.set_language("ru")
    assert translator.translate("listing.goodbye") == "До свидания!"


def test_unknown_language_falls_back_to_english(caplog: pytest.LogCaptureFixture) -> None:
    translator.set_language("de")
    assert translator.translate("listing.goodbye") == "Goodbye!"
    assert "not available" in caplog.text


def test_string_tables_share_keys() -> None:
    tables = {
        language: json.loads((translator.STRINGS_DIR / f"{language}.json").read_text(encoding="utf-8"))
        for language in translator.available_languages()
    }
    assert set(tables["en"]) == set(tables["ru"])
