"""Вывод в терминал с цветовой темой и чтение ответов пользователя."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, TextIO

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from dcon.i18n.translator import translate

THEME_STYLES: Dict[str, Dict[str, str]] = {
    "light": {
        "header": "bold blue",
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "cyan",
    },
    "dark": {
        "header": "bold cyan",
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold blue",
    },
}


def build_theme(name: str) -> Theme:
    """Тема rich по имени из настроек; неизвестное имя даёт светлую тему."""

    return Theme(THEME_STYLES.get(name, THEME_STYLES["light"]))


class Terminal:
    """Обёртка над rich Console: разметка отключена, данные выводятся как есть."""

    def __init__(
        self,
        theme_name: str = "light",
        *,
        file: Optional[TextIO] = None,
        input_stream: Optional[TextIO] = None,
    ) -> None:
        self._console = Console(
            file=file,
            theme=build_theme(theme_name),
            highlight=False,
            color_system=None if file is not None else "auto",
        )
        self._input_stream = input_stream

    @property
    def console(self) -> Console:
        return self._console

    # ---------------------------------------------------------------- output
    def styled(self, style: str, text: str) -> None:
        self._console.print(Text(text, style=style), soft_wrap=True)

    def header(self, text: str) -> None:
        self.styled("header", text)

    def success(self, text: str) -> None:
        self.styled("success", text)

    def error(self, text: str) -> None:
        self.styled("error", text)

    def warning(self, text: str) -> None:
        self.styled("warning", text)

    def info(self, text: str) -> None:
        self.styled("info", text)

    def line(self, text: str = "") -> None:
        self._console.print(Text(text), soft_wrap=True)

    def lines(self, texts: Iterable[str]) -> None:
        for text in texts:
            self.line(text)

    def write(self, text: str) -> None:
        """Выводит произвольный блок (логи) без перевода строки в конце."""

        self._console.print(Text(text), soft_wrap=True, end="")

    # ----------------------------------------------------------------- input
    def prompt(self, text: str) -> str:
        """Читает строку; EOFError пробрасывается вызывающему."""

        answer = self._console.input(Text(text), stream=self._input_stream)
        return answer.strip()

    def pause(self) -> None:
        try:
            self.prompt(translate("prompt.continue"))
        except EOFError:
            self.line()

    def confirm(self, text: str, *, default: bool = True) -> bool:
        """Да/нет; ответ, начинающийся с n/N, означает отказ."""

        try:
            answer = self.prompt(text)
        except EOFError:
            self.line()
            return False
        if not answer:
            return default
        return not answer.startswith(("n", "N"))
