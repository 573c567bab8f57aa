"""Общие фейки для тестов интерактивной сессии."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pytest

from dcon.docker_api.containers import summarize_ports
from dcon.docker_api.exceptions import ContainerNotFoundError
from dcon.docker_api.models import ContainerDetails
from dcon.session.state_machine import Session
from dcon.settings.config import AppConfig
from dcon.storage.favorites import FavoritesStore
from dcon.storage.history import HistoryStore
from dcon.ui.console import Terminal


class ScriptedInput:
    """Поток ввода: отдаёт заготовленные строки, затем конец ввода."""

    def __init__(self, answers: Sequence[str]) -> None:
        self.answers: List[str] = list(answers)

    def readline(self) -> str:
        if not self.answers:
            raise EOFError
        return self.answers.pop(0) + "\n"


class FakeGateway:
    """Шлюз без Docker: запоминает вызовы, ошибки задаются словарём."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = list(names)
        self.calls: List[Tuple[str, str]] = []
        self.failures: Dict[str, BaseException] = {}
        self.closed = False

    def _call(self, action: str, name: str) -> None:
        self.calls.append((action, name))
        failure = self.failures.get(action)
        if failure is not None:
            raise failure

    def list_running(self) -> List[str]:
        failure = self.failures.get("list")
        if failure is not None:
            raise failure
        return list(self.names)

    def inspect(self, name: str) -> ContainerDetails:
        self._call("inspect", name)
        if name not in self.names:
            raise ContainerNotFoundError(name)
        return ContainerDetails(
            name=name,
            ip_address="172.18.0.2",
            image="nginx:1.25",
            status="running",
            started_at="2024-03-01T10:20:30.000000000Z",
            ports=["80/tcp -> 0.0.0.0:8080"],
        )

    def port_mappings(self, name: str) -> List[str]:
        self._call("port_mappings", name)
        return self.inspect(name).ports

    def port_summary(self, name: str) -> str:
        self._call("port_summary", name)
        return summarize_ports(self.inspect(name))

    def fetch_logs(self, name: str, tail: int, *, timestamps: bool = True) -> str:
        self._call("fetch_logs", name)
        return f"last {tail} lines of {name}\n"

    def detect_shell(self, name: str) -> str:
        self._call("detect_shell", name)
        return "/bin/sh"

    def exec_interactive(self, name: str, shell: str) -> int:
        self._call("exec", name)
        return 0

    def stream_logs(self, name: str, tail: int, *, follow: bool = True, timestamps: bool = True) -> int:
        self._call("logs", name)
        return 0

    def stream_stats(self, name: str) -> int:
        self._call("stats", name)
        return 0

    def restart(self, name: str) -> None:
        self._call("restart", name)

    def close(self) -> None:
        self.closed = True


class SessionHarness:
    """Сессия вместе с фейками и буфером вывода."""

    def __init__(self, base_dir: Path, names: Sequence[str], answers: Sequence[str]) -> None:
        self.config = AppConfig(base_dir=base_dir, log_lines=25)
        self.gateway = FakeGateway(names)
        self.output = io.StringIO()
        self.input = ScriptedInput(answers)
        self.terminal = Terminal(file=self.output, input_stream=self.input)
        self.favorites = FavoritesStore(self.config.favorites_path)
        self.history = HistoryStore(self.config.history_path)
        self.session = Session(
            gateway=self.gateway,  # type: ignore[arg-type]
            favorites=self.favorites,
            history=self.history,
            terminal=self.terminal,
            config=self.config,
            snapshot=tuple(names),
        )

    @property
    def text(self) -> str:
        return self.output.getvalue()

    def actions(self) -> List[Tuple[str, str]]:
        return [(entry.container_name, entry.action) for entry in self.history.list()]


HarnessFactory = Callable[..., SessionHarness]


@pytest.fixture
def make_harness(tmp_path: Path) -> HarnessFactory:
    def factory(names: Sequence[str], answers: Optional[Sequence[str]] = None) -> SessionHarness:
        return SessionHarness(tmp_path, names, answers or [])

    return factory
