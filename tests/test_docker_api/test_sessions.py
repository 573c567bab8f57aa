"""Тесты запуска сеансов docker CLI."""

from __future__ import annotations

import subprocess
from typing import Any, List

import pytest

from dcon.docker_api import sessions


class FakeChild:
    def __init__(self, exitstatus: Any = 0, signalstatus: Any = None) -> None:
        self.exitstatus = exitstatus
        self.signalstatus = signalstatus
        self.calls: List[str] = []

    def setwinsize(self, rows: int, cols: int) -> None:
        self.calls.append("setwinsize")

    def interact(self) -> None:
        self.calls.append("interact")

    def close(self) -> None:
        self.calls.append("close")


def test_command_builders() -> None:
    assert sessions.exec_command("web", "/bin/sh") == ["exec", "-it", "web", "/bin/sh"]
    assert sessions.logs_command("web", tail=50, follow=True, timestamps=True) == [
        "logs",
        "--tail",
        "50",
        "--follow",
        "--timestamps",
        "web",
    ]
    assert sessions.logs_command("web", tail=5, follow=False, timestamps=False) == [
        "logs",
        "--tail",
        "5",
        "web",
    ]
    assert sessions.stats_command("web") == ["stats", "web"]


def test_build_cli_env_sets_docker_host(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DOCKER_HOST", raising=False)
    assert "DOCKER_HOST" not in sessions.build_cli_env(None)
    env = sessions.build_cli_env("unix:///tmp/docker.sock")
    assert env["DOCKER_HOST"] == "unix:///tmp/docker.sock"


def test_run_interactive_hands_terminal_to_user(monkeypatch: pytest.MonkeyPatch) -> None:
    child = FakeChild(exitstatus=3)
    spawned: List[Any] = []

    def fake_spawn(command: str, args: List[str], **kwargs: Any) -> FakeChild:
        spawned.append((command, args))
        return child

    monkeypatch.setattr(sessions.pexpect, "spawn", fake_spawn)
    status = sessions.run_interactive(["exec", "-it", "web", "/bin/sh"], {})

    assert status == 3
    assert spawned == [("docker", ["exec", "-it", "web", "/bin/sh"])]
    assert child.calls == ["setwinsize", "interact", "close"]


def test_run_interactive_reports_signal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        sessions.pexpect, "spawn", lambda *args, **kwargs: FakeChild(exitstatus=None, signalstatus=2)
    )
    assert sessions.run_interactive(["exec", "-it", "web", "/bin/sh"], {}) == 130


def test_run_interactive_spawn_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_spawn(*args: Any, **kwargs: Any) -> FakeChild:
        raise sessions.pexpect.exceptions.ExceptionPexpect("docker: not found")

    monkeypatch.setattr(sessions.pexpect, "spawn", failing_spawn)
    with pytest.raises(sessions.SessionLaunchError):
        sessions.run_interactive(["stats", "web"], {})


def test_run_attached(monkeypatch: pytest.MonkeyPatch) -> None:
    recorded: List[List[str]] = []

    def fake_run(args: List[str], **kwargs: Any) -> subprocess.CompletedProcess:
        recorded.append(args)
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr(sessions.subprocess, "run", fake_run)
    assert sessions.run_attached(["stats", "web"], {}) == 0
    assert recorded == [["docker", "stats", "web"]]


def test_run_attached_missing_binary(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(args: List[str], **kwargs: Any) -> subprocess.CompletedProcess:
        raise FileNotFoundError("docker")

    monkeypatch.setattr(sessions.subprocess, "run", fake_run)
    with pytest.raises(sessions.SessionLaunchError):
        sessions.run_attached(["logs", "web"], {})
