"""Тесты сборки приложения и кодов завершения."""

from __future__ import annotations

import io
from pathlib import Path

from conftest import FakeGateway, ScriptedInput

from dcon.app import EXIT_INTERRUPTED, EXIT_RUNTIME_UNAVAILABLE, CLIApp
from dcon.docker_api.exceptions import RuntimeUnavailableError
from dcon.settings.config import AppConfig
from dcon.ui.console import Terminal


class InterruptingInput:
    def readline(self) -> str:
        raise KeyboardInterrupt


def make_app(tmp_path: Path, gateway: FakeGateway, stream=None) -> tuple[CLIApp, io.StringIO]:
    output = io.StringIO()
    terminal = Terminal(file=output, input_stream=stream or ScriptedInput([]))
    app = CLIApp(AppConfig(base_dir=tmp_path), terminal, gateway_factory=lambda config: gateway)
    return app, output


def test_runtime_unavailable_at_start(tmp_path: Path) -> None:
    def failing_factory(config: AppConfig) -> FakeGateway:
        raise RuntimeUnavailableError("connection refused")

    output = io.StringIO()
    app = CLIApp(AppConfig(base_dir=tmp_path), Terminal(file=output), gateway_factory=failing_factory)
    assert app.run() == EXIT_RUNTIME_UNAVAILABLE
    assert "Docker is not running or not accessible" in output.getvalue()


def test_listing_failure_closes_gateway(tmp_path: Path) -> None:
    gateway = FakeGateway(["web"])
    gateway.failures["list"] = RuntimeUnavailableError("boom")
    app, output = make_app(tmp_path, gateway)
    assert app.run() == EXIT_RUNTIME_UNAVAILABLE
    assert "Failed to get container list" in output.getvalue()
    assert gateway.closed


def test_no_containers_exit_ok(tmp_path: Path) -> None:
    gateway = FakeGateway([])
    app, output = make_app(tmp_path, gateway)
    assert app.run() == 0
    assert "No running containers found." in output.getvalue()
    assert gateway.closed


def test_ctrl_c_at_prompt(tmp_path: Path) -> None:
    gateway = FakeGateway(["web", "db"])
    app, _ = make_app(tmp_path, gateway, stream=InterruptingInput())
    assert app.run() == EXIT_INTERRUPTED
    assert gateway.closed


def test_target_not_found_exit_code(tmp_path: Path) -> None:
    app, _ = make_app(tmp_path, FakeGateway(["web"]))
    assert app.run("mysql") == 1
