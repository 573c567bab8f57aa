"""Интерактивные сеансы docker CLI, привязанные к текущему терминалу.

Оболочка запускается через pexpect и передаётся пользователю через
``interact()``; потоки логов и статистики идут обычным subprocess с
наследованием stdin/stdout. Прерывание (Ctrl+C) обрабатывает вызывающая
сторона.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from typing import Dict, List, Optional, Sequence

import pexpect

LOGGER = logging.getLogger(__name__)

DOCKER_BINARY = "docker"


class SessionLaunchError(Exception):
    """docker CLI не удалось запустить."""


def build_cli_env(base_url: Optional[str]) -> Dict[str, str]:
    """Формирует окружение для docker CLI с учётом настроенного endpoint."""

    env = os.environ.copy()
    if base_url:
        env["DOCKER_HOST"] = base_url
    return env


def exec_command(container: str, shell: str) -> List[str]:
    return ["exec", "-it", container, shell]


def logs_command(container: str, *, tail: int, follow: bool, timestamps: bool) -> List[str]:
    args = ["logs", "--tail", str(tail)]
    if follow:
        args.append("--follow")
    if timestamps:
        args.append("--timestamps")
    args.append(container)
    return args


def stats_command(container: str) -> List[str]:
    return ["stats", container]


def run_interactive(args: Sequence[str], env: Dict[str, str]) -> int:
    """Запускает docker с псевдотерминалом и отдаёт управление пользователю."""

    LOGGER.debug("Spawning docker %s", " ".join(args))
    try:
        child = pexpect.spawn(DOCKER_BINARY, list(args), env=env, encoding="utf-8", timeout=None)
    except pexpect.exceptions.ExceptionPexpect as exc:
        raise SessionLaunchError(str(exc)) from exc
    size = shutil.get_terminal_size()
    child.setwinsize(size.lines, size.columns)
    child.interact()
    child.close()
    if child.exitstatus is not None:
        return int(child.exitstatus)
    return 128 + int(child.signalstatus or 0)


def run_attached(args: Sequence[str], env: Dict[str, str]) -> int:
    """Запускает docker, наследуя терминал; KeyboardInterrupt пробрасывается наверх."""

    LOGGER.debug("Running docker %s", " ".join(args))
    try:
        completed = subprocess.run([DOCKER_BINARY, *args], env=env, check=False)
    except OSError as exc:
        raise SessionLaunchError(str(exc)) from exc
    return completed.returncode
