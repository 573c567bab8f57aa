"""Различные вспомогательные функции форматирования."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Tuple

NOT_AVAILABLE = "N/A"
ELLIPSIS = "..."

_SOCKET_SCHEMES = ("unix://", "tcp://", "npipe://", "http://", "https://", "ssh://")

# Порядок важен: сначала конкретные порты, затем общие правила
_PORT_ABBREVIATIONS: Tuple[Tuple[str, str], ...] = (
    ("443/tcp -> *", "443→*"),
    ("80/tcp -> *", "80→*"),
    ("8080/tcp -> *", "8080→*"),
    ("/tcp -> *", "→*"),
    ("/udp -> *", "→*[UDP]"),
)

_UPTIME_BUCKETS: Tuple[Tuple[int, str], ...] = (
    (86400, "d"),
    (3600, "h"),
    (60, "m"),
)


def normalize_socket_path(raw_value: str) -> str:
    """Возвращает путь сокета с корректным префиксом unix://."""

    value = raw_value.strip()
    if not value:
        return value
    lowered = value.lower()
    if lowered.startswith(_SOCKET_SCHEMES):
        return value
    if value.startswith("/"):
        return f"unix://{value}"
    return value


def abbreviate_ports(ports: str) -> str:
    """Сокращает типовые пробросы портов до стрелочной записи (80/tcp -> *8080 → 80→*8080)."""

    for pattern, replacement in _PORT_ABBREVIATIONS:
        ports = ports.replace(pattern, replacement)
    return ports


def truncate_ports(ports: str, max_width: int) -> str:
    """Обрезает строку портов, стараясь сохранить первый порт целиком."""

    if len(ports) <= max_width:
        return ports
    if "," in ports:
        first_port = ports.split(",", 1)[0]
        if len(first_port) <= max_width - 4:
            return f"{first_port},{ELLIPSIS}"
    return ports[: max(max_width - 3, 0)] + ELLIPSIS


def truncate_name(name: str, max_width: int) -> str:
    """Обрезает имя контейнера до ширины колонки с многоточием."""

    if len(name) <= max_width:
        return name
    return name[: max(max_width - 3, 0)] + ELLIPSIS


def format_uptime(elapsed_seconds: Optional[float]) -> str:
    """Переводит секунды в корзины d/h/m/s."""

    if elapsed_seconds is None:
        return NOT_AVAILABLE
    seconds = max(int(elapsed_seconds), 0)
    for threshold, suffix in _UPTIME_BUCKETS:
        if seconds >= threshold:
            return f"{seconds // threshold}{suffix}"
    return f"{seconds}s"


def parse_docker_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Разбирает StartedAt из docker inspect (RFC 3339 с наносекундами)."""

    if not value or value.startswith("0001-01-01"):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    # Python понимает не больше шести знаков дробной части
    if "." in text:
        head, _, tail = text.partition(".")
        digits = ""
        offset = ""
        for index, char in enumerate(tail):
            if not char.isdigit():
                offset = tail[index:]
                break
            digits += char
        text = f"{head}.{digits[:6].ljust(6, '0')}{offset}"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def uptime_from_started_at(started_at: Optional[str], now: Optional[datetime] = None) -> str:
    """Возвращает корзину аптайма по значению StartedAt."""

    started = parse_docker_timestamp(started_at)
    if started is None:
        return NOT_AVAILABLE
    current = now or datetime.now(timezone.utc)
    return format_uptime((current - started).total_seconds())
