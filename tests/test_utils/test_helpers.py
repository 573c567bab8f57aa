"""Тесты вспомогательных утилит."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from dcon.utils.helpers import (
    abbreviate_ports,
    format_uptime,
    normalize_socket_path,
    parse_docker_timestamp,
    truncate_name,
    truncate_ports,
    uptime_from_started_at,
)


def test_normalize_socket_path_adds_unix_prefix() -> None:
    assert normalize_socket_path("/var/run/docker.sock") == "unix:///var/run/docker.sock"


def test_normalize_socket_path_keeps_existing_scheme() -> None:
    assert normalize_socket_path("unix:///var/run/docker.sock") == "unix:///var/run/docker.sock"
    assert normalize_socket_path("tcp://127.0.0.1:2375") == "tcp://127.0.0.1:2375"


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (90000, "1d"),
        (86400, "1d"),
        (5000, "1h"),
        (3600, "1h"),
        (90, "1m"),
        (60, "1m"),
        (10, "10s"),
        (0, "0s"),
    ],
)
def test_format_uptime_buckets(seconds: int, expected: str) -> None:
    assert format_uptime(seconds) == expected


def test_format_uptime_handles_missing_and_negative_values() -> None:
    assert format_uptime(None) == "N/A"
    assert format_uptime(-30) == "0s"


def test_abbreviate_ports_known_patterns() -> None:
    assert abbreviate_ports("443/tcp -> *443") == "443→*443"
    assert abbreviate_ports("80/tcp -> *8080,3000/tcp -> *3000") == "80→*8080,3000→*3000"
    assert abbreviate_ports("53/udp -> *53") == "53→*[UDP]53"


def test_abbreviate_ports_leaves_other_text() -> None:
    assert abbreviate_ports("(80/tcp)") == "(80/tcp)"
    assert abbreviate_ports("N/A") == "N/A"


def test_truncate_ports_keeps_first_port() -> None:
    ports = "80→*8080," + ",".join(f"{port}→*{port}" for port in range(9000, 9010))
    assert truncate_ports(ports, 20) == "80→*8080,..."


def test_truncate_ports_hard_cut_when_first_port_is_long() -> None:
    ports = "12345→*12345,23456→*23456"
    result = truncate_ports(ports, 12)
    assert result == "12345→*12..."
    assert len(result) == 12


def test_truncate_ports_short_value_unchanged() -> None:
    assert truncate_ports("80→*80", 50) == "80→*80"


def test_truncate_name_adds_ellipsis() -> None:
    name = "x" * 60
    result = truncate_name(name, 50)
    assert len(result) == 50
    assert result == "x" * 47 + "..."
    assert truncate_name("web", 50) == "web"


def test_parse_docker_timestamp_with_nanoseconds() -> None:
    parsed = parse_docker_timestamp("2024-03-01T10:20:30.123456789Z")
    assert parsed == datetime(2024, 3, 1, 10, 20, 30, 123456, tzinfo=timezone.utc)


def test_parse_docker_timestamp_zero_and_garbage() -> None:
    assert parse_docker_timestamp("0001-01-01T00:00:00Z") is None
    assert parse_docker_timestamp("") is None
    assert parse_docker_timestamp("not a date") is None


def test_uptime_from_started_at() -> None:
    now = datetime(2024, 3, 2, 12, 0, 0, tzinfo=timezone.utc)
    started = (now - timedelta(hours=5, minutes=3)).strftime("%Y-%m-%dT%H:%M:%S.000000000Z")
    assert uptime_from_started_at(started, now=now) == "5h"
    assert uptime_from_started_at("N/A", now=now) == "N/A"
