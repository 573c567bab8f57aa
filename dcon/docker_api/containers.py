"""Функции для работы с контейнерами через Docker client."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from docker.errors import DockerException, NotFound
from requests.exceptions import RequestException

from dcon.docker_api.client import DockerClientWrapper
from dcon.docker_api.exceptions import ActionFailedError, ContainerNotFoundError, DockerAPIError
from dcon.docker_api.models import ContainerDetails
from dcon.utils.helpers import NOT_AVAILABLE

SHELL_CANDIDATES: Sequence[str] = ("/bin/bash", "/bin/sh", "/bin/zsh", "/bin/ash")
FALLBACK_SHELL = "/bin/bash"
UNLIMITED = "unlimited"


def list_running_names(client: DockerClientWrapper) -> List[str]:
    """Возвращает имена запущенных контейнеров в порядке docker ps."""

    raw = client.get_raw_client()
    try:
        containers = raw.containers.list()
    except (DockerException, RequestException) as exc:
        raise DockerAPIError(f"Failed to get container list: {exc}") from exc
    return [container.name for container in containers]


def get_container(client: DockerClientWrapper, name: str) -> Any:
    raw = client.get_raw_client()
    try:
        return raw.containers.get(name)
    except NotFound as exc:
        raise ContainerNotFoundError(name) from exc
    except (DockerException, RequestException) as exc:
        raise DockerAPIError(str(exc), context={"name": name}) from exc


def inspect_container(client: DockerClientWrapper, name: str) -> ContainerDetails:
    """Собирает ContainerDetails из атрибутов docker inspect."""

    attrs: Dict[str, Any] = getattr(get_container(client, name), "attrs", {}) or {}
    config = attrs.get("Config") or {}
    state = attrs.get("State") or {}
    host_config = attrs.get("HostConfig") or {}
    network_settings = attrs.get("NetworkSettings") or {}
    networks = network_settings.get("Networks") or {}

    return ContainerDetails(
        name=name,
        ip_address=_first_ip_address(networks),
        image=config.get("Image") or NOT_AVAILABLE,
        status=state.get("Status") or NOT_AVAILABLE,
        started_at=state.get("StartedAt") or NOT_AVAILABLE,
        ports=format_port_mappings(network_settings),
        exposed_ports=sorted((config.get("ExposedPorts") or {}).keys()),
        memory_limit=_format_memory_limit(host_config.get("Memory")),
        cpu_limit=_format_cpu_limit(host_config),
        env_vars=list(config.get("Env") or []),
        networks=list(networks.keys()),
    )


def format_port_mappings(network_settings: Dict[str, Any]) -> List[str]:
    """Возвращает пробросы портов в формате `docker port` (80/tcp -> 0.0.0.0:8080)."""

    ports = network_settings.get("Ports") or {}
    result = []
    for container_port, mappings in ports.items():
        if not mappings:
            continue
        for mapping in mappings:
            host_ip = mapping.get("HostIp") or "0.0.0.0"
            if ":" in host_ip:
                host_ip = f"[{host_ip}]"
            result.append(f"{container_port} -> {host_ip}:{mapping.get('HostPort')}")
    return result


def summarize_ports(details: ContainerDetails) -> str:
    """Однострочная сводка портов для таблицы."""

    if details.ports:
        compact = [
            line.replace("0.0.0.0:", "*").replace("[::]:", "*:").replace(":::", "*:")
            for line in details.ports
        ]
        return ",".join(compact)
    if details.exposed_ports:
        return f"({','.join(details.exposed_ports)})"
    return NOT_AVAILABLE


def detect_shell(client: DockerClientWrapper, name: str) -> str:
    """Ищет первую доступную оболочку внутри контейнера."""

    try:
        container = get_container(client, name)
        for shell in SHELL_CANDIDATES:
            result = container.exec_run(["test", "-f", shell])
            if _exit_code(result) == 0:
                return shell
    except (DockerException, RequestException, DockerAPIError):
        return FALLBACK_SHELL
    return FALLBACK_SHELL


def restart_container(client: DockerClientWrapper, name: str) -> None:
    """Перезапускает контейнер."""

    container = get_container(client, name)
    try:
        container.restart()
    except (DockerException, RequestException) as exc:
        raise ActionFailedError(name, "restart", str(exc)) from exc


def fetch_logs(
    client: DockerClientWrapper, name: str, *, tail: int = 50, timestamps: bool = True
) -> str:
    """Возвращает строку логов контейнера."""

    container = get_container(client, name)
    try:
        data = container.logs(tail=tail, timestamps=timestamps)
    except (DockerException, RequestException) as exc:
        raise ActionFailedError(name, "logs", str(exc)) from exc
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return str(data)


def _first_ip_address(networks: Dict[str, Any]) -> str:
    for settings in networks.values():
        address = (settings or {}).get("IPAddress")
        if address:
            return str(address)
    return NOT_AVAILABLE


def _exit_code(result: Any) -> Any:
    if isinstance(result, tuple):
        return result[0]
    return getattr(result, "exit_code", None)


def _format_memory_limit(value: Any) -> str:
    if not value:
        return UNLIMITED
    return _format_bytes(value)


def _format_cpu_limit(host_config: Dict[str, Any]) -> str:
    nano_cpus = host_config.get("NanoCpus") or 0
    if nano_cpus > 0:
        return f"{nano_cpus / 1_000_000_000:g} CPUs"
    quota = host_config.get("CpuQuota") or 0
    if quota > 0:
        period = host_config.get("CpuPeriod") or 100000
        return f"{quota / period:g} CPUs"
    return UNLIMITED


def _format_bytes(value: Any) -> str:
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return NOT_AVAILABLE
    units = ["B", "KB", "MB", "GB", "TB"]
    index = 0
    while numeric >= 1024 and index < len(units) - 1:
        numeric /= 1024.0
        index += 1
    return f"{numeric:.1f} {units[index]}"
