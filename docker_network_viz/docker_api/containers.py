"""Функции для получения контейнеров и построения топологии сетей.

Сырые записи контейнеров имеют формат ответа ``GET /containers/json``::

    {
        "Names": ["/web"],
        "NetworkSettings": {"Networks": {"frontend": {"Aliases": ["www"]}}},
    }

Построение карт не обращается к Docker и не хранит состояния между вызовами:
каждый вызов возвращает новые словари.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from docker.errors import DockerException

from docker_network_viz.docker_api.client import DockerClientWrapper
from docker_network_viz.docker_api.exceptions import DockerAPIError
from docker_network_viz.docker_api.models import ContainerInfo

LOGGER = logging.getLogger(__name__)


def list_containers(
    client: DockerClientWrapper, *, all_containers: bool = True
) -> List[Dict[str, Any]]:
    """Возвращает сырые записи контейнеров, отсортированные по имени."""

    raw = client.get_raw_client()
    try:
        found = raw.containers.list(all=all_containers, sparse=True)
    except DockerException as exc:
        raise DockerAPIError(f"failed to list Docker containers: {exc}") from exc
    records = [getattr(container, "attrs", {}) or {} for container in found]
    records.sort(key=lambda record: sanitize_container_name(record.get("Names")))
    LOGGER.debug("Fetched %d containers (all=%s)", len(records), all_containers)
    return records


def inspect_container(client: DockerClientWrapper, container_id: str) -> Dict[str, Any]:
    """Возвращает словарь атрибутов контейнера (docker inspect)."""

    raw = client.get_raw_client()
    try:
        container = raw.containers.get(container_id)
    except DockerException as exc:
        raise DockerAPIError(
            f"failed to inspect Docker container {container_id}: {exc}"
        ) from exc
    return getattr(container, "attrs", {})


def sanitize_container_name(names: Optional[Iterable[str]]) -> str:
    """Берёт первое имя контейнера и убирает ведущий "/"."""

    for name in names or ():
        return name[1:] if name.startswith("/") else name
    return ""


def _memberships(record: Dict[str, Any]) -> Dict[str, Any]:
    settings = record.get("NetworkSettings") or {}
    return settings.get("Networks") or {}


def convert_to_container_info(record: Dict[str, Any]) -> ContainerInfo:
    """Превращает одну сырую запись в ContainerInfo."""

    info = ContainerInfo(sanitize_container_name(record.get("Names")))
    for network_name, endpoint in _memberships(record).items():
        info.add_network(network_name)
        for alias in (endpoint or {}).get("Aliases") or []:
            info.add_alias(alias)
    return info


def convert_containers_to_container_infos(
    records: Iterable[Dict[str, Any]],
) -> List[ContainerInfo]:
    return [convert_to_container_info(record) for record in records]


def build_container_map(records: Iterable[Dict[str, Any]]) -> Dict[str, ContainerInfo]:
    """Строит словарь имя -> ContainerInfo.

    Если две записи дают одно имя, остаётся последняя.
    """

    container_map: Dict[str, ContainerInfo] = {}
    for record in records:
        info = convert_to_container_info(record)
        if info.name in container_map:
            LOGGER.debug("Container name %r is duplicated, keeping the last record", info.name)
        container_map[info.name] = info
    return container_map


def build_network_to_containers_map(
    records: Iterable[Dict[str, Any]],
) -> Dict[str, List[ContainerInfo]]:
    """Строит словарь сеть -> отсортированный по имени список копий ContainerInfo."""

    records = list(records)
    container_map = build_container_map(records)
    network_to_containers: Dict[str, List[ContainerInfo]] = {}
    for record in records:
        info = container_map[sanitize_container_name(record.get("Names"))]
        for network_name in _memberships(record):
            network_to_containers.setdefault(network_name, []).append(info.clone())

    for bucket in network_to_containers.values():
        bucket.sort(key=lambda item: item.name)
    return network_to_containers
