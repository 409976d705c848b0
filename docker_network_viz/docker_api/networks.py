"""Функции для работы с сетями Docker."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from docker.errors import DockerException

from docker_network_viz.docker_api.client import DockerClientWrapper
from docker_network_viz.docker_api.exceptions import DockerAPIError
from docker_network_viz.docker_api.models import NetworkInfo

LOGGER = logging.getLogger(__name__)


def list_networks(
    client: DockerClientWrapper, *, drivers: Optional[Iterable[str]] = None
) -> List[Dict[str, Any]]:
    """Возвращает сырые записи сетей, отсортированные по имени.

    ``drivers`` ограничивает выборку сетями с указанными драйверами.
    """

    raw = client.get_raw_client()
    filters: Dict[str, List[str]] = {}
    driver_list = list(drivers or [])
    if driver_list:
        filters["driver"] = driver_list
    try:
        found = raw.networks.list(filters=filters or None)
    except DockerException as exc:
        raise DockerAPIError(f"failed to list Docker networks: {exc}") from exc
    records = [getattr(network, "attrs", {}) or {} for network in found]
    records.sort(key=lambda record: record.get("Name") or "")
    LOGGER.debug("Fetched %d networks", len(records))
    return records


def inspect_network(client: DockerClientWrapper, network_id: str) -> Dict[str, Any]:
    """Возвращает атрибуты сети по идентификатору или имени."""

    raw = client.get_raw_client()
    try:
        network = raw.networks.get(network_id)
    except DockerException as exc:
        raise DockerAPIError(f"failed to inspect Docker network {network_id}: {exc}") from exc
    return getattr(network, "attrs", {})


def convert_to_network_info(record: Dict[str, Any]) -> NetworkInfo:
    return NetworkInfo(name=record.get("Name") or "", driver=record.get("Driver") or "")


def convert_networks_to_network_infos(records: Iterable[Dict[str, Any]]) -> List[NetworkInfo]:
    return [convert_to_network_info(record) for record in records]
