"""Менеджер доступа к данным Docker для построения топологии.

Файл описывает класс, который создаёт Docker client по настройкам (адрес и
таймаут подключения) и собирает из сырых ответов Docker снимок топологии:
список сетей, словарь контейнеров и словарь сеть -> участники.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from docker_network_viz.docker_api import containers, networks
from docker_network_viz.docker_api.client import DockerClientWrapper
from docker_network_viz.docker_api.exceptions import DockerAPIError
from docker_network_viz.docker_api.models import ContainerInfo, NetworkInfo
from docker_network_viz.utils.helpers import normalize_socket_path

LOGGER = logging.getLogger(__name__)


class SettingsSource(Protocol):
    """Всё, что нужно поставщику от реестра настроек."""

    def get_value(self, group: str, key: str, default: Any = None) -> Any:  # pragma: no cover
        ...


@dataclass
class Topology:
    """Снимок топологии, полученный за один проход."""

    networks: List[NetworkInfo]
    container_map: Dict[str, ContainerInfo]
    network_to_containers: Dict[str, List[ContainerInfo]]


class DockerDataProvider:
    """Предоставляет высокоуровневый API для получения сетей и контейнеров.

    Клиент создаётся при первом обращении и переиспользуется до close().
    """

    def __init__(self, settings: SettingsSource) -> None:
        self._settings = settings
        self._client: Optional[DockerClientWrapper] = None

    # ------------------------------------------------------------------ helpers
    def _create_client(self) -> DockerClientWrapper:
        """Создаёт Docker client, ограничивая время подключения."""

        host = normalize_socket_path(str(self._settings.get_value("docker", "host", default="")))
        timeout = int(self._settings.get_value("docker", "connection_timeout_sec", default=10))
        base_url = host or None
        if timeout <= 0:
            return DockerClientWrapper(base_url)

        # без with: выход из контекста ждал бы зависшее подключение
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(DockerClientWrapper, base_url, timeout=timeout)
        try:
            return future.result(timeout=timeout)
        except TimeoutError as exc:
            LOGGER.error(
                "Docker client creation timeout for %s after %s seconds",
                base_url or "environment",
                timeout,
            )
            raise DockerAPIError(f"connection timeout after {timeout} seconds") from exc
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    @property
    def client(self) -> DockerClientWrapper:
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def close(self) -> None:
        """Закрывает клиент, если он был создан."""

        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "DockerDataProvider":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------- fetches
    def ping(self) -> None:
        """Проверяет, что Docker daemon отвечает."""

        self.client.ping()

    def fetch_networks(self, drivers: Optional[List[str]] = None) -> List[Dict[str, Any]]:
        """Возвращает сырые записи сетей."""

        return networks.list_networks(self.client, drivers=drivers)

    def fetch_containers(self, *, all_containers: bool = True) -> List[Dict[str, Any]]:
        """Возвращает сырые записи контейнеров (по умолчанию включая остановленные)."""

        return containers.list_containers(self.client, all_containers=all_containers)

    def fetch_topology(self) -> Topology:
        """Получает сети и контейнеры и строит обе карты.

        Ошибка любой из выборок прерывает построение целиком.
        """

        raw_networks = self.fetch_networks()
        raw_containers = self.fetch_containers(all_containers=True)
        LOGGER.info(
            "Building topology from %d networks and %d containers",
            len(raw_networks),
            len(raw_containers),
        )
        return Topology(
            networks=networks.convert_networks_to_network_infos(raw_networks),
            container_map=containers.build_container_map(raw_containers),
            network_to_containers=containers.build_network_to_containers_map(raw_containers),
        )
