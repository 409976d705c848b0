"""Обёртка над docker-py с безопасной инициализацией."""

from __future__ import annotations

import logging
from typing import Any, Optional

import docker
from docker.errors import DockerException

from docker_network_viz.docker_api.exceptions import DockerAPIError

LOGGER = logging.getLogger(__name__)


class DockerClientWrapper:
    """Управляет созданием и использованием docker API client."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[int] = None,
        raw_client: Any | None = None,
    ) -> None:
        self.base_url = base_url  # None означает настройки из окружения (DOCKER_HOST)
        self.timeout = timeout
        self._client = raw_client or self._create_client()

    def _create_client(self) -> Any:
        kwargs: dict[str, Any] = {}
        if self.timeout:
            kwargs["timeout"] = self.timeout
        try:
            if self.base_url:
                return docker.DockerClient(base_url=self.base_url, version="auto", **kwargs)
            return docker.from_env(**kwargs)
        except DockerException as exc:
            LOGGER.error(
                "Docker client init error via %s: %s",
                self.base_url or "environment",
                exc,
            )
            raise DockerAPIError(f"failed to create Docker client: {exc}") from exc

    def get_raw_client(self) -> Any:
        """Возвращает внутренний docker client."""

        return self._client

    def ping(self) -> None:
        """Проверяет доступность Docker daemon, бросая DockerAPIError при сбое."""

        try:
            self._client.ping()
        except DockerException as exc:
            LOGGER.error("Docker ping failed: %s", exc)
            raise DockerAPIError(f"failed to ping Docker daemon: {exc}") from exc

    def close(self) -> None:
        """Закрывает HTTP-сессию клиента."""

        try:
            self._client.close()
        except DockerException as exc:  # pragma: no cover - зависит от окружения
            LOGGER.warning("Docker client close failed: %s", exc)

    def __enter__(self) -> "DockerClientWrapper":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
