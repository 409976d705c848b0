"""Исключения слоя работы с Docker API."""

from __future__ import annotations


class DockerAPIError(Exception):
    """Любая ошибка обращения к Docker daemon (подключение, список, inspect)."""
