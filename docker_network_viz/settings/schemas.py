"""Соответствие плоских ключей YAML/окружения ключам групп настроек."""

from __future__ import annotations

from typing import Dict, Tuple

ENV_PREFIX = "DNV_"

# Плоские ключи в стиле флагов CLI: "no-color: true" в корне YAML-файла
FLAT_KEYS: Dict[str, Tuple[str, str]] = {
    "no-color": ("display", "no_color"),
    "only-network": ("display", "only_network"),
    "container": ("display", "container"),
    "no-aliases": ("display", "no_aliases"),
    "host": ("docker", "host"),
    "timeout": ("docker", "connection_timeout_sec"),
    "log-level": ("logging", "level"),
    "log-file": ("logging", "file"),
}


def env_var_name(flat_key: str) -> str:
    """no-color -> DNV_NO_COLOR."""

    return ENV_PREFIX + flat_key.upper().replace("-", "_").replace(".", "_")
