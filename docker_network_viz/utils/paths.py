"""Централизованное описание путей приложения."""

from __future__ import annotations

from pathlib import Path
from typing import List

# CONFIG_FILE_NAME: имя YAML-файла, который ищется в текущей и домашней директории
CONFIG_FILE_NAME = ".docker-network-viz.yaml"


def default_config_candidates() -> List[Path]:
    """Возвращает пути, где ищется конфигурация, в порядке приоритета."""

    return [Path.cwd() / CONFIG_FILE_NAME, Path.home() / CONFIG_FILE_NAME]
