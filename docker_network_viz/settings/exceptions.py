"""Исключения подсистемы конфигурации (YAML-файл, переменные DNV_*, флаги)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class SettingsError(Exception):
    """Базовая ошибка конфигурации; контекст сохраняется и попадает в лог."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


class SettingsNotFoundError(SettingsError):
    """Обращение к неизвестной группе или ключу."""

    def __init__(self, group: str, key: Optional[str] = None) -> None:
        dotted = f"{group}.{key}" if key else group
        super().__init__(f"unknown setting '{dotted}'", context={"group": group, "key": key})


class SettingsValidationError(SettingsError):
    """Значение не прошло валидатор ключа."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(
            f"invalid value {value!r} for '{key}': {reason}",
            context={"key": key, "value": value, "reason": reason},
        )


class SettingsIOError(SettingsError):
    """Файл конфигурации не читается или не является YAML-словарём."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(
            f"cannot read config file '{path}': {reason}",
            context={"path": str(path), "reason": reason},
        )
