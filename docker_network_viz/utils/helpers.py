"""Различные вспомогательные функции."""

from __future__ import annotations

import os
from typing import Any


_SOCKET_SCHEMES = ("unix://", "tcp://", "npipe://", "http://", "https://", "ssh://")


def normalize_socket_path(raw_value: str) -> str:
    """Возвращает адрес Docker с корректным префиксом unix://."""

    value = raw_value.strip()
    if not value:
        return value
    lowered = value.lower()
    if lowered.startswith(_SOCKET_SCHEMES):
        return value
    if value.startswith("/"):
        return f"unix://{value}"
    return value


def is_terminal(stream: Any) -> bool:
    """True, если поток вывода подключён к интерактивному терминалу."""

    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:  # закрытый поток
        return False


def color_disabled_by_env() -> bool:
    """Учитывает соглашение NO_COLOR (https://no-color.org)."""

    return bool(os.environ.get("NO_COLOR"))
