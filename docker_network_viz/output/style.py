"""Оформление вывода цветом по семантическим категориям."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

import click

from docker_network_viz.utils.helpers import color_disabled_by_env, is_terminal


class Category(str, Enum):
    """Категории текста, которые окрашиваются по-разному."""

    NETWORK = "network"
    CONTAINER = "container"
    ALIAS = "alias"
    LABEL = "label"
    TREE = "tree"


_PALETTE: Dict[Category, Dict[str, Any]] = {
    Category.NETWORK: {"fg": "cyan", "bold": True},
    Category.CONTAINER: {"fg": "green"},
    Category.ALIAS: {"fg": "yellow"},
    Category.LABEL: {"fg": "magenta"},
    Category.TREE: {"fg": "blue"},
}


@dataclass(frozen=True)
class Style:
    """Функция оформления: при enabled=False возвращает текст без изменений."""

    enabled: bool = False

    def apply(self, category: Category | str, text: str) -> str:
        if not self.enabled:
            return text
        return click.style(text, **_PALETTE[Category(category)])

    def network(self, text: str) -> str:
        return self.apply(Category.NETWORK, text)

    def container(self, text: str) -> str:
        return self.apply(Category.CONTAINER, text)

    def alias(self, text: str) -> str:
        return self.apply(Category.ALIAS, text)

    def label(self, text: str) -> str:
        return self.apply(Category.LABEL, text)

    def tree(self, text: str) -> str:
        return self.apply(Category.TREE, text)


PLAIN = Style(enabled=False)


def style_for_stream(stream: Any, *, no_color: bool = False) -> Style:
    """Включает цвет только для терминала, если он не отключён флагом или NO_COLOR."""

    enabled = not no_color and not color_disabled_by_env() and is_terminal(stream)
    return Style(enabled=enabled)
