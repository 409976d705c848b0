"""Символы псевдографики для отрисовки деревьев."""

from __future__ import annotations

from typing import Final

TREE_BRANCH: Final[str] = "├──"  # ├── для не последнего элемента
TREE_END: Final[str] = "└──"  # └── для последнего элемента
TREE_VERTICAL: Final[str] = "│   "  # отступ под не последним элементом
TREE_SPACE: Final[str] = "    "  # отступ под последним элементом


def branch_glyphs(is_last: bool) -> tuple[str, str]:
    """Возвращает (префикс строки, отступ для потомков) для позиции элемента."""

    if is_last:
        return TREE_END, TREE_SPACE
    return TREE_BRANCH, TREE_VERTICAL
