"""Визуализация топологии сетей Docker в виде дерева."""

__version__ = "0.1.0"
