"""Реестр настроек: значения по умолчанию, YAML-файл и переопределения из CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

from docker_network_viz.settings.exceptions import SettingsIOError, SettingsNotFoundError
from docker_network_viz.settings.groups import (
    DisplaySettings,
    DockerSettings,
    LoggingSettings,
    SettingsGroup,
)
from docker_network_viz.settings.schemas import FLAT_KEYS
from docker_network_viz.utils.paths import default_config_candidates

# строки, которые плоские ключи принимают как bool (как strconv.ParseBool)
_TRUE_STRINGS = frozenset({"1", "t", "true"})
_FALSE_STRINGS = frozenset({"0", "f", "false"})


class SettingsRegistry:
    """Хранит все группы настроек одного запуска CLI.

    Порядок применения: значения по умолчанию, затем YAML-файл, затем
    переопределения из флагов и переменных DNV_* (apply_overrides).
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self._logger = logging.getLogger(__name__)
        self._explicit_path = config_path
        self._loaded_path: Optional[Path] = None
        self._settings: Dict[str, SettingsGroup] = {
            "display": DisplaySettings(),
            "docker": DockerSettings(),
            "logging": LoggingSettings(),
        }

    @property
    def config_path(self) -> Optional[Path]:
        """Путь к прочитанному файлу конфигурации (None, если файл не найден)."""

        return self._loaded_path

    # --------------------------------------------------------------------- API
    def get_value(self, group: str, key: str, default: Any = None) -> Any:
        settings_group = self._settings.get(group)
        if not settings_group:
            if default is not None:
                return default
            raise SettingsNotFoundError(group, key)
        if key not in settings_group.keys():
            if default is not None:
                return default
            raise SettingsNotFoundError(group, key)
        return settings_group.get(key)

    def set_value(self, group: str, key: str, value: Any) -> None:
        self._require_group(group).set(key, value)

    def get_group(self, group: str) -> SettingsGroup:
        return self._require_group(group)

    def load_from_disk(self, path: Optional[Path] = None) -> Optional[Path]:
        """Читает первый найденный YAML-файл и возвращает его путь.

        Отсутствие файла не ошибка: остаются значения по умолчанию.
        """

        target = self._find_config(path or self._explicit_path)
        if target is None:
            self._logger.debug("No config file found, using defaults")
            return None
        try:
            content = yaml.safe_load(target.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise SettingsIOError(target, str(exc)) from exc
        if content is None:
            content = {}
        if not isinstance(content, dict):
            raise SettingsIOError(target, "top level must be a mapping")

        self.load_from_mapping(content)
        self._loaded_path = target
        self._logger.debug("Loaded config file %s", target)
        return target

    def load_from_mapping(self, data: Dict[str, Any]) -> None:
        """Применяет словарь с вложенными группами и/или плоскими ключами."""

        for key, value in data.items():
            if key in self._settings and isinstance(value, dict):
                self._settings[key].update(value)
            elif key in FLAT_KEYS:
                group, setting = FLAT_KEYS[key]
                self.set_value(group, setting, self._coerce_flat(group, setting, value))
            else:
                self._logger.warning("Ignoring unknown config key %r", key)

    def apply_overrides(self, overrides: Dict[str, Any]) -> None:
        """Применяет значения флагов CLI по плоским ключам (no-color, host...)."""

        for flat_key, value in overrides.items():
            try:
                group, key = FLAT_KEYS[flat_key]
            except KeyError:
                raise SettingsNotFoundError(flat_key) from None
            self.set_value(group, key, value)

    def reset_to_defaults(self) -> None:
        for group in self._settings.values():
            group.reset_to_defaults()

    # ----------------------------------------------------------------- helpers
    def _require_group(self, group: str) -> SettingsGroup:
        try:
            return self._settings[group]
        except KeyError:
            raise SettingsNotFoundError(group, None) from None

    def _coerce_flat(self, group: str, key: str, value: Any) -> Any:
        if not isinstance(value, str) or not isinstance(self._require_group(group).get(key), bool):
            return value
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
        return value

    def _find_config(self, explicit: Optional[Path]) -> Optional[Path]:
        candidates: Iterable[Path] = [explicit] if explicit else default_config_candidates()
        for candidate in candidates:
            if candidate.is_file():
                return candidate
            if explicit:
                self._logger.debug("Config file %s does not exist", candidate)
        return None
