"""Группы настроек CLI с валидацией значений."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from docker_network_viz.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from docker_network_viz.settings.validators import (
    AllOf,
    ChoiceValidator,
    RangeValidator,
    TypeValidator,
    Validator,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class SettingsGroup(ABC):
    """Абстрактная база для конкретных групп настроек."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Задаёт значения по умолчанию для группы."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает валидаторы к ключам группы."""

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._defaults.keys())

    def get(self, key: str) -> Any:
        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values[key]

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение, выбрасывая ошибку при невалидных данных."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
            )
        self._values[key] = value

    def update(self, data: Dict[str, Any]) -> None:
        """Применяет словарь значений; неизвестный ключ считается ошибкой."""

        for key, value in data.items():
            self.set(key, value)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)


class DisplaySettings(SettingsGroup):
    """Что и как выводить: фильтры, алиасы, цвет."""

    group_name = "display"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "no_color": False,
            "only_network": "",
            "container": "",
            "no_aliases": False,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "no_color": TypeValidator(bool),
            "only_network": TypeValidator(str),
            "container": TypeValidator(str),
            "no_aliases": TypeValidator(bool),
        }


class DockerSettings(SettingsGroup):
    """Подключение к Docker daemon."""

    group_name = "docker"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "host": "",  # пусто: DOCKER_HOST или локальный сокет
            "connection_timeout_sec": 10,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "host": TypeValidator(str),
            "connection_timeout_sec": AllOf(TypeValidator(int), RangeValidator(0, 300)),
        }


class LoggingSettings(SettingsGroup):
    """Уровень логирования и необязательный файл с ротацией."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "level": "WARNING",
            "file": "",
            "max_file_size_mb": 10,
            "max_archived_files": 5,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "level": ChoiceValidator(LOG_LEVELS),
            "file": TypeValidator(str),
            "max_file_size_mb": AllOf(TypeValidator(int), RangeValidator(1, 1000)),
            "max_archived_files": AllOf(TypeValidator(int), RangeValidator(1, 50)),
        }
