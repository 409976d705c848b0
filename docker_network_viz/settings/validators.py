"""Валидаторы значений конфигурации."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Tuple


class Validator(ABC):
    """Абстрактный валидатор значения."""

    @abstractmethod
    def validate(self, value: Any) -> Tuple[bool, str]:
        """Возвращает (True, "") при успехе либо (False, описание ошибки)."""


class TypeValidator(Validator):
    """Проверяет тип значения; bool не принимается там, где ожидается int."""

    def __init__(self, expected_type: type) -> None:
        self.expected_type = expected_type

    def validate(self, value: Any) -> Tuple[bool, str]:
        if isinstance(value, bool) and self.expected_type is not bool:
            return False, f"expected {self.expected_type.__name__}, got bool"
        if isinstance(value, self.expected_type):
            return True, ""
        return False, f"expected {self.expected_type.__name__}, got {type(value).__name__}"


class RangeValidator(Validator):
    """Числовое значение в границах [min_value, max_value]."""

    def __init__(self, min_value: Optional[int] = None, max_value: Optional[int] = None) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> Tuple[bool, str]:
        too_low = self.min_value is not None and value < self.min_value
        too_high = self.max_value is not None and value > self.max_value
        if too_low or too_high:
            return False, f"must be within [{self.min_value}, {self.max_value}]"
        return True, ""


class ChoiceValidator(Validator):
    """Значение из конечного набора строк, без учёта регистра."""

    def __init__(self, choices: Iterable[str]) -> None:
        self.choices = [choice.upper() for choice in choices]

    def validate(self, value: Any) -> Tuple[bool, str]:
        if isinstance(value, str) and value.upper() in self.choices:
            return True, ""
        return False, f"must be one of {', '.join(self.choices)}"


class AllOf(Validator):
    """Применяет валидаторы по очереди и возвращает первую ошибку."""

    def __init__(self, *validators: Validator) -> None:
        self.validators: List[Validator] = list(validators)

    def validate(self, value: Any) -> Tuple[bool, str]:
        for validator in self.validators:
            is_valid, error = validator.validate(value)
            if not is_valid:
                return False, error
        return True, ""
