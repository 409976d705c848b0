"""Тесты валидаторов конфигурации."""

from __future__ import annotations

from docker_network_viz.settings.validators import (
    AllOf,
    ChoiceValidator,
    RangeValidator,
    TypeValidator,
)


def test_type_validator_rejects_bool_for_int() -> None:
    validator = TypeValidator(int)
    assert validator.validate(5) == (True, "")
    ok, error = validator.validate(True)
    assert not ok
    assert "bool" in error
    assert TypeValidator(bool).validate(False) == (True, "")


def test_range_validator() -> None:
    validator = RangeValidator(0, 10)
    assert validator.validate(0)[0]
    assert validator.validate(10)[0]
    assert not validator.validate(11)[0]
    assert RangeValidator(min_value=1).validate(10**6)[0]


def test_choice_validator() -> None:
    validator = ChoiceValidator(["debug", "INFO"])
    assert validator.validate("DEBUG")[0]
    assert validator.validate("info")[0]
    assert not validator.validate("trace")[0]
    assert not validator.validate(10)[0]


def test_all_of_returns_first_error() -> None:
    validator = AllOf(TypeValidator(int), RangeValidator(0, 5))
    assert validator.validate(3) == (True, "")
    ok, error = validator.validate("3")
    assert not ok
    assert "expected int" in error
    ok, error = validator.validate(9)
    assert "within" in error
