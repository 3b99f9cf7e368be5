"""Length validation rules."""

from typing import Any

from ..base import BaseValidationRule


def _length(value: Any) -> int:
    if value is None:
        return 0
    try:
        return len(value)
    except TypeError:
        return len(str(value))


def _limit(parameter: Any) -> int:
    if isinstance(parameter, bool) or not isinstance(parameter, (int, float)):
        raise TypeError(f"Length limit must be a number, got {parameter!r}")
    return int(parameter)


class MinLengthRule(BaseValidationRule):
    """Check that a value is at least N characters (or items) long."""

    @property
    def name(self) -> str:
        return "minLength"

    @property
    def description(self) -> str:
        return "Verifies that the value length is not below the configured minimum"

    def check_parameter(self, parameter: Any) -> int:
        return _limit(parameter)

    def test(self, value: Any, parameter: Any) -> bool:
        return _length(value) >= _limit(parameter)

    def default_message(self, parameter: Any) -> str:
        return f"Must be at least {parameter} characters long"


class MaxLengthRule(BaseValidationRule):
    """Check that a value is at most N characters (or items) long."""

    @property
    def name(self) -> str:
        return "maxLength"

    @property
    def description(self) -> str:
        return "Verifies that the value length does not exceed the configured maximum"

    def check_parameter(self, parameter: Any) -> int:
        return _limit(parameter)

    def test(self, value: Any, parameter: Any) -> bool:
        return _length(value) <= _limit(parameter)

    def default_message(self, parameter: Any) -> str:
        return f"Must be at most {parameter} characters long"
