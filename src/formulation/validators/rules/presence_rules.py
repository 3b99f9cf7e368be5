"""Presence validation rules."""

from typing import Any

from ..base import BaseValidationRule, is_empty


class RequiredRule(BaseValidationRule):
    """Check that a field has a non-empty value."""

    @property
    def name(self) -> str:
        return "required"

    @property
    def description(self) -> str:
        return "Verifies that the field is not empty, blank or missing"

    def test(self, value: Any, parameter: Any) -> bool:
        return not is_empty(value)

    def default_message(self, parameter: Any) -> str:
        return "This field is required"
