"""Format validation rules.

Empty values pass every format rule; combine with ``required`` to
enforce presence.
"""

import re
from typing import Any, Union

from ..base import BaseValidationRule, is_empty

_EMAIL_REGEX = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

# Optional leading +, digits with common separators
_PHONE_REGEX = re.compile(r"\+?[\d\s().-]+")
_PHONE_MIN_DIGITS = 6
_PHONE_MAX_DIGITS = 15

_NUMERIC_REGEX = re.compile(r"[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?")


class PatternRule(BaseValidationRule):
    """Check that a value fully matches a regular expression."""

    @property
    def name(self) -> str:
        return "pattern"

    @property
    def description(self) -> str:
        return "Verifies that the value matches the configured regular expression"

    def check_parameter(self, parameter: Any) -> re.Pattern:
        if isinstance(parameter, re.Pattern):
            return parameter
        if not isinstance(parameter, str):
            raise TypeError(f"Pattern must be a string or compiled regex, got {parameter!r}")
        try:
            return re.compile(parameter)
        except re.error as e:
            raise ValueError(f"Invalid regular expression {parameter!r}: {e}") from e

    def test(self, value: Any, parameter: Union[str, re.Pattern]) -> bool:
        if is_empty(value):
            return True
        return self.check_parameter(parameter).fullmatch(str(value)) is not None

    def default_message(self, parameter: Any) -> str:
        return "Invalid format"


class EmailRule(BaseValidationRule):
    """Check that a value looks like an e-mail address."""

    @property
    def name(self) -> str:
        return "email"

    @property
    def description(self) -> str:
        return "Verifies that the value is a well-formed e-mail address"

    def test(self, value: Any, parameter: Any) -> bool:
        if is_empty(value):
            return True
        return _EMAIL_REGEX.fullmatch(str(value).strip()) is not None

    def default_message(self, parameter: Any) -> str:
        return "Must be a valid e-mail address"


class PhoneNumbersRule(BaseValidationRule):
    """Check that a value looks like a phone number."""

    @property
    def name(self) -> str:
        return "phoneNumbers"

    @property
    def description(self) -> str:
        return "Verifies that the value is a phone number with 6 to 15 digits"

    def test(self, value: Any, parameter: Any) -> bool:
        if is_empty(value):
            return True
        text = str(value).strip()
        if not _PHONE_REGEX.fullmatch(text):
            return False
        digits = sum(1 for c in text if c.isdigit())
        return _PHONE_MIN_DIGITS <= digits <= _PHONE_MAX_DIGITS

    def default_message(self, parameter: Any) -> str:
        return "Must be a valid phone number"


class NumericRule(BaseValidationRule):
    """Check that a value is a number or a numeric string."""

    @property
    def name(self) -> str:
        return "numeric"

    @property
    def description(self) -> str:
        return "Verifies that the value is numeric"

    def test(self, value: Any, parameter: Any) -> bool:
        if is_empty(value):
            return True
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float)):
            return True
        return _NUMERIC_REGEX.fullmatch(str(value).strip()) is not None

    def default_message(self, parameter: Any) -> str:
        return "Must be a number"
