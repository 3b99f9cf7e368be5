"""Exceptions raised by Formulation."""

from typing import Iterable, Optional


class FormulationError(Exception):
    """Base class for all Formulation errors."""


class UnknownFieldError(FormulationError, KeyError):
    """An operation referenced a field that is neither in the schema nor the model."""

    def __init__(self, field_name: str, known: Optional[Iterable[str]] = None):
        self.field_name = field_name
        self.known = sorted(known) if known is not None else []
        message = f"Unknown field: {field_name!r}"
        if self.known:
            message += f". Known fields: {', '.join(self.known)}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class InvalidRuleConfigError(FormulationError, ValueError):
    """A schema entry could not be turned into a rule definition."""

    def __init__(self, field_name: str, rule_name: Optional[str], reason: str):
        self.field_name = field_name
        self.rule_name = rule_name
        where = f"'{field_name}.{rule_name}'" if rule_name else f"'{field_name}'"
        super().__init__(f"Invalid rule config for {where}: {reason}")


class ConfigError(FormulationError, ValueError):
    """Invalid form configuration or settings."""
