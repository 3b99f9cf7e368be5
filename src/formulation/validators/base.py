"""Base abstractions for validation rules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Union

# A message is either a literal or built from the rule parameter
Message = Union[str, Callable[[Any], str]]


def is_empty(value: Any) -> bool:
    """True for None, blank strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def render_message(message: Message, parameter: Any) -> str:
    """Resolve a message template against the rule parameter."""
    if callable(message):
        return str(message(parameter))
    return message


class BaseValidationRule(ABC):
    """Abstract base class for all field validation rules."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this rule, as used in schema configs."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this rule checks."""
        ...

    @abstractmethod
    def test(self, value: Any, parameter: Any) -> bool:
        """
        Check a single field value.

        Args:
            value: Current value of the field
            parameter: Rule parameter from the schema (True for flag rules)

        Returns:
            True if the value passes the rule
        """
        ...

    def check_parameter(self, parameter: Any) -> Any:
        """
        Validate a schema parameter once, at setup time.

        Returns:
            The parameter to store in the rule definition

        Raises:
            TypeError, ValueError: If the parameter is unusable
        """
        return parameter

    def default_message(self, parameter: Any) -> str:
        return f"Failed rule '{self.name}'"


@dataclass(frozen=True)
class BuiltinRule:
    """A schema entry resolved against the built-in rule library."""

    name: str
    parameter: Any
    rule: BaseValidationRule
    message: Message


@dataclass(frozen=True)
class CustomRule:
    """A schema entry that carries its own predicate."""

    name: str
    parameter: Any
    predicate: Callable[[Any, Any], Any]
    message: Message


RuleDefinition = Union[BuiltinRule, CustomRule]


def evaluate_rule(definition: RuleDefinition, value: Any) -> bool:
    """Run one rule definition against a value. True means the value passes."""
    if isinstance(definition, BuiltinRule):
        return bool(definition.rule.test(value, definition.parameter))
    return bool(definition.predicate(value, definition.parameter))
