"""Turn a declarative per-field rule config into ordered rule definitions."""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..errors import InvalidRuleConfigError
from .base import (
    BaseValidationRule,
    BuiltinRule,
    CustomRule,
    Message,
    RuleDefinition,
)
from .rules import get_rule

logger = logging.getLogger(__name__)

DEFAULT_CUSTOM_MESSAGE = "Invalid value"

Schema = Dict[str, List[RuleDefinition]]


def normalize_schema(
    raw: Mapping[str, Mapping[str, Any]],
    messages: Optional[Mapping[str, Message]] = None,
) -> Schema:
    """
    Normalize a raw schema config.

    Each field maps rule names to one of:
    - ``True`` or a parameter literal for a built-in rule
    - ``{"condition": ..., "message": ...}`` for a built-in with its own message
    - ``{"test": callable, "message": ..., "condition": ...}`` for a custom rule
    - a BaseValidationRule instance

    Falsy entries are left out. Rule order follows declaration order.

    Args:
        raw: Field name -> rule name -> rule entry
        messages: Optional rule name -> message overrides

    Returns:
        Field name -> ordered list of rule definitions

    Raises:
        InvalidRuleConfigError: On any entry that cannot be resolved
    """
    messages = messages or {}
    schema: Schema = {}

    for field_name, field_rules in raw.items():
        if field_rules is None:
            field_rules = {}
        if not isinstance(field_rules, Mapping):
            raise InvalidRuleConfigError(
                field_name, None, "field config must be a mapping of rule names"
            )

        definitions: List[RuleDefinition] = []
        for rule_name, entry in field_rules.items():
            definition = _normalize_entry(field_name, rule_name, entry, messages)
            if definition is not None:
                definitions.append(definition)
        schema[field_name] = definitions

    logger.debug(
        "Normalized schema: %s",
        {name: [d.name for d in defs] for name, defs in schema.items()},
    )
    return schema


def _normalize_entry(
    field_name: str,
    rule_name: str,
    entry: Any,
    messages: Mapping[str, Message],
) -> Optional[RuleDefinition]:
    if isinstance(entry, BaseValidationRule):
        return BuiltinRule(
            name=rule_name,
            parameter=_check_parameter(field_name, rule_name, entry, True),
            rule=entry,
            message=messages.get(rule_name, entry.default_message),
        )

    if not entry:
        # Not configured
        return None

    builtin = get_rule(rule_name)

    if isinstance(entry, Mapping):
        if "test" in entry:
            return _custom_rule(field_name, rule_name, entry, messages)
        if builtin is None:
            raise InvalidRuleConfigError(
                field_name, rule_name, "custom rule is missing a 'test' function"
            )
        parameter = entry.get("condition", True)
        if not parameter:
            return None
        parameter = _check_parameter(field_name, rule_name, builtin, parameter)
        message = entry.get("message") or messages.get(rule_name, builtin.default_message)
        _check_message(field_name, rule_name, message)
        return BuiltinRule(
            name=rule_name, parameter=parameter, rule=builtin, message=message
        )

    if builtin is None:
        raise InvalidRuleConfigError(
            field_name, rule_name, f"unknown rule with value {entry!r}"
        )

    parameter = _check_parameter(field_name, rule_name, builtin, entry)
    message = messages.get(rule_name, builtin.default_message)
    _check_message(field_name, rule_name, message)
    return BuiltinRule(name=rule_name, parameter=parameter, rule=builtin, message=message)


def _custom_rule(
    field_name: str,
    rule_name: str,
    entry: Mapping[str, Any],
    messages: Mapping[str, Message],
) -> CustomRule:
    predicate = entry["test"]
    if not callable(predicate):
        raise InvalidRuleConfigError(field_name, rule_name, "'test' must be callable")

    message = entry.get("message") or messages.get(rule_name, DEFAULT_CUSTOM_MESSAGE)
    _check_message(field_name, rule_name, message)
    return CustomRule(
        name=rule_name,
        parameter=entry.get("condition", True),
        predicate=predicate,
        message=message,
    )


def _check_message(field_name: str, rule_name: str, message: Any) -> None:
    if not (isinstance(message, str) or callable(message)):
        raise InvalidRuleConfigError(
            field_name, rule_name, "message must be a string or a callable"
        )


def _check_parameter(
    field_name: str, rule_name: str, rule: BaseValidationRule, parameter: Any
) -> Any:
    try:
        return rule.check_parameter(parameter)
    except (TypeError, ValueError) as e:
        raise InvalidRuleConfigError(field_name, rule_name, str(e)) from e
