"""Built-in validation rules."""

from typing import Any, Dict, List, Optional

from ..base import BaseValidationRule
from .format_rules import EmailRule, NumericRule, PatternRule, PhoneNumbersRule
from .length_rules import MaxLengthRule, MinLengthRule
from .presence_rules import RequiredRule


def get_all_default_rules() -> List[BaseValidationRule]:
    """Instantiate all built-in rules."""
    return [
        # Presence
        RequiredRule(),
        # Length
        MinLengthRule(),
        MaxLengthRule(),
        # Format
        PatternRule(),
        EmailRule(),
        PhoneNumbersRule(),
        NumericRule(),
    ]


BUILTIN_RULES: Dict[str, BaseValidationRule] = {
    rule.name: rule for rule in get_all_default_rules()
}


def get_rule(rule_name: str) -> Optional[BaseValidationRule]:
    """Look up a built-in rule by name."""
    return BUILTIN_RULES.get(rule_name)


def list_rules() -> Dict[str, str]:
    """Map each built-in rule name to its description."""
    return {name: rule.description for name, rule in BUILTIN_RULES.items()}


def evaluate(rule_name: str, value: Any, parameter: Any = True) -> bool:
    """
    Evaluate a built-in rule by name.

    Raises:
        KeyError: If no built-in rule has that name
    """
    rule = BUILTIN_RULES.get(rule_name)
    if rule is None:
        raise KeyError(f"Unknown rule: {rule_name}. Available: {', '.join(BUILTIN_RULES)}")
    return bool(rule.test(value, parameter))


__all__ = [
    "BUILTIN_RULES",
    "EmailRule",
    "MaxLengthRule",
    "MinLengthRule",
    "NumericRule",
    "PatternRule",
    "PhoneNumbersRule",
    "RequiredRule",
    "evaluate",
    "get_all_default_rules",
    "get_rule",
    "list_rules",
]
