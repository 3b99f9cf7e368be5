"""
Validation engine for form field values.

Provides the built-in rule library, schema normalization and the
evaluator that turns field values into validation results.
"""

from ..schemas.base import FormValidationResult
from .base import BaseValidationRule, BuiltinRule, CustomRule, RuleDefinition
from .engine import ValidationEngine
from .normalizer import normalize_schema


def validate(data, schema, messages=None) -> FormValidationResult:
    """
    One-liner validation function.

    Args:
        data: Field name -> value dict
        schema: Raw per-field rule config
        messages: Optional rule name -> message overrides

    Returns:
        FormValidationResult
    """
    engine = ValidationEngine.from_config(schema, messages)
    return engine.validate_form(data)


__all__ = [
    "BaseValidationRule",
    "BuiltinRule",
    "CustomRule",
    "RuleDefinition",
    "ValidationEngine",
    "normalize_schema",
    "validate",
]
