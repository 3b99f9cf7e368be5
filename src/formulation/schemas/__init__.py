"""Data models for Formulation."""

from .base import (
    FieldValidationResult,
    FieldValue,
    FormState,
    FormValidationResult,
    RuleError,
)

__all__ = [
    "FieldValue",
    "RuleError",
    "FieldValidationResult",
    "FormValidationResult",
    "FormState",
]
