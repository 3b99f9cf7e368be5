"""
Formulation - Declarative form validation

Track a model of named field values, validate it against a declarative
rule schema, and publish touched/validity/error state to consumers.
"""

__version__ = "0.1.0"

import sys

if sys.version_info < (3, 10):
    raise RuntimeError("Formulation requires Python 3.10 or higher")

from .config import FormConfig, Settings, ValidateOn, load_form_config, load_settings
from .core import EMPTY_VALUE, FieldBinding, Form, ModelStore, with_validation
from .errors import (
    ConfigError,
    FormulationError,
    InvalidRuleConfigError,
    UnknownFieldError,
)
from .schemas.base import (
    FieldValidationResult,
    FieldValue,
    FormState,
    FormValidationResult,
    RuleError,
)
from .validators import (
    BaseValidationRule,
    BuiltinRule,
    CustomRule,
    ValidationEngine,
    normalize_schema,
    validate,
)
from .validators.rules import BUILTIN_RULES, evaluate, get_rule, list_rules

__all__ = [
    "__version__",
    # Main API
    "Form",
    "with_validation",
    "validate",
    "FieldBinding",
    "ModelStore",
    "EMPTY_VALUE",
    # Result types
    "FieldValue",
    "RuleError",
    "FieldValidationResult",
    "FormValidationResult",
    "FormState",
    # Rules
    "BaseValidationRule",
    "BuiltinRule",
    "CustomRule",
    "ValidationEngine",
    "normalize_schema",
    "BUILTIN_RULES",
    "evaluate",
    "get_rule",
    "list_rules",
    # Config
    "FormConfig",
    "Settings",
    "ValidateOn",
    "load_form_config",
    "load_settings",
    # Errors
    "FormulationError",
    "UnknownFieldError",
    "InvalidRuleConfigError",
    "ConfigError",
]
