"""Validation engine that runs rule definitions and produces validation results."""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..errors import UnknownFieldError
from ..schemas.base import (
    FieldValidationResult,
    FieldValue,
    FormValidationResult,
    RuleError,
)
from .base import Message, RuleDefinition, evaluate_rule, render_message
from .normalizer import Schema, normalize_schema

logger = logging.getLogger(__name__)


class ValidationEngine:
    """
    Runs a normalized schema against field values.

    Usage:
        engine = ValidationEngine.from_config(
            {"firstname": {"required": True}, "lastname": {"minLength": 2}}
        )
        result = engine.validate_form({"firstname": "", "lastname": "A"})

    Every rule of a field runs on each pass; failures are collected in
    declaration order. A rule that raises counts as a failure of that rule
    and never stops the other rules or fields.
    """

    def __init__(self, schema: Schema):
        self._schema: Schema = {name: list(defs) for name, defs in schema.items()}

    @classmethod
    def from_config(
        cls,
        raw: Mapping[str, Mapping[str, Any]],
        messages: Optional[Mapping[str, Message]] = None,
    ) -> "ValidationEngine":
        return cls(normalize_schema(raw, messages))

    @property
    def schema(self) -> Schema:
        return {name: list(defs) for name, defs in self._schema.items()}

    @property
    def field_names(self) -> List[str]:
        return list(self._schema)

    def has_field(self, name: str) -> bool:
        return name in self._schema

    def rules_for(self, name: str) -> List[RuleDefinition]:
        if name not in self._schema:
            raise UnknownFieldError(name, self._schema)
        return list(self._schema[name])

    def validate_field(
        self, name: str, value: Any, is_touched: bool = False
    ) -> FieldValidationResult:
        """
        Validate one field value against all its rules.

        Args:
            name: Field name declared in the schema
            value: Current field value
            is_touched: Touched flag copied into the result

        Returns:
            FieldValidationResult with every failed rule, in declaration order

        Raises:
            UnknownFieldError: If the field is not in the schema
        """
        errors: List[RuleError] = []
        for definition in self.rules_for(name):
            if self._passes(name, definition, value):
                continue
            errors.append(
                RuleError(
                    rule=definition.name,
                    condition=definition.parameter,
                    message=self._message(name, definition),
                )
            )

        return FieldValidationResult(
            errors=errors, is_touched=is_touched, is_valid=len(errors) == 0
        )

    def validate_form(self, model: Mapping[str, Any]) -> FormValidationResult:
        """
        Validate every schema field.

        Args:
            model: Field name -> raw value or FieldValue. Missing fields
                are validated as empty.

        Returns:
            FormValidationResult whose is_valid is the AND of all fields
        """
        fields: Dict[str, FieldValidationResult] = {}
        for name in self._schema:
            entry = model.get(name)
            if isinstance(entry, FieldValue):
                fields[name] = self.validate_field(name, entry.value, entry.is_touched)
            else:
                fields[name] = self.validate_field(name, "" if entry is None else entry)

        return FormValidationResult(
            is_valid=all(f.is_valid for f in fields.values()), fields=fields
        )

    @staticmethod
    def _passes(field_name: str, definition: RuleDefinition, value: Any) -> bool:
        try:
            return evaluate_rule(definition, value)
        except Exception:
            logger.warning(
                "Rule '%s' raised on field '%s' and was counted as failed",
                definition.name,
                field_name,
                exc_info=True,
            )
            return False

    @staticmethod
    def _message(field_name: str, definition: RuleDefinition) -> str:
        try:
            return render_message(definition.message, definition.parameter)
        except Exception:
            logger.warning(
                "Message for rule '%s' on field '%s' raised",
                definition.name,
                field_name,
                exc_info=True,
            )
            return f"Rule '{definition.name}' failed"
