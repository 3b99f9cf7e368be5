"""Result and state models for Formulation.

All models serialize to camelCase (``isValid``, ``isTouched``) with
``model_dump(by_alias=True)`` and accept either spelling on input.
"""

import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldValue(_CamelModel):
    """Current value and touched flag of one field."""

    value: Any = ""
    is_touched: bool = False


class RuleError(_CamelModel):
    """One failed rule for a field."""

    rule: str
    condition: Any = None
    message: str = ""

    @field_serializer("condition")
    def _serialize_condition(self, condition: Any) -> Any:
        # Compiled patterns are reported by their source text
        if isinstance(condition, re.Pattern):
            return condition.pattern
        return condition


class FieldValidationResult(_CamelModel):
    """
    Validation outcome for a single field.

    ``is_valid`` is None until the field has been validated since the
    last reset.
    """

    errors: List[RuleError] = Field(default_factory=list)
    is_touched: bool = False
    is_valid: Optional[bool] = None

    @property
    def messages(self) -> List[str]:
        return [e.message for e in self.errors]


class FormValidationResult(_CamelModel):
    """Validation outcome for a whole form."""

    is_valid: Optional[bool] = None
    fields: Dict[str, FieldValidationResult] = Field(default_factory=dict)

    @staticmethod
    def combine(fields: Dict[str, FieldValidationResult]) -> Optional[bool]:
        """
        Form-level validity from field results.

        True when every field is valid, False when any field is invalid,
        None otherwise (some field not validated yet).
        """
        states = [f.is_valid for f in fields.values()]
        if any(s is False for s in states):
            return False
        if all(s is True for s in states):
            return True
        return None


class FormState(_CamelModel):
    """Derived state published to form consumers after every change."""

    schema_: FormValidationResult = Field(
        default_factory=FormValidationResult, alias="schema"
    )
    model: Dict[str, FieldValue] = Field(default_factory=dict)
    is_touched: bool = False
    is_button_disabled: bool = True
