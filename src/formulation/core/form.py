"""
Form: the stateful validation handle owned by one form instance.

Combines a ModelStore, a normalized schema and the current field
results, and republishes derived state after every operation.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from ..config import FormConfig, ValidateOn
from ..errors import UnknownFieldError
from ..schemas.base import (
    FieldValidationResult,
    FieldValue,
    FormState,
    FormValidationResult,
)
from ..validators.engine import ValidationEngine
from .model import ModelStore

logger = logging.getLogger(__name__)

Listener = Callable[[FormState], None]


class Form:
    """
    Main form validation class.

    Usage:
        form = Form(FormConfig(schema={"firstname": {"required": True}}))
        form.set_initial_model({"firstname": ""})
        form.set_property("firstname", "Foo")
        result = form.validate_form()

    Every public operation runs synchronously and notifies subscribers
    with the new FormState before returning.
    """

    def __init__(
        self,
        config: Union[FormConfig, Mapping[str, Any], None] = None,
        *,
        schema: Optional[Mapping[str, Any]] = None,
        messages: Optional[Mapping[str, Any]] = None,
        validate_on: Union[ValidateOn, str, None] = None,
    ):
        """
        Initialize a Form.

        Args:
            config: FormConfig or a dict with schema/messages/validateOn
            schema: Raw per-field rule config (overrides config.schema)
            messages: Rule name -> message overrides (overrides config.messages)
            validate_on: "change" or "blur" (overrides config.validate_on)

        Raises:
            InvalidRuleConfigError: If the schema cannot be normalized
            ConfigError: If validate_on is not a known trigger
        """
        config = FormConfig.coerce(config)
        overrides: Dict[str, Any] = {}
        if schema is not None:
            overrides["schema_"] = dict(schema)
        if messages is not None:
            overrides["messages"] = dict(messages)
        if validate_on is not None:
            overrides["validate_on"] = ValidateOn.parse(validate_on)
        if overrides:
            config = config.model_copy(update=overrides)

        self.config = config
        self.engine = ValidationEngine.from_config(config.schema_, config.messages)
        self._store = ModelStore(self.engine.field_names)
        self._results: Dict[str, FieldValidationResult] = {}
        self._listeners: List[Listener] = []
        self._reset_results()

    @property
    def validate_on(self) -> ValidateOn:
        return self.config.validate_on

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def schema(self) -> FormValidationResult:
        fields = {name: self._field_result(name) for name in self._results}
        return FormValidationResult(
            is_valid=FormValidationResult.combine(fields), fields=fields
        )

    @property
    def model(self) -> Dict[str, FieldValue]:
        return self._store.to_dict()

    @property
    def is_touched(self) -> bool:
        return self._store.is_touched

    @property
    def is_button_disabled(self) -> bool:
        return self.schema.is_valid is not True

    @property
    def state(self) -> FormState:
        schema = self.schema
        return FormState(
            schema_=schema,
            model=self.model,
            is_touched=self.is_touched,
            is_button_disabled=schema.is_valid is not True,
        )

    def get_schema(self, name: str) -> FieldValidationResult:
        """
        Current validation result of one field.

        Fields present only in the model have no rules and report
        ``is_valid=None``.

        Raises:
            UnknownFieldError: If the field is in neither schema nor model
        """
        if name in self._results:
            return self._field_result(name)
        return FieldValidationResult(is_touched=self._store.get(name).is_touched)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback receiving the FormState after each change.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Model operations
    # ------------------------------------------------------------------

    def set_initial_model(self, values: Optional[Mapping[str, Any]] = None) -> None:
        """Seed the model, remember it for reset_form, and validate it."""
        self._store.initialize(values)
        self._validate_all()
        self._publish("set_initial_model")

    def set_model(self, values: Mapping[str, Any]) -> None:
        """Merge values into the model without changing the reset snapshot."""
        self._store.merge(values)
        self._publish("set_model")

    def set_property(self, name: str, value: Any) -> None:
        """Set one field value and mark it touched."""
        self._store.set_property(name, value)
        self._publish("set_property")

    def clear_form(self) -> None:
        """Empty every field and drop validation results."""
        self._store.clear()
        self._reset_results()
        self._publish("clear_form")

    def reset_form(self) -> None:
        """Restore the initial model and drop validation results."""
        self._store.reset()
        self._reset_results()
        self._publish("reset_form")

    def set_touched(self) -> None:
        self._store.set_touched(True)
        self._publish("set_touched")

    def set_untouched(self) -> None:
        self._store.set_touched(False)
        self._publish("set_untouched")

    # ------------------------------------------------------------------
    # Validation operations
    # ------------------------------------------------------------------

    def validate_field(self, name: str) -> FieldValidationResult:
        """
        Validate one field against its current value.

        Fields outside the schema have no rules and are never validated;
        they report ``is_valid=None``, as get_schema does.

        Raises:
            UnknownFieldError: If the field is in neither schema nor model
        """
        current = self._store.get(name)
        if self.engine.has_field(name):
            result = self.engine.validate_field(name, current.value, current.is_touched)
            self._results[name] = result
        else:
            result = FieldValidationResult(is_touched=current.is_touched)
        self._publish("validate_field")
        return result

    def validate_form(self) -> FormValidationResult:
        """Validate every schema field and return the form result."""
        self._validate_all()
        self._publish("validate_form")
        return self.schema

    def reset_validation(self) -> None:
        """Drop all validation results and touched flags; values are kept."""
        self._store.set_touched(False)
        self._reset_results()
        self._publish("reset_validation")

    def bind(self, name: str):
        """Field binding for one field name."""
        from .binding import FieldBinding

        return FieldBinding(self, name)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _field_result(self, name: str) -> FieldValidationResult:
        return self._results[name].model_copy(
            update={"is_touched": self._field_touched(name)}, deep=True
        )

    def _field_touched(self, name: str) -> bool:
        try:
            return self._store.get(name).is_touched
        except UnknownFieldError:
            return False

    def _validate_all(self) -> None:
        result = self.engine.validate_form(self._store.to_dict())
        self._results = dict(result.fields)

    def _reset_results(self) -> None:
        self._results = {
            name: FieldValidationResult() for name in self.engine.field_names
        }

    def _publish(self, operation: str) -> None:
        if not self._listeners:
            logger.debug("%s: no listeners", operation)
            return
        state = self.state
        logger.debug(
            "%s: isValid=%s isTouched=%s",
            operation,
            state.schema_.is_valid,
            state.is_touched,
        )
        for listener in list(self._listeners):
            listener(state)
