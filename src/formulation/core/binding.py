"""Per-field bindings and the with_validation factory.

A FieldBinding gives a presentational input everything it needs for one
field: the current value, a setter, change/blur notifiers and the
current validation result. The change/blur trigger policy is applied
here, not in the engine.
"""

import functools
import logging
from typing import Any, Callable, List, Mapping, Optional, TypeVar, Union, overload

from ..config import FormConfig, ValidateOn
from ..schemas.base import FieldValidationResult
from .form import Form
from .model import EMPTY_VALUE

logger = logging.getLogger(__name__)

R = TypeVar("R")


class FieldBinding:
    """Wires one field of a Form to an input."""

    def __init__(self, form: Form, name: str):
        self.form = form
        self.name = name

    @property
    def value(self) -> Any:
        current = self.form.model.get(self.name)
        return current.value if current is not None else EMPTY_VALUE

    @property
    def result(self) -> FieldValidationResult:
        return self.form.get_schema(self.name)

    @property
    def errors(self) -> List[str]:
        """Messages to show; empty until the field is touched."""
        result = self.result
        if not result.is_touched:
            return []
        return result.messages

    def set_value(self, value: Any) -> None:
        self.form.set_property(self.name, value)

    def on_change(self, value: Any) -> FieldValidationResult:
        self.set_value(value)
        if self.form.validate_on is ValidateOn.CHANGE:
            return self.form.validate_field(self.name)
        return self.result

    def on_blur(self) -> FieldValidationResult:
        if self.form.validate_on is ValidateOn.BLUR:
            return self.form.validate_field(self.name)
        return self.result

    def __repr__(self) -> str:
        return f"FieldBinding(name={self.name!r}, value={self.value!r})"


@overload
def with_validation(
    config: Union[FormConfig, Mapping[str, Any], None] = None,
) -> Form: ...


@overload
def with_validation(
    config: Union[FormConfig, Mapping[str, Any], None],
    component: Callable[..., R],
) -> Callable[..., R]: ...


def with_validation(
    config: Union[FormConfig, Mapping[str, Any], None] = None,
    component: Optional[Callable[..., R]] = None,
):
    """
    Create a Form for a configuration, optionally composed with a component.

    Without a component, returns the Form itself. With a component,
    returns a callable that owns one Form and calls the component with
    ``form=`` set to it, plus any arguments passed through.

    Args:
        config: FormConfig or dict with schema/messages/validateOn
        component: Optional presentational callable

    Returns:
        Form, or the composed callable
    """
    form = Form(config)
    if component is None:
        return form

    @functools.wraps(component)
    def composed(*args, **kwargs):
        return component(*args, form=form, **kwargs)

    composed.form = form
    logger.debug(
        "Composed %s with a form of %d fields", component, len(form.engine.field_names)
    )
    return composed
