"""Stateful form handle, model store and field bindings."""

from .binding import FieldBinding, with_validation
from .form import Form
from .model import EMPTY_VALUE, ModelStore

__all__ = ["EMPTY_VALUE", "FieldBinding", "Form", "ModelStore", "with_validation"]
