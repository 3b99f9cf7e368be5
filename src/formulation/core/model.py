"""In-memory store of field values and touched flags."""

import copy
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..errors import UnknownFieldError
from ..schemas.base import FieldValue

logger = logging.getLogger(__name__)

EMPTY_VALUE = ""


class ModelStore:
    """
    Holds the current value and touched flag of every field.

    The store remembers the values passed to ``set_initial_model`` so
    that ``reset`` can restore them later. Reads before initialization
    return an empty mapping.
    """

    def __init__(self, field_names: Optional[Iterable[str]] = None):
        self._declared = list(field_names or [])
        self._fields: Dict[str, FieldValue] = {}
        self._snapshot: Dict[str, Any] = {}
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def field_names(self) -> List[str]:
        names = list(self._declared)
        names.extend(n for n in self._fields if n not in self._declared)
        return names

    @property
    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self._snapshot)

    @property
    def is_touched(self) -> bool:
        return any(f.is_touched for f in self._fields.values())

    def get(self, name: str) -> FieldValue:
        if name in self._fields:
            return self._fields[name]
        if name in self._declared:
            return FieldValue(value=EMPTY_VALUE)
        raise UnknownFieldError(name, self.field_names)

    def value(self, name: str) -> Any:
        return self.get(name).value

    def to_dict(self) -> Dict[str, FieldValue]:
        """Copy of the model; mutating it does not affect the store."""
        return {name: f.model_copy(deep=True) for name, f in self._fields.items()}

    def values(self) -> Dict[str, Any]:
        return {name: f.value for name, f in self._fields.items()}

    def initialize(self, values: Optional[Mapping[str, Any]] = None) -> None:
        """
        Seed the model and remember it as the reset snapshot.

        Declared fields that are not in ``values`` start empty.
        """
        values = dict(values or {})
        seeded: Dict[str, Any] = {name: EMPTY_VALUE for name in self._declared}
        seeded.update(values)

        self._snapshot = copy.deepcopy(seeded)
        self._fields = {
            name: FieldValue(value=copy.deepcopy(value), is_touched=False)
            for name, value in seeded.items()
        }
        self._initialized = True
        logger.debug("Model initialized with fields: %s", list(self._fields))

    def set_property(self, name: str, value: Any) -> None:
        """Set one value and mark the field touched. Unknown names raise."""
        if name not in self._fields and name not in self._declared:
            raise UnknownFieldError(name, self.field_names)
        self._fields[name] = FieldValue(value=value, is_touched=True)

    def merge(self, values: Mapping[str, Any]) -> None:
        """
        Merge values into the model.

        Entries may be plain values, which mark the field touched, or
        FieldValue / ``{"value": ..., "isTouched": ...}`` mappings, which
        are taken as they are.
        """
        for name, entry in values.items():
            self._fields[name] = _to_field_value(entry)
        self._initialized = True

    def clear(self) -> None:
        """Empty every value and clear touched flags."""
        for name in self.field_names:
            self._fields[name] = FieldValue(value=EMPTY_VALUE, is_touched=False)

    def reset(self) -> None:
        """Restore the snapshot values and clear touched flags."""
        self._fields = {
            name: FieldValue(value=copy.deepcopy(value), is_touched=False)
            for name, value in self._snapshot.items()
        }

    def set_touched(self, touched: bool = True) -> None:
        for field in self._fields.values():
            field.is_touched = touched


def _to_field_value(entry: Any) -> FieldValue:
    if isinstance(entry, FieldValue):
        return entry.model_copy(deep=True)
    if isinstance(entry, Mapping) and "value" in entry and set(entry) <= {
        "value",
        "isTouched",
        "is_touched",
    }:
        return FieldValue.model_validate(entry)
    return FieldValue(value=entry, is_touched=True)
