"""Test the ModelStore."""

import pytest

from formulation import UnknownFieldError
from formulation.core.model import EMPTY_VALUE, ModelStore
from formulation.schemas.base import FieldValue


class TestInitialization:
    """Test seeding the model."""

    def test_empty_before_initialization(self):
        """Reading the model before initialization returns an empty mapping."""
        store = ModelStore(["firstname"])
        assert store.to_dict() == {}
        assert store.initialized is False
        assert store.is_touched is False

    def test_declared_fields_default_to_empty(self):
        store = ModelStore(["firstname", "lastname"])
        store.initialize({"firstname": "Foo"})

        assert store.value("firstname") == "Foo"
        assert store.value("lastname") == EMPTY_VALUE
        assert all(not f.is_touched for f in store.to_dict().values())

    def test_extra_fields_are_kept(self):
        store = ModelStore(["firstname"])
        store.initialize({"nickname": "F"})
        assert store.value("nickname") == "F"
        assert store.field_names == ["firstname", "nickname"]

    def test_reinitialize_replaces_snapshot(self):
        store = ModelStore(["firstname"])
        store.initialize({"firstname": "Foo"})
        store.initialize({"firstname": "Bar"})
        assert store.snapshot == {"firstname": "Bar"}

    def test_snapshot_is_not_aliased(self):
        """Mutating the seeded value does not change the snapshot."""
        tags = ["a"]
        store = ModelStore(["tags"])
        store.initialize({"tags": tags})
        tags.append("b")
        store.value("tags").append("c")
        assert store.snapshot == {"tags": ["a"]}


class TestMutations:
    """Test value updates."""

    def test_set_property_marks_touched(self):
        store = ModelStore(["firstname"])
        store.initialize()
        store.set_property("firstname", "Foo")

        field = store.get("firstname")
        assert field.value == "Foo"
        assert field.is_touched is True
        assert store.is_touched is True

    def test_set_property_before_initialization_creates_field(self):
        store = ModelStore(["firstname"])
        store.set_property("firstname", "Foo")
        assert store.to_dict() == {"firstname": FieldValue(value="Foo", is_touched=True)}

    def test_set_property_unknown_field_raises(self):
        store = ModelStore(["firstname"])
        store.initialize()
        with pytest.raises(UnknownFieldError, match="age"):
            store.set_property("age", 3)

    def test_merge_plain_values_marks_touched(self):
        store = ModelStore(["firstname", "lastname"])
        store.initialize()
        store.merge({"firstname": "Foo"})

        assert store.get("firstname").is_touched is True
        assert store.get("lastname").is_touched is False

    def test_merge_field_values_keeps_flags(self):
        store = ModelStore(["firstname"])
        store.merge({"firstname": {"value": "Foo", "isTouched": False}})
        assert store.get("firstname") == FieldValue(value="Foo", is_touched=False)

    def test_merge_does_not_change_snapshot(self):
        store = ModelStore(["firstname"])
        store.initialize({"firstname": "Foo"})
        store.merge({"firstname": "Bar"})
        assert store.snapshot == {"firstname": "Foo"}

    def test_merge_is_idempotent(self):
        store = ModelStore(["firstname"])
        store.initialize()
        store.merge({"firstname": "Foo"})
        first = store.to_dict()
        store.merge({"firstname": "Foo"})
        assert store.to_dict() == first

    def test_to_dict_returns_copy(self):
        store = ModelStore(["firstname"])
        store.initialize({"firstname": "Foo"})
        store.to_dict()["firstname"].value = "Changed"
        assert store.value("firstname") == "Foo"


class TestResets:
    """Test clear, reset and touched toggles."""

    def test_clear_empties_values(self):
        store = ModelStore(["firstname", "lastname"])
        store.initialize({"firstname": "Foo", "lastname": "Bar"})
        store.set_property("firstname", "Baz")
        store.clear()

        assert store.values() == {"firstname": EMPTY_VALUE, "lastname": EMPTY_VALUE}
        assert store.is_touched is False
        assert store.snapshot == {"firstname": "Foo", "lastname": "Bar"}

    def test_reset_restores_snapshot(self):
        store = ModelStore(["firstname"])
        store.initialize({"firstname": "Foo"})
        store.set_property("firstname", "Bar")
        store.reset()

        assert store.get("firstname") == FieldValue(value="Foo", is_touched=False)

    def test_set_touched_and_untouched(self):
        store = ModelStore(["firstname", "lastname"])
        store.initialize({"firstname": "Foo"})

        store.set_touched(True)
        assert all(f.is_touched for f in store.to_dict().values())
        assert store.value("firstname") == "Foo"

        store.set_touched(False)
        assert store.is_touched is False
