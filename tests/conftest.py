"""Pytest configuration and fixtures."""

import json
from pathlib import Path
from typing import Dict

import pytest

from formulation import Form


@pytest.fixture
def name_schema() -> Dict:
    """Schema used by most form scenarios."""
    return {
        "firstname": {"required": True},
        "lastname": {"minLength": 2},
    }


@pytest.fixture
def contact_schema() -> Dict:
    """Schema of the demo contact form."""
    return {
        "firstname": {"minLength": 2},
        "lastname": {"required": True},
        "phone": {"phoneNumbers": True},
    }


@pytest.fixture
def contact_values() -> Dict:
    return {
        "firstname": "Foo",
        "lastname": "Bar",
        "phone": "0123456789",
    }


@pytest.fixture
def form(name_schema) -> Form:
    """Form initialized with an invalid model."""
    f = Form(schema=name_schema)
    f.set_initial_model({"firstname": "", "lastname": "A"})
    return f


@pytest.fixture
def config_file(tmp_path, contact_schema) -> Path:
    """Form config written as JSON."""
    path = tmp_path / "form.json"
    path.write_text(
        json.dumps(
            {
                "schema": contact_schema,
                "messages": {"required": "Please fill in this field"},
            }
        )
    )
    return path


@pytest.fixture(autouse=True)
def clean_formulation_env(monkeypatch):
    """Keep settings from the host environment out of tests."""
    monkeypatch.delenv("FORMULATION_VALIDATE_ON", raising=False)
    monkeypatch.delenv("FORMULATION_LOG_LEVEL", raising=False)
