"""Shared fixtures for Prompt Form tests."""

from pathlib import Path

import pytest

from prompt_form.config import get_config, update_config
from prompt_form.models.field_definitions import FieldDescriptor


SAMPLE_FORM_PATH = Path(__file__).parent.parent / "data" / "sample_form.json"


@pytest.fixture
def make_field():
    """Factory for field descriptors with sensible defaults."""

    def _make(variant: str = "Input", name: str = "field", label: str = "Field", **kwargs) -> FieldDescriptor:
        return FieldDescriptor(name=name, label=label, variant=variant, **kwargs)

    return _make


@pytest.fixture
def sample_form_path() -> Path:
    return SAMPLE_FORM_PATH


@pytest.fixture
def restore_config():
    """Restore configuration values changed by a test."""
    config = get_config()
    saved = dict(vars(config))
    yield config
    update_config(**saved)
