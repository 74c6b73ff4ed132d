"""
Field descriptor models for prompt-driven form generation.

A form is described by an ordered list of field descriptors. Each
descriptor carries a variant tag that selects both the widget used to
render it and the validation rules applied to its value.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class FieldVariant(str, Enum):
    """
    Closed set of field variants.

    Tags outside the set resolve to UNKNOWN, which validates as a plain
    unconstrained string.
    """

    CHECKBOX = "Checkbox"
    COMBOBOX = "Combobox"
    DATE_PICKER = "Date Picker"
    DATETIME_PICKER = "Datetime Picker"
    FILE_INPUT = "File Input"
    INPUT = "Input"
    INPUT_OTP = "Input OTP"
    LOCATION_INPUT = "Location Input"
    MULTI_SELECT = "Multi Select"
    PASSWORD = "Password"
    PHONE = "Phone"
    SELECT = "Select"
    SIGNATURE_INPUT = "Signature Input"
    SLIDER = "Slider"
    SMART_DATETIME_INPUT = "Smart Datetime Input"
    SWITCH = "Switch"
    TAGS_INPUT = "Tags Input"
    TEXTAREA = "Textarea"
    UNKNOWN = "Unknown"

    @classmethod
    def from_tag(cls, tag: str) -> "FieldVariant":
        """Resolve a raw variant tag, falling back to UNKNOWN."""
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN

    @classmethod
    def known_tags(cls) -> list[str]:
        return [v.value for v in cls if v is not cls.UNKNOWN]


class FieldDescriptor(BaseModel):
    """
    One entry of a generated form.

    The variant is kept as the raw tag so that any string coming from the
    generation service is accepted; use ``kind`` for the resolved variant.
    """

    name: str = Field(..., description="Key of the field in the submitted record")
    label: str = Field(..., description="Human-readable label")
    variant: str = Field(
        default=FieldVariant.INPUT.value,
        description=f"Widget variant, one of: {', '.join(FieldVariant.known_tags())}",
    )
    description: str | None = Field(default=None, description="Help text")
    placeholder: str | None = Field(default=None, description="Placeholder text")
    required: bool = Field(default=False, description="Whether a value must be provided")
    checked: bool = Field(default=True, description="Default value for Checkbox and Switch")
    disabled: bool = Field(default=False, description="Render the widget as disabled")
    value: str | None = Field(default=None, description="Initial display value")
    row_index: int = Field(default=0, ge=0, alias="rowIndex", description="Display order")

    # Slider only
    min: float | None = Field(default=None, description="Slider minimum (default 0)")
    max: float | None = Field(default=None, description="Slider maximum (default 100)")
    step: float | None = Field(default=None, description="Slider step (default 1)")

    # Display only
    locale: str | None = Field(default=None)
    hour12: bool | None = Field(default=None)
    class_name: str | None = Field(default=None, alias="className")

    model_config = {"populate_by_name": True}

    @property
    def kind(self) -> FieldVariant:
        """Resolved variant of this field."""
        return FieldVariant.from_tag(self.variant)


class GeneratedForm(BaseModel):
    """Field list as returned by the form generation service."""

    forms: list[FieldDescriptor] = Field(
        ...,
        description="Ordered list of form fields",
    )

    def sorted_fields(self) -> list[FieldDescriptor]:
        """Fields in presentation order (stable on equal rowIndex)."""
        return sorted(self.forms, key=lambda f: f.row_index)

    @classmethod
    def from_payload(cls, payload: Any) -> "GeneratedForm":
        """Build from ``{"forms": [...]}`` or a bare list of descriptors."""
        if isinstance(payload, list):
            payload = {"forms": payload}
        return cls.model_validate(payload)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "GeneratedForm":
        """Load a static field list from a JSON file."""
        with open(path, encoding="utf-8") as f:
            return cls.from_payload(json.load(f))


class UploadedFile(BaseModel):
    """File handle as submitted by the browser (metadata only)."""

    name: str = Field(..., description="Original file name")
    size: int = Field(..., ge=0, description="Size in bytes")
    content_type: str | None = Field(default=None, alias="type")

    model_config = {"populate_by_name": True}
