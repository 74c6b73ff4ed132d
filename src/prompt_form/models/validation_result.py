"""
Validation result models for submitted form records.

These models are the output of an AggregateValidator run.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """Kinds of per-field validation failures."""

    CONSTRAINT_VIOLATION = "constraint_violation"
    REQUIRED_FIELD_MISSING = "required_field_missing"
    TYPE_MISMATCH = "type_mismatch"


class FieldValidationError(BaseModel):
    """Validation error for a specific field."""

    field_name: str = Field(..., description="Name of the field with error")
    error_type: ErrorKind = Field(..., description="Kind of validation error")
    message: str = Field(..., description="Human-readable error message")


class ValidationResult(BaseModel):
    """Result of validating one submission record."""

    ok: bool = Field(..., description="Whether every field passed")
    errors: list[FieldValidationError] = Field(
        default_factory=list, description="All validation errors, in field order"
    )
    values: dict[str, Any] | None = Field(
        default=None, description="Coerced values, only set when ok"
    )

    @property
    def error_count(self) -> int:
        """Get the number of validation errors."""
        return len(self.errors)

    def get_field_errors(self, field_name: str) -> list[FieldValidationError]:
        """Get all errors for a specific field."""
        return [e for e in self.errors if e.field_name == field_name]

    def to_error_dict(self) -> dict[str, list[str]]:
        """Convert errors to a dict mapping field names to error messages."""
        result: dict[str, list[str]] = {}
        for error in self.errors:
            result.setdefault(error.field_name, []).append(error.message)
        return result

    def to_response(self) -> dict[str, Any]:
        """Plain dict for JSON responses: values on success, errors otherwise."""
        if self.ok:
            return {"ok": True, "values": self.values}
        return {"ok": False, "errors": self.to_error_dict()}
