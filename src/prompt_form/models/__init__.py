"""
Data models for Prompt Form.

This module contains Pydantic models for:
- Field descriptors (the generated form definition)
- Validation results
"""

from prompt_form.models.field_definitions import (
    FieldDescriptor,
    FieldVariant,
    GeneratedForm,
    UploadedFile,
)
from prompt_form.models.validation_result import (
    ErrorKind,
    FieldValidationError,
    ValidationResult,
)

__all__ = [
    # Field descriptors
    "FieldDescriptor",
    "FieldVariant",
    "GeneratedForm",
    "UploadedFile",
    # Validation
    "ErrorKind",
    "FieldValidationError",
    "ValidationResult",
]
