"""
Output guardrails for Prompt Form.

These guardrails check the generated field list before it is compiled.
"""

from collections import Counter
from typing import Any

from pydantic import BaseModel, Field
from agents import (
    Agent,
    GuardrailFunctionOutput,
    RunContextWrapper,
    output_guardrail,
)

from prompt_form.models.field_definitions import FieldVariant, GeneratedForm


class FieldListCheckResult(BaseModel):
    """Result of checking a generated field list."""

    is_valid: bool = Field(..., description="Whether the field list is usable")
    errors: list[str] = Field(default_factory=list, description="Blocking problems")
    warnings: list[str] = Field(default_factory=list, description="Non-blocking problems")


def check_field_list(form: GeneratedForm) -> FieldListCheckResult:
    """
    Check a generated field list.

    Empty lists and blank names are errors. Duplicate names and unknown
    variants are only warnings: the compiler handles both.
    """
    errors = []
    warnings = []

    if not form.forms:
        errors.append("Generated form has no fields")

    for index, field in enumerate(form.forms):
        if not field.name.strip():
            errors.append(f"Field at position {index} has an empty name")
        if field.kind is FieldVariant.UNKNOWN:
            warnings.append(
                f"Field '{field.name}' has unknown variant '{field.variant}', "
                "it will be validated as plain text"
            )

    counts = Counter(field.name for field in form.forms)
    for name, count in counts.items():
        if count > 1:
            warnings.append(f"Field name '{name}' is used {count} times, the last one wins")

    return FieldListCheckResult(is_valid=not errors, errors=errors, warnings=warnings)


@output_guardrail
async def field_list_guardrail(
    ctx: RunContextWrapper[Any],
    agent: Agent[Any],
    output: GeneratedForm,
) -> GuardrailFunctionOutput:
    """Trip when the generated field list cannot be rendered."""
    result = check_field_list(output)
    return GuardrailFunctionOutput(
        output_info=result.model_dump(),
        tripwire_triggered=not result.is_valid,
    )
