"""
Field-to-validation-schema compiler.

Turns an ordered list of field descriptors into an AggregateValidator.
Compilation is a pure fold: the same descriptors always produce an
equivalent validator, and no descriptor list makes it fail.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any

from prompt_form.models.field_definitions import FieldDescriptor, FieldVariant, GeneratedForm
from prompt_form.validation import constants as c
from prompt_form.validation.aggregate import AggregateValidator
from prompt_form.validation.composition import FieldValidator, compose
from prompt_form.validation.rules import build_rule

logger = logging.getLogger("prompt-form.compiler")

FieldLike = FieldDescriptor | Mapping[str, Any]


def _as_descriptor(field: FieldLike) -> FieldDescriptor:
    if isinstance(field, FieldDescriptor):
        return field
    return FieldDescriptor.model_validate(field)


def compile_field(field: FieldLike) -> FieldValidator:
    """Compile a single descriptor into its composed validator."""
    descriptor = _as_descriptor(field)
    if descriptor.kind is FieldVariant.UNKNOWN:
        logger.debug(
            f"Field '{descriptor.name}' has unrecognized variant "
            f"'{descriptor.variant}', using generic string rule"
        )
    return compose(
        name=descriptor.name,
        label=descriptor.label,
        base=build_rule(descriptor),
        required=descriptor.required,
    )


def _register(
    compiled: Mapping[str, FieldValidator],
    field: FieldLike,
) -> dict[str, FieldValidator]:
    validator = compile_field(field)
    if validator.name in compiled:
        logger.warning(f"Duplicate field name '{validator.name}', last definition wins")
    return {**compiled, validator.name: validator}


def compile_schema(fields: Iterable[FieldLike]) -> AggregateValidator:
    """
    Compile field descriptors into an aggregate validator.

    Args:
        fields: Field descriptors, or dicts in the descriptor's JSON shape

    Returns:
        AggregateValidator with one entry per distinct field name.
        Duplicate names keep the last descriptor.

    Raises:
        pydantic.ValidationError: If a dict is not a well-formed descriptor
    """
    return AggregateValidator(reduce(_register, fields, {}))


@dataclass(frozen=True)
class CompiledForm:
    """Field list in display order together with its validator."""

    form_id: str
    fields: tuple[FieldDescriptor, ...]
    validator: AggregateValidator

    def to_ui_schema(self) -> dict[str, Any]:
        """Export widget hints per field for the renderer."""
        ui_schema: dict[str, Any] = {}
        for order, field in enumerate(self.fields):
            field_ui: dict[str, Any] = {
                "ui:widget": c.VARIANT_WIDGETS.get(field.variant, c.DEFAULT_WIDGET),
                "ui:order": order,
            }
            if field.placeholder:
                field_ui["ui:placeholder"] = field.placeholder
            if field.description:
                field_ui["ui:help"] = field.description
            if field.disabled:
                field_ui["ui:disabled"] = True
            if field.kind is FieldVariant.COMBOBOX:
                field_ui["ui:options"] = c.LANGUAGES
            ui_schema[field.name] = field_ui
        return ui_schema

    def to_form_config(self) -> dict[str, Any]:
        """Export complete form configuration for the browser."""
        return {
            "formId": self.form_id,
            "fields": [f.model_dump(by_alias=True, exclude_none=True) for f in self.fields],
            "uiSchema": self.to_ui_schema(),
            "defaults": self.validator.defaults(),
        }


def compile_form(form: GeneratedForm, form_id: str = "generated_form") -> CompiledForm:
    """Sort a generated form for display and compile its validator."""
    return CompiledForm(
        form_id=form_id,
        fields=tuple(form.sorted_fields()),
        validator=compile_schema(form.forms),
    )
