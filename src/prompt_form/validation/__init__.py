"""
Validation schema compiler.

Compiles field descriptors into per-field validators:
- Variant rule table (base type, constraints, transforms)
- Required/optional composition
- Aggregate validator over whole submission records
"""

from prompt_form.validation.aggregate import AggregateValidator
from prompt_form.validation.compiler import (
    CompiledForm,
    compile_field,
    compile_form,
    compile_schema,
)
from prompt_form.validation.composition import OptionalField, RequiredField
from prompt_form.validation.rules import VARIANT_RULES, BaseRule, build_rule

__all__ = [
    "AggregateValidator",
    "BaseRule",
    "CompiledForm",
    "OptionalField",
    "RequiredField",
    "VARIANT_RULES",
    "build_rule",
    "compile_field",
    "compile_form",
    "compile_schema",
]
