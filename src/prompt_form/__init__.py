"""
Prompt Form: validated forms from natural-language prompts.

A prompt is turned into an ordered list of field descriptors by a
model; the descriptors are compiled into per-field validators so that
submissions can be checked and coerced without another model call.

Simple Usage:
    from prompt_form import generate_form

    form = await generate_form("create a form with name, email, and age")

    result = form.validator.validate({"name": "Ada", "age": 36})
    if not result.ok:
        print(result.to_error_dict())

Static field lists:
    from prompt_form import compile_schema

    validator = compile_schema([
        {"name": "password", "label": "Password", "variant": "Password", "required": True},
    ])
    validator.validate({"password": "Abc12345!"}).ok  # True

Tracing:
    from prompt_form.tracing import setup_tracing

    setup_tracing(console=True, verbose=True)
"""

from prompt_form.orchestrator import (
    FormGenerationOrchestrator,
    generate_form,
    load_form,
)
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
from prompt_form.validation import (
    AggregateValidator,
    CompiledForm,
    compile_field,
    compile_form,
    compile_schema,
)
from prompt_form.tracing import (
    setup_tracing,
    disable_tracing,
    enable_tracing,
)
from prompt_form.guardrails import (
    prompt_safety_guardrail,
    field_list_guardrail,
)

__all__ = [
    # Main interface
    "FormGenerationOrchestrator",
    "generate_form",
    "load_form",
    # Field descriptors
    "FieldDescriptor",
    "FieldVariant",
    "GeneratedForm",
    "UploadedFile",
    # Compiler
    "AggregateValidator",
    "CompiledForm",
    "compile_field",
    "compile_form",
    "compile_schema",
    # Validation results
    "ErrorKind",
    "ValidationResult",
    "FieldValidationError",
    # Tracing
    "setup_tracing",
    "disable_tracing",
    "enable_tracing",
    # Guardrails
    "prompt_safety_guardrail",
    "field_list_guardrail",
]

__version__ = "0.1.0"
