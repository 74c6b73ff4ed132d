"""
Aggregate validator for a whole form.

Holds one compiled validator per field name and checks complete
submission records. Every field is validated independently, so a single
run reports every error the form currently has.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from prompt_form.models.validation_result import FieldValidationError, ValidationResult
from prompt_form.validation.composition import ABSENT, FieldValidator


class AggregateValidator:
    """
    Immutable collection of per-field validators keyed by field name.

    Usage:
        validator = compile_schema(fields)
        result = validator.validate({"email": "a@b.co"})
        if not result.ok:
            print(result.to_error_dict())
    """

    def __init__(self, validators: Mapping[str, FieldValidator]):
        self._validators = MappingProxyType(dict(validators))

    @property
    def validators(self) -> Mapping[str, FieldValidator]:
        return self._validators

    def __len__(self) -> int:
        return len(self._validators)

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __iter__(self) -> Iterator[str]:
        return iter(self._validators)

    def validate(self, record: Mapping[str, Any]) -> ValidationResult:
        """
        Validate a submission record.

        Keys without a validator are dropped from the coerced values.

        Args:
            record: Mapping from field name to raw submitted value

        Returns:
            ValidationResult with coerced values on success, or every
            per-field error otherwise
        """
        values: dict[str, Any] = {}
        errors: list[FieldValidationError] = []

        for name, validator in self._validators.items():
            outcome = validator.validate(record.get(name, ABSENT))
            for issue in outcome.issues:
                errors.append(
                    FieldValidationError(
                        field_name=name,
                        error_type=issue.kind,
                        message=issue.message,
                    )
                )
            if outcome.ok and outcome.present:
                values[name] = outcome.value

        if errors:
            return ValidationResult(ok=False, errors=errors)
        return ValidationResult(ok=True, values=values)

    def validate_field(self, name: str, value: Any = ABSENT) -> list[str]:
        """Messages for a single field, for live validation while editing."""
        validator = self._validators.get(name)
        if validator is None:
            raise KeyError(f"Unknown field: {name}")
        return [issue.message for issue in validator.validate(value).issues]

    def defaults(self) -> dict[str, Any]:
        """Initial widget values for fields whose rule carries a default."""
        result = {}
        for name, validator in self._validators.items():
            initial = validator.initial_value()
            if initial is not None:
                result[name] = initial
        return result
