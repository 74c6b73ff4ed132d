"""
Required/optional composition over a base rule.

Both wrappers look at emptiness first. A value is empty when the key is
absent from the record, or the value is None or the empty string. Base
constraints never see an empty value.
"""

from dataclasses import dataclass
from typing import Any, Protocol

from prompt_form.models.validation_result import ErrorKind
from prompt_form.validation.constraints import Outcome
from prompt_form.validation.rules import BaseRule


class _Absent:
    """Marker for a key missing from the submitted record."""

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Any = _Absent()


def is_empty(value: Any) -> bool:
    return value is ABSENT or value is None or (isinstance(value, str) and value == "")


class FieldValidator(Protocol):
    """Interface shared by every compiled per-field validator."""

    name: str
    label: str

    def validate(self, value: Any = ABSENT) -> Outcome: ...

    def initial_value(self) -> Any: ...


@dataclass(frozen=True)
class RequiredField:
    """Empty values fail with "<label> is required"; others go to the base rule."""

    name: str
    label: str
    base: BaseRule

    def validate(self, value: Any = ABSENT) -> Outcome:
        if is_empty(value):
            return Outcome.failed(ErrorKind.REQUIRED_FIELD_MISSING, f"{self.label} is required")
        return self.base.validate(value)

    def initial_value(self) -> Any:
        return self.base.default if self.base.has_default else None


@dataclass(frozen=True)
class OptionalField:
    """Empty values pass untouched (or take the rule default); others go to the base rule."""

    name: str
    label: str
    base: BaseRule

    def validate(self, value: Any = ABSENT) -> Outcome:
        if is_empty(value):
            if self.base.has_default:
                return Outcome(value=self.base.default)
            return Outcome(present=False)
        return self.base.validate(value)

    def initial_value(self) -> Any:
        return self.base.default if self.base.has_default else None


def compose(name: str, label: str, base: BaseRule, required: bool) -> FieldValidator:
    """Wrap a base rule according to the field's ``required`` flag."""
    if required:
        return RequiredField(name=name, label=label, base=base)
    return OptionalField(name=name, label=label, base=base)
