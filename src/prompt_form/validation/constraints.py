"""
Constraint kinds and per-field outcomes.

A constraint inspects an already-coerced value and returns an error
message, or None when the value satisfies it. Every constraint kind is a
frozen dataclass, so compiled rules can be shared freely.
"""

import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable, Sized, Union

from prompt_form.models.validation_result import ErrorKind


class CoercionError(ValueError):
    """Raised by a coercer when a value has the wrong base type."""


@dataclass(frozen=True)
class Issue:
    """A single failure produced while validating one field."""

    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class Outcome:
    """
    Result of validating one field value.

    ``present`` is False when the field contributes nothing to the
    coerced record (an optional field left empty with no default).
    """

    value: Any = None
    issues: tuple[Issue, ...] = ()
    present: bool = True

    @property
    def ok(self) -> bool:
        return not self.issues

    @classmethod
    def failed(cls, kind: ErrorKind, *messages: str) -> "Outcome":
        return cls(issues=tuple(Issue(kind, m) for m in messages), present=False)


@dataclass(frozen=True)
class Range:
    """Inclusive numeric bounds."""

    minimum: float | None = None
    maximum: float | None = None
    too_small: str = ""
    too_big: str = ""

    def check(self, value: float) -> str | None:
        if self.minimum is not None and value < self.minimum:
            return self.too_small
        if self.maximum is not None and value > self.maximum:
            return self.too_big
        return None


@dataclass(frozen=True)
class Length:
    """Inclusive bounds on ``len(value)``."""

    min_length: int | None = None
    max_length: int | None = None
    too_short: str = ""
    too_long: str = ""

    def check(self, value: Sized) -> str | None:
        size = len(value)
        if self.min_length is not None and size < self.min_length:
            return self.too_short
        if self.max_length is not None and self.max_length < size:
            return self.too_long
        return None


@dataclass(frozen=True)
class Pattern:
    """Regex search over a string value."""

    regex: re.Pattern[str]
    message: str

    def check(self, value: str) -> str | None:
        return None if self.regex.search(value) else self.message


@dataclass(frozen=True)
class OneOf:
    """Membership in a fixed set of allowed values."""

    choices: frozenset[str]
    message: str

    def check(self, value: Any) -> str | None:
        return None if value in self.choices else self.message


def _exact(number: float) -> Fraction:
    if isinstance(number, float):
        return Fraction(repr(number))
    return Fraction(number)


@dataclass(frozen=True)
class MultipleOf:
    """Value must be an exact multiple of ``step``."""

    step: float
    message: str

    def check(self, value: float) -> str | None:
        # exact fractions avoid float remainders such as 0.3 % 0.1
        try:
            remainder = _exact(value) % _exact(self.step)
        except (ValueError, OverflowError, ZeroDivisionError):
            return self.message
        return None if remainder == 0 else self.message


@dataclass(frozen=True)
class Predicate:
    """Arbitrary check for rules the other kinds cannot express."""

    test: Callable[[Any], bool]
    message: str

    def check(self, value: Any) -> str | None:
        return None if self.test(value) else self.message


Constraint = Union[Range, Length, Pattern, OneOf, MultipleOf, Predicate]
