"""
Variant rule table.

Maps every FieldVariant to a builder that turns a FieldDescriptor into a
BaseRule: a coercer for the variant's base type, the constraints checked
against the coerced value, an optional transform applied once all
constraints pass, and an optional default value.

Messages are user-facing and shown next to the widget verbatim.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Callable

from pydantic import TypeAdapter, ValidationError

from prompt_form.models.field_definitions import FieldDescriptor, FieldVariant, UploadedFile
from prompt_form.models.validation_result import ErrorKind
from prompt_form.validation import constants as c
from prompt_form.validation.constraints import (
    CoercionError,
    Constraint,
    Length,
    MultipleOf,
    OneOf,
    Outcome,
    Pattern,
    Predicate,
    Range,
)


_DATETIME = TypeAdapter(datetime)
_DATE = TypeAdapter(date)


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "nan" if isinstance(value, float) and math.isnan(value) else "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _expected(expected: str, value: Any) -> CoercionError:
    return CoercionError(f"Expected {expected}, received {_type_name(value)}")


# --- Coercers ---


def as_boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise _expected("boolean", value)
    return value


def as_string(value: Any) -> str:
    if not isinstance(value, str):
        raise _expected("string", value)
    return value


def as_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _expected("number", value)
    if isinstance(value, float) and math.isnan(value):
        raise _expected("number", value)
    return value


def as_datetime(value: Any) -> datetime:
    """
    Coerce strings, numbers and dates to a datetime.

    Numbers are milliseconds since the epoch and give UTC-aware
    datetimes, the way browsers serialize Date values. Strings keep
    their own offset and are naive when they carry none. Numeric
    strings are rejected rather than read as epoch seconds.
    """
    invalid = CoercionError("That's not a valid date")
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        raise invalid
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise invalid
    if isinstance(value, str):
        text = value.strip()
        if c.NUMERIC_STRING.fullmatch(text):
            raise invalid
        try:
            return _DATETIME.validate_python(text)
        except ValidationError:
            pass
        try:
            day = _DATE.validate_python(text)
        except ValidationError:
            raise invalid
        return datetime(day.year, day.month, day.day)
    raise invalid


def as_string_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        raise _expected("array", value)
    for item in value:
        if not isinstance(item, str):
            raise _expected("string", item)
    return list(value)


def _as_file(item: Any) -> Any:
    if isinstance(item, Mapping):
        try:
            return UploadedFile.model_validate(item)
        except ValidationError:
            raise CoercionError("Expected a file")
    size = getattr(item, "size", None)
    if isinstance(size, bool) or not isinstance(size, int):
        raise CoercionError("Expected a file")
    return item


def as_file_list(value: Any) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise _expected("array", value)
    return [_as_file(item) for item in value]


def as_location(value: Any) -> tuple[str, str | None]:
    """Coerce ``[country]`` or ``[country, state]`` to a 2-tuple."""
    if not isinstance(value, (list, tuple)):
        raise _expected("array", value)
    if not 1 <= len(value) <= 2:
        raise CoercionError("Expected [country, state]")
    country = as_string(value[0])
    state = value[1] if len(value) == 2 else None
    if state is not None:
        state = as_string(state)
    return country, state


def trim(value: str) -> str:
    return value.strip()


# --- Rules ---


@dataclass(frozen=True)
class BaseRule:
    """
    Validation rule for one variant, before required/optional composition.

    A wrong base type stops validation with a single type error. Otherwise
    every constraint is checked so that all failing messages are reported.
    """

    coerce: Callable[[Any], Any]
    constraints: tuple[Constraint, ...] = ()
    transform: Callable[[Any], Any] | None = None
    has_default: bool = False
    default: Any = None

    def validate(self, value: Any) -> Outcome:
        try:
            coerced = self.coerce(value)
        except CoercionError as e:
            return Outcome.failed(ErrorKind.TYPE_MISMATCH, str(e))

        messages = []
        for constraint in self.constraints:
            message = constraint.check(coerced)
            if message is not None:
                messages.append(message)
        if messages:
            return Outcome.failed(ErrorKind.CONSTRAINT_VIOLATION, *messages)

        if self.transform is not None:
            coerced = self.transform(coerced)
        return Outcome(value=coerced)


RuleBuilder = Callable[[FieldDescriptor], BaseRule]


def _format_number(value: float) -> str:
    return f"{value:g}"


def boolean_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(coerce=as_boolean, has_default=True, default=field.checked)


def combobox_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(
        coerce=as_string,
        constraints=(
            Length(min_length=1, too_short="Please select a language"),
            OneOf(c.LANGUAGE_CODES, "Please select a valid language"),
        ),
    )


def date_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(coerce=as_datetime)


def file_input_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(
        coerce=as_file_list,
        constraints=(
            Predicate(
                lambda files: all(f.size <= c.MAX_FILE_SIZE for f in files),
                "Each file must be less than 4MB",
            ),
            Length(max_length=c.MAX_FILES, too_long=f"Maximum {c.MAX_FILES} files allowed"),
        ),
    )


def input_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(
        coerce=as_string,
        constraints=(Length(min_length=1, too_short="This field is required"),),
        transform=trim,
    )


def otp_rule(field: FieldDescriptor) -> BaseRule:
    wrong_length = f"OTP must be exactly {c.OTP_LENGTH} digits"
    return BaseRule(
        coerce=as_string,
        constraints=(
            Length(c.OTP_LENGTH, c.OTP_LENGTH, wrong_length, wrong_length),
            Pattern(c.DIGITS_ONLY, "OTP must contain only numbers"),
        ),
    )


def location_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(
        coerce=as_location,
        constraints=(Predicate(lambda loc: len(loc[0]) > 0, "Country is required"),),
    )


def multi_select_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(
        coerce=as_string_list,
        constraints=(
            Length(
                1,
                c.MULTI_SELECT_MAX,
                "Please select at least one option",
                f"Maximum {c.MULTI_SELECT_MAX} selections allowed",
            ),
        ),
    )


def password_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(
        coerce=as_string,
        constraints=(
            Length(
                min_length=c.PASSWORD_MIN_LENGTH,
                too_short=f"Password must be at least {c.PASSWORD_MIN_LENGTH} characters",
            ),
            Pattern(c.HAS_UPPERCASE, "Password must contain at least one uppercase letter"),
            Pattern(c.HAS_LOWERCASE, "Password must contain at least one lowercase letter"),
            Pattern(c.HAS_DIGIT, "Password must contain at least one number"),
            Pattern(c.HAS_SPECIAL, "Password must contain at least one special character"),
        ),
    )


def phone_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(
        coerce=as_string,
        constraints=(
            Length(min_length=1, too_short="Phone number is required"),
            Pattern(c.PHONE_NUMBER, "Please enter a valid phone number"),
        ),
    )


def select_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(
        coerce=as_string,
        constraints=(Length(min_length=1, too_short="Please select an option"),),
    )


def signature_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(
        coerce=as_string,
        constraints=(
            Length(min_length=1, too_short="Signature is required"),
            Predicate(lambda s: s.startswith(c.SIGNATURE_PREFIX), "Invalid signature format"),
        ),
    )


def slider_rule(field: FieldDescriptor) -> BaseRule:
    minimum = c.SLIDER_DEFAULT_MIN if field.min is None else field.min
    maximum = c.SLIDER_DEFAULT_MAX if field.max is None else field.max
    # a non-positive step cannot define a grid
    step = field.step if field.step is not None and field.step > 0 else c.SLIDER_DEFAULT_STEP
    return BaseRule(
        coerce=as_number,
        constraints=(
            Range(
                minimum,
                maximum,
                f"Number must be greater than or equal to {_format_number(minimum)}",
                f"Number must be less than or equal to {_format_number(maximum)}",
            ),
            MultipleOf(step, f"Number must be a multiple of {_format_number(step)}"),
        ),
    )


def tags_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(
        coerce=as_string_list,
        constraints=(
            Length(1, c.TAGS_MAX, "Please add at least one tag", f"Maximum {c.TAGS_MAX} tags allowed"),
            Predicate(
                lambda tags: all(len(tag) <= c.TAG_MAX_LENGTH for tag in tags),
                f"Each tag must be less than {c.TAG_MAX_LENGTH} characters",
            ),
        ),
    )


def textarea_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(
        coerce=as_string,
        constraints=(
            Length(
                1,
                c.TEXTAREA_MAX_LENGTH,
                "This field is required",
                f"Maximum {c.TEXTAREA_MAX_LENGTH} characters allowed",
            ),
        ),
        transform=trim,
    )


def generic_rule(field: FieldDescriptor) -> BaseRule:
    return BaseRule(coerce=as_string)


VARIANT_RULES: dict[FieldVariant, RuleBuilder] = {
    FieldVariant.CHECKBOX: boolean_rule,
    FieldVariant.SWITCH: boolean_rule,
    FieldVariant.COMBOBOX: combobox_rule,
    FieldVariant.DATE_PICKER: date_rule,
    FieldVariant.DATETIME_PICKER: date_rule,
    FieldVariant.SMART_DATETIME_INPUT: date_rule,
    FieldVariant.FILE_INPUT: file_input_rule,
    FieldVariant.INPUT: input_rule,
    FieldVariant.INPUT_OTP: otp_rule,
    FieldVariant.LOCATION_INPUT: location_rule,
    FieldVariant.MULTI_SELECT: multi_select_rule,
    FieldVariant.PASSWORD: password_rule,
    FieldVariant.PHONE: phone_rule,
    FieldVariant.SELECT: select_rule,
    FieldVariant.SIGNATURE_INPUT: signature_rule,
    FieldVariant.SLIDER: slider_rule,
    FieldVariant.TAGS_INPUT: tags_rule,
    FieldVariant.TEXTAREA: textarea_rule,
    FieldVariant.UNKNOWN: generic_rule,
}


def build_rule(field: FieldDescriptor) -> BaseRule:
    """Build the base rule for a descriptor from its resolved variant."""
    return VARIANT_RULES[field.kind](field)
