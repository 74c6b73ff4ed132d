"""Tests for the variant rule table and constraint kinds."""

from datetime import date, datetime, timezone
from types import SimpleNamespace

import pytest

from prompt_form.models.field_definitions import FieldVariant, UploadedFile
from prompt_form.models.validation_result import ErrorKind
from prompt_form.validation.constraints import Length, MultipleOf, OneOf, Range
from prompt_form.validation.compiler import compile_schema
from prompt_form.validation.rules import VARIANT_RULES, build_rule


def messages(outcome):
    return [issue.message for issue in outcome.issues]


class TestRuleTable:
    """Tests for VARIANT_RULES completeness."""

    def test_every_variant_has_a_rule(self):
        """Every FieldVariant, including UNKNOWN, has a builder."""
        for variant in FieldVariant:
            assert variant in VARIANT_RULES, f"Missing rule for {variant}"

    def test_builders_are_deterministic(self, make_field):
        """Building twice from one descriptor gives equal rules."""
        field = make_field("Slider", min=1, max=5)
        assert build_rule(field).constraints == build_rule(field).constraints


class TestConstraintKinds:
    """Tests for individual constraint kinds."""

    def test_range_is_inclusive(self):
        rng = Range(0, 10, "small", "big")
        assert rng.check(0) is None
        assert rng.check(10) is None
        assert rng.check(-0.5) == "small"
        assert rng.check(10.5) == "big"

    def test_length_bounds(self):
        length = Length(1, 3, "short", "long")
        assert length.check("") == "short"
        assert length.check("abcd") == "long"
        assert length.check([1, 2]) is None

    def test_multiple_of_avoids_float_error(self):
        """0.3 is a multiple of 0.1 even though 0.3 % 0.1 != 0 in floats."""
        assert MultipleOf(0.1, "step").check(0.3) is None
        assert MultipleOf(0.5, "step").check(0.75) == "step"

    def test_multiple_of_huge_integer(self):
        """Integers beyond float range are checked exactly."""
        assert MultipleOf(1, "step").check(10**400) is None
        assert MultipleOf(3, "step").check(10**400) == "step"

    def test_multiple_of_infinity(self):
        assert MultipleOf(0.5, "step").check(float("inf")) == "step"

    def test_one_of(self):
        one_of = OneOf(frozenset({"en"}), "bad")
        assert one_of.check("en") is None
        assert one_of.check("xx") == "bad"


class TestBooleanRules:
    """Checkbox and Switch."""

    @pytest.mark.parametrize("variant", ["Checkbox", "Switch"])
    def test_accepts_booleans(self, make_field, variant):
        rule = build_rule(make_field(variant))
        assert rule.validate(False).value is False
        assert rule.validate(True).ok

    def test_default_is_checked(self, make_field):
        rule = build_rule(make_field("Checkbox", checked=False))
        assert rule.has_default
        assert rule.default is False

    def test_rejects_strings(self, make_field):
        outcome = build_rule(make_field("Switch")).validate("true")
        assert messages(outcome) == ["Expected boolean, received string"]
        assert outcome.issues[0].kind is ErrorKind.TYPE_MISMATCH


class TestComboboxRule:
    def test_known_language(self, make_field):
        assert build_rule(make_field("Combobox")).validate("fr").ok

    def test_unknown_language(self, make_field):
        outcome = build_rule(make_field("Combobox")).validate("xx")
        assert messages(outcome) == ["Please select a valid language"]


class TestDateRules:
    """Date Picker, Datetime Picker and Smart Datetime Input."""

    @pytest.mark.parametrize("variant", ["Date Picker", "Datetime Picker", "Smart Datetime Input"])
    def test_parses_iso_string(self, make_field, variant):
        outcome = build_rule(make_field(variant)).validate("2024-05-01T10:30:00")
        assert outcome.value == datetime(2024, 5, 1, 10, 30)

    def test_parses_date_only_string(self, make_field):
        outcome = build_rule(make_field("Date Picker")).validate("2024-05-01")
        assert outcome.value == datetime(2024, 5, 1)

    def test_number_is_epoch_milliseconds(self, make_field):
        outcome = build_rule(make_field("Date Picker")).validate(86_400_000)
        assert outcome.value == datetime(1970, 1, 2, tzinfo=timezone.utc)

    def test_date_object(self, make_field):
        outcome = build_rule(make_field("Date Picker")).validate(date(2020, 2, 29))
        assert outcome.value == datetime(2020, 2, 29)

    def test_number_result_is_utc_aware(self, make_field):
        outcome = build_rule(make_field("Datetime Picker")).validate(1_700_000_000_000)
        assert outcome.value == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_naive_string_stays_naive(self, make_field):
        outcome = build_rule(make_field("Datetime Picker")).validate("2024-05-01T10:30:00")
        assert outcome.value.tzinfo is None

    @pytest.mark.parametrize("value", ["1700000000", "1700000000000", "-5", "12.5"])
    def test_numeric_strings_rejected(self, make_field, value):
        """Numeric strings are not read as epoch timestamps."""
        outcome = build_rule(make_field("Date Picker")).validate(value)
        assert messages(outcome) == ["That's not a valid date"]

    def test_out_of_range_number(self, make_field):
        outcome = build_rule(make_field("Date Picker")).validate(10**400)
        assert messages(outcome) == ["That's not a valid date"]

    @pytest.mark.parametrize("value", ["not a date", "2024-13-45", True, [2024]])
    def test_invalid(self, make_field, value):
        outcome = build_rule(make_field("Datetime Picker")).validate(value)
        assert messages(outcome) == ["That's not a valid date"]


class TestFileInputRule:
    def test_accepts_small_files(self, make_field):
        outcome = build_rule(make_field("File Input")).validate(
            [{"name": "a.png", "size": 1024, "type": "image/png"}]
        )
        assert outcome.ok
        assert isinstance(outcome.value[0], UploadedFile)

    def test_accepts_objects_with_size(self, make_field):
        handle = SimpleNamespace(name="a.png", size=10)
        assert build_rule(make_field("File Input")).validate([handle]).value == [handle]

    def test_file_too_large(self, make_field):
        outcome = build_rule(make_field("File Input")).validate(
            [{"name": "big.bin", "size": 4 * 1024 * 1024 + 1}]
        )
        assert messages(outcome) == ["Each file must be less than 4MB"]

    def test_exactly_four_mebibytes_passes(self, make_field):
        outcome = build_rule(make_field("File Input")).validate([{"name": "f", "size": 4 * 1024 * 1024}])
        assert outcome.ok

    def test_too_many_files(self, make_field):
        files = [{"name": f"{i}.txt", "size": 1} for i in range(6)]
        outcome = build_rule(make_field("File Input")).validate(files)
        assert messages(outcome) == ["Maximum 5 files allowed"]

    def test_not_a_file(self, make_field):
        outcome = build_rule(make_field("File Input")).validate(["a.png"])
        assert messages(outcome) == ["Expected a file"]


class TestTextRules:
    """Input and Textarea."""

    def test_input_trims(self, make_field):
        assert build_rule(make_field("Input")).validate("  Ada  ").value == "Ada"

    def test_textarea_trims(self, make_field):
        assert build_rule(make_field("Textarea")).validate("hello\n").value == "hello"

    def test_textarea_too_long(self, make_field):
        outcome = build_rule(make_field("Textarea")).validate("x" * 1001)
        assert messages(outcome) == ["Maximum 1000 characters allowed"]

    def test_textarea_at_limit(self, make_field):
        assert build_rule(make_field("Textarea")).validate("x" * 1000).ok

    def test_input_rejects_numbers(self, make_field):
        outcome = build_rule(make_field("Input")).validate(42)
        assert messages(outcome) == ["Expected string, received number"]


class TestOtpRule:
    def test_valid(self, make_field):
        assert build_rule(make_field("Input OTP")).validate("123456").ok

    def test_non_digit(self, make_field):
        outcome = build_rule(make_field("Input OTP")).validate("12a456")
        assert messages(outcome) == ["OTP must contain only numbers"]

    def test_wrong_length(self, make_field):
        outcome = build_rule(make_field("Input OTP")).validate("12345")
        assert messages(outcome) == ["OTP must be exactly 6 digits"]

    def test_unicode_digits_rejected(self, make_field):
        outcome = build_rule(make_field("Input OTP")).validate("١٢٣٤٥٦")
        assert messages(outcome) == ["OTP must contain only numbers"]


class TestLocationRule:
    def test_country_and_state(self, make_field):
        outcome = build_rule(make_field("Location Input")).validate(["US", "CA"])
        assert outcome.value == ("US", "CA")

    def test_state_optional(self, make_field):
        assert build_rule(make_field("Location Input")).validate(["US", None]).value == ("US", None)
        assert build_rule(make_field("Location Input")).validate(["US"]).value == ("US", None)

    def test_country_required(self, make_field):
        outcome = build_rule(make_field("Location Input")).validate(["", "CA"])
        assert messages(outcome) == ["Country is required"]

    def test_wrong_shape(self, make_field):
        outcome = build_rule(make_field("Location Input")).validate(["a", "b", "c"])
        assert messages(outcome) == ["Expected [country, state]"]


class TestListRules:
    """Multi Select and Tags Input."""

    def test_multi_select_bounds(self, make_field):
        rule = build_rule(make_field("Multi Select"))
        assert messages(rule.validate([])) == ["Please select at least one option"]
        assert messages(rule.validate(["x"] * 11)) == ["Maximum 10 selections allowed"]
        assert rule.validate(["x"] * 10).ok

    def test_tags_single(self, make_field):
        assert build_rule(make_field("Tags Input")).validate(["a"]).ok

    def test_too_many_tags(self, make_field):
        outcome = build_rule(make_field("Tags Input")).validate([str(i) for i in range(21)])
        assert messages(outcome) == ["Maximum 20 tags allowed"]

    def test_tag_too_long(self, make_field):
        outcome = build_rule(make_field("Tags Input")).validate(["x" * 51])
        assert messages(outcome) == ["Each tag must be less than 50 characters"]

    def test_tag_at_limit(self, make_field):
        assert build_rule(make_field("Tags Input")).validate(["x" * 50]).ok

    def test_all_failures_reported(self, make_field):
        outcome = build_rule(make_field("Tags Input")).validate(["x" * 51] * 21)
        assert len(outcome.issues) == 2

    def test_non_string_item(self, make_field):
        outcome = build_rule(make_field("Tags Input")).validate(["a", 1])
        assert messages(outcome) == ["Expected string, received number"]


class TestPasswordRule:
    def test_strong_password(self, make_field):
        assert build_rule(make_field("Password")).validate("Abc12345!").ok

    def test_weak_password_reports_each_rule(self, make_field):
        outcome = build_rule(make_field("Password")).validate("abc12345")
        assert messages(outcome) == [
            "Password must contain at least one uppercase letter",
            "Password must contain at least one special character",
        ]

    def test_short_password(self, make_field):
        outcome = build_rule(make_field("Password")).validate("Ab1!")
        assert messages(outcome) == ["Password must be at least 8 characters"]


class TestPhoneRule:
    @pytest.mark.parametrize("value", ["+14155550123", "4155550123", "12"])
    def test_valid(self, make_field, value):
        assert build_rule(make_field("Phone")).validate(value).ok

    @pytest.mark.parametrize("value", ["0123456", "+1 415 555", "1", "+1234567890123456", "12\n"])
    def test_invalid(self, make_field, value):
        outcome = build_rule(make_field("Phone")).validate(value)
        assert messages(outcome) == ["Please enter a valid phone number"]


class TestSelectAndSignatureRules:
    def test_select_any_value(self, make_field):
        assert build_rule(make_field("Select")).validate("anything").ok

    def test_signature_data_url(self, make_field):
        assert build_rule(make_field("Signature Input")).validate("data:image/png;base64,AAA").ok

    def test_signature_wrong_format(self, make_field):
        outcome = build_rule(make_field("Signature Input")).validate("http://example.com/sig.png")
        assert messages(outcome) == ["Invalid signature format"]


class TestSliderRule:
    def test_defaults_bounds_inclusive(self, make_field):
        rule = build_rule(make_field("Slider"))
        assert rule.validate(0).ok
        assert rule.validate(100).ok
        assert rule.validate(42).ok

    def test_below_and_above(self, make_field):
        rule = build_rule(make_field("Slider"))
        assert messages(rule.validate(-1)) == ["Number must be greater than or equal to 0"]
        assert messages(rule.validate(101)) == ["Number must be less than or equal to 100"]

    def test_misaligned_with_default_step(self, make_field):
        outcome = build_rule(make_field("Slider")).validate(2.5)
        assert messages(outcome) == ["Number must be a multiple of 1"]

    def test_custom_bounds_and_step(self, make_field):
        rule = build_rule(make_field("Slider", min=10, max=20, step=0.5))
        assert rule.validate(10).ok
        assert rule.validate(20).ok
        assert rule.validate(12.5).ok
        assert not rule.validate(12.25).ok
        assert not rule.validate(9.5).ok

    def test_zero_max_is_respected(self, make_field):
        rule = build_rule(make_field("Slider", min=-10, max=0))
        assert rule.validate(0).ok
        assert not rule.validate(1).ok

    def test_rejects_non_numbers(self, make_field):
        rule = build_rule(make_field("Slider"))
        assert messages(rule.validate("5")) == ["Expected number, received string"]
        assert messages(rule.validate(True)) == ["Expected number, received boolean"]
        assert messages(rule.validate(float("nan"))) == ["Expected number, received nan"]


class TestGenericRule:
    def test_unknown_variant_is_plain_string(self, make_field):
        rule = build_rule(make_field("Frobnicator"))
        assert rule.validate("anything").value == "anything"
        assert rule.constraints == ()

    def test_unknown_variant_still_checks_type(self, make_field):
        outcome = build_rule(make_field("Frobnicator")).validate(3)
        assert outcome.issues[0].kind is ErrorKind.TYPE_MISMATCH


class TestHugeNumbers:
    """Integers too large for a float are validated, not raised."""

    def test_slider_above_maximum(self, make_field):
        outcome = build_rule(make_field("Slider")).validate(10**400)
        assert messages(outcome) == ["Number must be less than or equal to 100"]

    def test_slider_below_minimum(self, make_field):
        outcome = build_rule(make_field("Slider")).validate(-(10**400))
        assert messages(outcome) == ["Number must be greater than or equal to 0"]

    def test_aggregate_reports_error(self):
        validator = compile_schema([{"name": "age", "label": "Age", "variant": "Slider"}])
        result = validator.validate({"age": 10**400})
        assert result.to_error_dict() == {"age": ["Number must be less than or equal to 100"]}
