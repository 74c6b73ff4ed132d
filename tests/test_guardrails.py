"""Tests for prompt and field-list guardrails."""

from prompt_form.config import update_config
from prompt_form.guardrails.constants import EMPTY_PROMPT_MESSAGE
from prompt_form.guardrails.input_guardrails import check_prompt
from prompt_form.guardrails.output_guardrails import check_field_list
from prompt_form.models.field_definitions import FieldDescriptor, GeneratedForm


class TestCheckPrompt:
    """Tests for the prompt safety check."""

    def test_normal_prompt(self, restore_config):
        """Test that an ordinary prompt is accepted."""
        result = check_prompt("A signup form with name, email and a password")
        assert result.is_safe
        assert result.issues == []

    def test_blank_prompt(self, restore_config):
        """Test that whitespace-only prompts are rejected."""
        result = check_prompt("   ")
        assert not result.is_safe
        assert result.issues == [EMPTY_PROMPT_MESSAGE]

    def test_too_long(self, restore_config):
        """Test the configured length limit."""
        update_config(max_prompt_length=10)
        result = check_prompt("a form with many fields")
        assert not result.is_safe
        assert "longer than 10" in result.issues[0]

    def test_injection_detected(self, restore_config):
        """Test that script injection is flagged."""
        result = check_prompt("a form <script>alert(1)</script>")
        assert not result.is_safe
        assert "Potentially unsafe content detected" in result.issues

    def test_injection_check_can_be_disabled(self, restore_config):
        """Test that disabling the injection check lets the prompt through."""
        update_config(enable_injection_check=False)
        assert check_prompt("a form with ${name}").is_safe


class TestCheckFieldList:
    """Tests for the generated field list check."""

    def test_valid_list(self):
        form = GeneratedForm(forms=[FieldDescriptor(name="a", label="A", variant="Input")])
        result = check_field_list(form)
        assert result.is_valid
        assert result.warnings == []

    def test_empty_list_is_error(self):
        result = check_field_list(GeneratedForm(forms=[]))
        assert not result.is_valid
        assert result.errors == ["Generated form has no fields"]

    def test_blank_name_is_error(self):
        form = GeneratedForm(forms=[FieldDescriptor(name=" ", label="A")])
        assert not check_field_list(form).is_valid

    def test_unknown_variant_and_duplicates_are_warnings(self):
        form = GeneratedForm(
            forms=[
                FieldDescriptor(name="a", label="A", variant="Frobnicator"),
                FieldDescriptor(name="b", label="B"),
                FieldDescriptor(name="b", label="B again"),
            ]
        )
        result = check_field_list(form)
        assert result.is_valid
        assert len(result.warnings) == 2
        assert any("Frobnicator" in w for w in result.warnings)
        assert any("'b' is used 2 times" in w for w in result.warnings)
