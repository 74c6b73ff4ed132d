"""
Guardrails for Prompt Form.

Checks on the prompt going in and the field list coming out.
"""

from prompt_form.guardrails.input_guardrails import check_prompt, prompt_safety_guardrail
from prompt_form.guardrails.output_guardrails import check_field_list, field_list_guardrail

__all__ = [
    "check_prompt",
    "prompt_safety_guardrail",
    "check_field_list",
    "field_list_guardrail",
]
