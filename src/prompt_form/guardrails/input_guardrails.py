"""
Input guardrails for Prompt Form.

These guardrails check the user's prompt before it reaches the model.
"""

import re
from typing import Any

from agents import (
    Agent,
    GuardrailFunctionOutput,
    RunContextWrapper,
    TResponseInputItem,
    input_guardrail,
)
from pydantic import BaseModel, Field

from prompt_form.guardrails.constants import EMPTY_PROMPT_MESSAGE, SUSPICIOUS_PATTERNS
from prompt_form.config import get_config


class SafetyCheckResult(BaseModel):
    """Result of input safety check."""

    is_safe: bool = Field(..., description="Whether the input is safe")
    issues: list[str] = Field(default_factory=list, description="Any issues found")


def _check_for_injection(text: str) -> bool:
    """Check for potential injection patterns."""
    for pattern in SUSPICIOUS_PATTERNS:
        if re.search(pattern, text, re.IGNORECASE):
            return False
    return True


def check_prompt(prompt: str) -> SafetyCheckResult:
    """
    Check a form prompt.

    Rejects blank prompts, prompts longer than the configured maximum,
    and (when enabled) prompts containing injection patterns.
    """
    config = get_config()
    issues = []

    if not prompt or not prompt.strip():
        issues.append(EMPTY_PROMPT_MESSAGE)
    elif len(prompt) > config.max_prompt_length:
        issues.append(f"Prompt is longer than {config.max_prompt_length} characters")

    if config.enable_injection_check and prompt and not _check_for_injection(prompt):
        issues.append("Potentially unsafe content detected")

    return SafetyCheckResult(is_safe=not issues, issues=issues)


def _input_to_text(input: str | list[TResponseInputItem]) -> str:
    if isinstance(input, list):
        return " ".join(
            str(item.get("content", "")) if isinstance(item, dict) else str(item)
            for item in input
        )
    return str(input)


@input_guardrail
async def prompt_safety_guardrail(
    ctx: RunContextWrapper[Any],
    agent: Agent[Any],
    input: str | list[TResponseInputItem],
) -> GuardrailFunctionOutput:
    """Trip when the prompt fails check_prompt."""
    result = check_prompt(_input_to_text(input))
    return GuardrailFunctionOutput(
        output_info=result.model_dump(),
        tripwire_triggered=not result.is_safe,
    )
