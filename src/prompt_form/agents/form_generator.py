"""
Form Generator Agent.

This agent turns a natural-language prompt into an ordered list of
field descriptors (GeneratedForm) as structured output.
"""

from agents import Agent, AgentOutputSchema

from prompt_form.agents.instructions import FORM_GENERATOR_INSTRUCTIONS
from prompt_form.guardrails.input_guardrails import prompt_safety_guardrail
from prompt_form.guardrails.output_guardrails import field_list_guardrail
from prompt_form.models.field_definitions import GeneratedForm
from prompt_form.config import get_config


def create_form_generator_agent(
    model: str | None = None,
    enable_guardrails: bool = True,
) -> Agent[None]:
    """
    Create the Form Generator agent.

    Args:
        model: The OpenAI model to use. If None, uses config.default_model.
        enable_guardrails: Whether to enable prompt and output guardrails.

    Returns:
        Configured Agent instance.
    """
    config = get_config()
    model = model or config.default_model

    input_guardrails = [prompt_safety_guardrail] if enable_guardrails else []
    output_guardrails = [field_list_guardrail] if enable_guardrails else []

    return Agent[None](
        name="Form Generator",
        instructions=FORM_GENERATOR_INSTRUCTIONS,
        model=model,
        model_settings=config.get_model_settings(),
        # descriptors have optional fields, which strict schemas reject
        output_type=AgentOutputSchema(GeneratedForm, strict_json_schema=False),
        input_guardrails=input_guardrails,
        output_guardrails=output_guardrails,
    )
