"""
Form Generation Orchestrator.

Main entry point for Prompt Form: give it a prompt, get back a field
list compiled into a validated form.
"""

import logging
from pathlib import Path

from agents import Runner, trace

from prompt_form.agents.form_generator import create_form_generator_agent
from prompt_form.config import get_config
from prompt_form.guardrails.constants import EMPTY_PROMPT_MESSAGE
from prompt_form.guardrails.input_guardrails import check_prompt
from prompt_form.models.field_definitions import GeneratedForm
from prompt_form.tracing import setup_tracing
from prompt_form.validation.compiler import CompiledForm, compile_form

logger = logging.getLogger("prompt-form")


class FormGenerationOrchestrator:
    """
    Orchestrates prompt -> field list -> compiled form.

    Usage:
        orchestrator = FormGenerationOrchestrator()

        form = await orchestrator.generate_form(
            "create a form with name, email, and age"
        )

        result = form.validator.validate({"name": "Ada"})
        print(result.to_error_dict())
    """

    def __init__(
        self,
        model: str | None = None,
        enable_guardrails: bool | None = None,
        enable_tracing: bool | None = None,
        trace_to_console: bool = False,
        trace_verbose: bool = False,
        trace_file: str | None = None,
        pre_validate_prompt: bool = False,
    ):
        """
        Initialize the orchestrator.

        Args:
            model: OpenAI model to use. If None, uses config.default_model.
            enable_guardrails: Whether to attach guardrails to the agent.
                If None, uses config.enable_guardrails.
            enable_tracing: Whether to enable tracing. If None, uses config.
            trace_to_console: Whether to log traces.
            trace_verbose: Whether to log every span.
            trace_file: Optional file path to write traces to.
            pre_validate_prompt: Run the full prompt check locally before
                calling the model. Blank prompts are always rejected locally.
        """
        config = get_config()
        self.model = model or config.default_model
        self.enable_guardrails = config.enable_guardrails if enable_guardrails is None else enable_guardrails
        self.enable_tracing = config.enable_tracing if enable_tracing is None else enable_tracing
        self.pre_validate_prompt = pre_validate_prompt

        setup_tracing(
            enabled=self.enable_tracing,
            console=trace_to_console,
            verbose=trace_verbose,
            file_path=trace_file,
        )

        self._generator = create_form_generator_agent(
            model=self.model,
            enable_guardrails=self.enable_guardrails,
        )

    async def generate_fields(self, prompt: str) -> GeneratedForm:
        """
        Ask the model for a field list matching the prompt.

        Args:
            prompt: Natural-language description of the form

        Returns:
            GeneratedForm with the field descriptors

        Raises:
            ValueError: If the prompt is blank or fails the local check,
                or the model returns an unexpected output type
        """
        if not prompt or not prompt.strip():
            raise ValueError(EMPTY_PROMPT_MESSAGE)

        if self.pre_validate_prompt:
            check = check_prompt(prompt)
            if not check.is_safe:
                raise ValueError("Invalid prompt:\n" + "\n".join(f"  - {i}" for i in check.issues))

        config = get_config()
        with trace(f"{config.trace_name_prefix}.generate"):
            result = await Runner.run(self._generator, prompt)

        if isinstance(result.final_output, GeneratedForm):
            logger.info(f"Generated {len(result.final_output.forms)} fields")
            return result.final_output
        else:
            raise ValueError(f"Unexpected output type: {type(result.final_output)}")

    async def generate_form(self, prompt: str, form_id: str = "generated_form") -> CompiledForm:
        """
        Generate a field list and compile it into a validated form.

        Example:
            >>> form = await orchestrator.generate_form("newsletter signup")
            >>> form.to_form_config()["uiSchema"]
        """
        fields = await self.generate_fields(prompt)
        return compile_form(fields, form_id=form_id)


def load_form(path: str | Path, form_id: str = "static_form") -> CompiledForm:
    """
    Compile a form from a static JSON field list.

    The file holds either ``{"forms": [...]}`` or a bare list of
    descriptors.
    """
    return compile_form(GeneratedForm.from_json_file(path), form_id=form_id)


async def generate_form(
    prompt: str,
    model: str | None = None,
    enable_guardrails: bool | None = None,
    enable_tracing: bool | None = None,
    trace_to_console: bool = False,
) -> CompiledForm:
    """
    Convenience function to generate a compiled form from a prompt.

    Example:
        >>> from prompt_form import generate_form
        >>> form = await generate_form("create a form with name, email, and age")
    """
    orchestrator = FormGenerationOrchestrator(
        model=model,
        enable_guardrails=enable_guardrails,
        enable_tracing=enable_tracing,
        trace_to_console=trace_to_console,
    )
    return await orchestrator.generate_form(prompt)
