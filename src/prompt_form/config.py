"""
Configuration module for Prompt Form.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from agents import ModelSettings

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default).lower()).lower() == "true"


@dataclass
class PromptFormConfig:
    """Configuration settings for Prompt Form."""

    # OpenAI settings
    openai_api_key: str = ""
    default_model: str = "gpt-4.1-nano-2025-04-14"

    # Model settings for deterministic behavior
    default_temperature: float = 0.0
    default_max_tokens: int | None = None

    # Form server settings
    server_host: str = "0.0.0.0"
    server_port: int = 9110

    # Guardrail settings
    enable_guardrails: bool = True
    enable_injection_check: bool = True
    max_prompt_length: int = 2000

    # Tracing settings
    enable_tracing: bool = True
    trace_name_prefix: str = "prompt-form"

    # Output settings
    log_level: str = "INFO"
    indent_json_output: int = 2
    verbose_output: bool = False

    def get_model_settings(self) -> ModelSettings:
        """Get ModelSettings instance with configured defaults."""
        return ModelSettings(
            temperature=self.default_temperature,
            max_tokens=self.default_max_tokens,
        )

    @classmethod
    def from_env(cls) -> "PromptFormConfig":
        """
        Create configuration from environment variables.

        Unset variables fall back to the class field defaults.
        """
        _defaults = cls()

        return cls(
            openai_api_key=os.getenv("OPENAI_API_KEY", _defaults.openai_api_key),
            default_model=os.getenv("OPENAI_MODEL", _defaults.default_model),
            default_temperature=float(os.getenv("PROMPT_FORM_TEMPERATURE", str(_defaults.default_temperature))),
            server_host=os.getenv("PROMPT_FORM_SERVER_HOST", _defaults.server_host),
            server_port=int(os.getenv("PROMPT_FORM_SERVER_PORT", str(_defaults.server_port))),
            enable_guardrails=_env_flag("PROMPT_FORM_ENABLE_GUARDRAILS", _defaults.enable_guardrails),
            enable_injection_check=_env_flag("PROMPT_FORM_ENABLE_INJECTION_CHECK", _defaults.enable_injection_check),
            max_prompt_length=int(os.getenv("PROMPT_FORM_MAX_PROMPT_LENGTH", str(_defaults.max_prompt_length))),
            enable_tracing=os.getenv("OPENAI_AGENTS_DISABLE_TRACING", "0" if _defaults.enable_tracing else "1") != "1",
            log_level=os.getenv("PROMPT_FORM_LOG_LEVEL", _defaults.log_level).upper(),
            verbose_output=_env_flag("PROMPT_FORM_VERBOSE_OUTPUT", _defaults.verbose_output),
        )


config = PromptFormConfig.from_env()


def get_config() -> PromptFormConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> PromptFormConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
