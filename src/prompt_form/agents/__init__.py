"""
Agent definitions for Prompt Form.

This module contains the form generator agent, which turns a prompt
into a list of field descriptors.
"""

from prompt_form.agents.form_generator import create_form_generator_agent

__all__ = [
    "create_form_generator_agent",
]
