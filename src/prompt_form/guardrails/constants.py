"""
Constants for guardrails in Prompt Form.

Patterns used by the prompt safety check.
"""

# Patterns that might indicate injection attempts
SUSPICIOUS_PATTERNS = [
    r"<script",
    r"javascript:",
    r"on\w+\s*=",
    r"\{\{.*\}\}",
    r"\$\{.*\}",
    r"eval\s*\(",
    r"__proto__",
]

EMPTY_PROMPT_MESSAGE = "Please enter a prompt first"
