"""
Web UI for Prompt Form.

JSON API plus a single static page that renders generated forms.
"""

from prompt_form.web.server import create_server, serve
from prompt_form.web.submission import FormSession, FormStore, SessionExistsError, SubmissionHandler

__all__ = [
    "create_server",
    "serve",
    "FormSession",
    "FormStore",
    "SessionExistsError",
    "SubmissionHandler",
]
