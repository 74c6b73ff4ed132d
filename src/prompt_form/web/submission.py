"""
Form sessions and submission handling.

A session pairs one compiled form with the latest accepted submission.
Sessions live in memory; a new prompt creates a new session, so each
validator is discarded together with its form.
"""

import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Any

from pydantic_core import to_jsonable_python

from prompt_form.validation.compiler import CompiledForm

logger = logging.getLogger("prompt-form.web")


class SessionExistsError(KeyError):
    """Raised when a requested session id is already taken."""


@dataclass
class FormSession:
    """One generated form and its accepted submission, if any."""

    session_id: str
    form: CompiledForm
    prompt: str | None = None
    submission: dict[str, Any] | None = None


class FormStore:
    """Thread-safe in-memory store of form sessions."""

    def __init__(self):
        self._sessions: dict[str, FormSession] = {}
        self._lock = threading.Lock()

    def create(
        self,
        form: CompiledForm,
        prompt: str | None = None,
        session_id: str | None = None,
    ) -> FormSession:
        """
        Open a new session.

        Raises:
            SessionExistsError: If ``session_id`` is already in use
        """
        session = FormSession(
            session_id=session_id or uuid.uuid4().hex,
            form=form,
            prompt=prompt,
        )
        with self._lock:
            if session.session_id in self._sessions:
                raise SessionExistsError(session.session_id)
            self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> FormSession | None:
        with self._lock:
            return self._sessions.get(session_id)

    def record_submission(self, session_id: str, values: dict[str, Any]) -> None:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                session.submission = values

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


class SubmissionHandler:
    """
    Validates submitted records and stores accepted values.

    Usage:
        handler = SubmissionHandler(store)
        ok, payload = handler.submit(session, {"email": "a@b.co"})
    """

    def __init__(self, store: FormStore):
        self.store = store

    def submit(self, session: FormSession, record: dict[str, Any]) -> tuple[bool, dict[str, Any]]:
        """
        Validate a record against the session's form.

        Returns:
            Tuple of (accepted, JSON-ready response payload)
        """
        result = session.form.validator.validate(record)

        if not result.ok:
            logger.info(
                f"Submission for {session.session_id} rejected with {result.error_count} errors"
            )
            return False, {
                "message": "Error processing form",
                "errors": result.to_error_dict(),
            }

        values = to_jsonable_python(result.values)
        self.store.record_submission(session.session_id, values)
        logger.info(f"Submission for {session.session_id} accepted")
        return True, {
            "message": "Form submitted successfully!",
            "data": values,
        }
