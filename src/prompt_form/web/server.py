"""
HTTP server for the Prompt Form web UI.

This server provides:
1. The single-page UI (prompt box + rendered form)
2. POST /api/forms: generate (or load) a form and open a session
3. GET /api/form-config/{session_id}: fields, widget hints, defaults
4. POST /api/submit/{session_id}: validate and store a submission
5. GET /api/submission/{session_id}: latest accepted submission
6. GET /health
"""

import asyncio
import json
import logging
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any, Callable
from urllib.parse import urlparse

from agents import InputGuardrailTripwireTriggered, OutputGuardrailTripwireTriggered
from pydantic import ValidationError

from prompt_form.config import get_config
from prompt_form.models.field_definitions import GeneratedForm
from prompt_form.orchestrator import FormGenerationOrchestrator
from prompt_form.validation.compiler import compile_form
from prompt_form.web.submission import FormStore, SessionExistsError, SubmissionHandler

logger = logging.getLogger("prompt-form.web")

STATIC_DIR = Path(__file__).parent / "static"


class FormRequestHandler(BaseHTTPRequestHandler):
    """HTTP handler for the UI and API endpoints."""

    store: FormStore
    orchestrator_factory: Callable[[], FormGenerationOrchestrator]
    _orchestrator: FormGenerationOrchestrator | None = None
    _orchestrator_lock = threading.Lock()

    def do_GET(self):
        """Handle GET requests."""
        path = urlparse(self.path).path

        if path in ("/", "/index.html") or path.startswith("/form/"):
            self.serve_file("index.html", "text/html; charset=utf-8")
        elif path == "/health":
            self.handle_health_check()
        elif path.startswith("/api/form-config/"):
            self.handle_form_config(self._session_id(path, "/api/form-config/"))
        elif path.startswith("/api/submission/"):
            self.handle_get_submission(self._session_id(path, "/api/submission/"))
        else:
            self.send_json_response({"error": "Not Found"}, 404)

    def do_POST(self):
        """Handle POST requests."""
        path = urlparse(self.path).path

        if path == "/api/forms":
            self.handle_create_form()
        elif path.startswith("/api/submit/"):
            self.handle_submit(self._session_id(path, "/api/submit/"))
        else:
            self.send_json_response({"error": "Not Found"}, 404)

    @staticmethod
    def _session_id(path: str, prefix: str) -> str:
        return path[len(prefix):].strip("/")

    def _read_json(self) -> Any:
        """
        Parse the request body as JSON.

        Raises:
            ValueError: On a bad Content-Length, invalid UTF-8 or invalid JSON
        """
        content_length = int(self.headers.get("Content-Length", 0))
        if content_length < 0:
            raise ValueError(f"Invalid Content-Length: {content_length}")
        body = self.rfile.read(content_length) if content_length else b"{}"
        return json.loads(body.decode("utf-8"))

    def _get_orchestrator(self) -> FormGenerationOrchestrator:
        cls = type(self)
        with cls._orchestrator_lock:
            if cls._orchestrator is None:
                cls._orchestrator = cls.orchestrator_factory()
        return cls._orchestrator

    def handle_create_form(self):
        """
        Create a form session.

        Body: {"prompt": "..."} to generate with the model, or
        {"fields": [...]} to compile a static field list.
        """
        try:
            data = self._read_json()
        except ValueError as e:
            self.send_json_response({"error": f"Invalid JSON: {e}"}, 400)
            return
        if not isinstance(data, dict):
            self.send_json_response({"error": "Request body must be a JSON object"}, 400)
            return

        requested_id = data.get("session_id")
        if requested_id is not None and (not isinstance(requested_id, str) or not requested_id or "/" in requested_id):
            self.send_json_response({"error": "session_id must be a non-empty string without /"}, 400)
            return
        if requested_id is not None and self.store.get(requested_id) is not None:
            self.send_json_response({"error": f"Session {requested_id} already exists"}, 409)
            return

        prompt = data.get("prompt")
        try:
            if data.get("fields") is not None:
                form = compile_form(GeneratedForm.from_payload(data["fields"]), form_id="static_form")
            else:
                form = asyncio.run(self._get_orchestrator().generate_form(prompt or ""))
        except ValidationError as e:
            self.send_json_response({"error": "Invalid field list", "details": e.errors(include_url=False)}, 400)
            return
        except (InputGuardrailTripwireTriggered, OutputGuardrailTripwireTriggered) as e:
            logger.warning(f"Guardrail rejected form generation: {e}")
            self.send_json_response({"error": "Failed to generate form. Please try again."}, 400)
            return
        except ValueError as e:
            self.send_json_response({"error": str(e)}, 400)
            return
        except Exception:
            logger.exception("Form generation error")
            self.send_json_response({"error": "Failed to generate form. Please try again."}, 500)
            return

        try:
            session = self.store.create(form, prompt=prompt, session_id=requested_id)
        except SessionExistsError:
            self.send_json_response({"error": f"Session {requested_id} already exists"}, 409)
            return
        logger.info(f"Created form session {session.session_id} with {len(form.fields)} fields")
        self.send_json_response({
            "success": True,
            "session_id": session.session_id,
            "form_url": f"/form/{session.session_id}",
            "form": form.to_form_config(),
        })

    def handle_form_config(self, session_id: str):
        """Return the form configuration of a session."""
        session = self.store.get(session_id)
        if session is None:
            self.send_json_response({"success": False, "error": "Form config not found"}, 404)
            return
        self.send_json_response({
            "success": True,
            "session_id": session_id,
            "prompt": session.prompt,
            "form": session.form.to_form_config(),
        })

    def handle_submit(self, session_id: str):
        """Validate a submission against the session's form."""
        session = self.store.get(session_id)
        if session is None:
            self.send_json_response({"success": False, "error": "Form config not found"}, 404)
            return

        try:
            record = self._read_json()
        except ValueError as e:
            self.send_json_response({"error": f"Invalid JSON: {e}"}, 400)
            return
        if not isinstance(record, dict):
            self.send_json_response({"error": "Submission must be a JSON object"}, 400)
            return

        accepted, payload = SubmissionHandler(self.store).submit(session, record)
        self.send_json_response({"success": accepted, **payload}, 200 if accepted else 422)

    def handle_get_submission(self, session_id: str):
        """Return the accepted submission of a session, for polling."""
        session = self.store.get(session_id)
        if session is None or session.submission is None:
            self.send_json_response({"success": True, "session_id": session_id, "submitted": False}, 404)
            return
        self.send_json_response({
            "success": True,
            "session_id": session_id,
            "submitted": True,
            "data": session.submission,
        })

    def handle_health_check(self):
        config = get_config()
        self.send_json_response({
            "status": "healthy",
            "service": "prompt-form",
            "port": config.server_port,
            "sessions": len(self.store),
        })

    def serve_file(self, filename: str, content_type: str):
        """Serve a static file."""
        file_path = STATIC_DIR / filename
        if not file_path.exists():
            self.send_json_response({"error": f"File not found: {filename}"}, 404)
            return

        content = file_path.read_bytes()
        self.send_response(200)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(content)))
        self.end_headers()
        self.wfile.write(content)

    def send_json_response(self, data: Any, status: int = 200):
        """Send JSON response."""
        json_data = json.dumps(data, indent=get_config().indent_json_output, default=str).encode("utf-8")

        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(json_data)))
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(json_data)

    def log_message(self, format, *args):
        logger.debug(f"{self.address_string()} {format % args}")


def create_server(
    host: str | None = None,
    port: int | None = None,
    store: FormStore | None = None,
    orchestrator_factory: Callable[[], FormGenerationOrchestrator] | None = None,
) -> ThreadingHTTPServer:
    """
    Build the HTTP server without starting it.

    Each server gets its own handler class so stores are never shared
    between server instances.
    """
    config = get_config()
    handler = type(
        "BoundFormRequestHandler",
        (FormRequestHandler,),
        {
            "store": store or FormStore(),
            "orchestrator_factory": staticmethod(orchestrator_factory or FormGenerationOrchestrator),
            "_orchestrator": None,
            "_orchestrator_lock": threading.Lock(),
        },
    )
    address = (config.server_host if host is None else host, config.server_port if port is None else port)
    return ThreadingHTTPServer(address, handler)


def serve(host: str | None = None, port: int | None = None) -> None:
    """Start the HTTP server and block until interrupted."""
    httpd = create_server(host, port)
    bound_host, bound_port = httpd.server_address[:2]
    logger.info(f"Prompt Form server running on http://{bound_host}:{bound_port}")

    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        logger.info("Server stopped")
    finally:
        httpd.server_close()
