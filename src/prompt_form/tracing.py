"""
Tracing configuration for Prompt Form.

Form generation runs through the OpenAI Agents SDK, which traces every
agent run. This module adds local processors so traces can be followed
in the log or collected in a JSON Lines file.
"""

import json
import logging

from agents import set_tracing_disabled
from agents.tracing import (
    Span,
    Trace,
    TracingProcessor,
    set_trace_processors,
)

logger = logging.getLogger("prompt-form.trace")


class LoggingTracingProcessor(TracingProcessor):
    """Writes trace and span boundaries to the ``prompt-form.trace`` logger."""

    def __init__(self, verbose: bool = False):
        """
        Args:
            verbose: If True, also log every span.
        """
        self.verbose = verbose

    def on_trace_start(self, trace: Trace) -> None:
        logger.info(f"[TRACE START] {trace.name} (ID: {trace.trace_id[:8]}...)")

    def on_trace_end(self, trace: Trace) -> None:
        logger.info(f"[TRACE END] {trace.name}")

    def on_span_start(self, span: Span[object]) -> None:
        if self.verbose:
            logger.debug(f"[SPAN START] {span.span_data}")

    def on_span_end(self, span: Span[object]) -> None:
        if self.verbose:
            logger.debug(f"[SPAN END] {span.span_data}")

    def shutdown(self) -> None:
        pass

    def force_flush(self) -> None:
        pass


class FileTracingProcessor(TracingProcessor):
    """
    Appends one JSON line per finished trace to a file.

    Spans are buffered per trace id until the trace ends.
    """

    def __init__(self, file_path: str = "traces.jsonl"):
        self.file_path = file_path
        self._traces: dict[str, dict] = {}

    def on_trace_start(self, trace: Trace) -> None:
        self._traces[trace.trace_id] = {
            "trace_id": trace.trace_id,
            "name": trace.name,
            "spans": [],
        }

    def on_trace_end(self, trace: Trace) -> None:
        record = self._traces.pop(trace.trace_id, None)
        if record is None:
            return
        with open(self.file_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(record) + "\n")

    def on_span_start(self, span: Span[object]) -> None:
        pass

    def on_span_end(self, span: Span[object]) -> None:
        record = self._traces.get(span.trace_id)
        if record is not None:
            record["spans"].append({
                "span_id": span.span_id,
                "data": str(span.span_data),
            })

    def shutdown(self) -> None:
        self._traces.clear()

    def force_flush(self) -> None:
        pass


def setup_tracing(
    enabled: bool = True,
    console: bool = False,
    verbose: bool = False,
    file_path: str | None = None,
) -> None:
    """
    Configure tracing for form generation.

    With no local processors configured, traces go to the OpenAI
    dashboard when an API key is available.

    Args:
        enabled: Whether tracing is enabled.
        console: Whether to log traces.
        verbose: Whether to log every span.
        file_path: Optional JSON Lines file to write traces to.
    """
    if not enabled:
        set_tracing_disabled(True)
        return

    set_tracing_disabled(False)

    processors: list[TracingProcessor] = []
    if console:
        processors.append(LoggingTracingProcessor(verbose=verbose))
    if file_path:
        processors.append(FileTracingProcessor(file_path=file_path))

    if processors:
        set_trace_processors(processors)


def disable_tracing() -> None:
    """Disable all tracing."""
    set_tracing_disabled(True)


def enable_tracing() -> None:
    """Enable tracing (uses default OpenAI dashboard)."""
    set_tracing_disabled(False)
