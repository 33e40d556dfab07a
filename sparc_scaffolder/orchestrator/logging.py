# sparc_scaffolder/orchestrator/logging.py
"""Structured logging for generation runs."""

import json
import logging
from datetime import datetime, timezone


class PipelineLogger:
    """Structured JSON logger for generation events."""

    def __init__(self, name: str = "sparc_scaffolder.pipeline"):
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def _log(self, level: int, event: str, **kwargs):
        """Log a structured event."""
        data = {
            "event": event,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **kwargs
        }
        self.logger.log(level, json.dumps(data))

    def generation_started(self, request_id: str, framework: str, description_length: int):
        """Log the start of a generation request."""
        self._log(
            logging.INFO,
            "generation_started",
            request_id=request_id,
            framework=framework,
            description_length=description_length
        )

    def phase_generated(self, request_id: str, phase: str, complexity: str):
        """Log a synthesized SPARC document."""
        self._log(
            logging.INFO,
            "phase_generated",
            request_id=request_id,
            phase=phase,
            complexity=complexity
        )

    def generation_complete(self, request_id: str, file_count: int, duration_ms: int):
        """Log a finished generation request."""
        self._log(
            logging.INFO,
            "generation_complete",
            request_id=request_id,
            file_count=file_count,
            duration_ms=duration_ms
        )

    def validation_failed(self, request_id: str, errors: list[str]):
        """Log rejected input."""
        self._log(
            logging.WARNING,
            "validation_failed",
            request_id=request_id,
            errors=errors
        )

    def elaboration_skipped(self, request_id: str, phase: str, reason: str):
        """Log a phase whose AI elaboration was dropped."""
        self._log(
            logging.WARNING,
            "elaboration_skipped",
            request_id=request_id,
            phase=phase,
            reason=reason
        )

    def retry_scheduled(self, provider: str, attempt: int, delay_seconds: float):
        """Log retry scheduling."""
        self._log(
            logging.WARNING,
            "retry_scheduled",
            provider=provider,
            attempt=attempt,
            delay_seconds=delay_seconds
        )

    def error(self, request_id: str, error_type: str, message: str):
        """Log an error."""
        self._log(
            logging.ERROR,
            "error",
            request_id=request_id,
            error_type=error_type,
            message=message
        )
