# sparc_scaffolder/orchestrator/errors.py
"""Custom error types for the scaffolder."""

from typing import Optional


class ScaffolderError(Exception):
    """Base error for scaffolder operations."""
    pass


class ConfigurationError(ScaffolderError):
    """Required configuration (e.g. provider credentials) is missing."""

    def __init__(self, message: str, missing: Optional[list[str]] = None):
        super().__init__(message)
        self.missing = missing or []


class SpecGenerationError(ScaffolderError):
    """Building the structured spec failed."""

    def __init__(self, message: str = "Failed to process input"):
        super().__init__(message)


class SparcGenerationError(ScaffolderError):
    """Synthesizing the SPARC documents failed."""

    def __init__(self, message: str = "Failed to generate SPARC documentation"):
        super().__init__(message)


class InvalidPhaseError(ScaffolderError):
    """Requested phase is not one of the five SPARC phases."""

    def __init__(self, message: str = "Invalid phase name", phase: Optional[str] = None):
        super().__init__(message)
        self.phase = phase


class UnsupportedFrameworkError(ScaffolderError):
    """Requested scaffold framework is unknown."""

    def __init__(self, message: str, framework: Optional[str] = None):
        super().__init__(message)
        self.framework = framework


class ProviderError(ScaffolderError):
    """A content provider call failed.

    status_code mirrors the HTTP status reported by the provider, or None
    for connection-level failures.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)

    @property
    def is_retryable(self) -> bool:
        """Only connection failures and 5xx responses are worth retrying."""
        return self.status_code is None or self.status_code >= 500
