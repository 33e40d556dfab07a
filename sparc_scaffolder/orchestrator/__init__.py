"""Generation orchestrator package."""

from sparc_scaffolder.orchestrator.errors import (
    ScaffolderError,
    ConfigurationError,
    SpecGenerationError,
    SparcGenerationError,
    InvalidPhaseError,
    UnsupportedFrameworkError,
    ProviderError,
)

__all__ = [
    "ScaffolderError",
    "ConfigurationError",
    "SpecGenerationError",
    "SparcGenerationError",
    "InvalidPhaseError",
    "UnsupportedFrameworkError",
    "ProviderError",
]
