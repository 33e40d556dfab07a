# tests/test_orchestrator_errors.py
"""Tests for scaffolder error types."""

import pytest


def test_error_hierarchy():
    from sparc_scaffolder.orchestrator.errors import (
        ConfigurationError,
        InvalidPhaseError,
        ProviderError,
        ScaffolderError,
        SparcGenerationError,
        SpecGenerationError,
        UnsupportedFrameworkError,
    )

    for error_cls in (
        ConfigurationError,
        InvalidPhaseError,
        ProviderError,
        SparcGenerationError,
        SpecGenerationError,
        UnsupportedFrameworkError,
    ):
        assert issubclass(error_cls, ScaffolderError)


def test_pipeline_errors_have_stable_messages():
    from sparc_scaffolder.orchestrator.errors import (
        InvalidPhaseError,
        SparcGenerationError,
        SpecGenerationError,
    )

    assert str(SpecGenerationError()) == "Failed to process input"
    assert str(SparcGenerationError()) == "Failed to generate SPARC documentation"
    assert str(InvalidPhaseError(phase="design")) == "Invalid phase name"
    assert InvalidPhaseError(phase="design").phase == "design"


def test_configuration_error_lists_missing():
    from sparc_scaffolder.orchestrator.errors import ConfigurationError

    error = ConfigurationError("Missing required API keys", missing=["OPENAI_API_KEY"])
    assert error.missing == ["OPENAI_API_KEY"]
    assert ConfigurationError("x").missing == []


@pytest.mark.parametrize("status_code,auth,retryable", [
    (None, False, True),
    (500, False, True),
    (503, False, True),
    (401, True, False),
    (403, True, False),
    (429, False, False),
    (402, False, False),
    (400, False, False),
])
def test_provider_error_classification(status_code, auth, retryable):
    from sparc_scaffolder.orchestrator.errors import ProviderError

    error = ProviderError("failed", status_code=status_code)

    assert error.is_auth_error is auth
    assert error.is_retryable is retryable


def test_errors_exported_from_package():
    from sparc_scaffolder import orchestrator
    from sparc_scaffolder.orchestrator import errors

    for name in orchestrator.__all__:
        assert getattr(orchestrator, name) is getattr(errors, name)
