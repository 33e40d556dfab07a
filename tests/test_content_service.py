# tests/test_content_service.py
"""Tests for the content service."""

import asyncio
import logging

import pytest

from conftest import RecordingSleep, ScriptedProvider, provider_error


def make_service(responses, config=None, provider_id="openai"):
    from sparc_scaffolder.agents.content_service import ContentService
    from sparc_scaffolder.config import ScaffolderConfig

    config = config or ScaffolderConfig(openai_api_key="sk-test")
    provider = ScriptedProvider(responses, provider_id)
    sleep = RecordingSleep()
    service = ContentService(config, providers={provider_id: provider}, sleep=sleep)
    return service, provider, sleep


def test_missing_credentials_raise_configuration_error():
    from sparc_scaffolder.agents.content_service import ContentService
    from sparc_scaffolder.config import ScaffolderConfig
    from sparc_scaffolder.orchestrator.errors import ConfigurationError

    with pytest.raises(ConfigurationError, match="Missing required API keys"):
        ContentService(ScaffolderConfig())


def test_mock_mode_needs_no_credentials(mock_config):
    from sparc_scaffolder.agents.content_service import ContentService
    from sparc_scaffolder.agents.providers.mock_provider import MockProvider

    service = ContentService(mock_config)

    assert set(service.providers) == {"openai", "anthropic"}
    assert all(isinstance(p, MockProvider) for p in service.providers.values())


def test_only_configured_providers_are_built():
    from sparc_scaffolder.agents.content_service import ContentService
    from sparc_scaffolder.agents.providers.anthropic_provider import AnthropicProvider
    from sparc_scaffolder.config import ScaffolderConfig

    service = ContentService(ScaffolderConfig(anthropic_api_key="sk-ant-test"))

    assert list(service.providers) == ["anthropic"]
    assert isinstance(service.providers["anthropic"], AnthropicProvider)


def test_generate_content_success_wraps_prompt():
    service, provider, sleep = make_service(["## Result\nDone"])

    result = asyncio.run(service.generate_content("Describe a blog", "openai"))

    assert result.success is True
    assert result.content == "## Result\nDone"
    assert result.error is None
    assert "User request: Describe a blog" in provider.prompts[0]
    assert "SPARC methodology" in provider.prompts[0]
    assert sleep.delays == []


def test_response_is_sanitized():
    service, _, _ = make_service(["<script>alert(1)</script><p>Clean text</p>"])

    result = asyncio.run(service.generate_content("Describe a blog", "openai"))

    assert result.success is True
    assert result.content == "Clean text"


@pytest.mark.parametrize("response", ["", None, "<div></div>"])
def test_empty_response_is_invalid(response):
    service, _, _ = make_service([response])

    result = asyncio.run(service.generate_content("Describe a blog", "openai"))

    assert result.success is False
    assert result.error == "Invalid response from AI service"


@pytest.mark.parametrize("prompt", ["", "   "])
def test_prompt_is_required(prompt):
    service, provider, _ = make_service(["unused"])

    result = asyncio.run(service.generate_content(prompt, "openai"))

    assert result.error == "Prompt is required"
    assert provider.prompts == []


def test_prompt_length_limit():
    from sparc_scaffolder.config import ScaffolderConfig

    config = ScaffolderConfig(openai_api_key="sk-test", max_prompt_length=20)
    service, _, _ = make_service(["unused"], config=config)

    result = asyncio.run(service.generate_content("x" * 21, "openai"))
    assert result.error == "Prompt exceeds maximum length"


@pytest.mark.parametrize("provider_id", ["google", "cohere", ""])
def test_unsupported_provider(provider_id):
    service, _, _ = make_service(["unused"])

    result = asyncio.run(service.generate_content("Describe a blog", provider_id))
    assert result.error == "Unsupported AI provider"


def test_claude_is_an_alias_for_anthropic():
    service, provider, _ = make_service(["from claude"], provider_id="anthropic")

    result = asyncio.run(service.generate_content("Describe a blog", "Claude"))

    assert result.success is True
    assert result.content == "from claude"


def test_supported_but_unconfigured_provider():
    service, _, _ = make_service(["unused"], provider_id="openai")

    result = asyncio.run(service.generate_content("Describe a blog", "anthropic"))

    assert result.success is False
    assert result.error == "Provider not configured: anthropic"


def test_retries_transient_failures_with_backoff():
    from sparc_scaffolder.config import ScaffolderConfig

    config = ScaffolderConfig(openai_api_key="sk-test", retry_base_delay=1.0)
    service, provider, sleep = make_service(
        [provider_error(500), provider_error(None), "recovered"], config=config
    )

    result = asyncio.run(service.generate_content("Describe a blog", "openai"))

    assert result.success is True
    assert result.content == "recovered"
    assert len(provider.prompts) == 3
    assert sleep.delays == [1.0, 2.0]


def test_gives_up_after_max_attempts():
    service, provider, sleep = make_service(
        [provider_error(502, "bad gateway")] * 3
    )

    result = asyncio.run(service.generate_content("Describe a blog", "openai"))

    assert result.success is False
    assert result.error == "bad gateway"
    assert len(provider.prompts) == 3
    assert len(sleep.delays) == 2


@pytest.mark.parametrize("status_code,message", [
    (401, "Authentication failed - please check API keys"),
    (403, "Authentication failed - please check API keys"),
    (429, "Rate limit exceeded - please try again later"),
    (402, "Quota exceeded - please check your billing"),
])
def test_non_transient_errors_are_not_retried(status_code, message):
    service, provider, sleep = make_service([provider_error(status_code), "never"])

    result = asyncio.run(service.generate_content("Describe a blog", "openai"))

    assert result.success is False
    assert result.error == message
    assert len(provider.prompts) == 1
    assert sleep.delays == []


def test_auth_error_hides_provider_message():
    service, provider, _ = make_service([provider_error(403, "invalid x-api-key sk-123")])

    result = asyncio.run(service.generate_content("Describe a blog", "openai"))

    assert result.error == "Authentication failed - please check API keys"
    assert "sk-123" not in result.error
    assert len(provider.prompts) == 1


def test_other_client_errors_pass_message_through():
    service, provider, _ = make_service([provider_error(400, "bad request body")])

    result = asyncio.run(service.generate_content("Describe a blog", "openai"))

    assert result.error == "bad request body"
    assert len(provider.prompts) == 1


def test_unexpected_exception_becomes_result():
    service, _, _ = make_service([RuntimeError("socket closed")])

    result = asyncio.run(service.generate_content("Describe a blog", "openai"))

    assert result.success is False
    assert result.error == "socket closed"


def test_retry_is_logged(caplog):
    service, _, _ = make_service([provider_error(503), "ok"])

    with caplog.at_level(logging.WARNING):
        asyncio.run(service.generate_content("Describe a blog", "openai"))

    assert "retry_scheduled" in caplog.text


def test_mock_providers_end_to_end(mock_config):
    from sparc_scaffolder.agents.content_service import ContentService

    service = ContentService(mock_config)
    result = asyncio.run(service.generate_content("Write the architecture overview", "anthropic"))

    assert result.success is True
    assert "System Architecture" in result.content


def test_list_providers_availability():
    from sparc_scaffolder.agents.content_service import list_providers
    from sparc_scaffolder.config import ScaffolderConfig

    providers = list_providers(ScaffolderConfig(openai_api_key="sk-test", google_api_key="g-test"))

    assert providers == [
        {"id": "openai", "name": "OpenAI GPT-4", "available": True},
        {"id": "anthropic", "name": "Anthropic Claude", "available": False},
        {"id": "google", "name": "Google Gemini", "available": True},
    ]


def test_content_result_to_dict():
    from sparc_scaffolder.agents.content_service import ContentResult

    assert ContentResult(success=False, error="nope").to_dict() == {
        "success": False,
        "content": "",
        "error": "nope",
    }
