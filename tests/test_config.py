# tests/test_config.py
"""Tests for scaffolder configuration."""


def test_config_defaults():
    from sparc_scaffolder.config import ScaffolderConfig

    config = ScaffolderConfig()

    assert config.environment == "development"
    assert config.max_retry_attempts == 3
    assert config.retry_base_delay == 1.0
    assert config.min_input_length == 10
    assert config.max_input_length == 10000
    assert config.enable_elaboration is False
    assert config.port == 3000
    assert config.has_credentials() is False


def test_config_from_env(monkeypatch):
    from sparc_scaffolder.config import ScaffolderConfig

    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("USE_MOCK_PROVIDERS", "true")
    monkeypatch.setenv("MAX_RETRY_ATTEMPTS", "5")
    monkeypatch.setenv("RETRY_BASE_DELAY_SECONDS", "0.5")
    monkeypatch.setenv("ENABLE_ELABORATION", "TRUE")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FRONTEND_URL", "https://app.example.com")

    config = ScaffolderConfig.from_env()

    assert config.is_production
    assert config.openai_api_key == "sk-test"
    assert config.use_mock_providers is True
    assert config.max_retry_attempts == 5
    assert config.retry_base_delay == 0.5
    assert config.enable_elaboration is True
    assert config.port == 8080
    assert config.frontend_url == "https://app.example.com"


def test_empty_env_keys_are_missing(monkeypatch):
    from sparc_scaffolder.config import ScaffolderConfig

    monkeypatch.setenv("OPENAI_API_KEY", "")

    config = ScaffolderConfig.from_env()
    assert config.openai_api_key is None
    assert config.has_credentials() is False


def test_provider_available():
    from sparc_scaffolder.config import ScaffolderConfig

    config = ScaffolderConfig(anthropic_api_key="sk-ant")

    assert config.provider_available("anthropic")
    assert config.provider_available("claude")
    assert not config.provider_available("openai")
    assert not config.provider_available("google")
    assert not config.provider_available("unknown")


def test_display_masks_secrets():
    from sparc_scaffolder.config import ScaffolderConfig

    text = ScaffolderConfig(openai_api_key="sk-very-secret").display()

    assert "sk-very-secret" not in text
    assert "OpenAI key: set" in text
    assert "Anthropic key: missing" in text
