# sparc_scaffolder/config.py
"""Configuration for the scaffolder."""

import os
from dataclasses import dataclass
from typing import Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() == "true"


@dataclass
class ScaffolderConfig:
    """Configuration for the scaffolder.

    Passed explicitly to the content service and orchestrator; the core never
    reads the environment itself. Use from_env() at process boundaries.
    """

    environment: str = "development"

    # Provider credentials
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    google_api_key: Optional[str] = None

    # Provider models
    openai_model: str = "gpt-4.1-mini"
    anthropic_model: str = "claude-haiku-4-5-20251001"

    # Serve canned responses instead of calling provider APIs
    use_mock_providers: bool = False

    # Retry policy
    max_retry_attempts: int = 3
    retry_base_delay: float = 1.0  # seconds, doubled per attempt

    # Input bounds
    min_input_length: int = 10
    max_input_length: int = 10000
    max_prompt_length: int = 10000

    # Ask the content service for extra notes per phase
    enable_elaboration: bool = False

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000
    frontend_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ScaffolderConfig":
        """Create configuration from environment variables."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", "development"),
            openai_api_key=os.environ.get("OPENAI_API_KEY") or None,
            anthropic_api_key=os.environ.get("ANTHROPIC_API_KEY") or None,
            google_api_key=os.environ.get("GOOGLE_API_KEY") or None,
            openai_model=os.environ.get("OPENAI_MODEL", "gpt-4.1-mini"),
            anthropic_model=os.environ.get("ANTHROPIC_MODEL", "claude-haiku-4-5-20251001"),
            use_mock_providers=_env_bool("USE_MOCK_PROVIDERS"),
            max_retry_attempts=int(os.environ.get("MAX_RETRY_ATTEMPTS", 3)),
            retry_base_delay=float(os.environ.get("RETRY_BASE_DELAY_SECONDS", 1.0)),
            max_prompt_length=int(os.environ.get("MAX_PROMPT_LENGTH", 10000)),
            enable_elaboration=_env_bool("ENABLE_ELABORATION"),
            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", 3000)),
            frontend_url=os.environ.get("FRONTEND_URL") or None,
        )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def has_credentials(self) -> bool:
        """True if at least one provider API key is configured."""
        return bool(self.openai_api_key or self.anthropic_api_key)

    def provider_available(self, provider_id: str) -> bool:
        """Check whether credentials exist for a provider id."""
        keys = {
            "openai": self.openai_api_key,
            "anthropic": self.anthropic_api_key,
            "claude": self.anthropic_api_key,
            "google": self.google_api_key,
        }
        return bool(keys.get(provider_id))

    def display(self) -> str:
        """Display configuration with secrets masked (for debugging)."""
        def mask(value: Optional[str]) -> str:
            return "set" if value else "missing"

        return f"""
SPARC Scaffolder Configuration
==============================
Environment: {self.environment}
OpenAI key: {mask(self.openai_api_key)} (model {self.openai_model})
Anthropic key: {mask(self.anthropic_api_key)} (model {self.anthropic_model})
Google key: {mask(self.google_api_key)}
Mock providers: {self.use_mock_providers}
Retries: {self.max_retry_attempts} (base delay {self.retry_base_delay}s)
Input bounds: {self.min_input_length}-{self.max_input_length} chars
Elaboration: {self.enable_elaboration}
Server: {self.host}:{self.port}
"""
