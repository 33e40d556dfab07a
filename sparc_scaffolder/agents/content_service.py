# sparc_scaffolder/agents/content_service.py
"""Content Service - the text-generation capability behind optional elaboration.

generate_content() never raises for provider trouble; it returns a
ContentResult with success=False and a human-readable error instead.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from sparc_scaffolder.agents.prompts import load_prompt
from sparc_scaffolder.agents.providers.anthropic_provider import AnthropicProvider
from sparc_scaffolder.agents.providers.base import ContentProvider
from sparc_scaffolder.agents.providers.mock_provider import MockProvider
from sparc_scaffolder.agents.providers.openai_provider import OpenAIProvider
from sparc_scaffolder.config import ScaffolderConfig
from sparc_scaffolder.orchestrator.errors import ConfigurationError, ProviderError
from sparc_scaffolder.orchestrator.logging import PipelineLogger
from sparc_scaffolder.processing.sanitizer import sanitize

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("openai", "anthropic")
PROVIDER_ALIASES = {"claude": "anthropic"}

# Listed by the providers endpoint; google has no provider implementation
PROVIDER_CATALOG = (
    ("openai", "OpenAI GPT-4"),
    ("anthropic", "Anthropic Claude"),
    ("google", "Google Gemini"),
)

AUTH_FAILED = "Authentication failed - please check API keys"
ERROR_MESSAGES = {
    402: "Quota exceeded - please check your billing",
    429: "Rate limit exceeded - please try again later",
}
INVALID_RESPONSE = "Invalid response from AI service"


@dataclass
class ContentResult:
    """Outcome of a content generation call."""

    success: bool
    content: str = ""
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {"success": self.success, "content": self.content, "error": self.error}


def list_providers(config: ScaffolderConfig) -> list[dict]:
    """Provider catalog with availability based on configured credentials."""
    return [
        {"id": provider_id, "name": name, "available": config.provider_available(provider_id)}
        for provider_id, name in PROVIDER_CATALOG
    ]


def build_providers(config: ScaffolderConfig) -> dict[str, ContentProvider]:
    """Instantiate providers for every configured credential.

    Raises:
        ConfigurationError: if no credentials are configured and mock
            providers are disabled.
    """
    if config.use_mock_providers:
        return {provider_id: MockProvider(provider_id) for provider_id in SUPPORTED_PROVIDERS}

    if not config.has_credentials():
        raise ConfigurationError(
            "Missing required API keys",
            missing=["OPENAI_API_KEY", "ANTHROPIC_API_KEY"],
        )

    providers: dict[str, ContentProvider] = {}
    if config.openai_api_key:
        providers["openai"] = OpenAIProvider(api_key=config.openai_api_key, model=config.openai_model)
    if config.anthropic_api_key:
        providers["anthropic"] = AnthropicProvider(
            api_key=config.anthropic_api_key, model=config.anthropic_model
        )
    return providers


class ContentService:
    """
    Generates text through a named provider with bounded retry.

    Flow:
    1. Validate prompt and provider id
    2. Wrap the prompt in the SPARC context template
    3. Call the provider, retrying transient failures with exponential backoff
    4. Sanitize the response
    """

    def __init__(
        self,
        config: ScaffolderConfig,
        providers: Optional[dict[str, ContentProvider]] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.config = config
        self.providers = providers if providers is not None else build_providers(config)
        self._sleep = sleep
        self.pipeline_logger = PipelineLogger()

    def resolve_provider_id(self, provider_id: str) -> str:
        normalized = (provider_id or "").lower().strip()
        return PROVIDER_ALIASES.get(normalized, normalized)

    def _validate(self, prompt: str, provider_id: str) -> Optional[str]:
        if not prompt or not prompt.strip():
            return "Prompt is required"
        if len(prompt) > self.config.max_prompt_length:
            return "Prompt exceeds maximum length"
        if provider_id not in SUPPORTED_PROVIDERS:
            return "Unsupported AI provider"
        if provider_id not in self.providers:
            return f"Provider not configured: {provider_id}"
        return None

    def optimize_prompt(self, prompt: str) -> str:
        """Wrap a request in the SPARC methodology context."""
        return load_prompt("sparc_context").format(prompt=prompt).strip()

    async def generate_content(self, prompt: str, provider_id: str) -> ContentResult:
        """Generate text for a prompt with the given provider."""
        resolved = self.resolve_provider_id(provider_id)

        validation_error = self._validate(prompt, resolved)
        if validation_error:
            return ContentResult(success=False, error=validation_error)

        try:
            raw = await self._call_with_retry(self.optimize_prompt(prompt), self.providers[resolved])
            return ContentResult(success=True, content=self._sanitize_response(raw))
        except Exception as e:
            return self._handle_error(e)

    async def _call_with_retry(self, prompt: str, provider: ContentProvider) -> str:
        max_attempts = max(1, self.config.max_retry_attempts)

        for attempt in range(1, max_attempts + 1):
            try:
                return await asyncio.to_thread(provider.generate, prompt)
            except ProviderError as e:
                if not e.is_retryable or attempt == max_attempts:
                    raise
                delay = self.config.retry_base_delay * (2 ** (attempt - 1))
                logger.warning(f"{provider.name} attempt {attempt} failed: {e}")
                self.pipeline_logger.retry_scheduled(provider.name, attempt, delay)
                await self._sleep(delay)

        raise ProviderError(f"{provider.name} produced no response")

    def _sanitize_response(self, content: Optional[str]) -> str:
        if not content:
            raise ProviderError(INVALID_RESPONSE)
        cleaned = sanitize(content)
        if not cleaned:
            raise ProviderError(INVALID_RESPONSE)
        return cleaned

    def _handle_error(self, error: Exception) -> ContentResult:
        message = None
        if isinstance(error, ProviderError):
            if error.is_auth_error:
                message = AUTH_FAILED
            else:
                message = ERROR_MESSAGES.get(error.status_code)
        if message is None:
            message = str(error) or "Unknown error occurred"

        logger.error(f"Content generation failed: {message}")
        return ContentResult(success=False, error=message)
