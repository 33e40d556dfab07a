"""Content providers for text generation."""

from sparc_scaffolder.agents.providers.base import ContentProvider
from sparc_scaffolder.agents.providers.openai_provider import OpenAIProvider
from sparc_scaffolder.agents.providers.anthropic_provider import AnthropicProvider
from sparc_scaffolder.agents.providers.mock_provider import MockProvider

__all__ = ["ContentProvider", "OpenAIProvider", "AnthropicProvider", "MockProvider"]
