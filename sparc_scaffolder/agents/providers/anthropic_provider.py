# sparc_scaffolder/agents/providers/anthropic_provider.py
"""Anthropic Claude content provider."""

import anthropic
from anthropic import Anthropic

from sparc_scaffolder.agents.providers.base import ContentProvider
from sparc_scaffolder.agents.providers.openai_provider import SYSTEM_PROMPT
from sparc_scaffolder.orchestrator.errors import ProviderError


class AnthropicProvider(ContentProvider):
    """Anthropic Claude-based content provider."""

    def __init__(
        self,
        api_key: str,
        model: str = "claude-haiku-4-5-20251001",
        max_tokens: int = 2048,
    ):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self._client = Anthropic(api_key=self.api_key)

    @property
    def name(self) -> str:
        return "anthropic"

    def generate(self, prompt: str) -> str:
        """Generate content using Anthropic Claude."""
        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[
                    {"role": "user", "content": prompt},
                ],
                system=SYSTEM_PROMPT,
                temperature=0.3,
            )
        except anthropic.APIStatusError as e:
            raise ProviderError(f"Anthropic error: {e.message}", status_code=e.status_code) from e
        except anthropic.APIError as e:
            raise ProviderError(f"Anthropic connection error: {e}") from e

        text_blocks = [block.text for block in response.content if getattr(block, "type", None) == "text"]
        return "".join(text_blocks).strip()
