# sparc_scaffolder/agents/providers/openai_provider.py
"""OpenAI content provider."""

import openai
from openai import OpenAI

from sparc_scaffolder.agents.providers.base import ContentProvider
from sparc_scaffolder.orchestrator.errors import ProviderError

SYSTEM_PROMPT = "You are a senior software architect who writes SPARC project documentation in markdown."


class OpenAIProvider(ContentProvider):
    """OpenAI-based content provider."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4.1-mini",
        max_tokens: int = 2048,
    ):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self._client = OpenAI(api_key=self.api_key)

    @property
    def name(self) -> str:
        return "openai"

    def generate(self, prompt: str) -> str:
        """Generate content using OpenAI chat completions."""
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self.max_tokens,
                temperature=0.3,
            )
        except openai.APIStatusError as e:
            raise ProviderError(f"OpenAI error: {e.message}", status_code=e.status_code) from e
        except openai.APIError as e:
            raise ProviderError(f"OpenAI connection error: {e}") from e

        if not response.choices:
            return ""
        return (response.choices[0].message.content or "").strip()
