# sparc_scaffolder/agents/providers/base.py
"""Abstract base class for content providers."""

from abc import ABC, abstractmethod


class ContentProvider(ABC):
    """Abstract base class for text-generation providers."""

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: Fully prepared prompt text

        Returns:
            Raw generated text (sanitized by the caller)

        Raises:
            ProviderError: with the provider's status code when available
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging (e.g., 'openai', 'anthropic')."""
        pass
