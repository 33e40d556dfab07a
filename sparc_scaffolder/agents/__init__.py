"""Content generation: providers, prompts, and the retrying content service."""

from sparc_scaffolder.agents.content_service import ContentResult, ContentService, list_providers

__all__ = ["ContentResult", "ContentService", "list_providers"]
