"""Shared test helpers."""

import pytest

from sparc_scaffolder.agents.providers.base import ContentProvider
from sparc_scaffolder.orchestrator.errors import ProviderError


BLOG_DESCRIPTION = "Create a simple blog application with user authentication"

ECOMMERCE_DESCRIPTION = (
    "Build an e-commerce platform with user registration, product catalog, "
    "payment processing, shopping cart and order management using Node.js, "
    "PostgreSQL, Redis and Docker"
)


class ScriptedProvider(ContentProvider):
    """Provider that replays a list of responses; exceptions are raised."""

    def __init__(self, responses, provider_name: str = "openai"):
        self.responses = list(responses)
        self.prompts = []
        self._name = provider_name

    @property
    def name(self) -> str:
        return self._name

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class RecordingSleep:
    """Async stand-in for asyncio.sleep that records requested delays."""

    def __init__(self):
        self.delays = []

    async def __call__(self, seconds: float):
        self.delays.append(seconds)


def provider_error(status_code=None, message="boom"):
    return ProviderError(message, status_code=status_code)


@pytest.fixture
def blog_spec():
    from sparc_scaffolder.processing.spec_builder import generate_structured_spec
    return generate_structured_spec(BLOG_DESCRIPTION)


@pytest.fixture
def ecommerce_spec():
    from sparc_scaffolder.processing.spec_builder import generate_structured_spec
    return generate_structured_spec(ECOMMERCE_DESCRIPTION)


@pytest.fixture
def mock_config():
    from sparc_scaffolder.config import ScaffolderConfig
    return ScaffolderConfig(use_mock_providers=True, retry_base_delay=0.0)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real credentials and switches out of tests."""
    for name in (
        "ENVIRONMENT",
        "OPENAI_API_KEY",
        "ANTHROPIC_API_KEY",
        "GOOGLE_API_KEY",
        "USE_MOCK_PROVIDERS",
        "ENABLE_ELABORATION",
        "FRONTEND_URL",
        "MAX_RETRY_ATTEMPTS",
        "RETRY_BASE_DELAY_SECONDS",
        "MAX_PROMPT_LENGTH",
        "HOST",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)
