# tests/test_provider_base.py
"""Tests for the content provider base class."""

import pytest


def test_content_provider_is_abstract():
    from sparc_scaffolder.agents.providers.base import ContentProvider

    with pytest.raises(TypeError):
        ContentProvider()


def test_content_provider_requires_generate_and_name():
    from sparc_scaffolder.agents.providers.base import ContentProvider

    class NameOnly(ContentProvider):
        @property
        def name(self):
            return "partial"

    with pytest.raises(TypeError):
        NameOnly()

    class Complete(ContentProvider):
        @property
        def name(self):
            return "complete"

        def generate(self, prompt):
            return prompt.upper()

    provider = Complete()
    assert provider.name == "complete"
    assert provider.generate("hi") == "HI"
