# sparc_scaffolder/agents/providers/mock_provider.py
"""Canned-response provider for tests, demos, and key-less development."""

from sparc_scaffolder.agents.providers.base import ContentProvider

MOCK_SPECIFICATION = """# Project Specification

## Overview
This is a mock specification generated for testing purposes.

## Requirements
1. User authentication
2. Data management
3. User interface
4. API integration

## Acceptance Criteria
- Users can successfully authenticate
- Data is stored securely
- Interface is responsive
- API calls complete within 500ms"""

MOCK_ARCHITECTURE = """# System Architecture

## Components
- Frontend: React application
- Backend: Node.js API server
- Database: PostgreSQL
- Cache: Redis

## Data Flow
1. User interacts with frontend
2. Frontend calls API
3. API processes request
4. Data is stored/retrieved from database
5. Response is returned to user"""

MOCK_GENERIC = """# Generated Content

This is mock content generated for: {excerpt}...

## Key Points
- Comprehensive implementation
- Best practices followed
- Production-ready code
- Proper error handling
- Security considerations
- Performance optimization"""


def _request_text(prompt: str) -> str:
    """The user request line of a SPARC-context prompt, or the whole prompt."""
    for line in prompt.splitlines():
        if line.startswith("User request:"):
            return line[len("User request:"):].strip()
    return prompt


class MockProvider(ContentProvider):
    """Returns static text chosen by prompt keywords."""

    def __init__(self, provider_name: str = "mock"):
        self._name = provider_name
        self.call_count = 0

    @property
    def name(self) -> str:
        return self._name

    def generate(self, prompt: str) -> str:
        self.call_count += 1
        request = _request_text(prompt)
        if "specification" in request:
            return MOCK_SPECIFICATION
        if "architecture" in request:
            return MOCK_ARCHITECTURE
        return MOCK_GENERIC.format(excerpt=request[:100])
