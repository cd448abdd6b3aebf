"""Shared fixtures for integration tests."""

import pytest

from blindspot_scout.config import get_settings
from blindspot_scout.services.llm import AnthropicBackend


@pytest.fixture
def anthropic_backend() -> AnthropicBackend:
    """A live Anthropic backend; skips when no API key is configured."""
    settings = get_settings()
    if not settings.anthropic_api_key:
        pytest.skip("ANTHROPIC_API_KEY not set; skipping live LLM test")
    return AnthropicBackend(settings.llm_model, api_key=settings.anthropic_api_key)
