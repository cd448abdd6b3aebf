"""LLM backends and response helpers."""

import json
import logging
import re
from abc import ABC, abstractmethod

from anthropic import NOT_GIVEN, AsyncAnthropic

from blindspot_scout.constants import LLM_MAX_TOKENS

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?|\n?```\s*$", re.IGNORECASE)


def parse_llm_json(response: str) -> dict:
    """Pull the first JSON object out of an LLM response.

    Strips markdown code fences, then looks for ``{...}`` anywhere in the text.

    Raises:
        ValueError: if no JSON object can be parsed.
    """
    text = _CODE_FENCE_RE.sub("", response.strip()).strip()
    match = re.search(r"\{.*\}", text, re.DOTALL)
    if not match:
        raise ValueError(f"No JSON object in LLM response: {text[:200]!r}")
    data = json.loads(match.group())
    if not isinstance(data, dict):
        raise ValueError("LLM response JSON is not an object")
    return data


class LLMBackend(ABC):
    """Abstract base class for LLM completion backends."""

    name: str = "base"

    @abstractmethod
    async def complete(self, prompt: str, system: str = "") -> str:
        """Return the model's text response to a single-turn prompt."""
        pass

    async def close(self) -> None:
        """Release any client resources held by the backend."""


class AnthropicBackend(LLMBackend):
    """Backend calling the Anthropic Messages API."""

    name = "anthropic"

    def __init__(self, model: str, api_key: str = "", max_tokens: int = LLM_MAX_TOKENS):
        self.model = model
        self.api_key = api_key
        self.max_tokens = max_tokens
        self._client: AsyncAnthropic | None = None

    @property
    def client(self) -> AsyncAnthropic:
        # Falls back to ANTHROPIC_API_KEY from the environment when no key is given
        if self._client is None:
            self._client = AsyncAnthropic(api_key=self.api_key or None)
        return self._client

    async def complete(self, prompt: str, system: str = "") -> str:
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=system or NOT_GIVEN,
            messages=[{"role": "user", "content": prompt}],
        )
        for block in response.content:
            if block.type == "text":
                return block.text
        raise ValueError(f"No text block in response from {self.model}")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None


MOCK_DEMOGRAPHICS_RESPONSE: str = json.dumps(
    {
        "age_buckets": ["18-65", "65-75"],
        "genders": ["male", "female"],
        "pregnancy_mentioned": False,
        "regions": ["North America", "Europe"],
    }
)


class MockBackend(LLMBackend):
    """Offline backend returning canned responses.

    ``responses`` are handed out in order and cycled; every prompt is recorded
    in ``calls`` so tests can inspect what would have been sent.
    """

    name = "mock"

    def __init__(self, responses: list[str] | None = None):
        self.responses = responses or [MOCK_DEMOGRAPHICS_RESPONSE]
        self.calls: list[tuple[str, str]] = []

    async def complete(self, prompt: str, system: str = "") -> str:
        response = self.responses[len(self.calls) % len(self.responses)]
        self.calls.append((prompt, system))
        logger.debug("Mock LLM call #%d (%d chars)", len(self.calls), len(prompt))
        return response
