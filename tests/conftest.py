"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any

import pytest

from perplexity_search.adapters.perplexity.adapter import PerplexityAdapter
from perplexity_search.config.settings import Settings
from perplexity_search.models.query import RecencyFilter, SearchRequest


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        perplexity={"api_key": "test-key"},
    )


@pytest.fixture
def adapter() -> PerplexityAdapter:
    """Create a Perplexity adapter instance (not initialised)."""
    return PerplexityAdapter(
        api_key="test-key",
        model="sonar",
        max_tokens=1024,
        temperature=0.5,
        base_url="http://test-api.example.com",
    )


@pytest.fixture
def simple_request() -> SearchRequest:
    """A search without a recency filter."""
    return SearchRequest(query="What is the capital of France?")


@pytest.fixture
def weekly_request() -> SearchRequest:
    """A search restricted to the last week."""
    return SearchRequest(query="Latest Python release", search_recency_filter=RecencyFilter.WEEK)


@pytest.fixture
def completion_response() -> dict[str, Any]:
    """Sample chat-completions response mirroring real Perplexity output."""
    return {
        "id": "3c90c3cc-0d44-4b50-8888-8dd25736052a",
        "model": "sonar",
        "created": 1724369245,
        "usage": {"prompt_tokens": 9, "completion_tokens": 2, "total_tokens": 11},
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": "Paris"},
                "delta": {"role": "assistant", "content": ""},
            }
        ],
        "citations": ["https://example.com"],
    }
