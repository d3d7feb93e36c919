"""Outbound chat-completions request body."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from perplexity_search.models.query import RecencyFilter


class ChatMessage(BaseModel):
    """One conversation turn."""

    role: Literal["user"] = "user"
    content: str


class CompletionPayload(BaseModel):
    """Body of ``POST /chat/completions``.

    ``search_recency_filter`` is omitted from the serialized body when unset,
    so the API applies no time filtering.
    """

    model: str
    messages: list[ChatMessage] = Field(min_length=1)
    max_tokens: int
    temperature: float
    search_recency_filter: RecencyFilter | None = None

    def to_body(self) -> dict[str, Any]:
        """Serialize to the JSON body sent to the API."""
        return self.model_dump(mode="json", exclude_none=True)
