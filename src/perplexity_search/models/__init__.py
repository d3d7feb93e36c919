"""Request, payload and result models for the search adapter."""

from perplexity_search.models.payload import ChatMessage, CompletionPayload
from perplexity_search.models.query import RecencyFilter, SearchRequest
from perplexity_search.models.result import SearchError, SearchOutcome, SearchResult

__all__ = [
    "ChatMessage",
    "CompletionPayload",
    "RecencyFilter",
    "SearchError",
    "SearchOutcome",
    "SearchRequest",
    "SearchResult",
]
