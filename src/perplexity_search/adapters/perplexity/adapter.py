"""Perplexity adapter — Web search via the Perplexity chat-completions API.

Sends the query as a single user turn to a ``sonar`` model and returns the
answer text together with the citations Perplexity attaches to it.

API reference:
  POST /chat/completions
    {
      "model": "sonar-pro",
      "messages": [{"role": "user", "content": "<query>"}],
      "max_tokens": 8192,
      "temperature": 0.2,
      "search_recency_filter": "week"      # optional
    }
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import httpx

from perplexity_search.adapters.base.adapter import AdapterHealth
from perplexity_search.adapters.base.exceptions import ConfigurationError, ConnectionError, QueryError
from perplexity_search.models.payload import ChatMessage, CompletionPayload
from perplexity_search.models.query import SearchRequest
from perplexity_search.models.result import SearchError, SearchOutcome, SearchResult

if TYPE_CHECKING:
    from perplexity_search.config.settings import PerplexitySettings

COMPLETIONS_PATH = "/chat/completions"


class PerplexityAdapter:
    """Search adapter for the Perplexity API.

    One ``search()`` call makes exactly one HTTP request. There is no
    retry, caching or shared per-request state, so concurrent calls are
    independent of each other.

    Args:
        api_key: Bearer token for authentication.
        model: Perplexity model name (``sonar`` or ``sonar-pro``).
        max_tokens: Maximum tokens for the answer.
        temperature: Sampling temperature.
        base_url: Perplexity API base URL.
        timeout: HTTP timeout in seconds; ``None`` waits indefinitely.
        logger: Logger for diagnostics. Defaults to the module logger.
    """

    def __init__(
        self,
        api_key: str = "",
        model: str = "sonar-pro",
        max_tokens: int = 8192,
        temperature: float = 0.2,
        base_url: str = "https://api.perplexity.ai",
        timeout: float | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: PerplexitySettings, logger: logging.Logger | None = None) -> PerplexityAdapter:
        """Build an adapter from the ``perplexity`` settings section."""
        return cls(
            api_key=settings.api_key,
            model=settings.model,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            base_url=settings.base_url,
            timeout=settings.timeout,
            logger=logger,
        )

    @property
    def name(self) -> str:
        return "perplexity"

    @property
    def model(self) -> str:
        return self._model

    def check_config(self) -> None:
        """Validate configuration without opening a connection.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        if not self._api_key:
            raise ConfigurationError(
                "Perplexity API key is required. "
                "Set PERPLEXITY_API_KEY or perplexity.api_key in the config file."
            )

    async def initialize(self) -> None:
        """Initialize the HTTP client.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        self.check_config()

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
            timeout=self._timeout,
        )
        self._logger.info("Using Perplexity model: %s", self._model)

    async def shutdown(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # ── Search ───────────────────────────────────────────────────────────

    def build_payload(self, request: SearchRequest) -> CompletionPayload:
        """Build the completion request body for *request*."""
        return CompletionPayload(
            model=self._model,
            messages=[ChatMessage(content=request.query)],
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            search_recency_filter=request.search_recency_filter,
        )

    async def search(self, request: SearchRequest) -> SearchOutcome:
        """Run one search against the Perplexity API.

        Never raises: transport failures, non-2xx responses and malformed
        bodies all come back as a ``SearchError``.

        Args:
            request: The search request.

        Returns:
            A ``SearchResult`` with answer and citations, or a ``SearchError``.
        """
        if not self._client:
            return SearchError.from_exception(ConnectionError("Perplexity client not initialized."))

        try:
            payload = self.build_payload(request)
            self._logger.info(
                "Using model: %s, max_tokens: %d, temperature: %s",
                self._model,
                self._max_tokens,
                self._temperature,
            )

            response = await self._client.post(COMPLETIONS_PATH, json=payload.to_body())

            if not response.is_success:
                message = _extract_error_message(response)
                self._logger.warning("Perplexity API error (%d): %s", response.status_code, message)
                return SearchError(message=message)

            return _parse_completion(response.json())
        except Exception as e:
            self._logger.warning("Perplexity search failed: %s", e, exc_info=True)
            return SearchError.from_exception(e)

    # ── Health ───────────────────────────────────────────────────────────

    async def health_check(self) -> AdapterHealth:
        """Report whether the adapter is ready; makes no API call."""
        now = datetime.now(UTC).isoformat()
        if self._client is None:
            return AdapterHealth(
                status="unhealthy",
                model=self._model,
                last_check=now,
                message="Perplexity client not initialized",
            )
        return AdapterHealth(status="healthy", model=self._model, last_check=now)


def _extract_error_message(response: httpx.Response) -> str:
    """Pull a readable message out of an error response.

    Tries ``error`` then ``message`` in the JSON body. Perplexity sometimes
    nests the detail as ``{"error": {"message": ...}}``.
    """
    fallback = f"HTTP error! status: {response.status_code}"
    try:
        data = response.json()
    except ValueError:
        return fallback
    if not isinstance(data, dict):
        return fallback

    for key in ("error", "message"):
        value = data.get(key)
        if isinstance(value, dict):
            value = value.get("message")
        if value:
            return str(value)
    return fallback


def _parse_completion(data: Any) -> SearchResult:
    """Map a chat-completions response to a ``SearchResult``.

    Raises:
        QueryError: If the answer text is missing or citations are malformed.
    """
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise QueryError("Unexpected Perplexity response: missing choices[0].message.content") from e
    if not isinstance(content, str):
        raise QueryError("Unexpected Perplexity response: choices[0].message.content is not text")

    citations = data.get("citations") or []
    if not isinstance(citations, list) or not all(isinstance(c, str) for c in citations):
        raise QueryError("Unexpected Perplexity response: citations is not a list of URLs")
    return SearchResult(content=content, citations=citations)
