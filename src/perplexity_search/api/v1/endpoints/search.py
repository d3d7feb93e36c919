"""Search endpoint — HTTP front for the ``search`` tool."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from perplexity_search.adapters.perplexity.adapter import PerplexityAdapter
from perplexity_search.api.deps import get_adapter
from perplexity_search.models.query import SearchRequest
from perplexity_search.models.result import SearchError, SearchResult

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/search",
    response_model=SearchResult | SearchError,
    summary="Web Search",
    description=(
        "Perform a web search using Perplexity's API and return the answer with its citations.\n\n"
        "The response is always HTTP 200 once the request body is valid. Failures of the "
        "upstream API are reported in the body with `is_error: true` and a `message`."
    ),
    responses={
        422: {"description": "Validation error — missing query or unknown recency filter"},
    },
)
async def search(
    request: SearchRequest,
    adapter: PerplexityAdapter = Depends(get_adapter),
) -> SearchResult | SearchError:
    """Forward *request* to Perplexity and return the result envelope."""
    outcome = await adapter.search(request)
    if isinstance(outcome, SearchError):
        logger.info("Search returned error envelope: %s", outcome.message)
    return outcome
