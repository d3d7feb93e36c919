"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from perplexity_search import __version__
from perplexity_search.adapters.base.adapter import AdapterHealth
from perplexity_search.adapters.perplexity.adapter import PerplexityAdapter
from perplexity_search.api.deps import get_adapter

router = APIRouter()


class HealthResponse(BaseModel):
    """System health check response."""

    status: str = Field(description="Health status (e.g. 'healthy')")
    version: str = Field(description="Server version")
    service: str = Field(description="Service name ('perplexity-search')")
    adapter: AdapterHealth = Field(description="Perplexity adapter status")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="System Health Check",
    description="Returns server version and the Perplexity adapter status. Does not call the API.",
)
async def health_check(
    adapter: PerplexityAdapter = Depends(get_adapter),
) -> HealthResponse:
    """Basic health check endpoint with adapter info."""
    adapter_health = await adapter.health_check()
    return HealthResponse(
        status=adapter_health.status,
        version=__version__,
        service="perplexity-search",
        adapter=adapter_health,
    )
