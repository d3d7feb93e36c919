"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from perplexity_search import __version__
from perplexity_search.adapters.perplexity.adapter import PerplexityAdapter
from perplexity_search.api.deps import set_adapter
from perplexity_search.api.v1.router import router as v1_router
from perplexity_search.config.settings import Settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads from environment.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        # Auto-detect perplexity-search.yaml if present
        yaml_path = Path("perplexity-search.yaml")
        if yaml_path.exists():
            logger.info("Loading configuration from %s", yaml_path)
            settings = Settings.from_yaml(yaml_path)
        else:
            settings = Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        logger.info("Starting %s v%s", settings.app_name, __version__)

        adapter = PerplexityAdapter.from_settings(settings.perplexity)
        await adapter.initialize()
        set_adapter(adapter)

        app.state.settings = settings
        app.state.adapter = adapter

        logger.info("Ready to serve requests on port %d", settings.server.port)
        yield

        logger.info("Shutting down...")
        await adapter.shutdown()
        set_adapter(None)
        logger.info("Shutdown complete")

    app = FastAPI(
        title="Perplexity Search",
        description="Web search with citations via the Perplexity API.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(v1_router, prefix="/v1")

    return app
