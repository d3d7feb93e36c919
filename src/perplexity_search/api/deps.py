"""API dependencies — Dependency injection for FastAPI endpoints."""

from __future__ import annotations

from perplexity_search.adapters.perplexity.adapter import PerplexityAdapter

# Global adapter instance (set during application lifespan)
_adapter: PerplexityAdapter | None = None


def set_adapter(adapter: PerplexityAdapter | None) -> None:
    """Set the global adapter instance (called during app lifespan)."""
    global _adapter
    _adapter = adapter


def get_adapter() -> PerplexityAdapter:
    """Get the global Perplexity adapter instance.

    Returns:
        The initialized PerplexityAdapter.

    Raises:
        RuntimeError: If the adapter is not initialized.
    """
    if _adapter is None:
        raise RuntimeError("Perplexity adapter not initialized. Is the server running?")
    return _adapter
