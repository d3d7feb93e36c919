"""Base adapter types — health model and exception taxonomy."""

from perplexity_search.adapters.base.adapter import AdapterHealth

__all__ = ["AdapterHealth"]
