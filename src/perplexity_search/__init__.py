"""Perplexity Search — MCP and HTTP adapter for the Perplexity search API."""

__version__ = "1.0.0"
