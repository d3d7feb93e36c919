"""MCP stdio server exposing the ``search`` tool."""

from perplexity_search.mcp_server.server import create_server, run_stdio

__all__ = ["create_server", "run_stdio"]
