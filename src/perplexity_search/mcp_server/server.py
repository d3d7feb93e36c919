"""MCP tool server — exposes the adapter as a ``search`` tool over stdio.

The server advertises one tool and maps every adapter outcome onto a
``CallToolResult``: answers as JSON text, failures as text with
``isError=True``. Tool calls never fail at the protocol level.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from perplexity_search import __version__
from perplexity_search.adapters.perplexity.adapter import PerplexityAdapter
from perplexity_search.config.settings import Settings
from perplexity_search.models.query import RecencyFilter, SearchRequest
from perplexity_search.models.result import SearchError, SearchOutcome

logger = logging.getLogger(__name__)

SERVER_NAME = "perplexity-search-server"
SEARCH_TOOL = "search"

SEARCH_TOOL_DESCRIPTION = (
    "Perform a web search using Perplexity's API, which provides detailed and contextually "
    "relevant results with citations. By default, no time filtering is applied to search results."
)

SEARCH_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "query": {
            "type": "string",
            "description": "The search query to perform",
        },
        "search_recency_filter": {
            "type": "string",
            "enum": [f.value for f in RecencyFilter],
            "description": (
                "Filter search results by recency (options: month, week, day, hour). "
                "If not specified, no time filtering is applied."
            ),
        },
    },
    "required": ["query"],
}


def search_tool() -> types.Tool:
    """Tool definition advertised by ``list_tools``."""
    return types.Tool(
        name=SEARCH_TOOL,
        title="Search",
        description=SEARCH_TOOL_DESCRIPTION,
        inputSchema=SEARCH_INPUT_SCHEMA,
    )


def tool_error(message: str) -> types.CallToolResult:
    """Error result for failures raised before any API call."""
    return types.CallToolResult(content=[types.TextContent(type="text", text=message)], isError=True)


def to_call_tool_result(outcome: SearchOutcome) -> types.CallToolResult:
    """Wrap an adapter outcome in the MCP result envelope."""
    if isinstance(outcome, SearchError):
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=outcome.text)],
            isError=True,
        )
    return types.CallToolResult(content=[types.TextContent(type="text", text=outcome.to_text())])


async def handle_call_tool(adapter: PerplexityAdapter, name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
    """Dispatch one tool call to the adapter.

    Args:
        adapter: An initialized adapter.
        name: Requested tool name.
        arguments: Raw tool arguments.

    Returns:
        The tool result; errors are reported in-band.
    """
    if name != SEARCH_TOOL:
        return tool_error(f"Unknown tool: {name}")

    try:
        request = SearchRequest.model_validate(arguments or {})
    except ValidationError as e:
        logger.warning("Rejected search arguments: %s", e)
        return tool_error(f"Invalid arguments: {e}")

    outcome = await adapter.search(request)
    return to_call_tool_result(outcome)


def create_server(adapter: PerplexityAdapter) -> Server:
    """Create the MCP server with the ``search`` tool registered.

    Args:
        adapter: The search adapter backing the tool. The caller owns its
            lifecycle (``initialize`` / ``shutdown``).

    Returns:
        A low-level MCP server ready to ``run``.
    """
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [search_tool()]

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        return await handle_call_tool(adapter, name, arguments)

    return server


async def run_stdio(settings: Settings) -> None:
    """Serve the ``search`` tool over stdio until the client disconnects."""
    adapter = PerplexityAdapter.from_settings(settings.perplexity)
    await adapter.initialize()
    server = create_server(adapter)

    logger.info("Starting %s v%s on stdio", SERVER_NAME, __version__)
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await adapter.shutdown()
        logger.info("%s stopped", SERVER_NAME)
