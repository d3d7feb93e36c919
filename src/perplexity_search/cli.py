"""CLI entry point for the Perplexity search server."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="perplexity-search",
        description="Perplexity Search — web search tool over MCP (stdio) or HTTP",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--transport",
        "-t",
        choices=["stdio", "http"],
        default="stdio",
        help="Serve the search tool over MCP stdio (default) or HTTP",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="HTTP bind address (overrides config)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=None,
        help="HTTP port (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=["json", "console"],
        default=None,
        help="Log format (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"perplexity-search {_get_version()}",
    )

    args = parser.parse_args(argv)

    settings = _load_settings(args.config)

    # Apply CLI overrides
    if args.host:
        settings.server.host = args.host
    if args.port:
        settings.server.port = args.port
    if args.log_level:
        settings.observability.log_level = args.log_level
    if args.log_format:
        settings.observability.log_format = args.log_format

    from perplexity_search.adapters.base.exceptions import ConfigurationError
    from perplexity_search.observability.logging import setup_logging

    setup_logging(settings.observability, stream=sys.stderr)

    if args.transport == "http":
        from perplexity_search.adapters.perplexity.adapter import PerplexityAdapter

        try:
            PerplexityAdapter.from_settings(settings.perplexity).check_config()
        except ConfigurationError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        _serve_http(settings)
        return

    from perplexity_search.mcp_server.server import run_stdio

    try:
        asyncio.run(run_stdio(settings))
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        pass


def _load_settings(config: str | None):
    """Load settings from YAML or environment, exiting on a bad config."""
    from pydantic import ValidationError

    from perplexity_search.config.settings import Settings

    try:
        if config:
            config_path = Path(config)
            if not config_path.exists():
                print(f"Error: Config file not found: {config_path}", file=sys.stderr)
                sys.exit(1)
            return Settings.from_yaml(config_path)
        return Settings()
    except ValidationError as e:
        print(f"Error: Invalid configuration:\n{e}", file=sys.stderr)
        sys.exit(1)


def _serve_http(settings) -> None:
    import uvicorn

    from perplexity_search.api.app import create_app

    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.observability.log_level.lower(),
    )


def _get_version() -> str:
    """Get the package version."""
    try:
        from perplexity_search import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    main()
