"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified), passed in as constructor values
  2. Environment variables (PERPLEXITY_SEARCH_ prefix)
  3. .env file
  4. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings

PerplexityModel = Literal["sonar", "sonar-pro"]


class ServerSettings(BaseModel):
    """HTTP server configuration (used by the ``http`` transport only)."""

    host: str = Field(default="127.0.0.1", description="Server bind address")
    port: int = Field(default=8080, description="Server port")


class PerplexitySettings(BaseModel):
    """Perplexity API configuration.

    ``max_tokens`` and ``temperature`` are forwarded to the API as-is; only
    their types are checked here.
    """

    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("api_key", "perplexityApiKey"),
        description="Perplexity API key",
    )
    model: PerplexityModel = Field(default="sonar-pro", description="Perplexity model to use")
    max_tokens: int = Field(
        default=8192,
        validation_alias=AliasChoices("max_tokens", "maxTokens"),
        description="Maximum tokens for response",
    )
    temperature: float = Field(default=0.2, description="Temperature for response generation")
    base_url: str = Field(default="https://api.perplexity.ai", description="Perplexity API endpoint")
    timeout: float | None = Field(
        default=None,
        description="HTTP timeout in seconds (None waits indefinitely)",
    )


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the
    PERPLEXITY_SEARCH_ prefix. Nested settings use double underscores.

    Example:
        PERPLEXITY_SEARCH_PERPLEXITY__API_KEY=pplx-...
        PERPLEXITY_SEARCH_PERPLEXITY__MODEL=sonar
        PERPLEXITY_SEARCH_SERVER__PORT=9090

    The bare ``PERPLEXITY_API_KEY`` variable is honoured as a fallback when
    no key is configured otherwise.
    """

    model_config = {
        "env_prefix": "PERPLEXITY_SEARCH_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    app_name: str = Field(default="perplexity-search-server", description="Server name")

    perplexity: PerplexitySettings = Field(default_factory=PerplexitySettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    perplexity_api_key: str = Field(
        default="",
        validation_alias="PERPLEXITY_API_KEY",
        exclude=True,
        description="Fallback API key read from PERPLEXITY_API_KEY",
    )

    def model_post_init(self, __context: object) -> None:
        if not self.perplexity.api_key and self.perplexity_api_key:
            self.perplexity.api_key = self.perplexity_api_key

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are passed as constructor arguments, so they
        override environment variables; keys absent from the file still fall
        back to the environment.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
