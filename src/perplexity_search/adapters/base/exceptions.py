"""Adapter-specific exceptions."""


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConnectionError(AdapterError):
    """Raised when the adapter is not connected to the remote API."""


class QueryError(AdapterError):
    """Raised when a search response cannot be interpreted."""


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid."""
