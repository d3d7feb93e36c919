"""Search result envelope — success and error variants.

Every ``search`` call ends in exactly one of these values; failures are told
apart from answers only by ``is_error`` and the message text.
"""

from __future__ import annotations

import json
from typing import Literal

from pydantic import BaseModel, Field, computed_field

ERROR_PREFIX = "Perplexity API error"
UNKNOWN_ERROR = "Unknown error occurred"


class SearchResult(BaseModel):
    """Answer text plus the sources it cites."""

    is_error: Literal[False] = Field(default=False, description="Always false for answers")
    content: str = Field(description="The model's answer text")
    citations: list[str] = Field(default_factory=list, description="Cited source URLs, in order")

    def to_text(self) -> str:
        """Render as the indented JSON text returned to tool callers."""
        return json.dumps({"content": self.content, "citations": self.citations}, indent=2, ensure_ascii=False)


class SearchError(BaseModel):
    """A failed search, carrying a human-readable message."""

    is_error: Literal[True] = Field(default=True, description="Always true for failures")
    message: str = Field(description="Error detail (remote message, status or exception text)")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def text(self) -> str:
        """Message as shown to callers, e.g. ``Perplexity API error: Invalid API key``."""
        return f"{ERROR_PREFIX}: {self.message}"

    @classmethod
    def from_exception(cls, exc: BaseException) -> SearchError:
        return cls(message=str(exc) or UNKNOWN_ERROR)


SearchOutcome = SearchResult | SearchError
