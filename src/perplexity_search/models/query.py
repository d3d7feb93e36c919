"""Inbound search request models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class RecencyFilter(str, Enum):
    """Time window restricting search results to recent sources."""

    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"


class SearchRequest(BaseModel):
    """A single ``search`` call."""

    query: str = Field(description="The search query to perform", min_length=1)
    search_recency_filter: RecencyFilter | None = Field(
        default=None,
        description=(
            "Filter search results by recency (options: month, week, day, hour). "
            "If not specified, no time filtering is applied."
        ),
    )
