"""Shared adapter models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AdapterHealth(BaseModel):
    """Health status of a search adapter."""

    status: str = Field(description="Health status: healthy, unhealthy")
    model: str | None = Field(default=None, description="Configured model name")
    last_check: str | None = Field(default=None, description="ISO timestamp of last health check")
    message: str | None = Field(default=None, description="Additional health message")
