"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PatternRequest(BaseModel):
    hash: str = Field(..., description="64 hexadecimal characters (32 bytes)")
    size: float | None = Field(default=None, gt=0, description="Canvas width/height in px")
    show_grid: bool | None = Field(default=None, description="Overlay the diagnostic grid")
