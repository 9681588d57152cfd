"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class PatternResponse(BaseModel):
    svg: str
    size: float
    marker_count: int = 0
    glyph: str = "none"


class TuningModel(BaseModel):
    f1: int
    gamma: float
    amp_scale: float


class ParametersResponse(BaseModel):
    hash: str
    freq1: int = Field(..., description="Lobes per turn before tuning (3-7)")
    pseudo: int
    amplitude: float
    inner_accent: int
    center_hollow: bool
    n_waves: int
    freq2: int
    glyph: str
    marker_count: int
    tuning: TuningModel
