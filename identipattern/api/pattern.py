"""Pattern endpoints: SVG/PNG rendering and parameter inspection."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from identipattern.config import Settings
from identipattern.dependencies import get_settings
from identipattern.engine.composer import generate_identipattern, plan_pattern, render_plan
from identipattern.facades.canvas import pixel_size
from identipattern.models.requests import PatternRequest
from identipattern.models.responses import ParametersResponse, PatternResponse, TuningModel
from identipattern.utils.rasterizer import render_svg_to_png

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pattern")


def _resolve_size(size: float | None, cfg: Settings) -> float:
    size = cfg.default_size if size is None else size
    if size > cfg.max_size:
        raise HTTPException(status_code=422, detail=f"size must be at most {cfg.max_size:g}")
    return size


@router.post("", response_model=PatternResponse)
async def create_pattern(req: PatternRequest, cfg: Settings = Depends(get_settings)) -> PatternResponse:
    size = _resolve_size(req.size, cfg)
    show_grid = cfg.default_show_grid if req.show_grid is None else req.show_grid
    plan = plan_pattern(req.hash, size)
    return PatternResponse(
        svg=render_plan(plan, show_grid),
        size=size,
        marker_count=plan.marker_count,
        glyph=plan.glyph.value,
    )


@router.get("/{hash_hex}.svg")
async def pattern_svg(
    hash_hex: str,
    size: float | None = Query(default=None, gt=0),
    grid: bool | None = Query(default=None),
    cfg: Settings = Depends(get_settings),
) -> Response:
    size = _resolve_size(size, cfg)
    show_grid = cfg.default_show_grid if grid is None else grid
    svg = generate_identipattern(hash_hex, size=size, show_grid=show_grid)
    return Response(content=svg, media_type="image/svg+xml")


@router.get("/{hash_hex}.png")
async def pattern_png(
    hash_hex: str,
    size: float | None = Query(default=None, gt=0),
    grid: bool | None = Query(default=None),
    cfg: Settings = Depends(get_settings),
) -> Response:
    size = _resolve_size(size, cfg)
    show_grid = cfg.default_show_grid if grid is None else grid
    svg = generate_identipattern(hash_hex, size=size, show_grid=show_grid)
    px = pixel_size(size)
    # cairosvg blocks; keep it off the event loop
    png = await asyncio.get_running_loop().run_in_executor(None, render_svg_to_png, svg, px, px)
    return Response(content=png, media_type="image/png")


@router.get("/{hash_hex}/parameters", response_model=ParametersResponse)
async def pattern_parameters(hash_hex: str, cfg: Settings = Depends(get_settings)) -> ParametersResponse:
    plan = plan_pattern(hash_hex, cfg.default_size)
    p, t = plan.params, plan.tuning
    return ParametersResponse(
        hash=plan.hash_input.hex,
        freq1=p.freq1,
        pseudo=p.pseudo,
        amplitude=p.amplitude,
        inner_accent=p.inner_accent,
        center_hollow=p.center_hollow,
        n_waves=p.n_waves,
        freq2=p.freq2,
        glyph=plan.glyph.value,
        marker_count=plan.marker_count,
        tuning=TuningModel(f1=t.f1, gamma=t.gamma, amp_scale=t.amp_scale),
    )
