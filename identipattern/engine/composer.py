"""Compose a full pattern: hash -> ordered primitives -> SVG text.

Emission order is fixed. Output must be byte-identical for identical inputs.

1. white background
2. optional diagnostic grid (10 + 10 lines, 20% opacity)
3. border square (8% margin)
4. ``n_waves`` sampled wave paths
5. marker rectangles
6. center glyph (0 or 1)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from identipattern.engine import constants as C
from identipattern.engine.geometry import GeometryConstants, build_geometry
from identipattern.engine.glyphs import GlyphKind, render_glyph
from identipattern.engine.hash_bytes import HashInput, parse_hash
from identipattern.engine.markers import place_markers
from identipattern.engine.parameters import DerivedParameters, derive_parameters
from identipattern.engine.profile import RadialProfile
from identipattern.engine.tuning import WaveTuning, tune_waves
from identipattern.errors import ValidationError
from identipattern.svg.primitives import Group, Line, Path, Primitive, Rect, Style
from identipattern.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternPlan:
    """Everything derived from one (hash, size) pair before drawing."""

    hash_input: HashInput
    params: DerivedParameters
    geometry: GeometryConstants
    tuning: WaveTuning

    @property
    def glyph(self) -> GlyphKind:
        if self.geometry.center_r <= 0:
            return GlyphKind.NONE
        return GlyphKind.from_accent(self.params.inner_accent)

    @property
    def marker_count(self) -> int:
        return int(self.hash_input.marker_bits().sum())


def plan_pattern(hash_hex: str, size: float = C.DEFAULT_SIZE) -> PatternPlan:
    hash_input = parse_hash(hash_hex)
    if not math.isfinite(size):
        raise ValidationError(f"size must be a finite number, got {size!r}")
    params = derive_parameters(hash_input)
    geometry = build_geometry(size, params.inner_accent)
    tuning = tune_waves(params.freq1, params.amplitude, geometry.curve_max_px, geometry.thickness)
    return PatternPlan(hash_input=hash_input, params=params, geometry=geometry, tuning=tuning)


def background(size: float) -> Rect:
    return Rect(width=size, height=size, style=Style(fill="white"))


def grid_overlay(size: float) -> Group:
    style = Style(stroke=C.GRID_STROKE, stroke_width=C.GRID_STROKE_WIDTH)
    lines: list[Primitive] = []
    for i in range(C.GRID_LINES):
        pos = (i + 1) * (size / C.GRID_LINES)
        lines.append(Line(x1=pos, y1="0", x2=pos, y2=size, style=style))
        lines.append(Line(x1="0", y1=pos, x2=size, y2=pos, style=style))
    return Group(children=tuple(lines), opacity=C.GRID_OPACITY)


def border(geom: GeometryConstants) -> Rect:
    return Rect(
        x=geom.border_offset,
        y=geom.border_offset,
        width=geom.border_size,
        height=geom.border_size,
        style=Style(fill="none", stroke="black", stroke_width=geom.border_thickness),
    )


def wave_paths(plan: PatternPlan, detail: int = C.WAVE_DETAIL) -> list[Path]:
    """One path per wave, each ``detail + 1`` points over a full turn."""
    geom, params = plan.geometry, plan.params
    profile = RadialProfile(plan.tuning, params.amplitude, geom.curve_max_px, geom.keepout, geom.thickness)
    style = Style(
        fill="none",
        stroke="black",
        stroke_width=geom.thickness,
        stroke_linecap="round",
        stroke_linejoin="round",
    )

    # The radius does not depend on the wave index, only the rotation does.
    samples = []
    for i in range(detail + 1):
        t = (i / detail) * math.pi * 2
        samples.append((t, profile(t)))

    paths = []
    for w in range(params.n_waves):
        wave_angle = (w * 2 * math.pi) / params.n_waves
        pts = []
        for t, r in samples:
            ang = params.freq2 * t + wave_angle
            pts.append((geom.cx + r * math.cos(ang), geom.cy + r * math.sin(ang)))
        paths.append(Path(points=tuple(pts), style=style))
    return paths


def compose_plan(plan: PatternPlan, show_grid: bool = False) -> list[Primitive]:
    """Ordered primitive list for an already derived plan."""
    geom = plan.geometry
    size = geom.size

    primitives: list[Primitive] = [background(size)]
    if show_grid:
        primitives.append(grid_overlay(size))
    primitives.append(border(geom))
    primitives.extend(wave_paths(plan))
    markers = place_markers(plan.hash_input, geom)
    primitives.extend(markers)
    primitives.extend(render_glyph(geom, plan.params.inner_accent, plan.params.center_hollow))

    logger.debug(
        "Pattern %s…: %d waves (f1=%d, freq2=%d), %d markers, glyph=%s",
        plan.hash_input.hex[:8],
        plan.params.n_waves,
        plan.tuning.f1,
        plan.params.freq2,
        len(markers),
        plan.glyph.value,
    )
    return primitives


def compose(hash_hex: str, size: float = C.DEFAULT_SIZE, show_grid: bool = False) -> list[Primitive]:
    """Ordered primitive list for a pattern."""
    return compose_plan(plan_pattern(hash_hex, size), show_grid)


def render_plan(plan: PatternPlan, show_grid: bool = False) -> str:
    return serialize_svg(compose_plan(plan, show_grid), plan.geometry.size)


def generate_identipattern(hash_hex: str, size: float = C.DEFAULT_SIZE, show_grid: bool = False) -> str:
    """Render the pattern for ``hash_hex`` as SVG text.

    Raises:
        ValidationError: if ``hash_hex`` is not 64 hex characters or
            ``size`` is not finite.
    """
    return render_plan(plan_pattern(hash_hex, size), show_grid)
