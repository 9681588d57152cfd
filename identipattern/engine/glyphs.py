"""Center glyphs: a closed set of categories keyed by ``inner_accent``.

Each category has exactly one render routine in ``_RENDERERS``. Accent 4 is
an empty category. It draws nothing and is kept as a gap between the circle
family (0-3) and the polygons (5-9).
"""

from __future__ import annotations

import enum
import math
from typing import Callable

from identipattern.engine import constants as C
from identipattern.engine.geometry import GeometryConstants
from identipattern.svg.primitives import Circle, Path, Primitive, Style


class GlyphKind(enum.Enum):
    STAR = "star"
    TRIANGLE = "triangle"
    DOT = "dot"
    CONCENTRIC = "concentric"
    NONE = "none"
    POLYGON = "polygon"

    @classmethod
    def from_accent(cls, inner_accent: int) -> "GlyphKind":
        if inner_accent == 0:
            return cls.STAR
        if inner_accent == 1:
            return cls.TRIANGLE
        if inner_accent == 2:
            return cls.DOT
        if inner_accent == 3:
            return cls.CONCENTRIC
        if 5 <= inner_accent <= 9:
            return cls.POLYGON
        return cls.NONE


def polygon_sides(inner_accent: int) -> int:
    """Accents 5..9 draw 4..8 sides."""
    return inner_accent - 1


def _shape_style(hollow: bool, thickness: float) -> Style:
    if hollow:
        return Style(fill="none", stroke="black", stroke_width=thickness)
    return Style(fill="black", stroke="black", stroke_width=thickness)


def _star(geom: GeometryConstants, inner_accent: int, hollow: bool) -> list[Primitive]:
    n_points = 5
    r = geom.center_r
    pts = []
    for i in range(n_points * 2):
        ang = (i * math.pi) / n_points - math.pi / 2
        rr = r if i % 2 == 0 else r * 0.4
        pts.append((geom.cx + rr * math.cos(ang), geom.cy + rr * math.sin(ang)))
    return [Path(points=tuple(pts), closed=True, style=_shape_style(hollow, geom.thickness))]


def _regular(geom: GeometryConstants, n_sides: int, hollow: bool) -> list[Primitive]:
    pts = []
    for i in range(n_sides):
        ang = (i * 2 * math.pi) / n_sides - math.pi / 2
        pts.append((geom.cx + geom.center_r * math.cos(ang), geom.cy + geom.center_r * math.sin(ang)))
    return [Path(points=tuple(pts), closed=True, style=_shape_style(hollow, geom.thickness))]


def _triangle(geom: GeometryConstants, inner_accent: int, hollow: bool) -> list[Primitive]:
    return _regular(geom, 3, hollow)


def _dot(geom: GeometryConstants, inner_accent: int, hollow: bool) -> list[Primitive]:
    # Always filled; the hollow flag does not apply to the dot.
    return [Circle(cx=geom.cx, cy=geom.cy, r=geom.center_r, style=Style(fill="black"))]


def _concentric(geom: GeometryConstants, inner_accent: int, hollow: bool) -> list[Primitive]:
    style = Style(fill="none", stroke="black", stroke_width=geom.thickness * C.CONCENTRIC_STROKE_RATIO)
    return [
        Circle(cx=geom.cx, cy=geom.cy, r=geom.center_r * (0.4 + i * 0.3), style=style)
        for i in range(3)
    ]


def _polygon(geom: GeometryConstants, inner_accent: int, hollow: bool) -> list[Primitive]:
    return _regular(geom, polygon_sides(inner_accent), hollow)


def _none(geom: GeometryConstants, inner_accent: int, hollow: bool) -> list[Primitive]:
    return []


_RENDERERS: dict[GlyphKind, Callable[[GeometryConstants, int, bool], list[Primitive]]] = {
    GlyphKind.STAR: _star,
    GlyphKind.TRIANGLE: _triangle,
    GlyphKind.DOT: _dot,
    GlyphKind.CONCENTRIC: _concentric,
    GlyphKind.NONE: _none,
    GlyphKind.POLYGON: _polygon,
}


def render_glyph(geom: GeometryConstants, inner_accent: int, hollow: bool) -> list[Primitive]:
    """Primitives for the center glyph; empty when its radius is zero."""
    if geom.center_r <= 0:
        return []
    return _RENDERERS[GlyphKind.from_accent(inner_accent)](geom, inner_accent, hollow)
