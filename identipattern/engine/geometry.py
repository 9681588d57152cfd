"""Size-derived layout values, computed once per pattern."""

from __future__ import annotations

from dataclasses import dataclass

from identipattern.engine import constants as C

# Keepout fraction per glyph category; accent 4 has none.
_KEEPOUT_BY_ACCENT: dict[int, float] = {
    0: C.KEEPOUT_STAR,
    1: C.KEEPOUT_TRIANGLE,
    2: C.KEEPOUT_DOT,
    3: C.KEEPOUT_CONCENTRIC,
    **{accent: C.KEEPOUT_POLYGON for accent in range(5, 10)},
}


@dataclass(frozen=True)
class GeometryConstants:
    size: float
    cx: float
    cy: float
    max_r: float
    curve_max_px: float
    keepout: float
    border_size: float
    border_offset: float
    marker_width: float
    marker_length: float
    thickness: float = C.THICKNESS

    @property
    def border_thickness(self) -> float:
        return self.thickness * C.BORDER_STROKE_RATIO

    @property
    def border_end(self) -> float:
        """Far edge (right / bottom) of the border square."""
        return self.border_offset + self.border_size

    @property
    def center_r(self) -> float:
        return self.keepout * C.GLYPH_RADIUS_FRACTION


def keepout_radius(size: float, inner_accent: int, curve_max_px: float) -> float:
    """Radius the waves must stay outside of so the center glyph stays clear."""
    keepout = size * _KEEPOUT_BY_ACCENT[inner_accent] if inner_accent in _KEEPOUT_BY_ACCENT else 0.0
    return min(keepout, curve_max_px * C.KEEPOUT_CAP_FRACTION) if keepout > 0 else 0.0


def build_geometry(size: float, inner_accent: int) -> GeometryConstants:
    thickness = C.THICKNESS
    max_r = size * C.MAX_RADIUS_FRACTION
    curve_outer_margin = max(C.CURVE_MARGIN_STROKES * thickness, size * C.CURVE_MARGIN_FRACTION)
    curve_max_px = max_r - curve_outer_margin

    border_size = size * C.BORDER_FRACTION
    return GeometryConstants(
        size=size,
        cx=size / 2,
        cy=size / 2,
        max_r=max_r,
        curve_max_px=curve_max_px,
        keepout=keepout_radius(size, inner_accent, curve_max_px),
        border_size=border_size,
        border_offset=(size - border_size) / 2,
        marker_width=size * C.MARKER_WIDTH_FRACTION,
        marker_length=size * C.MARKER_LENGTH_FRACTION,
        thickness=thickness,
    )
