"""Write compact SVG markup from drawing primitives.

The output is byte-stable: no whitespace between elements, attributes in a
fixed order, coordinates as 2-decimal fixed point.
"""

from __future__ import annotations

from identipattern.svg.primitives import (
    Circle,
    Coord,
    Group,
    Line,
    Path,
    Primitive,
    Rect,
    Style,
)
from identipattern.utils.math_helpers import format_number, to_fixed

SVG_NS = "http://www.w3.org/2000/svg"


def fmt(value: Coord) -> str:
    """Format one coordinate. Strings pass through unchanged."""
    if isinstance(value, str):
        return value
    return to_fixed(value)


def _style_attrs(style: Style) -> list[tuple[str, str]]:
    attrs: list[tuple[str, str]] = []
    if style.fill is not None:
        attrs.append(("fill", style.fill))
    if style.stroke is not None:
        attrs.append(("stroke", style.stroke))
    if style.stroke_width is not None:
        attrs.append(("stroke-width", fmt(style.stroke_width)))
    if style.stroke_linecap is not None:
        attrs.append(("stroke-linecap", style.stroke_linecap))
    if style.stroke_linejoin is not None:
        attrs.append(("stroke-linejoin", style.stroke_linejoin))
    return attrs


def path_data(points: tuple[tuple[float, float], ...], closed: bool = False) -> str:
    """``M x,y L x,y ...`` with an optional trailing ``Z``."""
    d = "M" + " L".join(f"{fmt(x)},{fmt(y)}" for x, y in points)
    return d + "Z" if closed else d


def primitive_attrs(prim: Primitive) -> list[tuple[str, str]]:
    """Ordered attribute list for a primitive (groups: only their own attributes)."""
    if isinstance(prim, Rect):
        if prim.x is None or prim.y is None:
            geom = [("width", format_number(prim.width)), ("height", format_number(prim.height))]
        else:
            geom = [
                ("x", fmt(prim.x)),
                ("y", fmt(prim.y)),
                ("width", fmt(prim.width)),
                ("height", fmt(prim.height)),
            ]
        return geom + _style_attrs(prim.style)
    if isinstance(prim, Line):
        geom = [("x1", fmt(prim.x1)), ("y1", fmt(prim.y1)), ("x2", fmt(prim.x2)), ("y2", fmt(prim.y2))]
        return geom + _style_attrs(prim.style)
    if isinstance(prim, Path):
        return [("d", path_data(prim.points, prim.closed))] + _style_attrs(prim.style)
    if isinstance(prim, Circle):
        geom = [("cx", fmt(prim.cx)), ("cy", fmt(prim.cy)), ("r", fmt(prim.r))]
        return geom + _style_attrs(prim.style)
    if isinstance(prim, Group):
        return [("opacity", prim.opacity)] if prim.opacity is not None else []
    raise TypeError(f"Unknown primitive: {type(prim).__name__}")


def serialize_primitive(prim: Primitive) -> str:
    attr_str = "".join(f' {k}="{v}"' for k, v in primitive_attrs(prim))
    if isinstance(prim, Group):
        inner = "".join(serialize_primitive(child) for child in prim.children)
        return f"<{prim.tag}{attr_str}>{inner}</{prim.tag}>"
    return f"<{prim.tag}{attr_str}/>"


def serialize_svg(primitives: list[Primitive], size: float) -> str:
    """Wrap primitives in a size x size ``<svg>`` root."""
    dim = format_number(size)
    parts = [f'<svg width="{dim}" height="{dim}" xmlns="{SVG_NS}">']
    parts.extend(serialize_primitive(p) for p in primitives)
    parts.append("</svg>")
    return "".join(parts)
