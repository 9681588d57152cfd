"""Drawing primitives emitted by the composer.

Coordinates are kept as floats and only rounded when serialized. A coordinate
given as ``str`` is written verbatim (the grid overlay uses a bare ``"0"``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

Coord = Union[float, str]


@dataclass(frozen=True)
class Style:
    fill: str | None = None
    stroke: str | None = None
    stroke_width: Coord | None = None
    stroke_linecap: str | None = None
    stroke_linejoin: str | None = None


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle. ``x``/``y`` of None means it spans the canvas from the origin."""

    width: float
    height: float
    style: Style
    x: float | None = None
    y: float | None = None

    tag = "rect"


@dataclass(frozen=True)
class Line:
    x1: Coord
    y1: Coord
    x2: Coord
    y2: Coord
    style: Style

    tag = "line"


@dataclass(frozen=True)
class Path:
    """Polyline through ``points``; ``closed`` appends a close-path command."""

    points: tuple[tuple[float, float], ...]
    style: Style
    closed: bool = False

    tag = "path"


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    style: Style

    tag = "circle"


@dataclass(frozen=True)
class Group:
    children: tuple["Primitive", ...] = field(default_factory=tuple)
    opacity: str | None = None

    tag = "g"


Primitive = Union[Rect, Line, Path, Circle, Group]
