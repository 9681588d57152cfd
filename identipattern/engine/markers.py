"""Marker placement: 128 bit flags -> rectangles around the border square.

Slot ``i`` is drawn when its bit is set and lands at position
``p = (i * 73) mod 128``. 73 is coprime with 128, so no two slots collide.
Positions 0-31 run along the top, 32-63 the right side, 64-95 the bottom
and 96-127 the left side.
"""

from __future__ import annotations

import enum

import numpy as np
from numpy.typing import NDArray

from identipattern.engine import constants as C
from identipattern.engine.geometry import GeometryConstants
from identipattern.engine.hash_bytes import HashInput
from identipattern.svg.primitives import Rect, Style

MARKER_STYLE = Style(fill="black")


class Side(enum.IntEnum):
    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


def permutation_table() -> NDArray[np.int64]:
    """Slot -> position for all 128 slots."""
    return (np.arange(C.MARKER_SLOTS, dtype=np.int64) * C.MARKER_STRIDE) & (C.MARKER_SLOTS - 1)


def marker_rect(position: int, geom: GeometryConstants) -> Rect:
    """Rectangle just outside the border, long axis pointing outward."""
    side = Side(position // C.MARKERS_PER_SIDE)
    frac = (position % C.MARKERS_PER_SIDE) / C.MARKERS_PER_SIDE
    along = geom.border_offset + frac * geom.border_size - geom.marker_width / 2
    width, length = geom.marker_width, geom.marker_length

    if side is Side.TOP:
        return Rect(x=along, y=geom.border_offset - length, width=width, height=length, style=MARKER_STYLE)
    if side is Side.RIGHT:
        return Rect(x=geom.border_end, y=along, width=length, height=width, style=MARKER_STYLE)
    if side is Side.BOTTOM:
        return Rect(x=along, y=geom.border_end, width=width, height=length, style=MARKER_STYLE)
    return Rect(x=geom.border_offset - length, y=along, width=length, height=width, style=MARKER_STYLE)


def place_markers(hash_input: HashInput, geom: GeometryConstants) -> list[Rect]:
    """One rectangle per set bit, in slot order."""
    bits = hash_input.marker_bits()
    positions = permutation_table()[bits.astype(bool)]
    return [marker_rect(int(p), geom) for p in positions]
