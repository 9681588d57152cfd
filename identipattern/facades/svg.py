"""String facade: (hash, size, show_grid) -> SVG text."""

from __future__ import annotations

from identipattern.engine.composer import generate_identipattern


def to_svg(hash_hex: str, size: float, show_grid: bool = False) -> str:
    return generate_identipattern(hash_hex, size=size, show_grid=bool(show_grid))
