"""Presentational binding: regenerate only when an input changes."""

from __future__ import annotations

from identipattern.engine.constants import DEFAULT_SIZE
from identipattern.facades.svg import to_svg


class PatternBinding:
    """Holds (hash, size, show_grid) and the SVG last rendered for them."""

    def __init__(self, hash_hex: str, size: float = DEFAULT_SIZE, show_grid: bool = False) -> None:
        self.hash_hex = hash_hex
        self.size = size
        self.show_grid = show_grid
        self.render_count = 0
        self._key: tuple[str, float, bool] | None = None
        self._svg = ""

    def set(self, **props) -> None:
        """Update any of ``hash_hex``, ``size``, ``show_grid``."""
        for name, value in props.items():
            if name not in ("hash_hex", "size", "show_grid"):
                raise TypeError(f"Unknown binding input: {name}")
            setattr(self, name, value)

    @property
    def svg(self) -> str:
        key = (self.hash_hex, self.size, bool(self.show_grid))
        if key != self._key:
            self._svg = to_svg(*key)
            self._key = key
            self.render_count += 1
        return self._svg
