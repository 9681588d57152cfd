"""Raster facade: draw a pattern onto a canvas-like render target.

The SVG is rasterized with cairosvg and decoded with Pillow. The decoded
image is a temporary resource. It is closed in a ``finally`` block once
drawing finishes or fails.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from PIL import Image

from identipattern.engine.constants import DEFAULT_SIZE
from identipattern.facades.svg import to_svg
from identipattern.utils.rasterizer import open_png, render_svg_to_png

logger = logging.getLogger(__name__)


class RenderTarget(Protocol):
    """The narrow surface the raster facade draws through."""

    def resize(self, width: int, height: int) -> None: ...

    def draw_image(self, image: Image.Image, x: int, y: int, width: int, height: int) -> None: ...


class ImageCanvas:
    """Pillow-backed render target. Resizing clears it, like an HTML canvas."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.image = Image.new("RGBA", (max(width, 1), max(height, 1)), (0, 0, 0, 0))

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def resize(self, width: int, height: int) -> None:
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))

    def draw_image(self, image: Image.Image, x: int, y: int, width: int, height: int) -> None:
        src = image.convert("RGBA")
        if src.size != (width, height):
            src = src.resize((width, height))
        self.image.alpha_composite(src, dest=(x, y))


def pixel_size(size: float) -> int:
    """Canvas pixels for ``size``: truncated, at least 1."""
    return max(1, int(size))


def _draw(canvas: RenderTarget, png_bytes: bytes, px: int) -> None:
    image = open_png(png_bytes)
    try:
        image.load()
        canvas.resize(px, px)
        canvas.draw_image(image, 0, 0, px, px)
    finally:
        image.close()


def to_canvas(
    canvas: RenderTarget, hash_hex: str, size: float = DEFAULT_SIZE, show_grid: bool = False,
) -> None:
    """Rasterize the pattern and draw it at (0, 0, size, size)."""
    svg = to_svg(hash_hex, size, show_grid)
    px = pixel_size(size)
    _draw(canvas, render_svg_to_png(svg, px, px), px)
    logger.debug("Drew %dx%d pattern onto %s", px, px, type(canvas).__name__)


async def to_canvas_async(
    canvas: RenderTarget, hash_hex: str, size: float = DEFAULT_SIZE, show_grid: bool = False,
) -> None:
    """Like ``to_canvas``, but rasterizes in the default executor.

    Drawing runs as the continuation once decoding has completed.
    """
    svg = to_svg(hash_hex, size, show_grid)
    px = pixel_size(size)
    loop = asyncio.get_running_loop()
    png_bytes = await loop.run_in_executor(None, render_svg_to_png, svg, px, px)
    _draw(canvas, png_bytes, px)
