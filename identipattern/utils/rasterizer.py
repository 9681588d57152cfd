"""Rasterization utilities: SVG text -> PNG bytes -> Pillow image."""

from __future__ import annotations

import io
import logging

from PIL import Image

logger = logging.getLogger(__name__)


def render_svg_to_png(svg: str, width: int, height: int) -> bytes:
    """Render SVG string to PNG bytes using cairosvg."""
    import cairosvg

    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=width,
            output_height=height,
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise


def open_png(png_bytes: bytes) -> Image.Image:
    """Decode PNG bytes. The caller owns the image and must close it."""
    return Image.open(io.BytesIO(png_bytes))
