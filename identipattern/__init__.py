"""Identipattern: deterministic SVG fingerprints for 32-byte hashes."""

__version__ = "0.1.0"

from identipattern.engine.composer import compose, generate_identipattern  # noqa: E402
from identipattern.errors import TargetNotFoundError, ValidationError  # noqa: E402
from identipattern.facades.binding import PatternBinding  # noqa: E402
from identipattern.facades.canvas import ImageCanvas, RenderTarget, to_canvas, to_canvas_async  # noqa: E402
from identipattern.facades.dom import update  # noqa: E402
from identipattern.facades.svg import to_svg  # noqa: E402

generate = generate_identipattern

__all__ = [
    "__version__",
    "compose",
    "generate",
    "generate_identipattern",
    "TargetNotFoundError",
    "ValidationError",
    "PatternBinding",
    "ImageCanvas",
    "RenderTarget",
    "to_canvas",
    "to_canvas_async",
    "update",
    "to_svg",
]
