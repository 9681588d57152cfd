"""Identipattern generation engine."""

from identipattern.engine.composer import compose, compose_plan, generate_identipattern, plan_pattern, render_plan
from identipattern.engine.glyphs import GlyphKind
from identipattern.engine.hash_bytes import HashInput, hash_segment, parse_hash
from identipattern.engine.parameters import DerivedParameters, derive_parameters
from identipattern.engine.tuning import WaveTuning, tune_waves

__all__ = [
    "compose",
    "compose_plan",
    "render_plan",
    "generate_identipattern",
    "plan_pattern",
    "GlyphKind",
    "HashInput",
    "hash_segment",
    "parse_hash",
    "DerivedParameters",
    "derive_parameters",
    "WaveTuning",
    "tune_waves",
]
