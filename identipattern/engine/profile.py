"""Radial profile: angle -> bounded wave radius."""

from __future__ import annotations

import math

from identipattern.engine import constants as C
from identipattern.engine.tuning import WaveTuning
from identipattern.utils.math_helpers import signed_pow


def radial_at(
    t: float,
    f1: float,
    amp: float,
    curve_max_px: float,
    keepout: float,
    thickness: float,
    gamma: float,
    amp_scale: float,
) -> float:
    """Radius in px at angle ``t``, clamped to ``[keepout, curve_max_px]``.

    If the oscillation would swing less than ``max(3*thickness, 2)`` px either
    side of its mean, the deviation is stretched to that floor.
    """
    sc = signed_pow(math.sin(f1 * t), gamma)
    r_norm = amp * (1 + 0.5 * sc) * amp_scale

    base_half_swing_px = 0.5 * amp * curve_max_px * amp_scale
    min_half_swing_px = max(C.MIN_HALF_SWING_STROKES * thickness, C.MIN_HALF_SWING_PX)
    if base_half_swing_px < min_half_swing_px:
        scale = min_half_swing_px / max(base_half_swing_px, C.EPSILON)
        mean = amp * amp_scale
        r_norm = mean + (r_norm - mean) * scale

    r_px = r_norm * curve_max_px
    return max(keepout, min(curve_max_px, r_px))


class RadialProfile:
    """``radial_at`` with the per-pattern arguments bound."""

    def __init__(
        self, tuning: WaveTuning, amplitude: float, curve_max_px: float, keepout: float, thickness: float,
    ) -> None:
        self.tuning = tuning
        self.amplitude = amplitude
        self.curve_max_px = curve_max_px
        self.keepout = keepout
        self.thickness = thickness

    def __call__(self, t: float) -> float:
        return radial_at(
            t,
            self.tuning.f1,
            self.amplitude,
            self.curve_max_px,
            self.keepout,
            self.thickness,
            self.tuning.gamma,
            self.tuning.amp_scale,
        )
