"""Wave-shape tuning: keep opposite-phase radii visibly apart.

A wave's radius at ``t`` and at ``t + pi/f1`` (half a period later) should differ
by at least ``min_gap_px``. Up to three relaxation steps are tried, one per
iteration, in a fixed order:

1. stretch the amplitude (``amp_scale``, capped at 1.25)
2. sharpen the lobes (``gamma`` += 0.2, capped at 1.7)
3. drop one lobe (``f1`` -= 1, floor 3)

The heuristic may stop short of the target gap. That is acceptable: the
result is still deterministic and bounded.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from identipattern.engine import constants as C
from identipattern.utils.math_helpers import signed_pow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WaveTuning:
    f1: int
    gamma: float
    amp_scale: float


def shaped_radius(
    t: float, f1: float, amplitude: float, gamma: float, amp_scale: float, curve_max_px: float,
) -> float:
    """Radius in px of the signed-power sine profile, before clamping."""
    sc = signed_pow(math.sin(f1 * t), gamma)
    return amplitude * (1 + 0.5 * sc) * amp_scale * curve_max_px


def min_opposite_gap(
    f1: float, amplitude: float, gamma: float, amp_scale: float, curve_max_px: float,
) -> float:
    """Smallest |r(t) - r(t + pi/f1)| over one turn."""
    min_gap = math.inf
    for i in range(C.TUNE_SAMPLES):
        t = (i / C.TUNE_SAMPLES) * math.pi * 2
        r1 = shaped_radius(t, f1, amplitude, gamma, amp_scale, curve_max_px)
        t_opp = t + math.pi / max(f1, C.EPSILON)
        r2 = shaped_radius(t_opp, f1, amplitude, gamma, amp_scale, curve_max_px)
        min_gap = min(min_gap, abs(r1 - r2))
    return min_gap


def tune_waves(freq1: int, amplitude: float, curve_max_px: float, thickness: float) -> WaveTuning:
    f1 = freq1
    gamma = C.GAMMA_START
    amp_scale = C.AMP_SCALE_START
    min_gap_px = max(C.MIN_GAP_STROKES * thickness, C.MIN_GAP_PX)

    for iteration in range(C.TUNE_ITERATIONS):
        min_gap = min_opposite_gap(f1, amplitude, gamma, amp_scale, curve_max_px)
        if min_gap >= min_gap_px:
            logger.debug("Wave tuning converged at iteration %d (gap %.3f)", iteration, min_gap)
            break
        if iteration == 0:
            amp_scale = min(C.AMP_SCALE_MAX, amp_scale * math.sqrt(min_gap_px / max(min_gap, C.EPSILON)))
        elif iteration == 1:
            gamma = min(C.GAMMA_MAX, gamma + C.GAMMA_STEP)
        elif f1 > C.MIN_FREQ:
            f1 = max(C.MIN_FREQ, f1 - 1)
    else:
        logger.debug("Wave tuning stopped without reaching %.2fpx gap", min_gap_px)

    return WaveTuning(f1=f1, gamma=gamma, amp_scale=amp_scale)
