"""Fixed geometry constants for pattern generation.

Fractions are relative to the canvas ``size``. Stroke widths are absolute:
they do NOT scale with ``size`` (0.7 and 0.63 units at every size). Changing
that would change every fingerprint, so it stays as is.
"""

DEFAULT_SIZE = 120.0

# Accepted input: exactly 32 bytes written as hex, either case.
HASH_HEX_LENGTH = 64

# djb2 seed and multiplier (h * 33 + c).
SEGMENT_SEED = 5381
SEGMENT_MULTIPLIER = 33
UINT32_MASK = 0xFFFFFFFF

# Absolute stroke widths.
THICKNESS = 0.7
BORDER_STROKE_RATIO = 0.9  # -> 0.63
CONCENTRIC_STROKE_RATIO = 0.8  # -> 0.56

# Samples per wave: 720 segments -> 721 points over one full turn.
WAVE_DETAIL = 720

# Outer wave radius is 38% of the canvas; curves keep 5% (or 3 strokes) inside it.
MAX_RADIUS_FRACTION = 0.38
CURVE_MARGIN_FRACTION = 0.05
CURVE_MARGIN_STROKES = 3.0

# Keepout radius per glyph category, as a fraction of size.
KEEPOUT_STAR = 0.12
KEEPOUT_TRIANGLE = 0.15
KEEPOUT_DOT = 0.06
KEEPOUT_CONCENTRIC = 0.08
KEEPOUT_POLYGON = 0.13
# Keepout may never exceed 40% of the curve bound.
KEEPOUT_CAP_FRACTION = 0.4
# Glyph radius is 75% of its keepout.
GLYPH_RADIUS_FRACTION = 0.75

# 84% border square -> 8% margin on each side.
BORDER_FRACTION = 0.84

# Marker rectangles: 128 slots, 32 per border side.
MARKER_SLOTS = 128
MARKERS_PER_SIDE = 32
MARKER_STRIDE = 73  # coprime with 128, so i -> i*73 mod 128 is a bijection
MARKER_WIDTH_FRACTION = 0.036
MARKER_LENGTH_FRACTION = 0.07

# Wave tuning heuristic.
TUNE_ITERATIONS = 3
TUNE_SAMPLES = 64
GAMMA_START = 1.35
GAMMA_STEP = 0.2
GAMMA_MAX = 1.7
AMP_SCALE_START = 1.0
AMP_SCALE_MAX = 1.25
MIN_FREQ = 3
MIN_GAP_STROKES = 7.0
MIN_GAP_PX = 6.0
MIN_HALF_SWING_STROKES = 3.0
MIN_HALF_SWING_PX = 2.0
# Division guard for near-zero gaps and frequencies.
EPSILON = 1e-6

# Diagnostic grid overlay.
GRID_LINES = 10
GRID_OPACITY = "0.2"
GRID_STROKE = "blue"
GRID_STROKE_WIDTH = "0.5"
