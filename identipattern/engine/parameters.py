"""Map segment hashes to bounded drawing parameters."""

from __future__ import annotations

from dataclasses import dataclass

from identipattern.engine.hash_bytes import HashInput


@dataclass(frozen=True)
class DerivedParameters:
    freq1: int  # 3..7, wave lobes before tuning
    pseudo: int  # 0..1023, feeds n_waves and freq2
    amplitude: float  # 0.35..0.70
    inner_accent: int  # 0..9, glyph category (4 = none)
    center_hollow: bool
    n_waves: int  # 3..5
    freq2: int  # 4..8, rotation rate


def derive_parameters(hash_input: HashInput) -> DerivedParameters:
    freq1 = hash_input.segment(0, 8) % 5 + 3
    pseudo = hash_input.segment(8, 8) % 1024
    amplitude = ((hash_input.segment(16, 8) % 1000) / 1000) * 0.35 + 0.35
    # Low-amplitude waves with many lobes crowd together.
    if amplitude < 0.5 and freq1 > 4:
        freq1 = 4

    return DerivedParameters(
        freq1=freq1,
        pseudo=pseudo,
        amplitude=amplitude,
        inner_accent=hash_input.segment(30, 2) % 10,
        center_hollow=(hash_input.segment(29, 1) & 1) == 1,
        n_waves=((pseudo >> 6) % 3) + 3,
        freq2=((pseudo >> 2) & 15) % 5 + 4,
    )
