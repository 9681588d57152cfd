"""Hash input parsing and windowed segment hashing.

Every drawing parameter is derived from ``hash_segment`` values. The segment
hash is djb2 (h * 33 + c) over a byte window, with 32-bit wraparound and an
unsigned result. It must match that arithmetic bit for bit.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from identipattern.engine.constants import (
    HASH_HEX_LENGTH,
    MARKER_SLOTS,
    SEGMENT_MULTIPLIER,
    SEGMENT_SEED,
    UINT32_MASK,
)
from identipattern.errors import ValidationError

logger = logging.getLogger(__name__)

_HASH_RE = re.compile(rf"[0-9a-f]{{{HASH_HEX_LENGTH}}}", re.IGNORECASE)


def validate_hash(text: str) -> str:
    """Raise ValidationError unless ``text`` is exactly 64 hex characters."""
    if not isinstance(text, str) or not _HASH_RE.fullmatch(text):
        raise ValidationError(f"hash must be {HASH_HEX_LENGTH} hex characters")
    return text


def _decode_pairs(text: str) -> bytes:
    """Decode 2-digit hex groups. A malformed group decodes to 0."""
    s = text.lower()
    out = bytearray()
    for i in range(0, len(s) - 1, 2):
        try:
            out.append(int(s[i:i + 2], 16))
        except ValueError:
            out.append(0)
    return bytes(out)


def hash_segment(data: bytes, start: int, length: int) -> int:
    """djb2 over ``data[start:start+length]`` (clipped), as unsigned 32-bit."""
    h = SEGMENT_SEED
    for byte in data[start:start + length]:
        h = (h * SEGMENT_MULTIPLIER + byte) & UINT32_MASK
    return h


@dataclass(frozen=True)
class HashInput:
    """The 32 bytes a pattern is drawn from."""

    data: bytes

    def segment(self, start: int, length: int) -> int:
        return hash_segment(self.data, start, length)

    def marker_bits(self) -> NDArray[np.uint8]:
        """128 flags: flag ``i`` is bit ``i & 7`` of byte ``i >> 3``."""
        head = np.frombuffer(self.data[: MARKER_SLOTS // 8], dtype=np.uint8)
        bits = np.unpackbits(head, bitorder="little")
        if len(bits) < MARKER_SLOTS:
            bits = np.concatenate([bits, np.zeros(MARKER_SLOTS - len(bits), dtype=np.uint8)])
        return bits

    @property
    def hex(self) -> str:
        return self.data.hex()


def parse_hash(text: str) -> HashInput:
    """Validate and decode a 64-character hex string."""
    validate_hash(text)
    data = _decode_pairs(text)
    logger.debug("Parsed hash %s… (%d bytes)", text[:8], len(data))
    return HashInput(data=data)
