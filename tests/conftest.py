"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"

ZERO_HASH = "0" * 64
ONES_HASH = "f" * 64

# sha256("identipattern-<n>") samples, one per inner_accent value 0..9.
ACCENT_HASHES = {
    0: "b0cb7a2fcd8a4bcd4212b03c96c9d27d38babb3f62bec907bd0c6521c02cb7b6",
    1: "3740ecb4a85cd4c9835542de11b228f7e0819e468304b809d24c0d3c0faf8442",
    2: "856789a2da6f5be6a95dbf14d50cfac100a3fc7299b248530f265d39ee2a791e",
    3: "59aa1584ff4753c1a8bbe913b22adb12405dbab8952f12ffc11527ef3466c377",
    4: "b6af1a2dc0f4a9650f6b9522431f427cec1bc40d107070032d15514a4d1408c9",
    5: "032ccf473db191f6c1a61aac45c27b60d47785bd65b2953f8687caba4b4da0c4",
    6: "e7152e1d534f68eac0afef7cd905483c52a6c85b3d4cd895f192c116d2a4bed9",
    7: "88d2b6f39f7d50fc373d0f99c1b6c578f18ce55055eb0bf99333c77b21527371",
    8: "28466bf8dc97f1feff1885010df948116572d88faccc029c909b51ebce376796",
    9: "e5294278487e2d7b431d322a9ca3bf564ef3f94f87af75cad94fa82c6d9e344a",
}

STAR_HASH = ACCENT_HASHES[0]
DOT_HASH = ACCENT_HASHES[2]
EMPTY_GLYPH_HASH = ACCENT_HASHES[4]


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


def popcount_head(hash_hex: str) -> int:
    """Set bits in the first 16 bytes."""
    return sum(bin(b).count("1") for b in bytes.fromhex(hash_hex)[:16])


def cairo_available() -> bool:
    try:
        import cairosvg  # noqa: F401
    except (ImportError, OSError):
        return False
    return True


requires_cairo = pytest.mark.skipif(not cairo_available(), reason="cairosvg / libcairo not available")


@pytest.fixture
def zero_hash() -> str:
    return ZERO_HASH


@pytest.fixture
def golden_zeros_svg() -> str:
    return load_fixture("zeros_120.svg")
