"""Tests for the presentational binding."""

from __future__ import annotations

import pytest

from identipattern.errors import ValidationError
from identipattern.facades.binding import PatternBinding
from identipattern.facades.svg import to_svg
from tests.conftest import ONES_HASH, ZERO_HASH


def test_renders_once_for_same_inputs():
    binding = PatternBinding(ZERO_HASH)
    first = binding.svg
    assert binding.svg is first
    assert binding.render_count == 1
    assert first == to_svg(ZERO_HASH, 120)


@pytest.mark.parametrize(
    "change",
    [{"hash_hex": ONES_HASH}, {"size": 240}, {"show_grid": True}],
)
def test_rerenders_on_change(change):
    binding = PatternBinding(ZERO_HASH)
    _ = binding.svg
    binding.set(**change)
    _ = binding.svg
    assert binding.render_count == 2


def test_same_value_does_not_rerender():
    binding = PatternBinding(ZERO_HASH, size=120)
    _ = binding.svg
    binding.set(size=120)
    _ = binding.svg
    assert binding.render_count == 1


def test_unknown_input():
    with pytest.raises(TypeError):
        PatternBinding(ZERO_HASH).set(colour="red")


def test_invalid_hash_surfaces_and_retries():
    binding = PatternBinding("bad")
    with pytest.raises(ValidationError):
        _ = binding.svg
    binding.set(hash_hex=ZERO_HASH)
    assert binding.svg.startswith("<svg")
    assert binding.render_count == 1
