"""End-to-end tests for pattern composition and SVG output."""

from __future__ import annotations

import re

import pytest

from identipattern import generate
from identipattern.engine.composer import compose, generate_identipattern, plan_pattern, render_plan
from identipattern.engine.glyphs import GlyphKind
from identipattern.errors import ValidationError
from identipattern.svg.primitives import Circle, Group, Line, Path, Rect
from tests.conftest import (
    ACCENT_HASHES,
    DOT_HASH,
    EMPTY_GLYPH_HASH,
    ONES_HASH,
    STAR_HASH,
    ZERO_HASH,
    load_fixture,
    popcount_head,
)

_MARKER_RE = re.compile(r'<rect x="[^"]+" y="[^"]+" width="[^"]+" height="[^"]+" fill="black"/>')
_BORDER_RE = re.compile(
    r'<rect x="([^"]+)" y="([^"]+)" width="([^"]+)" height="([^"]+)" fill="none" stroke="black" stroke-width="([^"]+)"/>'
)


class TestGolden:
    def test_all_zero_default_options(self, golden_zeros_svg):
        assert generate_identipattern(ZERO_HASH) == golden_zeros_svg

    def test_all_zero_explicit_options(self, golden_zeros_svg):
        assert generate_identipattern(ZERO_HASH, size=120, show_grid=False) == golden_zeros_svg

    def test_all_ones_with_grid(self):
        assert generate_identipattern(ONES_HASH, size=120, show_grid=True) == load_fixture("ones_120_grid.svg")

    def test_star_at_240(self):
        assert generate_identipattern(STAR_HASH, size=240) == load_fixture("star_240.svg")

    def test_dot_at_96(self):
        assert generate_identipattern(DOT_HASH, size=96) == load_fixture("dot_96.svg")

    def test_uppercase_input_same_output(self):
        assert generate_identipattern(STAR_HASH.upper(), size=240) == load_fixture("star_240.svg")


class TestDeterminism:
    @pytest.mark.parametrize("hash_hex", list(ACCENT_HASHES.values()))
    def test_repeated_calls_identical(self, hash_hex):
        first = generate_identipattern(hash_hex, size=120)
        second = generate_identipattern(hash_hex, size=120)
        assert first == second

    def test_alias(self):
        assert generate(ZERO_HASH) == generate_identipattern(ZERO_HASH)

    def test_render_plan_matches_generate(self):
        plan = plan_pattern(ONES_HASH, 120)
        assert render_plan(plan, show_grid=True) == load_fixture("ones_120_grid.svg")
        assert plan.marker_count == 128


class TestValidation:
    @pytest.mark.parametrize("bad", ["0" * 63, "0" * 65, "g" * 64, "0" * 63 + "g"])
    def test_invalid_hash_raises(self, bad):
        with pytest.raises(ValidationError):
            generate_identipattern(bad)

    @pytest.mark.parametrize("size", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_size_raises(self, size):
        with pytest.raises(ValidationError):
            generate_identipattern(ZERO_HASH, size=size)

    @pytest.mark.parametrize("good", ["f" * 64, "0" * 64])
    def test_valid_extremes(self, good):
        assert generate_identipattern(good).startswith("<svg")


class TestStructure:
    def test_emission_order(self):
        prims = compose(STAR_HASH, 120, show_grid=True)
        plan = plan_pattern(STAR_HASH, 120)
        n_waves = plan.params.n_waves
        n_markers = popcount_head(STAR_HASH)

        assert isinstance(prims[0], Rect) and prims[0].x is None
        assert isinstance(prims[1], Group) and prims[1].opacity == "0.2"
        assert isinstance(prims[2], Rect) and prims[2].style.fill == "none"
        waves = prims[3:3 + n_waves]
        assert all(isinstance(w, Path) and not w.closed for w in waves)
        markers = prims[3 + n_waves:3 + n_waves + n_markers]
        assert all(isinstance(m, Rect) and m.style.fill == "black" for m in markers)
        glyph = prims[3 + n_waves + n_markers:]
        assert len(glyph) == 1 and isinstance(glyph[0], Path) and len(glyph[0].points) == 10

    def test_grid_has_twenty_lines(self):
        grid = compose(ZERO_HASH, 120, show_grid=True)[1]
        assert isinstance(grid, Group)
        assert len(grid.children) == 20
        assert all(isinstance(line, Line) for line in grid.children)

    def test_no_grid_by_default(self):
        assert not any(isinstance(p, Group) for p in compose(ZERO_HASH))

    @pytest.mark.parametrize("hash_hex", [ZERO_HASH, ONES_HASH, *ACCENT_HASHES.values()])
    def test_wave_count_and_detail(self, hash_hex):
        svg = generate_identipattern(hash_hex)
        paths = re.findall(r'<path d="([^"]+)" fill="none" stroke="black" stroke-width="0.70" stroke-linecap', svg)
        assert len(paths) in {3, 4, 5}
        assert len(paths) == plan_pattern(hash_hex).params.n_waves
        for d in paths:
            assert d.count(" L") == 720

    @pytest.mark.parametrize("hash_hex", [ZERO_HASH, ONES_HASH, *ACCENT_HASHES.values()])
    def test_marker_count_is_popcount(self, hash_hex):
        svg = generate_identipattern(hash_hex)
        assert len(_MARKER_RE.findall(svg)) == popcount_head(hash_hex)

    @pytest.mark.parametrize("hash_hex", [ZERO_HASH, ONES_HASH, *ACCENT_HASHES.values()])
    def test_tuned_f1_at_least_three(self, hash_hex):
        assert plan_pattern(hash_hex).tuning.f1 >= 3

    def test_coordinates_have_two_decimals(self, golden_zeros_svg):
        for d in re.findall(r' d="M([^"]+)"', golden_zeros_svg):
            for pair in d.rstrip("Z").split(" L"):
                x, y = pair.split(",")
                assert re.fullmatch(r"-?\d+\.\d\d", x) and re.fullmatch(r"-?\d+\.\d\d", y)


class TestGlyphPresence:
    def test_empty_category_draws_no_glyph(self):
        prims = compose(EMPTY_GLYPH_HASH)
        assert plan_pattern(EMPTY_GLYPH_HASH).glyph is GlyphKind.NONE
        assert not any(isinstance(p, Circle) for p in prims)
        assert not any(isinstance(p, Path) and p.closed for p in prims)

    @pytest.mark.parametrize("accent", [0, 1, 2, 3, 5, 6, 7, 8, 9])
    def test_other_categories_draw_a_glyph(self, accent):
        plan = plan_pattern(ACCENT_HASHES[accent])
        assert plan.glyph is not GlyphKind.NONE
        prims = compose(ACCENT_HASHES[accent])
        assert any(isinstance(p, Circle) or (isinstance(p, Path) and p.closed) for p in prims)

    def test_dot_is_filled_circle_even_when_hollow(self):
        plan = plan_pattern(DOT_HASH)
        assert plan.params.center_hollow is True
        svg = generate_identipattern(DOT_HASH)
        assert svg.endswith('<circle cx="60.00" cy="60.00" r="5.40" fill="black"/></svg>')


class TestSizeScaling:
    def test_border_scales_stroke_does_not(self):
        small = _BORDER_RE.search(generate_identipattern(STAR_HASH, size=120)).groups()
        large = _BORDER_RE.search(generate_identipattern(STAR_HASH, size=240)).groups()
        for a, b in zip(small[:4], large[:4]):
            assert float(b) == pytest.approx(2 * float(a), abs=0.011)
        assert small[4] == large[4] == "0.63"

    def test_markers_scale(self):
        small = compose(ONES_HASH, 120)
        large = compose(ONES_HASH, 240)
        small_rects = [p for p in small if isinstance(p, Rect) and p.style.fill == "black"]
        large_rects = [p for p in large if isinstance(p, Rect) and p.style.fill == "black"]
        assert len(small_rects) == len(large_rects) == 128
        for a, b in zip(small_rects, large_rects):
            assert (b.x, b.y, b.width, b.height) == pytest.approx((2 * a.x, 2 * a.y, 2 * a.width, 2 * a.height))

    def test_wave_stroke_width_fixed(self):
        for size in (60, 120, 240, 480):
            svg = generate_identipattern(ZERO_HASH, size=size)
            widths = set(re.findall(r'stroke-width="([^"]+)" stroke-linecap', svg))
            assert widths == {"0.70"}

    def test_root_dimensions(self):
        assert generate_identipattern(ZERO_HASH, size=240).startswith('<svg width="240" height="240" ')
        assert generate_identipattern(ZERO_HASH, size=120.5).startswith('<svg width="120.5" height="120.5" ')
