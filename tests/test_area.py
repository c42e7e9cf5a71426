"""
Tests for the area membership predicate.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from core.area import SHAPES, evaluate, in_area, in_circle, in_rectangle, in_triangle

# Millesimal grid keeps squares well clear of float underflow.
coords = st.integers(min_value=-10**6, max_value=10**6).map(lambda n: n / 1000)
radii = st.integers(min_value=0, max_value=10**6).map(lambda n: n / 1000)


class TestBoundaries:
    def test_origin_with_zero_radius_is_inside(self):
        assert in_area(0, 0, 0) is True

    @pytest.mark.parametrize("x, y", [(2.0, 0.0), (0.0, 2.0)])
    def test_circle_edge_is_inclusive(self, x, y):
        assert in_circle(x, y, 4.0)
        assert in_area(x, y, 4.0)

    def test_just_outside_circle(self):
        assert not in_circle(2.0000001, 0.0, 4.0)
        assert not in_area(1.5, 1.5, 4.0)

    def test_rectangle_corners(self):
        assert in_rectangle(-4.0, 2.0, 4.0)
        assert in_rectangle(0.0, 0.0, 4.0)
        assert not in_rectangle(-4.0, 2.0000001, 4.0)
        assert not in_rectangle(-4.0000001, 1.0, 4.0)

    def test_triangle_hypotenuse_is_inclusive(self):
        assert in_triangle(-2.0, -2.0, 4.0)
        assert in_triangle(-4.0, 0.0, 4.0)
        assert in_triangle(0.0, -4.0, 4.0)
        assert not in_triangle(-2.0, -2.0000001, 4.0)

    def test_fourth_quadrant_is_empty(self):
        assert not in_area(1.0, -1.0, 4.0)

    def test_bounding_box_corner_is_outside(self):
        assert not in_area(4.0, 4.0, 4.0)
        assert not in_area(-4.0, -4.0, 4.0)

    def test_evaluate_reports_matching_shapes(self):
        verdict = evaluate(0, 0, 4)
        assert verdict.inside
        assert set(verdict.matched) == {"in_circle", "in_rectangle", "in_triangle"}

        verdict = evaluate(-1, 1, 4)
        assert verdict.matched == ("in_rectangle",)

        verdict = evaluate(3, 3, 4)
        assert not verdict.inside
        assert verdict.matched == ()


class TestProperties:
    @given(coords, coords, radii)
    def test_union_of_shapes(self, x, y, r):
        assert in_area(x, y, r) == any(test(x, y, r) for test in SHAPES)

    @given(coords, coords, radii)
    def test_deterministic(self, x, y, r):
        assert in_area(x, y, r) == in_area(x, y, r)
        assert evaluate(x, y, r).inside == in_area(x, y, r)

    @given(coords, coords, radii)
    def test_outside_bounding_square(self, x, y, r):
        if abs(x) > r or abs(y) > r:
            assert not in_area(x, y, r)

    @given(
        st.floats(min_value=1e-6, max_value=1e6),
        st.floats(min_value=1e-6, max_value=1e6),
        radii,
    )
    def test_fourth_quadrant_never_inside(self, x, neg_y, r):
        assert not in_area(x, -neg_y, r)

    @given(radii)
    def test_origin_always_inside(self, r):
        assert in_area(0.0, 0.0, r)
