import numpy as np
import pytest
from numpy.testing import assert_array_equal

from realroi.errors import DimensionMismatchError
from realroi.geom import maths


HOUSE = np.array([(15, 15), (20, 20), (25, 15), (25, 10), (15, 10)], dtype=float)


def test_bounds_real_from_points():
    lo, hi = maths.bounds_real([(1, 5), (-2, 3), (4, -1)])
    assert_array_equal(lo, [-2, -1])
    assert_array_equal(hi, [4, 5])


def test_bounds_real_truncates_longer_points():
    lo, hi = maths.bounds_real([(0, 0), (5, 5, 100)])
    assert lo.shape == (2,)
    assert_array_equal(hi, [5, 5])


def test_bounds_real_rejects_shorter_points():
    with pytest.raises(DimensionMismatchError) as info:
        maths.bounds_real([(0, 0, 0), (1, 1)])
    assert info.value.expected == 3
    assert info.value.got == 2


def test_bounds_real_with_explicit_dimensionality():
    lo, hi = maths.bounds_real([(3, 1, 7), (1, 2, 9)], n=2)
    assert_array_equal(lo, [1, 1])
    assert_array_equal(hi, [3, 2])


def test_bounds_real_of_nothing():
    with pytest.raises(ValueError):
        maths.bounds_real([])


def test_dimension_mismatch_is_both_index_and_value_error():
    assert issubclass(DimensionMismatchError, IndexError)
    assert issubclass(DimensionMismatchError, ValueError)


def test_as_query_shapes():
    single, is_single = maths.as_query((1, 2, 3), 2)
    assert is_single
    assert_array_equal(single, [[1, 2]])

    stack, is_single = maths.as_query([(1, 2), (3, 4)], 2)
    assert not is_single
    assert stack.shape == (2, 2)

    with pytest.raises(ValueError):
        maths.as_query(np.zeros((2, 2, 2)), 2)


def test_as_coordinates_single_point():
    assert_array_equal(maths.as_coordinates((1, 2, 3), 2), [1, 2])
    assert_array_equal(maths.as_coordinates(5, 1), [5])


def test_as_coordinates_rejects_point_stacks():
    with pytest.raises(ValueError, match="single point"):
        maths.as_coordinates([(20, 14), (26, 30)], 2)


class TestLineContains:

    def test_points_on_segment(self):
        assert maths.line_contains((0, 0), (10, 5), (4, 2))
        assert maths.line_contains((0, 0), (10, 5), (0, 0))
        assert maths.line_contains((0, 0), (10, 5), (10, 5))

    def test_points_beyond_endpoints(self):
        assert not maths.line_contains((0, 0), (10, 5), (12, 6))
        assert not maths.line_contains((0, 0), (10, 5), (-2, -1))

    def test_points_off_the_line(self):
        assert not maths.line_contains((0, 0), (10, 5), (4, 2.5))

    def test_axis_aligned_segments(self):
        assert maths.line_contains((25, 15), (25, 10), (25, 11))
        assert not maths.line_contains((25, 15), (25, 10), (25, 16))
        assert maths.line_contains((0, 3), (8, 3), (2.5, 3))

    def test_n_dimensional(self):
        assert maths.line_contains((0, 0, 0), (2, 4, 6), (1, 2, 3))
        assert not maths.line_contains((0, 0, 0), (2, 4, 6), (1, 2, 4))
        assert not maths.line_contains((0, 0, 0), (2, 4, 6), (3, 6, 9))

    def test_one_dimensional(self):
        assert maths.line_contains((1,), (4,), (2.5,))
        assert not maths.line_contains((1,), (4,), (4.5,))

    def test_zero_length_segment(self):
        assert maths.line_contains((3, 3), (3, 3), (3, 3))
        assert not maths.line_contains((3, 3), (3, 3), (3, 3.5))

    def test_vectorized(self):
        result = maths.line_contains((0, 0), (10, 10), [(5, 5), (5, 6), (11, 11)])
        assert_array_equal(result, [True, False, False])


class TestPnpoly:

    def test_interior_and_exterior(self):
        assert maths.pnpoly(HOUSE, (20, 14))
        assert not maths.pnpoly(HOUSE, (26, 30))

    def test_edge_bias(self):
        # lower/left boundary counts as inside, upper/right as outside
        assert maths.pnpoly(HOUSE, (19, 10))
        assert maths.pnpoly(HOUSE, (15, 13))
        assert not maths.pnpoly(HOUSE, (25, 11))
        assert not maths.pnpoly(HOUSE, (22, 18))

    def test_vectorized(self):
        result = maths.pnpoly(HOUSE, [(20, 14), (26, 30), (15, 10)])
        assert_array_equal(result, [True, False, True])

    def test_extra_coordinates_ignored(self):
        assert maths.pnpoly(HOUSE, (20, 14, 99))


def test_polygon_edges_include_closing_edge():
    assert maths.polygon_edges_contain(HOUSE, (15, 13))
    assert not maths.path_contains(HOUSE, (15, 13), closed=False)


def test_classify_polygon():
    codes = maths.classify_polygon(HOUSE, [(20, 14), (22, 18), (26, 30), (15, 15)])
    assert_array_equal(codes, [maths.INSIDE, maths.ON_EDGE, maths.OUTSIDE, maths.ON_EDGE])
    assert maths.classify_polygon(HOUSE, (20, 14)) == maths.INSIDE


def test_distance_powered():
    assert maths.distance_powered((0, 0), (1, 1), 2, (1, 0)) == 1.0
    assert maths.distance_powered((1, 1), (2, 4), 2, (2, 3)) == pytest.approx(0.5)
    assert_array_equal(maths.distance_powered((0, 0), (1, 1), 1, [(0.5, 0.5), (0, 0)]), [1.0, 0.0])


def test_interval_of_empty_array():
    lo, hi = maths.interval_of(np.empty((0, 3)), 3)
    assert np.all(np.isposinf(lo))
    assert np.all(np.isneginf(hi))
