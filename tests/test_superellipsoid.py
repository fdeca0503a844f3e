import numpy as np
import pytest
from numpy.testing import assert_array_equal

from realroi.boundary import BoundaryType
from realroi.geom.superellipsoid import Ellipsoid, Sphere, SuperEllipsoid


def test_closed_unit_circle():
    circle = SuperEllipsoid((0, 0), (1, 1), 2)
    assert circle.boundary_type is BoundaryType.CLOSED
    assert circle.distance_powered((1, 0)) == 1.0
    assert circle.test((1, 0))
    assert not circle.test((1.0001, 0))
    assert circle.test((0, 0))


def test_open_unit_circle():
    circle = SuperEllipsoid((0, 0), (1, 1), 2, boundary_type=BoundaryType.OPEN)
    assert not circle.test((1, 0))
    assert not circle.test((0, -1))
    assert circle.test((0.5, 0))


def test_exponent_selects_family():
    diamond = SuperEllipsoid((0, 0), (1, 1), 1)
    assert diamond.test((0.5, 0.5))
    assert not diamond.test((0.6, 0.5))

    squircle = SuperEllipsoid((0, 0), (1, 1), 100)
    assert squircle.test((0.99, 0.99))
    assert not squircle.test((1.01, 0))


def test_semi_axes_scale_each_axis():
    ellipse = SuperEllipsoid((10, 20), (4, 1), 2)
    assert ellipse.test((14, 20))
    assert not ellipse.test((10, 22))
    assert ellipse.test((10, 21))


def test_bounds():
    shape = SuperEllipsoid((1, 2), (3, 4), 3)
    assert_array_equal(shape.real_min(), [-2, -2])
    assert_array_equal(shape.real_max(), [4, 6])


def test_dimensionality_is_shorter_array():
    shape = SuperEllipsoid((1, 2, 3), (1, 1), 2)
    assert shape.num_dimensions == 2
    assert_array_equal(shape.center, [1, 2])
    assert shape.test((1, 2, 500))


def test_contains_vectorized():
    circle = SuperEllipsoid((0, 0), (1, 1), 2)
    assert_array_equal(circle.contains([(1, 0), (1.0001, 0), (0.3, 0.3)]), [True, False, True])


def test_parameters_are_read_only_copies():
    shape = SuperEllipsoid((0, 0), (1, 1), 2)
    center = shape.center
    center[0] = 50
    assert shape.test((0, 0))
    assert shape.exponent == 2.0


@pytest.mark.parametrize("kwargs", [
    dict(center=(0, 0), semi_axis_lengths=(1, 0), exponent=2),
    dict(center=(0, 0), semi_axis_lengths=(1, -1), exponent=2),
    dict(center=(0, 0), semi_axis_lengths=(1, 1), exponent=0),
    dict(center=(), semi_axis_lengths=(1, 1), exponent=2),
    dict(center=(0, 0), semi_axis_lengths=(1, 1), exponent=2, boundary_type=BoundaryType.UNSPECIFIED),
])
def test_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        SuperEllipsoid(**kwargs)


def test_with_params_returns_new_shape():
    circle = SuperEllipsoid((0, 0), (1, 1), 2)
    diamond = circle.with_params(exponent=1)
    assert diamond.exponent == 1.0
    assert circle.exponent == 2.0
    assert circle.test((0.6, 0.5))
    assert not diamond.test((0.6, 0.5))


def test_equality_and_hash():
    a = SuperEllipsoid((0, 0), (1, 2), 3)
    b = SuperEllipsoid([0.0, 0.0], np.array([1.0, 2.0]), 3.0)
    assert a == b
    assert hash(a) == hash(b)
    assert a != SuperEllipsoid((0, 0), (1, 2), 4)
    assert a != SuperEllipsoid((0, 0), (1, 2), 3, boundary_type=BoundaryType.OPEN)
    assert a != SuperEllipsoid((0, 1), (1, 2), 3)


def test_ellipsoid_and_sphere():
    ellipsoid = Ellipsoid((0, 0, 0), (2, 1, 1))
    assert ellipsoid.exponent == 2.0
    assert ellipsoid.test((2, 0, 0))
    assert ellipsoid == SuperEllipsoid((0, 0, 0), (2, 1, 1), 2)

    sphere = Sphere((1, 1), 2, boundary_type=BoundaryType.OPEN)
    assert sphere.radius == 2.0
    assert_array_equal(sphere.semi_axis_lengths, [2, 2])
    assert not sphere.test((3, 1))
    assert sphere.test((2, 2))

    bigger = sphere.with_params(radius=3)
    assert isinstance(bigger, Sphere)
    assert bigger.test((3, 1))
    assert bigger.boundary_type is BoundaryType.OPEN

    flatter = ellipsoid.with_params(semi_axis_lengths=(2, 1, 0.5))
    assert isinstance(flatter, Ellipsoid)
    assert not flatter.test((0, 0, 0.75))
