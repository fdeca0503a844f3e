"""
Superellipsoids.

A superellipsoid is the set of points whose powered radial distance

    D(p) = sum_d (|p[d] - c[d]| / r[d]) ** e

is at most one (CLOSED) or strictly below one (OPEN). The exponent selects
the family: ``e = 1`` gives diamonds, ``e = 2`` ellipsoids, and large ``e``
approaches boxes with rounded corners.
"""

from typing import Any, Dict, Sequence, Union

import numpy as np
from numpy.typing import ArrayLike

from realroi.boundary import BoundaryType
from realroi.geom import maths
from realroi.geom.shape import Shape


class SuperEllipsoid(Shape):
    """Axis-aligned n-d superellipsoid. Immutable once constructed."""

    def __init__(self, center: Sequence[float], semi_axis_lengths: Sequence[float],
                 exponent: float, boundary_type: BoundaryType = BoundaryType.CLOSED):
        """
        Creates an n-d superellipsoid, where n is the length of the shorter array.

        :param center: Position of the superellipsoid in space
        :param semi_axis_lengths: Half width/height/depth/... per axis
        :param exponent: Exponent of the superellipsoid
        :param boundary_type: OPEN or CLOSED
        """
        c = np.array(center, dtype=float).reshape(-1)
        r = np.array(semi_axis_lengths, dtype=float).reshape(-1)
        n = min(c.shape[0], r.shape[0])
        if n == 0:
            raise ValueError("Center and semi-axis lengths must have at least one entry")
        if boundary_type not in (BoundaryType.OPEN, BoundaryType.CLOSED):
            raise ValueError(f"{type(self).__name__} supports OPEN or CLOSED boundaries, got {boundary_type}")
        if np.any(r[:n] <= 0):
            raise ValueError("Semi-axis lengths must be positive")
        if not exponent > 0:
            raise ValueError("Exponent must be positive")

        super().__init__(n, boundary_type)
        self._center = c[:n]
        self._semi_axis_lengths = r[:n]
        self._exponent = float(exponent)
        self._min = self._center - self._semi_axis_lengths
        self._max = self._center + self._semi_axis_lengths

    @property
    def center(self) -> np.ndarray:
        return self._center.copy()

    @property
    def semi_axis_lengths(self) -> np.ndarray:
        return self._semi_axis_lengths.copy()

    @property
    def exponent(self) -> float:
        return self._exponent

    def distance_powered(self, points: ArrayLike) -> Union[float, np.ndarray]:
        """Powered radial distance of point(s) from the center; 1 on the surface."""
        return maths.distance_powered(self._center, self._semi_axis_lengths, self._exponent, points)

    def contains(self, points: ArrayLike) -> Union[bool, np.ndarray]:
        dist = self.distance_powered(points)
        if self._boundary_type is BoundaryType.CLOSED:
            return dist <= 1.0
        return dist < 1.0

    @property
    def params(self) -> Dict[str, Any]:
        return {
            'center': self._center.tolist(),
            'semi_axis_lengths': self._semi_axis_lengths.tolist(),
            'exponent': self._exponent,
            'boundary_type': self._boundary_type,
        }

    def __eq__(self, other):
        if not isinstance(other, SuperEllipsoid):
            return NotImplemented
        return (self._boundary_type is other._boundary_type
                and self._n == other._n
                and self._exponent == other._exponent
                and bool(np.all(self._center == other._center))
                and bool(np.all(self._semi_axis_lengths == other._semi_axis_lengths)))

    def __hash__(self):
        return hash((self._boundary_type, tuple(self._center.tolist()),
                     tuple(self._semi_axis_lengths.tolist()), self._exponent))


class Ellipsoid(SuperEllipsoid):
    """Superellipsoid with exponent 2."""

    def __init__(self, center: Sequence[float], semi_axis_lengths: Sequence[float],
                 boundary_type: BoundaryType = BoundaryType.CLOSED):
        super().__init__(center, semi_axis_lengths, 2.0, boundary_type)

    @property
    def params(self) -> Dict[str, Any]:
        params = super().params
        del params['exponent']
        return params


class Sphere(SuperEllipsoid):
    """Ellipsoid with the same radius on every axis."""

    def __init__(self, center: Sequence[float], radius: float,
                 boundary_type: BoundaryType = BoundaryType.CLOSED):
        n = len(center)
        super().__init__(center, [radius] * n, 2.0, boundary_type)

    @property
    def radius(self) -> float:
        return float(self._semi_axis_lengths[0])

    @property
    def params(self) -> Dict[str, Any]:
        return {
            'center': self._center.tolist(),
            'radius': self.radius,
            'boundary_type': self._boundary_type,
        }
