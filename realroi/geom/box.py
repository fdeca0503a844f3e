"""Axis-aligned boxes."""

from typing import Any, Dict, Sequence, Union

import numpy as np
from numpy.typing import ArrayLike

from realroi.boundary import BoundaryType
from realroi.geom.maths import as_query
from realroi.geom.shape import Shape


class Box(Shape):
    """
    Axis-aligned hyper-rectangle. Immutable once constructed.

    The two corners may be given in any order; each axis is sorted
    independently. Dimensionality is the length of the shorter corner.
    """

    def __init__(self, min_corner: Sequence[float], max_corner: Sequence[float],
                 boundary_type: BoundaryType = BoundaryType.CLOSED):
        a = np.array(min_corner, dtype=float).reshape(-1)
        b = np.array(max_corner, dtype=float).reshape(-1)
        n = min(a.shape[0], b.shape[0])
        if n == 0:
            raise ValueError("Box corners must have at least one coordinate")
        if boundary_type not in (BoundaryType.OPEN, BoundaryType.CLOSED):
            raise ValueError(f"Box supports OPEN or CLOSED boundaries, got {boundary_type}")
        super().__init__(n, boundary_type)
        self._min = np.minimum(a[:n], b[:n])
        self._max = np.maximum(a[:n], b[:n])

    @property
    def center(self) -> np.ndarray:
        return (self._min + self._max) / 2

    @property
    def side_lengths(self) -> np.ndarray:
        return self._max - self._min

    def contains(self, points: ArrayLike) -> Union[bool, np.ndarray]:
        query, single = as_query(points, self._n)
        if self._boundary_type is BoundaryType.CLOSED:
            inside = np.all((query >= self._min) & (query <= self._max), axis=1)
        else:
            inside = np.all((query > self._min) & (query < self._max), axis=1)
        return bool(inside[0]) if single else inside

    @property
    def params(self) -> Dict[str, Any]:
        return {
            'min_corner': self._min.tolist(),
            'max_corner': self._max.tolist(),
            'boundary_type': self._boundary_type,
        }

    def __eq__(self, other):
        if not isinstance(other, Box):
            return NotImplemented
        return (self._boundary_type is other._boundary_type
                and self._n == other._n
                and bool(np.all(self._min == other._min))
                and bool(np.all(self._max == other._max)))

    def __hash__(self):
        return hash((self._boundary_type, tuple(self._min.tolist()), tuple(self._max.tolist())))
