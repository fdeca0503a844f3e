"""
Point collections.

A point collection is a mask that contains exactly its member points. The
boundary type is always CLOSED. Adding and removing points are optional
operations: variants that do not support them raise
UnsupportedOperationError.
"""

import logging
from abc import abstractmethod
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

import numpy as np
from numpy.typing import ArrayLike
from scipy.spatial import cKDTree

from realroi.boundary import BoundaryType
from realroi.errors import UnsupportedOperationError
from realroi.geom.maths import as_coordinates, as_query, interval_of, stack_points
from realroi.geom.shape import Shape

logger = logging.getLogger(__name__)


class PointCollection(Shape):
    """Abstract base class for finite point sets."""

    def __init__(self, n: int):
        super().__init__(n, BoundaryType.CLOSED)

    @abstractmethod
    def points(self) -> Iterable[np.ndarray]:
        """Returns the points in the collection."""

    @abstractmethod
    def __len__(self):
        pass

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.points())

    def add_point(self, point: ArrayLike) -> None:
        """Optional operation. Adds a point to the collection."""
        raise UnsupportedOperationError("add_point", self)

    def remove_point(self, point: ArrayLike) -> None:
        """Optional operation. Removes a point from the collection."""
        raise UnsupportedOperationError("remove_point", self)

    def _as_sorted_rows(self) -> List[tuple]:
        return sorted(tuple(p.tolist()) for p in self.points())

    def __eq__(self, other):
        if not isinstance(other, PointCollection):
            return NotImplemented
        return self._n == other._n and self._as_sorted_rows() == other._as_sorted_rows()

    def __hash__(self):
        return hash((self._n, tuple(self._as_sorted_rows())))


class RealPointCollection(PointCollection):
    """
    Mutable point collection backed by a plain array.

    Membership is an exact coordinate match against every member. Bounds are
    recomputed after each addition or removal.
    """

    def __init__(self, points: Iterable[ArrayLike], n: Optional[int] = None):
        """
        :param points: Member points; may be empty only if ``n`` is given
        :param n: Dimensionality, or None to take it from the first point
        """
        stacked = stack_points(points, n)
        super().__init__(stacked.shape[1])
        self._points = stacked
        self._update_bounds()

    def points(self) -> List[np.ndarray]:
        return [p.copy() for p in self._points]

    def __len__(self):
        return self._points.shape[0]

    def contains(self, points: ArrayLike) -> Union[bool, np.ndarray]:
        query, single = as_query(points, self._n)
        matches = np.all(query[:, None, :] == self._points[None, :, :], axis=2)
        inside = np.any(matches, axis=1)
        return bool(inside[0]) if single else inside

    def add_point(self, point: ArrayLike) -> None:
        coords = as_coordinates(point, self._n)
        self._points = np.vstack([self._points, coords])
        self._update_bounds()
        logger.debug(f"RealPointCollection: added {coords.tolist()}, {len(self)} points")

    def remove_point(self, point: ArrayLike) -> None:
        """Removes the first member equal to ``point``."""
        coords = as_coordinates(point, self._n)
        hits = np.flatnonzero(np.all(self._points == coords, axis=1))
        if hits.size == 0:
            raise ValueError(f"Point {coords.tolist()} is not in the collection")
        self._points = np.delete(self._points, hits[0], axis=0)
        self._update_bounds()
        logger.debug(f"RealPointCollection: removed {coords.tolist()}, {len(self)} points")

    def _update_bounds(self) -> None:
        self._min, self._max = interval_of(self._points, self._n)

    @property
    def params(self) -> Dict[str, Any]:
        return {'points': self._points.tolist(), 'n': self._n}


class KDTreeRealPointCollection(PointCollection):
    """
    Immutable point collection indexed by a k-d tree.

    Membership queries look up the nearest member and compare it exactly,
    which stays fast for large collections. Adding or removing points is not
    supported.
    """

    def __init__(self, points: Iterable[ArrayLike], n: Optional[int] = None):
        stacked = stack_points(points, n)
        if stacked.shape[0] == 0:
            raise ValueError("KDTreeRealPointCollection requires at least one point")
        super().__init__(stacked.shape[1])
        self._points = stacked
        self._tree = cKDTree(stacked)
        self._min, self._max = interval_of(stacked, self._n)

    def points(self) -> List[np.ndarray]:
        return [p.copy() for p in self._points]

    def __len__(self):
        return self._points.shape[0]

    def contains(self, points: ArrayLike) -> Union[bool, np.ndarray]:
        query, single = as_query(points, self._n)
        # The tree only accepts finite coordinates; members are always finite
        finite = np.all(np.isfinite(query), axis=1)
        inside = np.zeros(query.shape[0], dtype=bool)
        if np.any(finite):
            _, nearest = self._tree.query(query[finite], k=1)
            inside[finite] = np.all(self._points[nearest] == query[finite], axis=1)
        return bool(inside[0]) if single else inside

    @property
    def params(self) -> Dict[str, Any]:
        return {'points': self._points.tolist(), 'n': self._n}
