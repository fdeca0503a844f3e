"""
Shape definitions shared by all masks.

This module provides the Shape base class (membership test, bounding interval,
boundary type, parametric copies), the VertexShape base for shapes whose
vertex lists can be edited in place, and VertexHandle, a live view of one
vertex slot.
"""

import logging
import operator
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

from realroi.boundary import BoundaryType
from realroi.geom.maths import as_coordinates, interval_of, stack_points

logger = logging.getLogger(__name__)


class Shape(ABC):
    """
    Abstract base class for all real-valued masks.

    Each shape must be able to:
    1. Test if a point is inside the shape
    2. Report its axis-aligned bounding interval
    3. Report how it treats boundary points
    4. Rebuild itself from its parameters (for parametric copies)
    """

    def __init__(self, n: int, boundary_type: BoundaryType):
        """
        :param n: Dimensionality of the space the shape lives in
        :param boundary_type: Boundary policy of this instance
        """
        if not isinstance(boundary_type, BoundaryType):
            raise TypeError(f"boundary_type must be a BoundaryType, got {type(boundary_type)}")
        self._n = int(n)
        self._boundary_type = boundary_type
        # Empty until the concrete shape fills it in
        self._min, self._max = interval_of(np.empty((0, self._n)), self._n)

    @property
    def num_dimensions(self) -> int:
        return self._n

    @property
    def boundary_type(self) -> BoundaryType:
        return self._boundary_type

    @abstractmethod
    def contains(self, points: ArrayLike) -> Union[bool, np.ndarray]:
        """
        Test if point(s) are inside the shape.

        :param points: A single point or an (N, n) array of points
        :return: Boolean or boolean array indicating containment
        """

    def test(self, point: ArrayLike) -> bool:
        """Test a single point. Extra coordinates are ignored."""
        return bool(self.contains(as_coordinates(point, self._n)))

    def __contains__(self, point) -> bool:
        return self.test(point)

    def real_min(self, d: Optional[int] = None) -> Union[float, np.ndarray]:
        """Lower corner of the bounding interval, or its ``d``-th coordinate."""
        if d is None:
            return self._min.copy()
        return float(self._min[d])

    def real_max(self, d: Optional[int] = None) -> Union[float, np.ndarray]:
        """Upper corner of the bounding interval, or its ``d``-th coordinate."""
        if d is None:
            return self._max.copy()
        return float(self._max[d])

    def get_bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Get bounding interval of the shape.

        :return: (min, max) arrays, one entry per dimension
        """
        return self.real_min(), self.real_max()

    @property
    @abstractmethod
    def params(self) -> Dict[str, Any]:
        """Constructor arguments that reproduce this shape."""

    def with_params(self, **kwargs) -> 'Shape':
        """
        Create a new shape with updated parameters.

        The result shares no state with this shape.

        :param kwargs: Parameter updates, named like the constructor arguments
        :return: New shape instance
        """
        unknown = set(kwargs) - set(self.params)
        if unknown:
            raise TypeError(f"{type(self).__name__} has no parameters {sorted(unknown)}")
        return self.__class__(**{**self.params, **kwargs})

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{type(self).__name__}({args})"


class VertexShape(Shape):
    """
    Shape defined by an ordered, editable list of vertices.

    The bounding interval is recomputed from scratch after every insertion,
    removal or move, so it is exact between any two calls. Index and
    dimensionality are validated before stored state is touched.
    """

    def __init__(self, vertices: Iterable[ArrayLike], n: Optional[int], boundary_type: BoundaryType):
        """
        :param vertices: Vertex coordinates in order
        :param n: Dimensionality, or None to take it from the first vertex
        :param boundary_type: Boundary policy of this instance
        """
        stacked = stack_points(vertices, n)
        if stacked.shape[0] == 0:
            raise ValueError(f"{type(self).__name__} requires at least one vertex")
        super().__init__(stacked.shape[1], boundary_type)
        self._vertices = stacked
        self._update_bounds()

    @property
    def num_vertices(self) -> int:
        return self._vertices.shape[0]

    def __len__(self):
        return self.num_vertices

    @property
    def vertices(self) -> np.ndarray:
        """Copy of the (num_vertices, n) vertex array."""
        return self._vertices.copy()

    def vertex(self, index: int) -> 'VertexHandle':
        """
        Live handle on the vertex at ``index``.

        The vertices are in the same order as when they were passed to the
        constructor, unless vertices have been added or removed.
        """
        return VertexHandle(self, index)

    def set_vertex(self, index: int, point: ArrayLike) -> None:
        """Move the vertex at ``index`` to ``point``."""
        index = self._check_index(index, self.num_vertices)
        coords = as_coordinates(point, self._n)
        self._vertices[index] = coords
        self._update_bounds()
        logger.debug(f"{type(self).__name__}: moved vertex {index} to {coords.tolist()}")

    def add_vertex(self, index: int, point: ArrayLike) -> None:
        """Insert ``point`` before position ``index`` (``index == num_vertices`` appends)."""
        index = self._check_index(index, self.num_vertices + 1)
        coords = as_coordinates(point, self._n)
        self._vertices = np.insert(self._vertices, index, coords, axis=0)
        self._update_bounds()
        logger.debug(f"{type(self).__name__}: inserted vertex {coords.tolist()} at {index}")

    def remove_vertex(self, index: int) -> None:
        """Delete the vertex at ``index``."""
        index = self._check_index(index, self.num_vertices)
        self._vertices = np.delete(self._vertices, index, axis=0)
        self._update_bounds()
        logger.debug(f"{type(self).__name__}: removed vertex {index}, {self.num_vertices} left")

    @staticmethod
    def _check_index(index: int, upper: int) -> int:
        index = operator.index(index)
        if index < 0 or index >= upper:
            raise IndexError(f"Vertex index {index} out of range [0, {upper})")
        return index

    def _update_bounds(self) -> None:
        """Recompute the bounding interval from every stored vertex."""
        self._min, self._max = interval_of(self._vertices, self._n)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self.num_vertices == other.num_vertices
                and self._boundary_type is other._boundary_type
                and self._n == other._n
                and bool(np.all(self._vertices == other._vertices)))

    def __hash__(self):
        result = 777.0
        weight = 11
        for v in self._vertices:
            result += weight * float(np.dot(v, v))
            weight += 3
        return hash((type(self).__name__, self._boundary_type, self._n, result))


class VertexHandle:
    """
    Mutable view of one vertex slot of a VertexShape.

    The handle is the pair (owner, index); it holds no coordinates of its
    own. Every mutation goes through ``owner.set_vertex`` so the owner's
    bounds are recomputed before the call returns. After vertices are
    inserted or removed the handle refers to whatever vertex now occupies
    its slot.
    """

    def __init__(self, owner: VertexShape, index: int):
        self._owner = owner
        self._index = owner._check_index(index, owner.num_vertices)

    @property
    def owner(self) -> VertexShape:
        return self._owner

    @property
    def index(self) -> int:
        return self._index

    @property
    def num_dimensions(self) -> int:
        return self._owner.num_dimensions

    @property
    def position(self) -> np.ndarray:
        """Copy of the current coordinates."""
        self._owner._check_index(self._index, self._owner.num_vertices)
        return self._owner._vertices[self._index].copy()

    def set_position(self, point: ArrayLike) -> None:
        """Move the vertex to ``point``."""
        self._owner.set_vertex(self._index, point)

    def move(self, displacement: ArrayLike) -> None:
        """Move the vertex by ``displacement``."""
        delta = as_coordinates(displacement, self.num_dimensions)
        self._owner.set_vertex(self._index, self.position + delta)

    def __getitem__(self, d: int) -> float:
        return float(self.position[d])

    def __len__(self):
        return self.num_dimensions

    def __iter__(self) -> Iterator[float]:
        return iter(self.position.tolist())

    def __array__(self, dtype=None, copy=None):
        pos = self.position
        return pos if dtype is None else pos.astype(dtype)

    def __repr__(self):
        return f"VertexHandle(index={self._index}, position={self.position.tolist()})"
