"""
Planar polygons.

A single Polygon class covers the three boundary variants. The variant only
changes how edge hits combine with the ray-casting interior test:

- CLOSED: interior or on an edge
- OPEN: interior and not on an edge
- UNSPECIFIED: the raw ray-casting result, with its natural edge bias
"""

from typing import Any, Callable, Dict, Iterable, Sequence, Union

import numpy as np
from numpy.typing import ArrayLike

from realroi.boundary import BoundaryType
from realroi.geom.maths import OUTSIDE, INSIDE, classify_polygon, pnpoly
from realroi.geom.shape import VertexShape


def _interior_or_edge(vertices: np.ndarray, points: ArrayLike):
    return classify_polygon(vertices, points) != OUTSIDE


def _interior_only(vertices: np.ndarray, points: ArrayLike):
    return classify_polygon(vertices, points) == INSIDE


_EDGE_POLICIES: Dict[BoundaryType, Callable[[np.ndarray, ArrayLike], Union[bool, np.ndarray]]] = {
    BoundaryType.CLOSED: _interior_or_edge,
    BoundaryType.OPEN: _interior_only,
    BoundaryType.UNSPECIFIED: pnpoly,
}


class Polygon(VertexShape):
    """Polygonal shape with arbitrary vertices in the plane."""

    def __init__(self, vertices: Iterable[ArrayLike],
                 boundary_type: BoundaryType = BoundaryType.UNSPECIFIED):
        """
        Initialize polygon.

        The ring is implicitly closed: the last vertex connects back to the
        first. Only the first two coordinates of each vertex are kept.

        :param vertices: List of vertex coordinates [(x1, y1), (x2, y2), ...]
        :param boundary_type: Whether edge points are inside (CLOSED), outside
            (OPEN) or decided by the ray-casting scan (UNSPECIFIED)
        """
        super().__init__(vertices, 2, boundary_type)

    @classmethod
    def from_xy(cls, x: Sequence[float], y: Sequence[float],
                boundary_type: BoundaryType = BoundaryType.UNSPECIFIED) -> 'Polygon':
        """
        Build a polygon from parallel x and y coordinate lists.

        If the lists differ in length the extra entries of the longer one are ignored.
        """
        return cls(list(zip(x, y)), boundary_type=boundary_type)

    def contains(self, points: ArrayLike) -> Union[bool, np.ndarray]:
        """Test if points are inside the polygon under its boundary policy."""
        return _EDGE_POLICIES[self._boundary_type](self._vertices, points)

    @property
    def params(self) -> Dict[str, Any]:
        return {
            'vertices': self._vertices.tolist(),
            'boundary_type': self._boundary_type,
        }
