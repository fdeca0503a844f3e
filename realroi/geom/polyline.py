"""Open chains of line segments."""

from typing import Any, Dict, Iterable, Union

import numpy as np
from numpy.typing import ArrayLike

from realroi.boundary import BoundaryType
from realroi.geom.maths import path_contains
from realroi.geom.shape import VertexShape


class Polyline(VertexShape):
    """
    Chain of segments through an ordered list of vertices.

    A polyline has no interior: a point belongs to it only if it lies on one
    of the segments ``[v[i-1], v[i]]``. The chain is not closed, so there is
    no segment from the last vertex back to the first. The boundary type is
    always CLOSED.
    """

    def __init__(self, vertices: Iterable[ArrayLike]):
        """
        Creates a polyline with the specified vertices.

        The dimensionality of the space is that of the first vertex. Later
        vertices with more coordinates are truncated; fewer coordinates raise
        DimensionMismatchError.

        :param vertices: Vertices which define the polyline in the desired order
        """
        super().__init__(vertices, None, BoundaryType.CLOSED)

    def contains(self, points: ArrayLike) -> Union[bool, np.ndarray]:
        return path_contains(self._vertices, points, closed=False)

    @property
    def params(self) -> Dict[str, Any]:
        return {'vertices': self._vertices.tolist()}
