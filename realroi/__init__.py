__version__ = '0.1.0'

import logging

# Library logging: silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

from realroi.boundary import BoundaryType
from realroi.errors import DimensionMismatchError, UnsupportedOperationError
from realroi.logging_config import setup_logging

from realroi.geom.shape import Shape, VertexShape, VertexHandle
from realroi.geom.polygon import Polygon
from realroi.geom.polyline import Polyline
from realroi.geom.superellipsoid import SuperEllipsoid, Ellipsoid, Sphere
from realroi.geom.box import Box
from realroi.geom.points import PointCollection, RealPointCollection, KDTreeRealPointCollection
from realroi.geom import maths

# Public API surface for facade exports
__all__ = [
    # meta
    "__version__",
    "setup_logging",
    # boundary and errors
    "BoundaryType",
    "DimensionMismatchError",
    "UnsupportedOperationError",
    # shapes
    "Shape",
    "VertexShape",
    "VertexHandle",
    "Polygon",
    "Polyline",
    "SuperEllipsoid",
    "Ellipsoid",
    "Sphere",
    "Box",
    "PointCollection",
    "RealPointCollection",
    "KDTreeRealPointCollection",
    # kernel
    "maths",
]
