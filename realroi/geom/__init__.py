"""
Geometry layer: real-valued masks and the kernel they share.

Shapes copy the coordinates they are given, answer membership queries for
single points or point stacks, and keep an exact bounding interval.
"""

from .shape import Shape, VertexShape, VertexHandle
from .polygon import Polygon
from .polyline import Polyline
from .superellipsoid import SuperEllipsoid, Ellipsoid, Sphere
from .box import Box
from .points import PointCollection, RealPointCollection, KDTreeRealPointCollection

__all__ = [
    'Shape', 'VertexShape', 'VertexHandle',
    'Polygon', 'Polyline',
    'SuperEllipsoid', 'Ellipsoid', 'Sphere',
    'Box',
    'PointCollection', 'RealPointCollection', 'KDTreeRealPointCollection',
]
