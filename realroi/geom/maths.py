"""
Geometry kernel shared by all shapes.

Stateless functions over ``float64`` coordinate arrays. Query functions accept
a single point (shape ``(n,)``) or a stack of points (shape ``(N, n)``) and
return a ``bool`` or a boolean array respectively.

Comparisons are exact floating-point comparisons; nothing here tries to be
robust against degenerate input such as zero-length edges.
"""

from typing import Iterable, Optional, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

from realroi.errors import DimensionMismatchError

# Codes returned by classify_polygon
INSIDE = 1
ON_EDGE = 0
OUTSIDE = -1


def as_coordinates(point: ArrayLike, n: int) -> np.ndarray:
    """
    Copy a point into a fresh float array of exactly ``n`` coordinates.

    Extra coordinates are dropped; missing ones raise DimensionMismatchError.
    A stack of points is rejected with ValueError.
    """
    coords = np.array(point, dtype=float)
    if coords.ndim > 1:
        raise ValueError(f"Expected a single point, got an array of shape {coords.shape}")
    coords = coords.reshape(-1)
    if coords.shape[0] < n:
        raise DimensionMismatchError(n, coords.shape[0])
    return coords[:n].copy()


def as_query(points: ArrayLike, n: int) -> Tuple[np.ndarray, bool]:
    """
    Normalize query input to an ``(N, n)`` array.

    :return: (array, single) where ``single`` tells whether a lone point was given
    """
    arr = np.asarray(points, dtype=float)
    single = arr.ndim <= 1
    if single:
        arr = arr.reshape(1, -1)
    elif arr.ndim != 2:
        raise ValueError(f"Query points must be a point or an (N, n) array, got shape {arr.shape}")
    if arr.shape[1] < n:
        raise DimensionMismatchError(n, arr.shape[1])
    return arr[:, :n], single


def _result(mask: np.ndarray, single: bool) -> Union[bool, np.ndarray]:
    return bool(mask[0]) if single else mask


def stack_points(points: Iterable[ArrayLike], n: Optional[int] = None) -> np.ndarray:
    """
    Copy a sequence of points into an ``(N, n)`` array.

    ``n`` defaults to the length of the first point. Longer points are
    truncated, shorter points raise DimensionMismatchError.
    """
    coords = [np.asarray(p, dtype=float).reshape(-1) for p in points]
    if n is None:
        if not coords:
            raise ValueError("Cannot infer dimensionality from an empty point sequence")
        n = coords[0].shape[0]
    stacked = np.empty((len(coords), n), dtype=float)
    for i, c in enumerate(coords):
        if c.shape[0] < n:
            raise DimensionMismatchError(n, c.shape[0])
        stacked[i] = c[:n]
    return stacked


def bounds_real(points: Iterable[ArrayLike], n: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Per-dimension bounding interval of a point sequence.

    :param points: Points, each with at least ``n`` coordinates
    :param n: Dimensionality; defaults to that of the first point
    :return: (min, max) arrays of length ``n``
    """
    stacked = stack_points(points, n)
    if stacked.shape[0] == 0:
        raise ValueError("Cannot compute bounds of an empty point sequence")
    return stacked.min(axis=0), stacked.max(axis=0)


def line_contains(start: ArrayLike, end: ArrayLike, points: ArrayLike) -> Union[bool, np.ndarray]:
    """
    Test whether points lie on the closed segment ``[start, end]``.

    The point must sit inside the segment's bounding box, its parametric
    coefficient ``t`` along the dominant axis must satisfy ``0 <= t <= 1``,
    and every pairwise cross product of direction and offset must vanish
    exactly (in 2-D this is the usual z-component of the cross product).
    """
    a = np.asarray(start, dtype=float).reshape(-1)
    b = np.asarray(end, dtype=float).reshape(-1)
    n = a.shape[0]
    b = b[:n]
    query, single = as_query(points, n)

    direction = b - a
    offset = query - a
    k = int(np.argmax(np.abs(direction)))

    if direction[k] == 0:
        # Zero-length segment: only the endpoint itself
        return _result(np.all(offset == 0, axis=1), single)

    lo = np.minimum(a, b)
    hi = np.maximum(a, b)
    within = np.all((query >= lo) & (query <= hi), axis=1)

    t = offset[:, k] / direction[k]
    in_range = (t >= 0) & (t <= 1)

    collinear = np.all(direction[k] * offset == direction * offset[:, [k]], axis=1)
    return _result(within & in_range & collinear, single)


def path_contains(vertices: ArrayLike, points: ArrayLike, closed: bool = False) -> Union[bool, np.ndarray]:
    """
    Test whether points lie on any segment of a vertex chain.

    :param vertices: (M, n) vertex array in path order
    :param points: Query point(s)
    :param closed: Also test the closing segment from the last vertex to the first
    """
    verts = np.asarray(vertices, dtype=float)
    query, single = as_query(points, verts.shape[1])
    hit = np.zeros(query.shape[0], dtype=bool)
    first = 0 if closed else 1
    for i in range(first, verts.shape[0]):
        # i == 0 pairs the last vertex with the first
        hit |= line_contains(verts[i - 1], verts[i], query)
    return _result(hit, single)


def pnpoly(vertices: ArrayLike, points: ArrayLike) -> Union[bool, np.ndarray]:
    """
    Ray casting point-in-polygon test.

    Counts crossings of a horizontal ray cast towards +x against every edge of
    the implicitly closed ring. Points exactly on an edge fall on whichever
    side the comparisons put them: lower/left edges tend to count as inside,
    upper/right edges as outside.
    """
    verts = np.asarray(vertices, dtype=float)
    query, single = as_query(points, 2)
    x, y = query[:, 0], query[:, 1]
    inside = np.zeros(query.shape[0], dtype=bool)

    count = verts.shape[0]
    j = count - 1
    for i in range(count):
        xi, yi = verts[i, 0], verts[i, 1]
        xj, yj = verts[j, 0], verts[j, 1]

        # Edges straddling the ray; never horizontal, so the division is safe
        crosses = (yi > y) != (yj > y)
        if np.any(crosses):
            x_intersect = (xj - xi) * (y[crosses] - yi) / (yj - yi) + xi
            hit = np.zeros_like(crosses)
            hit[crosses] = x[crosses] < x_intersect
            inside ^= hit
        j = i

    return _result(inside, single)


def polygon_edges_contain(vertices: ArrayLike, points: ArrayLike) -> Union[bool, np.ndarray]:
    """Test whether points lie on any edge of a closed polygon ring."""
    return path_contains(np.asarray(vertices, dtype=float)[:, :2], points, closed=True)


def classify_polygon(vertices: ArrayLike, points: ArrayLike) -> Union[int, np.ndarray]:
    """
    Classify points against a polygon.

    :return: INSIDE, ON_EDGE or OUTSIDE per point
    """
    query, single = as_query(points, 2)
    on_edge = polygon_edges_contain(vertices, query)
    interior = pnpoly(vertices, query)
    codes = np.where(on_edge, ON_EDGE, np.where(interior, INSIDE, OUTSIDE))
    return int(codes[0]) if single else codes


def distance_powered(center: ArrayLike, semi_axis_lengths: ArrayLike, exponent: float,
                     points: ArrayLike) -> Union[float, np.ndarray]:
    """
    Powered radial distance of a superellipsoid.

    ``D(p) = sum_d (|p[d] - c[d]| / r[d]) ** e``; ``D <= 1`` on and inside
    the surface.
    """
    c = np.asarray(center, dtype=float)
    r = np.asarray(semi_axis_lengths, dtype=float)
    query, single = as_query(points, c.shape[0])
    dist = np.sum((np.abs(query - c) / r) ** exponent, axis=1)
    return float(dist[0]) if single else dist


def interval_of(points: np.ndarray, n: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Bounding interval of an (N, n) array.

    An empty array yields the empty interval ``(+inf, -inf)`` on every axis.
    """
    if points.shape[0] == 0:
        return np.full(n, np.inf), np.full(n, -np.inf)
    return points.min(axis=0), points.max(axis=0)
