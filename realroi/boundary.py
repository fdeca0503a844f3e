"""
Boundary classification for masks.

A shape's boundary type decides whether points lying exactly on its edge
satisfy the membership test. It never changes interior behaviour.
"""

from enum import Enum


class BoundaryType(Enum):
    """How a shape treats points lying exactly on its boundary."""

    OPEN = "open"
    """Boundary points are excluded."""

    CLOSED = "closed"
    """Boundary points are included."""

    UNSPECIFIED = "unspecified"
    """Mixed policy defined by the concrete shape."""

    def __str__(self):
        return self.value
