import os
import sys

import pytest

# Ensure repository root is on sys.path so 'realroi' imports work when running tests
_HERE = os.path.dirname(__file__)
_ROOT = os.path.abspath(os.path.join(_HERE, '..'))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)


@pytest.fixture
def house_vertices():
    """Pentagon with a pointed roof, listed clockwise from the left eave."""
    return [(15, 15), (20, 20), (25, 15), (25, 10), (15, 10)]


@pytest.fixture
def house_edge_points():
    """One point on each edge of the house, edge i running from vertex i to i + 1."""
    return [(17, 17), (22, 18), (25, 11), (19, 10), (15, 13)]
