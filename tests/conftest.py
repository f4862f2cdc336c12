"""Shared test fixtures for planegeom tests."""
import pytest
from planegeom.types import HalfPlane
from planegeom.intervals import Interval, IntervalSet


def _iset(*pairs):
    return IntervalSet(Interval(lo, hi) for lo, hi in pairs)


@pytest.fixture(scope="session")
def iset():
    """Build an IntervalSet from (lo, hi) pairs."""
    return _iset


@pytest.fixture(scope="session")
def same_vertices():
    """Order-free vertex comparison: every point has a match within tol both ways."""
    def close(p, q, tol):
        return abs(p[0]-q[0]) < tol and abs(p[1]-q[1]) < tol
    def check(got, expected, tol=1e-6):
        return (all(any(close(p, q, tol) for p in got) for q in expected)
                and all(any(close(p, q, tol) for q in expected) for p in got))
    return check


@pytest.fixture
def square10():
    """CCW square [0,10] x [0,10]."""
    return [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]


@pytest.fixture
def triangle_constraints():
    """x >= 0, y >= 0, x + y <= 10."""
    return [HalfPlane(-1, 0, 0), HalfPlane(0, -1, 0), HalfPlane(1, 1, 10)]


@pytest.fixture
def sample_sets():
    """Canonical sets with overlapping, touching, disjoint and point members."""
    return [
        IntervalSet(),
        _iset((1, 5), (8, 10)),
        _iset((2, 9)),
        _iset((0, 1), (3, 4), (6, 7), (9, 12)),
        _iset((-5, -2), (4, 4), (5, 8.5)),
        _iset((-1, 20)),
    ]
