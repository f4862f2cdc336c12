"""Tests for planegeom/types.py: Border and HalfPlane."""
import pytest
from planegeom.types import Border, HalfPlane


# --- Border.cross_point ---

def test_cross_point_midway():
    # x = 5 crosses (0,0)->(10,0) at t = 0.5
    p = Border(1, 0, 5).cross_point((0, 0), (10, 0))
    assert abs(p[0] - 5.0) < 1e-12
    assert abs(p[1] - 0.0) < 1e-12


def test_cross_point_includes_start():
    p = Border(1, 0, 0).cross_point((0, 0), (10, 0))
    assert p == (0.0, 0.0)


def test_cross_point_excludes_end():
    assert Border(1, 0, 10).cross_point((0, 0), (10, 0)) is None


def test_cross_point_parallel():
    assert Border(0, 1, 0).cross_point((0, 0), (10, 0)) is None


def test_cross_point_outside_segment():
    assert Border(1, 0, 20).cross_point((0, 0), (10, 0)) is None
    assert Border(1, 0, -1).cross_point((0, 0), (10, 0)) is None


def test_cross_point_reversed_direction():
    p = Border(1, 1, 10).cross_point((10, 10), (0, 0))
    assert abs(p[0] - 5.0) < 1e-12
    assert abs(p[1] - 5.0) < 1e-12


def test_cross_point_shared_vertex_reported_once():
    # Walking the closed ring, a border through a vertex is hit by exactly one edge
    ring = [(0, 0), (10, 0), (10, 10), (0, 10)]
    border = Border(1, -1, 10)  # passes through (10, 0)
    hits = [border.cross_point(ring[i], ring[(i+1) % 4]) for i in range(4)]
    hits = [h for h in hits if h is not None]
    assert len(hits) == 1
    assert hits[0] == (10.0, 0.0)


def test_cross_point_eps_controls_parallel():
    # Nearly parallel: denom = 1e-10
    b = Border(1e-11, 1, 0)
    assert b.cross_point((0, 1), (10, 1), eps=1e-9) is None
    assert b.cross_point((0, 1), (10, 1), eps=1e-12) is None  # t far outside [0, 1)
    assert Border(1e-11, 1, 1).cross_point((0, 1), (10, 1), eps=1e-12) == (0.0, 1.0)


# --- HalfPlane ---

def test_contains_inside_outside():
    hp = HalfPlane(1, 1, 10)
    assert hp.contains((0, 0))
    assert not hp.contains((6, 6))


def test_contains_boundary():
    assert HalfPlane(1, 1, 10).contains((4, 6))


def test_contains_tolerance():
    hp = HalfPlane(1, 0, 0)
    assert hp.contains((5e-13, 0))
    assert not hp.contains((5e-12, 0))
    assert hp.contains((5e-12, 0), eps=1e-11)


def test_border_coefficients():
    assert HalfPlane(1, 2, 3).border() == Border(1, 2, 3)


def test_value_semantics():
    assert HalfPlane(1, 2, 3) == HalfPlane(1, 2, 3)
    assert hash(Border(1, 2, 3)) == hash(Border(1, 2, 3))
    with pytest.raises(AttributeError):
        HalfPlane(1, 2, 3).a = 5
