"""Polygon construction, boolean combination and traversal on top of shapely."""
from collections.abc import Iterable
from functools import reduce

import shapely
from shapely.geometry import GeometryCollection, Polygon
from shapely.geometry.base import BaseGeometry, BaseMultipartGeometry

from .constants import EPS, BOUND
from .types import Point, HalfPlane
from .geometry import GeometryError, convex_from_half_planes
from .intervals import IntervalSet

# ============================================================
# Construction
# ============================================================
def from_vertices(vertices: list[Point] | None) -> Polygon:
    """Polygon from an open vertex list; the ring is closed here.

    Returns an empty polygon for None or no vertices. Raises GeometryError
    for fewer than three vertices.
    """
    if not vertices:
        return Polygon()
    if len(vertices) < 3:
        raise GeometryError(f"Degenerate ring: {len(vertices)} vertices")
    ring = list(vertices)
    ring.append(vertices[0])
    return Polygon(ring)

def from_half_planes(
    constraints: Iterable[HalfPlane | None] | None,
    eps: float = EPS,
    bound: float = BOUND,
) -> Polygon | None:
    """Convex polygon satisfying every constraint, or None if there is none.

    The plane is approximated by a square of half-side *bound*, so an
    unbounded region comes back clipped to that square.
    """
    verts = convex_from_half_planes(constraints, eps, bound)
    if verts is None:
        return None
    return from_vertices(verts)

# ============================================================
# Boolean Operations
# ============================================================
def union(geoms: Iterable[BaseGeometry]) -> BaseGeometry:
    """Union of all *geoms*; an empty collection if there are none."""
    return reduce(lambda acc, g: acc.union(g), geoms, GeometryCollection())

def intersection(geoms: Iterable[BaseGeometry]) -> BaseGeometry:
    """Region common to all *geoms*. Stops early once the result is empty."""
    acc = None
    for g in geoms:
        acc = g if acc is None else acc.intersection(g)
        if acc.is_empty:
            break
    return GeometryCollection() if acc is None else acc

# ============================================================
# Traversal
# ============================================================
def _ring_points(ring) -> list[Point]:
    return [(float(x), float(y)) for x, y in ring.coords]

def get_vertices(geom: BaseGeometry | None) -> list[list[Point]]:
    """Closed coordinate rings of every polygon part of *geom*.

    Each polygon contributes its exterior ring followed by its holes; the
    last point of each ring repeats the first. Non-polygon parts are skipped.
    """
    if geom is None or geom.is_empty:
        return []
    rings = []
    for part in shapely.get_parts(geom):
        if isinstance(part, Polygon):
            rings.append(_ring_points(part.exterior))
            rings.extend(_ring_points(r) for r in part.interiors)
    return rings

def x_domain_intervals(geom: BaseGeometry | None, eps: float = EPS) -> IntervalSet:
    """Projection of *geom* onto the x axis, as the union of leaf bounding boxes."""
    rs = IntervalSet.empty()
    if geom is None or geom.is_empty:
        return rs
    stack = [geom]
    while stack:
        g = stack.pop()
        if g is None or g.is_empty:
            continue
        if isinstance(g, BaseMultipartGeometry):
            stack.extend(g.geoms)
        else:
            min_x, _, max_x, _ = g.bounds
            rs = rs.union(IntervalSet.of(min_x, max_x), eps)
    return rs
