"""Convex polygon construction by half-plane clipping."""
import logging
from collections.abc import Iterable

from .constants import EPS, BOUND
from .types import Point, HalfPlane

logger = logging.getLogger(__name__)

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for malformed geometry input."""

# ============================================================
# Convex Clipping
# ============================================================
def bounding_square(bound: float = BOUND) -> list[Point]:
    """CCW square of half-side *bound*, standing in for the unbounded plane."""
    return [(-bound, -bound), (bound, -bound), (bound, bound), (-bound, bound)]

def clip_convex(poly: list[Point], hp: HalfPlane, eps: float = EPS) -> list[Point]:
    """Clip a convex polygon against a single half-plane (Sutherland-Hodgman).

    *poly* is an implicitly closed vertex list. Vertices on the border are
    kept. Returns an empty list if the polygon lies entirely outside.
    """
    out: list[Point] = []
    border = hp.border(); n = len(poly)
    for i in range(n):
        p1 = poly[i]; p2 = poly[(i+1)%n]
        cp = border.cross_point(p1, p2, eps)
        if cp is not None:
            out.append(cp)  # [p1, p2) crosses the border
        if hp.contains(p2, eps):
            out.append(p2)
    return out

def convex_from_half_planes(
    constraints: Iterable[HalfPlane | None] | None,
    eps: float = EPS,
    bound: float = BOUND,
) -> list[Point] | None:
    """Vertex list of the intersection of all *constraints*.

    Starts from ``bounding_square(bound)`` and clips once per constraint.
    Returns None when there is no solution: the constraint list or one of
    its entries is None, or the region becomes empty part way through.
    The returned ring is not closed.
    """
    if constraints is None:
        logger.debug("convex_from_half_planes: no constraint list")
        return None
    poly = bounding_square(bound)
    for i, hp in enumerate(constraints):
        if hp is None:
            logger.debug("convex_from_half_planes: constraint %d is None", i)
            return None
        poly = clip_convex(poly, hp, eps)
        if not poly:
            logger.debug("convex_from_half_planes: empty after constraint %d %r", i, hp)
            return None
    return poly
