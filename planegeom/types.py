"""Shared type definitions: points, lines and half-planes."""
from typing import NamedTuple

from .constants import EPS

Point = tuple[float, float]

class Border(NamedTuple):
    """Infinite line a*x + b*y = c."""
    a: float; b: float; c: float

    def cross_point(self, p1: Point, p2: Point, eps: float = EPS) -> Point | None:
        """Crossing of the segment [p1, p2) with this line, or None.

        The segment is half-open (p1 included, p2 excluded) so that walking a
        closed ring edge by edge reports each crossing exactly once.
        """
        # p1 + t*(p2-p1) on the line:  t*(a*dx + b*dy) = c - a*x1 - b*y1
        dx = p2[0]-p1[0]; dy = p2[1]-p1[1]
        denom = self.a*dx + self.b*dy
        nom = self.c - self.a*p1[0] - self.b*p1[1]
        if abs(denom) < eps:
            return None  # parallel
        t = nom/denom
        if 0 <= t < 1:
            return (p1[0]+t*dx, p1[1]+t*dy)
        return None

class HalfPlane(NamedTuple):
    """Closed half-plane a*x + b*y <= c."""
    a: float; b: float; c: float

    def contains(self, p: Point, eps: float = EPS) -> bool:
        """True if p satisfies the inequality; points on the border count as inside."""
        return self.a*p[0] + self.b*p[1] <= self.c + eps

    def border(self) -> Border:
        return Border(self.a, self.b, self.c)
