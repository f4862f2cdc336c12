"""SVG outline rendering for polygon geometries."""
from typing import Callable

from shapely.geometry.base import BaseGeometry

from .types import Point
from .polygons import get_vertices

_SVG_NS = "http://www.w3.org/2000/svg"


def make_svg_transform(min_x: float, max_y: float) -> Callable[[float, float], tuple[float, float]]:
    """Create to_svg closure: shift min_x to 0 and flip y about max_y (y up)."""
    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (x - min_x, max_y - y)
    return to_svg


def path_for_ring(ring: list[Point], to_svg: Callable[[float, float], tuple[float, float]]) -> str:
    """One ``<path>`` line for a closed ring, or '' if it has under two points."""
    if len(ring) < 2:
        return ""
    cmds = []
    for i, (x, y) in enumerate(ring):
        sx, sy = to_svg(x, y)
        cmds.append(f"{'M' if i == 0 else 'L'}{sx!r} {sy!r}")
    return f"    <path d='{' '.join(cmds)} z' />\n"


def to_svg(geom: BaseGeometry | None) -> str:
    """Black, unfilled outline of every polygon ring in *geom*.

    The viewBox matches the bounding box. Returns '' for empty or
    zero-width/height geometries.
    """
    if geom is None or geom.is_empty:
        return ""
    min_x, min_y, max_x, max_y = geom.bounds
    width = max_x - min_x; height = max_y - min_y
    if width == 0 or height == 0:
        return ""
    xf = make_svg_transform(min_x, max_y)
    parts = [f"<svg xmlns='{_SVG_NS}' viewBox='0 0 {width!r} {height!r}'>\n",
             "  <g stroke='black' fill='none'>\n"]
    parts.extend(path_for_ring(ring, xf) for ring in get_vertices(geom))
    parts.append("  </g>\n</svg>")
    return "".join(parts)
