"""Half-plane clipping, interval algebra, and shapely polygon utilities."""

from .constants import EPS, BOUND
from .types import Point, Border, HalfPlane
from .geometry import (
    GeometryError,
    bounding_square, clip_convex, convex_from_half_planes,
)
from .intervals import InvalidInterval, Interval, IntervalSet, normalize
from .polygons import (
    from_vertices, from_half_planes,
    union, intersection,
    get_vertices, x_domain_intervals,
)
from .svg import make_svg_transform, to_svg
