"""Canonical sets of closed real intervals.

An ``IntervalSet`` is always sorted by lower bound with no two members
overlapping or touching within ``eps``. Union, intersection and difference
are linear scans that rely on that form.
"""
import math
from typing import NamedTuple
from collections.abc import Iterable, Iterator

from .constants import EPS
from .geometry import GeometryError

# ============================================================
# Error Type
# ============================================================
class InvalidInterval(GeometryError):
    """Raised for an interval with lo > hi or a NaN bound."""

# ============================================================
# Interval
# ============================================================
class _Bounds(NamedTuple):
    lo: float; hi: float

class Interval(_Bounds):
    """Closed interval [lo, hi]. Raises InvalidInterval for lo > hi or NaN."""
    __slots__ = ()

    def __new__(cls, lo: float, hi: float):
        if math.isnan(lo) or math.isnan(hi):
            raise InvalidInterval(f"NaN bound: [{lo}, {hi}]")
        if lo > hi:
            raise InvalidInterval(f"lo > hi: [{lo}, {hi}]")
        return super().__new__(cls, lo, hi)

def normalize(intervals: Iterable[Interval], eps: float = EPS) -> tuple[Interval, ...]:
    """Sort and merge *intervals* into canonical form.

    Members closer than *eps* are merged. Order among equal lower bounds
    does not affect the result.
    """
    srt = sorted(intervals, key=lambda r: r.lo)
    if not srt:
        return ()
    out = []
    cur = srt[0]
    for nxt in srt[1:]:
        if nxt.lo <= cur.hi + eps:
            if nxt.hi > cur.hi:
                cur = Interval(cur.lo, nxt.hi)
        else:
            out.append(cur); cur = nxt
    out.append(cur)
    return tuple(out)

# ============================================================
# IntervalSet
# ============================================================
class IntervalSet:
    """Immutable canonical union of closed intervals.

    The constructor normalizes whatever it is given, so every instance is
    canonical. Operators ``|``, ``&`` and ``-`` use the default tolerance;
    call the named methods to pass a different ``eps``.
    """
    __slots__ = ("_ranges",)

    def __init__(self, intervals: Iterable[Interval] = (), eps: float = EPS):
        self._ranges = normalize(intervals, eps)

    @classmethod
    def empty(cls) -> "IntervalSet":
        return cls()

    @classmethod
    def of(cls, lo: float, hi: float) -> "IntervalSet":
        """Set holding the single interval [lo, hi]. Raises InvalidInterval."""
        return cls([Interval(lo, hi)])

    # --- accessors ---

    @property
    def intervals(self) -> tuple[Interval, ...]:
        return self._ranges

    def to_list(self) -> list[list[float]]:
        """Members as ``[lo, hi]`` pairs."""
        return [[r.lo, r.hi] for r in self._ranges]

    def is_empty(self) -> bool:
        return not self._ranges

    def __iter__(self) -> Iterator[Interval]:
        return iter(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __bool__(self) -> bool:
        return bool(self._ranges)

    def __eq__(self, other):
        if not isinstance(other, IntervalSet):
            return NotImplemented
        return self._ranges == other._ranges

    def __hash__(self):
        return hash(self._ranges)

    def __repr__(self):
        return f"IntervalSet({self.to_list()})"

    # --- set algebra ---

    def union(self, other: "IntervalSet", eps: float = EPS) -> "IntervalSet":
        return IntervalSet(self._ranges + other._ranges, eps)

    def intersect(self, other: "IntervalSet", eps: float = EPS) -> "IntervalSet":
        """Points in both sets. Touching members yield a degenerate [x, x]."""
        a = self._ranges; b = other._ranges
        out = []
        i = j = 0
        while i < len(a) and j < len(b):
            ra = a[i]; rb = b[j]
            lo = max(ra.lo, rb.lo); hi = min(ra.hi, rb.hi)
            if lo <= hi + eps:
                out.append(Interval(lo, max(lo, hi)))
            if ra.hi < rb.hi:
                i += 1
            else:
                j += 1
        return IntervalSet(out, eps)

    def subtract(self, other: "IntervalSet", eps: float = EPS) -> "IntervalSet":
        """Points of this set not in *other* (closure of the difference)."""
        a = self._ranges; b = other._ranges
        out = []
        j = 0
        for ra in a:
            # skip b members entirely left of ra
            while j < len(b) and b[j].hi < ra.lo - eps:
                j += 1
            cur = ra.lo
            jj = j
            while jj < len(b) and b[jj].lo <= ra.hi + eps:
                rb = b[jj]
                if rb.lo > cur + eps:
                    out.append(Interval(cur, min(ra.hi, rb.lo)))  # gap before rb
                cur = max(cur, rb.hi)
                if cur >= ra.hi - eps:
                    break
                jj += 1
            if cur < ra.hi - eps:
                out.append(Interval(cur, ra.hi))
        return IntervalSet(out, eps)

    __or__ = union
    __and__ = intersect
    __sub__ = subtract
