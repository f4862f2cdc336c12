"""Numeric tolerances and working-area constants.

Every operation that uses these also accepts them as keyword arguments
(``eps=``, ``bound=``) so callers can work at other scales.
"""

# Tolerance (absolute, in coordinate units)
EPS = 1e-12                       # containment / parallel / merge slack

# Working area
BOUND = 1e9                       # half-side of the square standing in for the whole plane
