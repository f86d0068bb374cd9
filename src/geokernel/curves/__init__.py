"""
Curve abstractions.

Minimal line and circle representations exposing the queries the intersection
algorithms need.
"""

from geokernel.curves.circular import CircularCurve
from geokernel.curves.linear import LinearCurve

__all__ = [
    "LinearCurve",
    "CircularCurve",
]
