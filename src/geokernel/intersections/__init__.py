"""
Intersection algorithms.

One class per curve pair, each implementing are_tangent, are_intersecting and
intersection_coordinates.
"""

from geokernel.intersections.base import CurveIntersection
from geokernel.intersections.circular_circular import (
    CircularCircularIntersection,
    radical_line_length,
)
from geokernel.intersections.linear_circular import LinearCircularIntersection
from geokernel.intersections.linear_linear import LinearLinearIntersection

__all__ = [
    # Base
    "CurveIntersection",
    # Curve pairs
    "LinearLinearIntersection",
    "LinearCircularIntersection",
    "CircularCircularIntersection",
    # Helpers
    "radical_line_length",
]
