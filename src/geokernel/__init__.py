"""
geokernel — tolerance-aware 2D geometric kernel.

Points, angles and offsets as immutable tolerance-aware value types, line and
circle curves, and robust line/line, line/circle and circle/circle
intersections.
"""

import logging as _logging

from geokernel.core.domain import (
    Angle,
    CartesianCoordinate,
    CartesianOffset,
    PolarCoordinate,
    normalize,
)
from geokernel.core.exceptions import (
    CurveIntersectionError,
    DegenerateGeometryError,
    DegenerateTransformationError,
    DivideByZeroError,
    GeometryError,
    NonIntersectingCurvesError,
    OverlappingCurvesError,
)
from geokernel.core.math.tolerance import ZERO_TOLERANCE, combined_tolerance
from geokernel.curves import CircularCurve, LinearCurve
from geokernel.intersections import (
    CircularCircularIntersection,
    CurveIntersection,
    LinearCircularIntersection,
    LinearLinearIntersection,
    radical_line_length,
)
from geokernel.transforms import Transformations

# Library stays silent unless the application configures logging
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Tolerance
    "ZERO_TOLERANCE",
    "combined_tolerance",
    # Value types
    "Angle",
    "normalize",
    "CartesianCoordinate",
    "CartesianOffset",
    "PolarCoordinate",
    # Transform
    "Transformations",
    # Curves
    "LinearCurve",
    "CircularCurve",
    # Intersections
    "CurveIntersection",
    "LinearLinearIntersection",
    "LinearCircularIntersection",
    "CircularCircularIntersection",
    "radical_line_length",
    # Errors
    "GeometryError",
    "DivideByZeroError",
    "DegenerateGeometryError",
    "DegenerateTransformationError",
    "CurveIntersectionError",
    "OverlappingCurvesError",
    "NonIntersectingCurvesError",
]
