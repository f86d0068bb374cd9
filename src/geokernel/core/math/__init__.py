"""
Core math modules для geokernel

Скалярные примитивы: модель допусков и нормализация углов.
"""

# Tolerance Model
from geokernel.core.math.tolerance import (
    # Constants
    DECIMAL_PLACES_MAX,
    ZERO_TOLERANCE,
    # Combination & validation
    Tolerant,
    combined_tolerance,
    min_tolerance,
    validate_tolerance,
    # Comparisons
    compare_with_tolerance,
    is_equal,
    is_greater_than,
    is_greater_than_or_equal,
    is_less_than,
    is_less_than_or_equal,
    is_zero,
    # Utilities
    decimal_places,
    sign_nonzero,
    snap_to_zero,
)

# Angles
from geokernel.core.math.angles import (
    ROUNDING_PRECISION_MIN,
    TWO_PI,
    as_degrees,
    as_radians,
    degrees_to_radians,
    radians_to_degrees,
    wrap_angle_within_positive_negative_pi,
    wrap_angle_within_two_pi,
)

__all__ = [
    # Tolerance constants
    "ZERO_TOLERANCE",
    "DECIMAL_PLACES_MAX",
    # Tolerance combination
    "Tolerant",
    "combined_tolerance",
    "min_tolerance",
    "validate_tolerance",
    # Comparisons
    "compare_with_tolerance",
    "is_equal",
    "is_greater_than",
    "is_greater_than_or_equal",
    "is_less_than",
    "is_less_than_or_equal",
    "is_zero",
    # Utilities
    "decimal_places",
    "sign_nonzero",
    "snap_to_zero",
    # Angles
    "TWO_PI",
    "ROUNDING_PRECISION_MIN",
    "as_degrees",
    "as_radians",
    "degrees_to_radians",
    "radians_to_degrees",
    "wrap_angle_within_positive_negative_pi",
    "wrap_angle_within_two_pi",
]
