"""
Domain value types.

Immutable tolerance-aware values of the kernel: Angle, CartesianCoordinate,
CartesianOffset, PolarCoordinate.
"""

from geokernel.core.domain.angle import Angle, normalize
from geokernel.core.domain.cartesian import CartesianCoordinate, CartesianOffset
from geokernel.core.domain.polar import PolarCoordinate

__all__ = [
    # Angle
    "Angle",
    "normalize",
    # Cartesian
    "CartesianCoordinate",
    "CartesianOffset",
    # Polar
    "PolarCoordinate",
]
