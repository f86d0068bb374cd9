"""
Coordinate frame transforms.

Maps coordinates between the global frame and a local frame used to simplify
intersection formulas.
"""

from geokernel.transforms.transformations import Transformations

__all__ = [
    "Transformations",
]
