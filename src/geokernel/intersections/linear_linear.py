"""
Linear/Linear — Пересечение двух прямых

Классификация:
- Касание (совпадение): прямые параллельны И имеют общее пересечение с осью
  (Y для невертикальных, X для вертикальных)
- Пересечение: прямые не параллельны
- Совпадающие прямые не считаются пересекающимися

Результат симметричен: порядок прямых не влияет ни на классификацию, ни на точку.
"""

import math
from typing import List

from geokernel.core.domain.cartesian import CartesianCoordinate
from geokernel.core.math.tolerance import is_equal
from geokernel.curves.linear import LinearCurve
from geokernel.intersections.base import CurveIntersection


class LinearLinearIntersection(CurveIntersection[LinearCurve, LinearCurve]):
    """
    Пересечение двух бесконечных прямых.

    Examples:
        >>> line1 = LinearCurve(CartesianCoordinate(0, 0), CartesianCoordinate(1, 1))
        >>> line2 = LinearCurve(CartesianCoordinate(0, 1), CartesianCoordinate(1, 0))
        >>> LinearLinearIntersection(line1, line2).intersection_coordinates()
        [CartesianCoordinate(x=0.5, y=0.5, tolerance=1e-20)]
    """

    def are_tangent(self) -> bool:
        """Прямые совпадают: параллельны и имеют общее пересечение с осью."""
        if not self.curve1.is_parallel(self.curve2):
            return False
        if self.curve1.is_vertical():
            return is_equal(
                self.curve1.intercept_x(), self.curve2.intercept_x(), self.tolerance
            )
        return is_equal(self.curve1.intercept_y(), self.curve2.intercept_y(), self.tolerance)

    def are_intersecting(self) -> bool:
        """Прямые пересекаются в единственной точке (не параллельны)."""
        return not self.curve1.is_parallel(self.curve2)

    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        """
        Returns:
            [] для параллельных (включая совпадающие) прямых, иначе [точка]
        """
        if not self.are_intersecting():
            return []
        coordinate = self.curve1.intersection_coordinate(self.curve2)
        if math.isinf(coordinate.x) or math.isinf(coordinate.y):
            return []
        return [coordinate]
