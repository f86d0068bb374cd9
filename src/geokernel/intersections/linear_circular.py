"""
Linear/Circular — Пересечение прямой и окружности

Классический алгоритм в локальной системе координат окружности:
центр окружности переносится в начало координат (ось X сохраняет направление),
контрольные точки прямой выражаются в этой системе.

ФОРМУЛЫ:
    D  = cross(p1_local, p2_local)          (обнуляется в пределах допуска)
    dx, dy = p2_local - p1_local
    dr = sqrt(dx² + dy²)
    Δ  = (r·dr)² - D²                        (обнуляется в пределах допуска)

    x = (D·dy ± sgn(dy)·dx·√Δ) / dr²
    y = (-D·dx ± |dy|·√Δ) / dr²
    где sgn(0) = +1

Классификация:
    Δ == 0 → касание (одна точка, ветвь "+")
    Δ ≥ 0  → пересечение (две точки, сначала ветвь "+")
    Δ < 0  → нет пересечения
    прямая нулевой длины → не касается и не пересекает; точки → DegenerateGeometryError
"""

import math
from typing import List

from geokernel.core.domain.cartesian import CartesianCoordinate, CartesianOffset
from geokernel.core.exceptions import DegenerateGeometryError
from geokernel.core.math.tolerance import sign_nonzero, snap_to_zero
from geokernel.curves.circular import CircularCurve
from geokernel.curves.linear import LinearCurve
from geokernel.intersections.base import CurveIntersection
from geokernel.logging_utils import get_logger
from geokernel.transforms.transformations import Transformations

log = get_logger(__name__)


class LinearCircularIntersection(CurveIntersection[LinearCurve, CircularCurve]):
    """
    Пересечение прямой (curve1) и окружности (curve2).

    Examples:
        >>> line = LinearCurve(CartesianCoordinate(-1, 1), CartesianCoordinate(1, 1))
        >>> circle = CircularCurve(1.0, CartesianCoordinate(0, 0))
        >>> LinearCircularIntersection(line, circle).intersection_coordinates()
        [CartesianCoordinate(x=0.0, y=1.0, tolerance=1e-20)]
    """

    def __init__(self, curve1: LinearCurve, curve2: CircularCurve) -> None:
        super().__init__(curve1, curve2)
        center = curve2.local_origin
        # Опорная точка оси X должна отстоять от центра дальше допуска
        reach = max(1.0, 2.0 * center.tolerance)
        self._transformations = Transformations(
            center, center + CartesianOffset.from_components(reach, 0.0, center.tolerance)
        )
        self._local_i = self._transformations.transform_to_local(curve1.i)
        self._local_j = self._transformations.transform_to_local(curve1.j)

    # -------------------------------------------------------------------------
    # Local-frame quantities
    # -------------------------------------------------------------------------

    def _dx(self) -> float:
        return self._local_j.x - self._local_i.x

    def _dy(self) -> float:
        return self._local_j.y - self._local_i.y

    def _dr(self) -> float:
        return math.hypot(self._dx(), self._dy())

    def determinant(self) -> float:
        """D = cross(p1, p2) в локальной системе окружности (обнулён в пределах допуска)."""
        return snap_to_zero(self._local_i.cross_product(self._local_j), self.tolerance)

    def discriminant(self) -> float:
        """Δ = (r·dr)² - D² (обнулён в пределах допуска)."""
        determinant = self.determinant()
        incidence = (self.curve2.radius * self._dr()) ** 2 - determinant ** 2
        return snap_to_zero(incidence, self.tolerance)

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def _is_degenerate(self) -> bool:
        return self._dx() == 0 and self._dy() == 0

    def are_tangent(self) -> bool:
        """Прямая касается окружности: Δ == 0 (прямая нулевой длины не касается)."""
        return not self._is_degenerate() and self.discriminant() == 0

    def are_intersecting(self) -> bool:
        """Прямая касается или пересекает окружность: Δ ≥ 0 (прямая нулевой длины не пересекает)."""
        return not self._is_degenerate() and self.discriminant() >= 0

    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        """
        Returns:
            [] если нет пересечения, [точка] при касании, [точка+, точка-] иначе

        Raises:
            DegenerateGeometryError: если прямая имеет нулевую длину
        """
        if self._is_degenerate():
            log.debug("Zero-length line %s against circle %s", self.curve1, self.curve2)
            raise DegenerateGeometryError(
                f"Line ({self.curve1.i.x}, {self.curve1.i.y}) - "
                f"({self.curve1.j.x}, {self.curve1.j.y}) has zero length"
            )

        discriminant = self.discriminant()
        if discriminant < 0:
            return []

        dx = self._dx()
        dy = self._dy()
        dr_squared = dx ** 2 + dy ** 2

        determinant = self.determinant()
        root = math.sqrt(discriminant)
        x_term = sign_nonzero(dy) * dx * root
        y_term = abs(dy) * root

        branches = [1.0] if discriminant == 0 else [1.0, -1.0]
        return [
            self._transformations.transform_to_global(
                CartesianCoordinate(
                    (determinant * dy + branch * x_term) / dr_squared,
                    (-determinant * dx + branch * y_term) / dr_squared,
                    self.tolerance,
                )
            )
            for branch in branches
        ]
