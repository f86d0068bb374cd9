"""
Circular/Circular — Пересечение двух окружностей

Алгоритм в локальной системе, где центр первой окружности — начало координат,
а центр второй лежит на положительной оси X:

    sep    = |c1 - c2|
    factor = sep² - r2² + r1²
    x      = factor / (2·sep)
    L      = sqrt(4·(sep·r1)² - factor²) / sep      (длина радикальной хорды)
    y      = ±L / 2

Классификация (модель внешнего касания):
    касание:     sep == r1 + r2 (в пределах допуска)
    пересечение: r1 + r2 ≥ sep (в пределах допуска)

Внутреннее касание (sep == |r1 - r2|) касанием не считается: оно
классифицируется как пересечение и даёт две совпадающие точки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Концентрические окружности → OverlappingCurvesError при запросе точек
2. Радикальная хорда непересекающихся окружностей → NonIntersectingCurvesError
3. Касание → одна точка (y = 0), пересечение → две точки (сначала +y)
"""

import math
from typing import Any, List, Optional

from geokernel.core.domain.cartesian import CartesianCoordinate
from geokernel.core.exceptions import NonIntersectingCurvesError, OverlappingCurvesError
from geokernel.core.math.tolerance import (
    ZERO_TOLERANCE,
    is_equal,
    is_greater_than,
    is_greater_than_or_equal,
    is_zero,
)
from geokernel.curves.circular import CircularCurve
from geokernel.intersections.base import CurveIntersection
from geokernel.logging_utils import get_logger
from geokernel.transforms.transformations import Transformations

log = get_logger(__name__)


# =============================================================================
# RADICAL LINE
# =============================================================================


def radical_line_length(
    separation: float,
    radius1: float,
    radius2: float,
    tolerance: float = ZERO_TOLERANCE,
    curve1: Optional[Any] = None,
    curve2: Optional[Any] = None,
) -> float:
    """
    Длина общей хорды (радикальной линии) двух окружностей.

    L = sqrt(4·(sep·r1)² - factor²) / sep, factor = sep² - r2² + r1²

    Args:
        separation: Расстояние между центрами
        radius1: Радиус первой окружности
        radius2: Радиус второй окружности
        tolerance: Абсолютный допуск
        curve1: Первая окружность (только для диагностики в ошибках)
        curve2: Вторая окружность (только для диагностики в ошибках)

    Returns:
        Длина хорды; 0 для касающихся окружностей

    Raises:
        OverlappingCurvesError: концентрические окружности (sep == 0)
        NonIntersectingCurvesError: окружности не пересекаются
            (sep > r1 + r2 или одна окружность строго внутри другой)

    Examples:
        >>> radical_line_length(11.0, 6.0, 7.0)
        6.899515...
        >>> radical_line_length(11.0, 6.0, 5.0)
        0.0
    """
    if is_zero(separation, tolerance):
        log.debug("Radical line requested for concentric circles: r1=%s, r2=%s", radius1, radius2)
        raise OverlappingCurvesError(
            f"Circles are concentric (separation {separation}): radical line is undefined",
            curve1,
            curve2,
        )
    if is_greater_than(separation, radius1 + radius2, tolerance):
        log.debug(
            "Radical line requested for separated circles: sep=%s, r1=%s, r2=%s",
            separation,
            radius1,
            radius2,
        )
        raise NonIntersectingCurvesError(
            f"Circles do not intersect: separation {separation} exceeds "
            f"radii sum {radius1 + radius2}",
            curve1,
            curve2,
        )

    factor = separation ** 2 - radius2 ** 2 + radius1 ** 2
    radicand = 4 * (separation * radius1) ** 2 - factor ** 2
    if is_zero(radicand, tolerance):
        return 0.0
    if radicand < 0:
        log.debug(
            "Radical line requested for nested circles: sep=%s, r1=%s, r2=%s",
            separation,
            radius1,
            radius2,
        )
        raise NonIntersectingCurvesError(
            f"Circles do not intersect: one circle lies inside the other "
            f"(separation {separation}, radii {radius1}, {radius2})",
            curve1,
            curve2,
        )
    return math.sqrt(radicand) / separation


# =============================================================================
# CIRCULAR / CIRCULAR
# =============================================================================


class CircularCircularIntersection(CurveIntersection[CircularCurve, CircularCurve]):
    """
    Пересечение двух окружностей.

    Examples:
        >>> circle1 = CircularCurve(2.0, CartesianCoordinate(0, 0))
        >>> circle2 = CircularCurve(2.0, CartesianCoordinate(4, 0))
        >>> CircularCircularIntersection(circle1, circle2).intersection_coordinates()
        [CartesianCoordinate(x=2.0, y=0.0, tolerance=1e-20)]
    """

    def center_separation(self) -> float:
        """Расстояние между центрами окружностей."""
        return self.curve1.center.distance_to(self.curve2.center)

    def are_tangent(self) -> bool:
        """Внешнее касание: sep == r1 + r2."""
        return is_equal(
            self.curve1.radius + self.curve2.radius, self.center_separation(), self.tolerance
        )

    def are_intersecting(self) -> bool:
        """Окружности касаются или пересекаются: r1 + r2 ≥ sep."""
        return is_greater_than_or_equal(
            self.curve1.radius + self.curve2.radius, self.center_separation(), self.tolerance
        )

    def radical_line_length(self) -> float:
        """
        Длина общей хорды окружностей.

        Raises:
            OverlappingCurvesError: концентрические окружности
            NonIntersectingCurvesError: окружности не пересекаются
        """
        return radical_line_length(
            self.center_separation(),
            self.curve1.radius,
            self.curve2.radius,
            self.tolerance,
            self.curve1,
            self.curve2,
        )

    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        """
        Returns:
            [] если окружности не пересекаются, [точка] при внешнем касании,
            иначе [точка +y, точка -y]

        Raises:
            OverlappingCurvesError: концентрические окружности
            NonIntersectingCurvesError: одна окружность строго внутри другой
        """
        if not self.are_intersecting():
            return []

        separation = self.center_separation()
        if self.are_tangent():
            if is_zero(separation, self.tolerance):
                log.debug("Tangent zero-radius circles share a center: %s", self.curve1.center)
                raise OverlappingCurvesError(
                    "Circles share a center: intersection is undefined", self.curve1, self.curve2
                )
            local_ys = [0.0]
        else:
            half_chord = self.radical_line_length() / 2
            local_ys = [half_chord, -half_chord]

        factor = separation ** 2 - self.curve2.radius ** 2 + self.curve1.radius ** 2
        x = factor / (2 * separation)
        transformations = Transformations(self.curve1.center, self.curve2.center)
        return [
            transformations.transform_to_global(CartesianCoordinate(x, y, self.tolerance))
            for y in local_ys
        ]
