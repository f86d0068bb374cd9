"""
LinearCurve — Прямая через две контрольные точки

Immutable Pydantic модель бесконечной прямой, заданной точками i и j.
Предоставляет запросы, которые нужны алгоритмам пересечений: наклон,
пересечения с осями, вертикальность/горизонтальность, параллельность.

Соглашения о бесконечностях:
- slope() вертикальной прямой: ±inf по знаку подъёма (rise)
- intercept_x() горизонтальной прямой: +inf
- intercept_y() вертикальной прямой: +inf
- intersection_coordinate() параллельных прямых: (inf, inf)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Две вертикальные прямые параллельны независимо от знака бесконечного наклона
2. Вырожденная прямая (i == j) является и горизонтальной, и вертикальной
3. slope() вырожденной прямой → DegenerateGeometryError
4. Точка пересечения не зависит от порядка прямых
"""

import math
from typing import Tuple

from pydantic import BaseModel, Field, field_validator

from geokernel.core.domain.angle import Number
from geokernel.core.domain.cartesian import CartesianCoordinate
from geokernel.core.exceptions import DegenerateGeometryError
from geokernel.core.math.tolerance import (
    ZERO_TOLERANCE,
    combined_tolerance,
    is_equal,
    is_zero,
    validate_tolerance,
)
from geokernel.logging_utils import get_logger

log = get_logger(__name__)


class LinearCurve(BaseModel):
    """
    Бесконечная прямая через контрольные точки i и j.

    Examples:
        >>> line = LinearCurve(CartesianCoordinate(1, 2), CartesianCoordinate(3, 4))
        >>> line.slope(), line.intercept_x(), line.intercept_y()
        (1.0, -1.0, 1.0)
    """

    i: CartesianCoordinate = Field(..., description="Первая контрольная точка")
    j: CartesianCoordinate = Field(..., description="Вторая контрольная точка")
    tolerance: float = Field(ZERO_TOLERANCE, description="Абсолютный допуск сравнений")

    model_config = {"frozen": True}

    def __init__(
        self,
        i: CartesianCoordinate,
        j: CartesianCoordinate,
        tolerance: float = ZERO_TOLERANCE,
    ) -> None:
        super().__init__(i=i, j=j, tolerance=tolerance)

    @field_validator("tolerance")
    @classmethod
    def validate_tolerance_value(cls, v: float) -> float:
        """Допуск неотрицателен и не NaN."""
        return validate_tolerance(v)

    # -------------------------------------------------------------------------
    # Alternate constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_slope_and_y_intercept(
        cls, slope: Number, intercept: Number, tolerance: float = ZERO_TOLERANCE
    ) -> "LinearCurve":
        """
        Прямая y = slope·x + intercept.

        Raises:
            DegenerateGeometryError: для бесконечного наклона (вертикальная прямая
                не определяется пересечением с осью Y)
        """
        if math.isinf(slope):
            raise DegenerateGeometryError(
                f"Slope {slope} is infinite: a vertical line is not defined by its y-intercept"
            )
        return cls(
            CartesianCoordinate(0.0, intercept, tolerance),
            CartesianCoordinate(1.0, intercept + slope, tolerance),
            tolerance,
        )

    @classmethod
    def from_slope_and_x_intercept(
        cls, slope: Number, intercept: Number, tolerance: float = ZERO_TOLERANCE
    ) -> "LinearCurve":
        """
        Прямая через (intercept, 0) с наклоном slope (бесконечный наклон → вертикаль).

        Raises:
            DegenerateGeometryError: для нулевого наклона (горизонтальная прямая
                не определяется пересечением с осью X)
        """
        if slope == 0:
            raise DegenerateGeometryError(
                "Slope is zero: a horizontal line is not defined by its x-intercept"
            )
        if math.isinf(slope):
            return cls(
                CartesianCoordinate(intercept, 0.0, tolerance),
                CartesianCoordinate(intercept, math.copysign(1.0, slope), tolerance),
                tolerance,
            )
        return cls(
            CartesianCoordinate(intercept, 0.0, tolerance),
            CartesianCoordinate(intercept + 1.0, slope, tolerance),
            tolerance,
        )

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def rise(self) -> float:
        return self.j.y - self.i.y

    def run(self) -> float:
        return self.j.x - self.i.x

    def length(self) -> float:
        return math.hypot(self.run(), self.rise())

    def slope(self) -> float:
        """
        Наклон прямой rise / run.

        Returns:
            rise / run; ±inf для вертикальной прямой (по знаку rise)

        Raises:
            DegenerateGeometryError: если обе контрольные точки совпадают
        """
        rise = self.rise()
        run = self.run()
        if is_zero(run, self.tolerance):
            if is_zero(rise, self.tolerance):
                log.debug("Slope requested for zero-length line %s", self)
                raise DegenerateGeometryError(
                    f"Rise & run are both zero for line ({self.i.x}, {self.i.y}) - "
                    f"({self.j.x}, {self.j.y})"
                )
            return math.inf if rise > 0 else -math.inf
        return rise / run

    def is_horizontal(self) -> bool:
        return is_zero(self.rise(), self.tolerance)

    def is_vertical(self) -> bool:
        return is_zero(self.run(), self.tolerance)

    def is_parallel(self, other: "LinearCurve") -> bool:
        """
        Параллельность: равные наклоны в пределах общего допуска.

        Две вертикальные прямые параллельны (наклоны +inf и -inf эквивалентны).
        """
        slope1 = self.slope()
        slope2 = other.slope()
        if math.isinf(slope1) and math.isinf(slope2):
            return True
        return is_equal(slope1, slope2, combined_tolerance(self, other))

    def is_perpendicular(self, other: "LinearCurve") -> bool:
        """Перпендикулярность: вертикаль/горизонталь или произведение наклонов -1."""
        if self.is_vertical():
            return other.is_horizontal()
        if other.is_vertical():
            return self.is_horizontal()
        return is_equal(self.slope() * other.slope(), -1.0, combined_tolerance(self, other))

    def intercept_x(self) -> float:
        """
        Пересечение с осью X.

        Returns:
            x при y = 0; +inf для горизонтальной прямой, не лежащей на оси X
        """
        if is_zero(self.i.y, self.tolerance):
            return self.i.x
        if is_zero(self.j.y, self.tolerance):
            return self.j.x
        if self.is_horizontal():
            return math.inf
        return -self.i.y / self.slope() + self.i.x

    def intercept_y(self) -> float:
        """
        Пересечение с осью Y.

        Returns:
            y при x = 0; +inf для вертикальной прямой, не лежащей на оси Y
        """
        if is_zero(self.i.x, self.tolerance):
            return self.i.y
        if is_zero(self.j.x, self.tolerance):
            return self.j.y
        if self.is_vertical():
            return math.inf
        return -self.i.x * self.slope() + self.i.y

    def y_at_x(self, x: Number) -> float:
        """y на прямой при заданном x; +inf для вертикальной прямой."""
        if self.is_vertical():
            return math.inf
        return self.i.y + self.slope() * (x - self.i.x)

    def x_at_y(self, y: Number) -> float:
        """x на прямой при заданном y; +inf для горизонтальной прямой."""
        if self.is_horizontal():
            return math.inf
        if self.is_vertical():
            return self.i.x
        return self.i.x + (y - self.i.y) / self.slope()

    def is_intersecting_coordinate(self, coordinate: CartesianCoordinate) -> bool:
        """Лежит ли точка на прямой (расстояние до прямой в пределах допуска)."""
        tolerance = combined_tolerance(self, coordinate)
        length = self.length()
        if is_zero(length, tolerance):
            return coordinate == self.i
        cross = self.run() * (coordinate.y - self.i.y) - self.rise() * (coordinate.x - self.i.x)
        return is_zero(cross / length, tolerance)

    def perpendicular_projection(self, coordinate: CartesianCoordinate) -> CartesianCoordinate:
        """
        Основание перпендикуляра, опущенного из точки на прямую.

        Raises:
            DegenerateGeometryError: для прямой нулевой длины
        """
        run = self.run()
        rise = self.rise()
        length_squared = run * run + rise * rise
        if length_squared == 0:
            raise DegenerateGeometryError(
                f"Cannot project onto zero-length line at ({self.i.x}, {self.i.y})"
            )
        t = ((coordinate.x - self.i.x) * run + (coordinate.y - self.i.y) * rise) / length_squared
        return CartesianCoordinate(self.i.x + t * run, self.i.y + t * rise, self.tolerance)

    def intersection_coordinate(self, other: "LinearCurve") -> CartesianCoordinate:
        """
        Точка пересечения двух бесконечных прямых.

        Args:
            other: Вторая прямая

        Returns:
            Точка пересечения; (inf, inf) для параллельных прямых

        Examples:
            >>> line1 = LinearCurve(CartesianCoordinate(-5, 6), CartesianCoordinate(-3, -2))
            >>> line2 = LinearCurve(CartesianCoordinate(1, 5), CartesianCoordinate(-7, 3))
            >>> line1.intersection_coordinate(line2)
            CartesianCoordinate(x=-4.411764..., y=3.647058..., tolerance=1e-20)
        """
        tolerance = combined_tolerance(self, other)
        if self.is_parallel(other):
            return CartesianCoordinate(math.inf, math.inf, tolerance)

        # Фиксированный порядок прямых: результат не зависит от порядка аргументов
        first, second = sorted((self, other), key=_ordering_key)

        if first.is_vertical() or second.is_vertical():
            vertical, sloped = (first, second) if first.is_vertical() else (second, first)
            x = vertical.i.x
            y = sloped.y_at_x(x)
        elif first.is_horizontal() or second.is_horizontal():
            horizontal, sloped = (first, second) if first.is_horizontal() else (second, first)
            y = horizontal.i.y
            x = sloped.x_at_y(y)
        else:
            slope1 = first.slope()
            slope2 = second.slope()
            x = (
                slope1 * first.i.x - slope2 * second.i.x + second.i.y - first.i.y
            ) / (slope1 - slope2)
            y = first.y_at_x(x)
        return CartesianCoordinate(x, y, tolerance)


def _ordering_key(line: LinearCurve) -> Tuple[float, float, float, float]:
    return (line.i.x, line.i.y, line.j.x, line.j.y)
