"""
CircularCurve — Окружность

Immutable Pydantic модель окружности: центр (local_origin) и неотрицательный
радиус. Предоставляет запросы, нужные алгоритмам пересечений, и базовые
метрические величины.
"""

import math
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from geokernel.core.domain.angle import Angle, Number
from geokernel.core.domain.cartesian import CartesianCoordinate
from geokernel.core.math.tolerance import (
    ZERO_TOLERANCE,
    combined_tolerance,
    is_equal,
    is_zero,
    validate_tolerance,
)


class CircularCurve(BaseModel):
    """
    Окружность с центром center и радиусом radius.

    Examples:
        >>> circle = CircularCurve(2.0, CartesianCoordinate(1, 1))
        >>> circle.length()
        12.566370614359172
    """

    radius: float = Field(..., description="Радиус (неотрицательный)")
    center: CartesianCoordinate = Field(..., description="Центр окружности")
    tolerance: float = Field(ZERO_TOLERANCE, description="Абсолютный допуск сравнений")

    model_config = {"frozen": True}

    def __init__(
        self,
        radius: Number,
        center: Optional[CartesianCoordinate] = None,
        tolerance: float = ZERO_TOLERANCE,
    ) -> None:
        if center is None:
            center = CartesianCoordinate.origin(tolerance)
        super().__init__(radius=radius, center=center, tolerance=tolerance)

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, v: float) -> float:
        """Радиус неотрицателен."""
        if math.isnan(v) or v < 0:
            raise ValueError(f"radius must be non-negative, got {v}")
        return v

    @field_validator("tolerance")
    @classmethod
    def validate_tolerance_value(cls, v: float) -> float:
        """Допуск неотрицателен и не NaN."""
        return validate_tolerance(v)

    @property
    def local_origin(self) -> CartesianCoordinate:
        """Центр окружности (начало её локальной системы координат)."""
        return self.center

    # -------------------------------------------------------------------------
    # Metrics
    # -------------------------------------------------------------------------

    def length(self) -> float:
        """Длина окружности 2πr."""
        return 2.0 * math.pi * self.radius

    def diameter(self) -> float:
        return 2.0 * self.radius

    def area(self) -> float:
        return math.pi * self.radius ** 2

    def curvature(self) -> float:
        """Кривизна 1/r; +inf для окружности нулевого радиуса."""
        if self.radius == 0:
            return math.inf
        return 1.0 / self.radius

    # -------------------------------------------------------------------------
    # Coordinates on the curve
    # -------------------------------------------------------------------------

    def coordinate_at_angle(self, angle: Union[Angle, Number]) -> CartesianCoordinate:
        """Точка окружности в направлении angle от центра."""
        return self.center.offset_coordinate(self.radius, angle)

    def is_intersecting_coordinate(self, coordinate: CartesianCoordinate) -> bool:
        """Лежит ли точка на окружности в пределах общего допуска."""
        return is_equal(
            self.center.distance_to(coordinate),
            self.radius,
            combined_tolerance(self, coordinate),
        )

    def ys_at_x(self, x: Number) -> List[float]:
        """
        Значения y окружности при заданном x.

        Returns:
            [] вне окружности, [y] на касании, [y_top, y_bottom] иначе
        """
        return _chord_values(x - self.center.x, self.center.y, self.radius, self.tolerance)

    def xs_at_y(self, y: Number) -> List[float]:
        """
        Значения x окружности при заданном y.

        Returns:
            [] вне окружности, [x] на касании, [x_right, x_left] иначе
        """
        return _chord_values(y - self.center.y, self.center.x, self.radius, self.tolerance)


def _chord_values(
    distance: float, center_value: float, radius: float, tolerance: float
) -> List[float]:
    half_chord_squared = radius ** 2 - distance ** 2
    if is_zero(half_chord_squared, tolerance):
        return [center_value]
    if half_chord_squared < 0:
        return []
    half_chord = math.sqrt(half_chord_squared)
    return [center_value + half_chord, center_value - half_chord]
