"""
Polar — Полярная координата

Immutable Pydantic модель точки (radius, azimuth). Используется для сравнения
с декартовыми точками и для смещений "на расстояние под углом".
"""

from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from geokernel.core.domain.angle import Angle, Number
from geokernel.core.domain.cartesian import CartesianCoordinate
from geokernel.core.exceptions import DivideByZeroError
from geokernel.core.math.angles import degrees_to_radians
from geokernel.core.math.tolerance import (
    ZERO_TOLERANCE,
    combined_tolerance,
    is_equal,
    validate_tolerance,
)


class PolarCoordinate(BaseModel):
    """Точка в полярных координатах относительно начала координат."""

    radius: float = Field(0.0, description="Расстояние от начала координат")
    azimuth: Angle = Field(default_factory=Angle, description="Угол от оси X против часовой")
    tolerance: float = Field(ZERO_TOLERANCE, description="Абсолютный допуск сравнений")

    model_config = {"frozen": True}

    def __init__(
        self,
        radius: Number = 0.0,
        azimuth: Union[Angle, Number] = 0.0,
        tolerance: float = ZERO_TOLERANCE,
    ) -> None:
        if not isinstance(azimuth, Angle):
            azimuth = Angle(azimuth, tolerance)
        super().__init__(radius=radius, azimuth=azimuth, tolerance=tolerance)

    @field_validator("tolerance")
    @classmethod
    def validate_tolerance_value(cls, v: float) -> float:
        """Допуск неотрицателен и не NaN."""
        return validate_tolerance(v)

    def to_cartesian(self) -> CartesianCoordinate:
        """
        Конверсия в декартовы координаты.

        Examples:
            >>> PolarCoordinate(2.828427125, math.pi / 4).to_cartesian()
            CartesianCoordinate(x=2.0000..., y=2.0000..., tolerance=1e-20)
        """
        return CartesianCoordinate(
            self.radius * self.azimuth.cos(),
            self.radius * self.azimuth.sin(),
            self.tolerance,
        )

    # -------------------------------------------------------------------------
    # Azimuth operations
    # -------------------------------------------------------------------------

    def _with(self, radius: float, azimuth: Angle) -> "PolarCoordinate":
        return PolarCoordinate(radius, azimuth, self.tolerance)

    def add_to_azimuth_radians(self, radians: Number) -> "PolarCoordinate":
        return self._with(self.radius, self.azimuth + radians)

    def subtract_from_azimuth_radians(self, radians: Number) -> "PolarCoordinate":
        return self._with(self.radius, self.azimuth - radians)

    def add_to_azimuth_degrees(self, degrees: Number) -> "PolarCoordinate":
        return self.add_to_azimuth_radians(degrees_to_radians(degrees))

    def subtract_from_azimuth_degrees(self, degrees: Number) -> "PolarCoordinate":
        return self.subtract_from_azimuth_radians(degrees_to_radians(degrees))

    def multiply_azimuth_by(self, multiplier: Number) -> "PolarCoordinate":
        return self._with(self.radius, self.azimuth * multiplier)

    def divide_azimuth_by(self, denominator: Number) -> "PolarCoordinate":
        """Raises DivideByZeroError при denominator == 0."""
        return self._with(self.radius, self.azimuth / denominator)

    # -------------------------------------------------------------------------
    # Radius operations
    # -------------------------------------------------------------------------

    def add_to_radius(self, value: Number) -> "PolarCoordinate":
        return self._with(self.radius + value, self.azimuth)

    def subtract_from_radius(self, value: Number) -> "PolarCoordinate":
        return self._with(self.radius - value, self.azimuth)

    def multiply_radius_by(self, multiplier: Number) -> "PolarCoordinate":
        return self._with(self.radius * multiplier, self.azimuth)

    def divide_radius_by(self, denominator: Number) -> "PolarCoordinate":
        """Raises DivideByZeroError при denominator == 0."""
        if denominator == 0:
            raise DivideByZeroError(f"Cannot divide PolarCoordinate radius {self.radius} by zero")
        return self._with(self.radius / denominator, self.azimuth)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CartesianCoordinate):
            return self.to_cartesian() == other
        if not isinstance(other, PolarCoordinate):
            return NotImplemented
        tolerance = combined_tolerance(self, other)
        return is_equal(self.radius, other.radius, tolerance) and is_equal(
            self.azimuth.radians, other.azimuth.radians, tolerance
        )

    def __hash__(self) -> int:
        # Совпадает с hash декартовой конверсии: PolarCoordinate == CartesianCoordinate
        return hash(self.to_cartesian())

    def __mul__(self, other: Any) -> "PolarCoordinate":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.multiply_radius_by(other)

    def __rmul__(self, other: Any) -> "PolarCoordinate":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "PolarCoordinate":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.divide_radius_by(other)
