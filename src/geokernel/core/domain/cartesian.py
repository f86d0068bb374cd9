"""
Cartesian — Точка и направленное смещение на плоскости

Immutable Pydantic модели:
- CartesianCoordinate: точка (x, y) с допуском
- CartesianOffset: упорядоченная пара точек (i, j), смещение j - i

Векторная арифметика (сложение, вычитание, масштабирование, скалярное и
векторное произведение) возвращает новые экземпляры.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Равенство покомпонентно в пределах min(tolerance_1, tolerance_2)
2. hash не зависит от tolerance
3. Деление на 0 → DivideByZeroError (никогда inf/NaN)
4. CartesianCoordinate == PolarCoordinate сравнивает после конверсии полярной точки
"""

import math
from typing import TYPE_CHECKING, Any, Union

from pydantic import BaseModel, Field, field_validator

from geokernel.core.domain.angle import Angle, Number
from geokernel.core.exceptions import DivideByZeroError
from geokernel.core.math.tolerance import (
    ZERO_TOLERANCE,
    combined_tolerance,
    is_equal,
    validate_tolerance,
)

if TYPE_CHECKING:
    from geokernel.core.domain.polar import PolarCoordinate


# =============================================================================
# CARTESIAN COORDINATE
# =============================================================================


class CartesianCoordinate(BaseModel):
    """
    Точка на плоскости.

    Operators:
        coord + coord, coord - coord → CartesianCoordinate (покомпонентно)
        coord ± offset → CartesianCoordinate (сдвиг на смещение)
        coord * k, k * coord, coord / k → CartesianCoordinate
    """

    x: float = Field(0.0, description="Координата X")
    y: float = Field(0.0, description="Координата Y")
    tolerance: float = Field(ZERO_TOLERANCE, description="Абсолютный допуск сравнений")

    model_config = {"frozen": True}

    def __init__(
        self, x: Number = 0.0, y: Number = 0.0, tolerance: float = ZERO_TOLERANCE
    ) -> None:
        super().__init__(x=x, y=y, tolerance=tolerance)

    @field_validator("tolerance")
    @classmethod
    def validate_tolerance_value(cls, v: float) -> float:
        """Допуск неотрицателен и не NaN."""
        return validate_tolerance(v)

    @classmethod
    def origin(cls, tolerance: float = ZERO_TOLERANCE) -> "CartesianCoordinate":
        """Начало координат (0, 0)."""
        return cls(0.0, 0.0, tolerance)

    # -------------------------------------------------------------------------
    # Vector products & distances
    # -------------------------------------------------------------------------

    def cross_product(self, other: "CartesianCoordinate") -> float:
        """
        Векторное произведение (z-компонента): x1·y2 - x2·y1.

        Examples:
            >>> CartesianCoordinate(1, 2).cross_product(CartesianCoordinate(3, 4))
            -2.0
        """
        return self.x * other.y - other.x * self.y

    def dot_product(self, other: "CartesianCoordinate") -> float:
        """
        Скалярное произведение: x1·x2 + y1·y2.

        Examples:
            >>> CartesianCoordinate(1, 2).dot_product(CartesianCoordinate(3, 4))
            11.0
        """
        return self.x * other.x + self.y * other.y

    def offset_from(self, other: "CartesianCoordinate") -> "CartesianOffset":
        """Смещение от other к этой точке (i=other, j=self)."""
        return CartesianOffset(other, self, combined_tolerance(self, other))

    def distance_from_origin(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "CartesianCoordinate") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    # -------------------------------------------------------------------------
    # Rotation & projection
    # -------------------------------------------------------------------------

    def offset_coordinate(
        self, distance: Number, rotation: Union[Angle, Number]
    ) -> "CartesianCoordinate":
        """
        Точка на расстоянии distance в направлении rotation от этой точки.

        Args:
            distance: Расстояние от текущей точки
            rotation: Направление (Angle или радианы), отсчёт от оси X против часовой
        """
        angle = rotation if isinstance(rotation, Angle) else Angle(rotation, self.tolerance)
        return CartesianCoordinate(
            self.x + distance * angle.cos(),
            self.y + distance * angle.sin(),
            self.tolerance,
        )

    def rotate(self, rotation: Union[Angle, Number]) -> "CartesianCoordinate":
        """
        Поворот точки вокруг начала координат против часовой стрелки.

        Examples:
            >>> CartesianCoordinate(3, 4).rotate(math.pi / 4)
            CartesianCoordinate(x=-0.7071..., y=4.9497..., tolerance=1e-20)
        """
        angle = rotation if isinstance(rotation, Angle) else Angle(rotation, self.tolerance)
        cos_a = angle.cos()
        sin_a = angle.sin()
        return CartesianCoordinate(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
            self.tolerance,
        )

    def rotate_about_point(
        self, center: "CartesianCoordinate", rotation: Union[Angle, Number]
    ) -> "CartesianCoordinate":
        """Поворот точки вокруг center против часовой стрелки."""
        relative = CartesianCoordinate(self.x - center.x, self.y - center.y, self.tolerance)
        rotated = relative.rotate(rotation)
        return CartesianCoordinate(rotated.x + center.x, rotated.y + center.y, self.tolerance)

    def to_polar(self) -> "PolarCoordinate":
        """Конверсия в полярные координаты относительно начала координат."""
        from geokernel.core.domain.polar import PolarCoordinate

        return PolarCoordinate(
            self.distance_from_origin(),
            Angle(math.atan2(self.y, self.x), self.tolerance),
            self.tolerance,
        )

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        from geokernel.core.domain.polar import PolarCoordinate

        if isinstance(other, PolarCoordinate):
            other = other.to_cartesian()
        if not isinstance(other, CartesianCoordinate):
            return NotImplemented
        tolerance = combined_tolerance(self, other)
        return is_equal(self.x, other.x, tolerance) and is_equal(self.y, other.y, tolerance)

    def __hash__(self) -> int:
        """
        hash по точным компонентам, без допуска.

        Равенство с допуском нетранзитивно, поэтому точки, равные лишь в пределах
        допуска, могут иметь разный hash. Ключами dict/set надёжны только точки
        с совпадающими компонентами.
        """
        return hash((self.x, self.y))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "CartesianCoordinate":
        if isinstance(other, CartesianCoordinate):
            return CartesianCoordinate(
                self.x + other.x, self.y + other.y, combined_tolerance(self, other)
            )
        if isinstance(other, CartesianOffset):
            return CartesianCoordinate(
                self.x + other.x(), self.y + other.y(), combined_tolerance(self, other)
            )
        return NotImplemented

    def __sub__(self, other: Any) -> "CartesianCoordinate":
        if isinstance(other, CartesianCoordinate):
            return CartesianCoordinate(
                self.x - other.x, self.y - other.y, combined_tolerance(self, other)
            )
        if isinstance(other, CartesianOffset):
            return CartesianCoordinate(
                self.x - other.x(), self.y - other.y(), combined_tolerance(self, other)
            )
        return NotImplemented

    def __mul__(self, other: Any) -> "CartesianCoordinate":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return CartesianCoordinate(self.x * other, self.y * other, self.tolerance)

    def __rmul__(self, other: Any) -> "CartesianCoordinate":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "CartesianCoordinate":
        if not isinstance(other, (int, float)):
            return NotImplemented
        if other == 0:
            raise DivideByZeroError(f"Cannot divide CartesianCoordinate({self.x}, {self.y}) by zero")
        return CartesianCoordinate(self.x / other, self.y / other, self.tolerance)


# =============================================================================
# CARTESIAN OFFSET
# =============================================================================


class CartesianOffset(BaseModel):
    """
    Направленное смещение от точки i к точке j.

    x() и y() — компоненты j - i, length() — евклидова длина.
    """

    i: CartesianCoordinate = Field(..., description="Начальная точка смещения")
    j: CartesianCoordinate = Field(..., description="Конечная точка смещения")
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

    @classmethod
    def from_components(
        cls, dx: Number, dy: Number, tolerance: float = ZERO_TOLERANCE
    ) -> "CartesianOffset":
        """Смещение (dx, dy) от начала координат."""
        return cls(
            CartesianCoordinate.origin(tolerance),
            CartesianCoordinate(dx, dy, tolerance),
            tolerance,
        )

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    def x(self) -> float:
        """Компонента X: j.x - i.x."""
        return self.j.x - self.i.x

    def y(self) -> float:
        """Компонента Y: j.y - i.y."""
        return self.j.y - self.i.y

    def length(self) -> float:
        """Евклидова длина смещения."""
        return math.hypot(self.x(), self.y())

    def to_cartesian_coordinate(self) -> CartesianCoordinate:
        """Смещение как точка (x(), y())."""
        return CartesianCoordinate(self.x(), self.y(), self.tolerance)

    def direction(self) -> Angle:
        """Направление смещения относительно оси X."""
        return Angle(math.atan2(self.y(), self.x()), self.tolerance)

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CartesianOffset):
            return NotImplemented
        tolerance = combined_tolerance(self, other)
        return (
            is_equal(self.i.x, other.i.x, tolerance)
            and is_equal(self.i.y, other.i.y, tolerance)
            and is_equal(self.j.x, other.j.x, tolerance)
            and is_equal(self.j.y, other.j.y, tolerance)
        )

    def __hash__(self) -> int:
        return hash((self.i, self.j))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> Any:
        if isinstance(other, CartesianOffset):
            return CartesianOffset.from_components(
                self.x() + other.x(), self.y() + other.y(), combined_tolerance(self, other)
            )
        if isinstance(other, CartesianCoordinate):
            return other + self
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, CartesianOffset):
            return CartesianOffset.from_components(
                self.x() - other.x(), self.y() - other.y(), combined_tolerance(self, other)
            )
        if isinstance(other, CartesianCoordinate):
            return CartesianCoordinate(
                self.x() - other.x, self.y() - other.y, combined_tolerance(self, other)
            )
        return NotImplemented

    def __mul__(self, other: Any) -> "CartesianOffset":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return CartesianOffset(self.i * other, self.j * other, self.tolerance)

    def __rmul__(self, other: Any) -> "CartesianOffset":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "CartesianOffset":
        if not isinstance(other, (int, float)):
            return NotImplemented
        if other == 0:
            raise DivideByZeroError(f"Cannot divide CartesianOffset({self.x()}, {self.y()}) by zero")
        return CartesianOffset(self.i / other, self.j / other, self.tolerance)
