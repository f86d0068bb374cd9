"""
Angle — Нормализованный угол

Immutable Pydantic модель угла в радианах. Все направленные рассуждения ядра
(параллельность, повороты, системы координат) проходят через этот тип.

Хранится исходное значение (radians_raw); нормализованное значение в (-π, π]
вычисляется из него. Числа (int/float) в операциях трактуются как углы в
радианах с допуском угла-операнда.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. radians == wrap(radians_raw), radians ∈ (-π, π] (±inf → +inf)
2. clockwise_radians == -radians
3. Равенство: |radians_1 - radians_2| < min(tolerance_1, tolerance_2)
4. Арифметика возвращает новый нормализованный Angle, деление на 0 → DivideByZeroError
"""

import math
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from geokernel.core.exceptions import DivideByZeroError
from geokernel.core.math.angles import (
    as_radians,
    degrees_to_radians,
    radians_to_degrees,
    wrap_angle_within_positive_negative_pi,
)
from geokernel.core.math.tolerance import (
    ZERO_TOLERANCE,
    combined_tolerance,
    compare_with_tolerance,
    is_equal,
    validate_tolerance,
)

Number = Union[int, float]


# =============================================================================
# ANGLE MODEL
# =============================================================================


class Angle(BaseModel):
    """
    Угол в радианах с нормализацией в (-π, π].

    Immutable модель (frozen=True): любая "мутирующая" операция создаёт новый
    экземпляр.

    Examples:
        >>> Angle(3 * math.pi / 2).radians
        -1.5707963267948966
        >>> Angle.from_degrees(90).radians
        1.5707963267948966
    """

    radians_raw: float = Field(0.0, description="Исходный угол в радианах (до нормализации)")
    tolerance: float = Field(ZERO_TOLERANCE, description="Абсолютный допуск сравнений")

    model_config = {"frozen": True}

    def __init__(self, radians: Number = 0.0, tolerance: float = ZERO_TOLERANCE) -> None:
        super().__init__(radians_raw=radians, tolerance=tolerance)

    @field_validator("tolerance")
    @classmethod
    def validate_tolerance_value(cls, v: float) -> float:
        """Допуск неотрицателен и не NaN."""
        return validate_tolerance(v)

    # -------------------------------------------------------------------------
    # Alternate constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_degrees(cls, degrees: Number, tolerance: float = ZERO_TOLERANCE) -> "Angle":
        """Угол из градусов."""
        return cls(degrees_to_radians(degrees), tolerance)

    @classmethod
    def from_components(cls, x: Number, y: Number, tolerance: float = ZERO_TOLERANCE) -> "Angle":
        """
        Направление вектора (x, y) относительно оси X.

        Examples:
            >>> Angle.from_components(-1, 0).radians
            3.141592653589793
        """
        return cls(as_radians(x, y), tolerance)

    @classmethod
    def origin(cls, tolerance: float = ZERO_TOLERANCE) -> "Angle":
        """Нулевой угол."""
        return cls(0.0, tolerance)

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def radians(self) -> float:
        """Нормализованный угол в (-π, π]."""
        return wrap_angle_within_positive_negative_pi(self.radians_raw, self.tolerance)

    @property
    def degrees(self) -> float:
        """Нормализованный угол в градусах, (-180, 180]."""
        return radians_to_degrees(self.radians)

    @property
    def degrees_raw(self) -> float:
        """Исходный (не нормализованный) угол в градусах."""
        return radians_to_degrees(self.radians_raw)

    @property
    def clockwise_radians(self) -> float:
        """Угол, отсчитываемый по часовой стрелке."""
        return -self.radians

    def sin(self) -> float:
        return math.sin(self.radians)

    def cos(self) -> float:
        return math.cos(self.radians)

    def tan(self) -> float:
        return math.tan(self.radians)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def _as_angle(self, other: Any) -> Optional["Angle"]:
        if isinstance(other, Angle):
            return other
        if isinstance(other, (int, float)):
            return Angle(other, self.tolerance)
        return None

    def compare_to(self, other: Union["Angle", Number]) -> int:
        """
        Трёхстороннее сравнение нормализованных углов.

        Returns:
            0 если углы равны в пределах общего допуска, иначе знак разности (-1 / 1)

        Raises:
            TypeError: если other не Angle и не число
        """
        angle = self._as_angle(other)
        if angle is None:
            raise TypeError(f"Cannot compare Angle with {type(other).__name__}")
        return compare_with_tolerance(
            self.radians, angle.radians, combined_tolerance(self, angle)
        )

    def __eq__(self, other: object) -> bool:
        angle = self._as_angle(other)
        if angle is None:
            return NotImplemented
        return is_equal(self.radians, angle.radians, combined_tolerance(self, angle))

    def __hash__(self) -> int:
        # По точному нормализованному углу; равные в пределах допуска углы могут различаться
        return hash(self.radians)

    def __lt__(self, other: Any) -> bool:
        if self._as_angle(other) is None:
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if self._as_angle(other) is None:
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if self._as_angle(other) is None:
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if self._as_angle(other) is None:
            return NotImplemented
        return self.compare_to(other) >= 0

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Angle":
        angle = self._as_angle(other)
        if angle is None:
            return NotImplemented
        return Angle(self.radians + angle.radians, combined_tolerance(self, angle))

    def __radd__(self, other: Any) -> "Angle":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Angle":
        angle = self._as_angle(other)
        if angle is None:
            return NotImplemented
        return Angle(self.radians - angle.radians, combined_tolerance(self, angle))

    def __rsub__(self, other: Any) -> "Angle":
        angle = self._as_angle(other)
        if angle is None:
            return NotImplemented
        return Angle(angle.radians - self.radians, combined_tolerance(self, angle))

    def __mul__(self, other: Any) -> "Angle":
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Angle(self.radians * other, self.tolerance)

    def __rmul__(self, other: Any) -> "Angle":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Angle":
        if not isinstance(other, (int, float)):
            return NotImplemented
        if other == 0:
            raise DivideByZeroError(f"Cannot divide Angle({self.radians}) by zero")
        return Angle(self.radians / other, self.tolerance)

    def __rtruediv__(self, other: Any) -> "Angle":
        if not isinstance(other, (int, float)):
            return NotImplemented
        if self.radians == 0:
            raise DivideByZeroError(f"Cannot divide {other} by a zero Angle")
        return Angle(other / self.radians, self.tolerance)

    def __neg__(self) -> "Angle":
        return Angle(-self.radians, self.tolerance)


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalize(radians: Number, tolerance: float = ZERO_TOLERANCE) -> Angle:
    """
    Нормализация произвольного угла в (-π, π].

    Эквивалентно конструктору Angle; результат идемпотентен:
    normalize(normalize(r).radians) == normalize(r).

    Examples:
        >>> normalize(10.995574).radians
        -1.5707963...
    """
    return Angle(radians, tolerance)
