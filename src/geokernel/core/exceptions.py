"""
Exceptions — Таксономия ошибок геометрического ядра

Ядро является чистой вычислительной библиотекой: ошибки поднимаются в точке
обнаружения и передаются вызывающему коду без восстановления или повторов.

Категории:
- Invalid-operation: деление значения (Angle, CartesianCoordinate,
  CartesianOffset, PolarCoordinate) на ноль
- Degenerate-geometry: нарушено геометрическое предусловие конкретного
  вычисления (концентрические окружности, совпадающие опорные точки
  преобразования, прямая нулевой длины)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не возвращает inf/NaN — всегда DivideByZeroError
2. Классификация (are_tangent / are_intersecting) никогда не поднимает ошибок
3. Ошибки пар кривых содержат обе кривые для диагностики
"""

from typing import Any, Optional


# =============================================================================
# БАЗОВЫЕ ОШИБКИ
# =============================================================================


class GeometryError(Exception):
    """Базовая ошибка геометрического ядра."""
    pass


class DivideByZeroError(GeometryError, ZeroDivisionError):
    """
    Деление геометрического значения на ноль.

    Наследует ZeroDivisionError, поэтому стандартная обработка
    `except ZeroDivisionError` продолжает работать.
    """
    pass


class DegenerateGeometryError(GeometryError, ValueError):
    """
    Вырожденная геометрическая конфигурация.

    Например: наклон прямой, у которой обе контрольные точки совпадают.
    """
    pass


class DegenerateTransformationError(DegenerateGeometryError):
    """Опорные точки локальной системы координат совпадают (направление оси X не определено)."""
    pass


# =============================================================================
# ОШИБКИ ПАР КРИВЫХ
# =============================================================================


class CurveIntersectionError(DegenerateGeometryError):
    """
    Ошибка вычисления пересечения пары кривых.

    Attributes:
        curve1: Первая кривая пары (если известна)
        curve2: Вторая кривая пары (если известна)
    """

    def __init__(
        self, message: str, curve1: Optional[Any] = None, curve2: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.curve1 = curve1
        self.curve2 = curve2


class OverlappingCurvesError(CurveIntersectionError):
    """Кривые совпадают или концентричны, точки пересечения не определены."""
    pass


class NonIntersectingCurvesError(CurveIntersectionError):
    """Запрошена величина, определённая только для пересекающихся кривых."""
    pass
