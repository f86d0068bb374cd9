"""
Angles — Angle Normalization & Unit Conversion

Скалярное ядро угловых вычислений, на котором построен тип Angle:
- Конверсия градусы ↔ радианы
- Нормализация в [0, 2π) и в (-π, π]
- Направление точки относительно начала координат

Нормализация в [0, 2π):
    revolutions = floor(round(radians / 2π, precision))
    wrapped = radians - revolutions · 2π
где precision = max(decimal_places(radians), ROUNDING_PRECISION_MIN). Округление
частного убирает остаточную ошибку деления для значений, записанных с меньшим
числом знаков, чем полный оборот (например, 6.2831853 трактуется как 2π).
Для очень больших углов, где округлённое число оборотов не представимо точно,
остаток берётся через math.fmod.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. ±inf нормализуются в +inf (sentinel "направление не определено"), не ошибка
2. Значения уже в (-π, π] возвращаются без изменений (идемпотентность)
3. Результат wrap_angle_within_positive_negative_pi лежит в (-π, π]
4. radians_to_degrees(degrees_to_radians(d)) ≈ d
"""

import math
from typing import Final

from geokernel.core.math.tolerance import (
    ZERO_TOLERANCE,
    decimal_places,
    is_zero,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Полный оборот в радианах
TWO_PI: Final[float] = 2.0 * math.pi

# Минимальная точность округления числа оборотов при нормализации
ROUNDING_PRECISION_MIN: Final[int] = 6

# Предел revolutions · 10^precision, точно представимого в float (2^53);
# выше него остаток вычисляется через fmod
REVOLUTIONS_EXACT_MAX: Final[float] = 2.0 ** 53


# =============================================================================
# КОНВЕРСИЯ ЕДИНИЦ
# =============================================================================


def degrees_to_radians(degrees: float) -> float:
    """
    Конверсия градусов в радианы.

    Examples:
        >>> degrees_to_radians(180.0)
        3.141592653589793
    """
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    """
    Конверсия радиан в градусы.

    Examples:
        >>> radians_to_degrees(math.pi / 2)
        90.0
    """
    return radians * 180.0 / math.pi


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def wrap_angle_within_two_pi(radians: float, tolerance: float = ZERO_TOLERANCE) -> float:
    """
    Нормализация угла в [0, 2π).

    Args:
        radians: Исходный угол (любой)
        tolerance: Допуск для привязки результата к нулю

    Returns:
        Угол в [0, 2π); +inf для ±inf. Значения на волосок меньше полного оборота
        могут дать крошечный отрицательный остаток, эквивалентный 0.

    Examples:
        >>> wrap_angle_within_two_pi(-0.5)
        5.783185307179586
        >>> wrap_angle_within_two_pi(math.inf)
        inf
    """
    if math.isinf(radians):
        return math.inf
    if math.isnan(radians):
        return radians

    precision = max(decimal_places(radians), ROUNDING_PRECISION_MIN)
    revolutions = radians / TWO_PI
    if abs(revolutions) * 10 ** precision < REVOLUTIONS_EXACT_MAX:
        wrapped = radians - math.floor(round(revolutions, precision)) * TWO_PI
    else:
        wrapped = math.fmod(radians, TWO_PI)
        if wrapped < 0:
            wrapped += TWO_PI
        if wrapped >= TWO_PI:
            wrapped = 0.0

    if is_zero(wrapped, tolerance):
        return 0.0
    return wrapped


def wrap_angle_within_positive_negative_pi(
    radians: float, tolerance: float = ZERO_TOLERANCE
) -> float:
    """
    Нормализация угла в (-π, π].

    Сначала угол приводится к [0, 2π), затем значения больше π отражаются
    вычитанием полного оборота.

    Args:
        radians: Исходный угол (любой)
        tolerance: Допуск для привязки результата к нулю

    Returns:
        Угол в (-π, π]; +inf для ±inf

    Examples:
        >>> wrap_angle_within_positive_negative_pi(3.926991)
        -2.356194307179586
        >>> wrap_angle_within_positive_negative_pi(-math.pi)
        3.141592653589793
    """
    if math.isinf(radians):
        return math.inf
    if -math.pi < radians <= math.pi:
        return 0.0 if is_zero(radians, tolerance) else radians

    wrapped = wrap_angle_within_two_pi(radians, tolerance)
    if wrapped > math.pi:
        wrapped -= TWO_PI
    return wrapped


# =============================================================================
# НАПРАВЛЕНИЕ ТОЧКИ
# =============================================================================


def as_radians(x: float, y: float) -> float:
    """
    Направление точки (x, y) от начала координат, в [0, 2π).

    Examples:
        >>> as_radians(0.0, 1.0)
        1.5707963267948966
        >>> as_radians(0.0, -1.0)
        4.71238898038469
    """
    return wrap_angle_within_two_pi(math.atan2(y, x))


def as_degrees(x: float, y: float) -> float:
    """Направление точки (x, y) от начала координат в градусах, в [0, 360)."""
    return radians_to_degrees(as_radians(x, y))
