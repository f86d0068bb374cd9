"""
Tolerance Model — Tolerance-aware Scalar Comparisons

Модель допусков для всего геометрического ядра:
- Абсолютный допуск (tolerance) хранится рядом с каждым геометрическим значением
- При взаимодействии двух значений используется минимальный из допусков
- Сравнения float (равенство, порядок, ноль) всегда учитывают допуск
- Вспомогательные функции для числа десятичных знаков и знака

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. combined_tolerance(a, b) == min(a.tolerance, b.tolerance) (строгий допуск побеждает)
2. +inf равно +inf, -inf равно -inf при любом допуске
3. Сравнения используют строгое неравенство: |a - b| < |tolerance|
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import Decimal
from typing import Final, Protocol


# =============================================================================
# ПАРАМЕТРЫ ДОПУСКОВ
# =============================================================================

# Допуск по умолчанию для всех конструкторов и сравнений библиотеки
# Вызывающий код, которому нужно более грубое равенство, передаёт допуск явно
ZERO_TOLERANCE: Final[float] = 1e-20

# Максимальное число десятичных знаков (ограничение точности double для округления)
DECIMAL_PLACES_MAX: Final[int] = 15


class Tolerant(Protocol):
    """Любое значение, несущее абсолютный допуск."""

    @property
    def tolerance(self) -> float: ...


# =============================================================================
# КОМБИНИРОВАНИЕ ДОПУСКОВ
# =============================================================================


def min_tolerance(tolerance1: float, tolerance2: float) -> float:
    """
    Минимальный из двух допусков.

    Args:
        tolerance1: Допуск первого операнда
        tolerance2: Допуск второго операнда

    Returns:
        min(|tolerance1|, |tolerance2|)
    """
    return min(abs(tolerance1), abs(tolerance2))


def combined_tolerance(a: Tolerant, b: Tolerant) -> float:
    """
    Эффективный допуск при взаимодействии двух значений.

    Используется каждым бинарным оператором и проверкой равенства ядра.

    Examples:
        >>> combined_tolerance(CartesianCoordinate(0, 0, 1e-3), CartesianCoordinate(1, 1, 1e-6))
        1e-06
    """
    return min_tolerance(a.tolerance, b.tolerance)


def validate_tolerance(value: float) -> float:
    """
    Валидация допуска.

    Raises:
        ValueError: если допуск отрицательный или NaN
    """
    if math.isnan(value):
        raise ValueError("tolerance must not be NaN")
    if value < 0:
        raise ValueError(f"tolerance must be non-negative, got {value}")
    return value


# =============================================================================
# СРАВНЕНИЯ С ДОПУСКОМ
# =============================================================================


def is_zero(value: float, tolerance: float = ZERO_TOLERANCE) -> bool:
    """
    Проверка на ноль с допуском.

    Examples:
        >>> is_zero(1e-9, 1e-6)
        True
        >>> is_zero(0.0)
        True
        >>> is_zero(1e-9)
        False
    """
    return abs(value) < abs(tolerance)


def is_equal(a: float, b: float, tolerance: float = ZERO_TOLERANCE) -> bool:
    """
    Равенство двух float с абсолютным допуском.

    Бесконечности одного знака считаются равными (используются как
    sentinel "направление не определено").

    Args:
        a: Первое значение
        b: Второе значение
        tolerance: Абсолютный допуск (default: ZERO_TOLERANCE)

    Returns:
        True если |a - b| < |tolerance| или обе бесконечности одного знака
    """
    if math.isinf(a) and math.isinf(b):
        return (a > 0) == (b > 0)
    return abs(a - b) < abs(tolerance)


def is_greater_than(a: float, b: float, tolerance: float = ZERO_TOLERANCE) -> bool:
    """a > b с учётом допуска (разница должна превышать допуск)."""
    if is_equal(a, b, tolerance):
        return False
    return (a - b) > abs(tolerance)


def is_less_than(a: float, b: float, tolerance: float = ZERO_TOLERANCE) -> bool:
    """a < b с учётом допуска."""
    if is_equal(a, b, tolerance):
        return False
    return (b - a) > abs(tolerance)


def is_greater_than_or_equal(a: float, b: float, tolerance: float = ZERO_TOLERANCE) -> bool:
    """a >= b с учётом допуска."""
    return is_equal(a, b, tolerance) or is_greater_than(a, b, tolerance)


def is_less_than_or_equal(a: float, b: float, tolerance: float = ZERO_TOLERANCE) -> bool:
    """a <= b с учётом допуска."""
    return is_equal(a, b, tolerance) or is_less_than(a, b, tolerance)


def compare_with_tolerance(a: float, b: float, tolerance: float = ZERO_TOLERANCE) -> int:
    """
    Трёхстороннее сравнение с допуском.

    Args:
        a: Первое значение
        b: Второе значение
        tolerance: Абсолютный допуск

    Returns:
        0 если a ≈ b в пределах допуска, иначе знак (a - b): -1 или 1

    Examples:
        >>> compare_with_tolerance(1.0, 1.0 + 1e-9, 1e-6)
        0
        >>> compare_with_tolerance(1.0, 2.0)
        -1
    """
    if is_equal(a, b, tolerance):
        return 0
    return 1 if a > b else -1


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def snap_to_zero(value: float, tolerance: float = ZERO_TOLERANCE) -> float:
    """Точный 0.0, если значение равно нулю в пределах допуска."""
    return 0.0 if is_zero(value, tolerance) else value


def sign_nonzero(value: float) -> float:
    """
    Знак без нулевой ветви: sgn(0) = +1.

    Examples:
        >>> sign_nonzero(0.0)
        1.0
        >>> sign_nonzero(-3.0)
        -1.0
    """
    return -1.0 if value < 0 else 1.0


def decimal_places(value: float) -> int:
    """
    Число десятичных знаков в кратчайшем round-trip представлении float.

    Результат ограничен диапазоном [0, DECIMAL_PLACES_MAX], пригодным для round().

    Examples:
        >>> decimal_places(6.2831853)
        7
        >>> decimal_places(-1.2345e-7)
        11
        >>> decimal_places(42.0)
        0
    """
    if not math.isfinite(value):
        return 0
    exponent = Decimal(repr(value)).normalize().as_tuple().exponent
    if not isinstance(exponent, int) or exponent >= 0:
        return 0
    return min(-exponent, DECIMAL_PLACES_MAX)
