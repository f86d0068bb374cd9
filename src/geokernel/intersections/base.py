"""
CurveIntersection — Базовый класс пересечения пары кривых

Каждая пара типов кривых (прямая/прямая, прямая/окружность,
окружность/окружность) реализует один и тот же набор возможностей:
- are_tangent(): кривые касаются (касание без пересечения)
- are_intersecting(): кривые пересекаются
- intersection_coordinates(): 0, 1 или 2 точки пересечения

Класс выбирается вызывающим кодом по статическим типам кривых, runtime
диспетчеризация по типам не выполняется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. tolerance == min(curve1.tolerance, curve2.tolerance)
2. are_tangent / are_intersecting не поднимают ошибок для корректных кривых
3. Ошибки поднимает только intersection_coordinates при вырожденной конфигурации
"""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from geokernel.core.domain.cartesian import CartesianCoordinate
from geokernel.core.math.tolerance import combined_tolerance

T1 = TypeVar("T1")
T2 = TypeVar("T2")


class CurveIntersection(ABC, Generic[T1, T2]):
    """Пересечение двух кривых; экземпляр неизменяем и создаётся на один запрос."""

    def __init__(self, curve1: T1, curve2: T2) -> None:
        self._curve1 = curve1
        self._curve2 = curve2
        self._tolerance = combined_tolerance(curve1, curve2)

    @property
    def curve1(self) -> T1:
        return self._curve1

    @property
    def curve2(self) -> T2:
        return self._curve2

    @property
    def tolerance(self) -> float:
        """Общий допуск пары кривых (минимальный)."""
        return self._tolerance

    @abstractmethod
    def are_tangent(self) -> bool:
        """Кривые касаются."""

    @abstractmethod
    def are_intersecting(self) -> bool:
        """Кривые пересекаются."""

    @abstractmethod
    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        """Точки пересечения (0, 1 или 2)."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(curve1={self._curve1!r}, curve2={self._curve2!r})"
