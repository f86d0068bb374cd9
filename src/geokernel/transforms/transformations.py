"""
Transformations — Глобальная ↔ локальная система координат

Локальная система задаётся двумя опорными точками:
- local_origin: начало локальной системы
- local_axis_x_pt: точка на положительной локальной оси X

Преобразование = поворот на угол rotation + перенос на displacement. Используется
алгоритмами пересечений, чтобы перевести одну кривую в начало координат и/или
выровнять её с осью X.

ФОРМУЛЫ:
    to_local(g)  = rotate(g - origin, -θ)
    to_global(l) = rotate(l, θ) + origin
    θ = atan2(axis.y - origin.y, axis.x - origin.x)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Совпадающие опорные точки → DegenerateTransformationError (не молчаливый default)
2. transform_to_global(transform_to_local(p)) ≈ p
3. Экземпляр неизменяем после создания
"""

from geokernel.core.domain.angle import Angle
from geokernel.core.domain.cartesian import CartesianCoordinate, CartesianOffset
from geokernel.core.exceptions import DegenerateTransformationError
from geokernel.core.math.tolerance import combined_tolerance
from geokernel.logging_utils import get_logger

log = get_logger(__name__)


class Transformations:
    """
    Поворот + перенос между глобальной и локальной системами координат.

    Examples:
        >>> transform = Transformations(CartesianCoordinate(3, 2), CartesianCoordinate(4, 2))
        >>> transform.transform_to_local(CartesianCoordinate(4, 6))
        CartesianCoordinate(x=1.0, y=4.0, tolerance=1e-20)
    """

    def __init__(
        self, local_origin: CartesianCoordinate, local_axis_x_pt: CartesianCoordinate
    ) -> None:
        """
        Args:
            local_origin: Начало локальной системы (в глобальных координатах)
            local_axis_x_pt: Точка на положительной локальной оси X

        Raises:
            DegenerateTransformationError: если опорные точки совпадают
        """
        if local_origin == local_axis_x_pt:
            log.debug(
                "Degenerate transformation: origin %s coincides with axis point %s",
                local_origin,
                local_axis_x_pt,
            )
            raise DegenerateTransformationError(
                f"Local origin ({local_origin.x}, {local_origin.y}) and local x-axis point "
                f"({local_axis_x_pt.x}, {local_axis_x_pt.y}) coincide: direction is undefined"
            )

        self._local_origin = local_origin
        self._local_axis_x_pt = local_axis_x_pt
        self._tolerance = combined_tolerance(local_origin, local_axis_x_pt)
        self._rotation = Angle.from_components(
            local_axis_x_pt.x - local_origin.x,
            local_axis_x_pt.y - local_origin.y,
            self._tolerance,
        )
        # cos/sin поворота, общие для всех преобразований экземпляра
        self._cos = self._rotation.cos()
        self._sin = self._rotation.sin()

    @property
    def local_origin(self) -> CartesianCoordinate:
        return self._local_origin

    @property
    def local_axis_x_pt(self) -> CartesianCoordinate:
        return self._local_axis_x_pt

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def rotation(self) -> Angle:
        """Угол между глобальной осью X и локальной осью X."""
        return self._rotation

    @property
    def displacement(self) -> CartesianOffset:
        """Смещение от глобального начала координат к локальному."""
        return self._local_origin.offset_from(CartesianCoordinate.origin(self._tolerance))

    def transform_to_local(self, coordinate: CartesianCoordinate) -> CartesianCoordinate:
        """
        Глобальная точка → локальная система.

        Args:
            coordinate: Точка в глобальных координатах

        Returns:
            Точка в локальных координатах (допуск сохраняется)
        """
        dx = coordinate.x - self._local_origin.x
        dy = coordinate.y - self._local_origin.y
        return CartesianCoordinate(
            dx * self._cos + dy * self._sin,
            -dx * self._sin + dy * self._cos,
            coordinate.tolerance,
        )

    def transform_to_global(self, coordinate: CartesianCoordinate) -> CartesianCoordinate:
        """
        Локальная точка → глобальная система.

        Args:
            coordinate: Точка в локальных координатах

        Returns:
            Точка в глобальных координатах (допуск сохраняется)
        """
        return CartesianCoordinate(
            coordinate.x * self._cos - coordinate.y * self._sin + self._local_origin.x,
            coordinate.x * self._sin + coordinate.y * self._cos + self._local_origin.y,
            coordinate.tolerance,
        )

    def __repr__(self) -> str:
        return (
            f"Transformations(local_origin=({self._local_origin.x}, {self._local_origin.y}), "
            f"rotation={self._rotation.radians})"
        )
