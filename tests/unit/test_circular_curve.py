"""
Тесты для CircularCurve

Проверяет:
1. Метрики окружности (длина, диаметр, площадь, кривизна)
2. Валидацию радиуса
3. Точки на окружности и значения x/y хорд
"""

import math

import pytest
from pydantic import ValidationError

from geokernel.core.domain import CartesianCoordinate
from geokernel.curves import CircularCurve


class TestCircularMetrics:
    """Тесты для метрик окружности"""

    @pytest.fixture
    def circle(self) -> CircularCurve:
        """Окружность r=2 с центром (1,1)"""
        return CircularCurve(2.0, CartesianCoordinate(1, 1))

    def test_metrics(self, circle: CircularCurve) -> None:
        """Длина, диаметр, площадь, кривизна"""
        assert circle.length() == pytest.approx(4 * math.pi)
        assert circle.diameter() == 4.0
        assert circle.area() == pytest.approx(4 * math.pi)
        assert circle.curvature() == 0.5

    def test_zero_radius_curvature(self) -> None:
        """Кривизна точки (r = 0) → +inf"""
        assert CircularCurve(0.0).curvature() == math.inf

    def test_default_center_is_origin(self) -> None:
        """Центр по умолчанию — начало координат"""
        circle = CircularCurve(3.0)
        assert circle.center == CartesianCoordinate.origin()

    def test_local_origin_is_center(self, circle: CircularCurve) -> None:
        """local_origin совпадает с центром"""
        assert circle.local_origin == circle.center


class TestCircularValidation:
    """Тесты для валидации полей"""

    def test_negative_radius_rejected(self) -> None:
        """Отрицательный радиус → ValidationError"""
        with pytest.raises(ValidationError, match="non-negative"):
            CircularCurve(-1.0)

    def test_negative_tolerance_rejected(self) -> None:
        """Отрицательный допуск → ValidationError"""
        with pytest.raises(ValidationError, match="non-negative"):
            CircularCurve(1.0, tolerance=-1e-6)

    def test_frozen(self) -> None:
        """Поля неизменяемы"""
        circle = CircularCurve(1.0)
        with pytest.raises(ValidationError):
            circle.radius = 2.0  # type: ignore[misc]


class TestCircularCoordinates:
    """Тесты для точек на окружности"""

    def test_coordinate_at_angle(self) -> None:
        """Точка в направлении π/2 от центра"""
        point = CircularCurve(2.0, CartesianCoordinate(1, 1)).coordinate_at_angle(math.pi / 2)
        assert point.x == pytest.approx(1.0)
        assert point.y == pytest.approx(3.0)

    def test_is_intersecting_coordinate(self) -> None:
        """Точка на окружности в пределах допуска"""
        circle = CircularCurve(2.0, CartesianCoordinate(1, 1))
        assert circle.is_intersecting_coordinate(CartesianCoordinate(3, 1))
        assert not circle.is_intersecting_coordinate(CartesianCoordinate(3, 1.5))

    def test_ys_at_x(self) -> None:
        """0, 1 или 2 значения y"""
        circle = CircularCurve(5.0)
        assert circle.ys_at_x(3) == [4.0, -4.0]
        assert circle.ys_at_x(5) == [0.0]
        assert circle.ys_at_x(6) == []

    def test_xs_at_y_with_offset_center(self) -> None:
        """Значения x для окружности со смещённым центром"""
        circle = CircularCurve(5.0, CartesianCoordinate(1, 1))
        assert circle.xs_at_y(-2) == [5.0, -3.0]
        assert circle.xs_at_y(6) == [1.0]
        assert circle.xs_at_y(7) == []
