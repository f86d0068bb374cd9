"""
Тесты для LinearCircularIntersection

Проверяет:
1. Секущие прямые (две точки, порядок ветвей)
2. Касательные прямые (одна точка)
3. Непересекающиеся прямые
4. Окружность со смещённым центром
5. Вырожденную прямую нулевой длины
"""

import math

import pytest

from geokernel.core.domain import CartesianCoordinate
from geokernel.core.exceptions import DegenerateGeometryError
from geokernel.curves import CircularCurve, LinearCurve
from geokernel.intersections import LinearCircularIntersection


def line(x1: float, y1: float, x2: float, y2: float, tolerance: float = 1e-20) -> LinearCurve:
    return LinearCurve(CartesianCoordinate(x1, y1), CartesianCoordinate(x2, y2), tolerance)


def assert_point(point: CartesianCoordinate, x: float, y: float) -> None:
    assert point.x == pytest.approx(x, abs=1e-6)
    assert point.y == pytest.approx(y, abs=1e-6)


# =============================================================================
# SECANTS
# =============================================================================


class TestSecantLines:
    """Тесты для прямых, пересекающих окружность r=6 в двух точках"""

    @pytest.fixture
    def circle(self) -> CircularCurve:
        """Окружность r=6 с центром в начале координат"""
        return CircularCurve(6.0)

    def test_vertical_line(self, circle: CircularCurve) -> None:
        """x = 0 → (0, 6), затем (0, -6)"""
        intersection = LinearCircularIntersection(line(0, -10, 0, 10), circle)
        assert intersection.are_intersecting()
        assert not intersection.are_tangent()

        points = intersection.intersection_coordinates()
        assert len(points) == 2
        assert_point(points[0], 0.0, 6.0)
        assert_point(points[1], 0.0, -6.0)

    def test_horizontal_line(self, circle: CircularCurve) -> None:
        """y = 0 → (6, 0), затем (-6, 0) (sgn(0) = +1)"""
        points = LinearCircularIntersection(line(-10, 0, 10, 0), circle).intersection_coordinates()
        assert_point(points[0], 6.0, 0.0)
        assert_point(points[1], -6.0, 0.0)

    def test_diagonal_through_center(self, circle: CircularCurve) -> None:
        """(-6,6)-(6,-6)"""
        points = LinearCircularIntersection(line(-6, 6, 6, -6), circle).intersection_coordinates()
        assert_point(points[0], -4.242641, 4.242641)
        assert_point(points[1], 4.242641, -4.242641)

    def test_horizontal_chord(self, circle: CircularCurve) -> None:
        """(10,3)-(-10,3)"""
        points = LinearCircularIntersection(line(10, 3, -10, 3), circle).intersection_coordinates()
        assert_point(points[0], -5.196152, 3.0)
        assert_point(points[1], 5.196152, 3.0)

    def test_oblique_chord(self, circle: CircularCurve) -> None:
        """(0,7)-(7,0)"""
        points = LinearCircularIntersection(line(0, 7, 7, 0), circle).intersection_coordinates()
        assert_point(points[0], 1.102084, 5.897916)
        assert_point(points[1], 5.897916, 1.102084)

    def test_coarse_tolerance(self) -> None:
        """Допуск больше единицы не делает локальную систему вырожденной"""
        tolerance = 2.0
        chord = line(-5, 1, 5, 1, tolerance=tolerance)
        coarse_circle = CircularCurve(3.0, CartesianCoordinate(0, 0, tolerance), tolerance)
        intersection = LinearCircularIntersection(chord, coarse_circle)
        assert intersection.are_intersecting()
        assert not intersection.are_tangent()

        points = intersection.intersection_coordinates()
        assert len(points) == 2
        assert_point(points[0], 2.828427, 1.0)
        assert_point(points[1], -2.828427, 1.0)

    def test_points_lie_on_both_curves(self, circle: CircularCurve) -> None:
        """Найденные точки принадлежат прямой и окружности"""
        chord = line(-3, -8, 5, 4, tolerance=1e-9)
        loose_circle = CircularCurve(6.0, tolerance=1e-9)
        for point in LinearCircularIntersection(chord, loose_circle).intersection_coordinates():
            assert chord.is_intersecting_coordinate(point)
            assert loose_circle.is_intersecting_coordinate(point)


# =============================================================================
# TANGENTS
# =============================================================================


class TestTangentLines:
    """Тесты для касательных"""

    def test_unit_circle_tangent(self) -> None:
        """Окружность r=1, прямая y = 1 → одна точка (0, 1)"""
        intersection = LinearCircularIntersection(line(-1, 1, 1, 1), CircularCurve(1.0))
        assert intersection.are_tangent()
        assert intersection.are_intersecting()
        assert intersection.discriminant() == 0

        points = intersection.intersection_coordinates()
        assert len(points) == 1
        assert_point(points[0], 0.0, 1.0)

    def test_vertical_tangent(self) -> None:
        """x = 6 касается окружности r=6 в (6, 0)"""
        points = LinearCircularIntersection(
            line(6, -5, 6, 5), CircularCurve(6.0)
        ).intersection_coordinates()
        assert len(points) == 1
        assert_point(points[0], 6.0, 0.0)

    def test_oblique_tangent_on_translated_circle(self) -> None:
        """Касательная под 45° к окружности с центром (5, 6)"""
        tolerance = 1e-5
        offset = 6 / math.sqrt(2)
        center = CartesianCoordinate(5, 6, tolerance)
        tangent = LinearCurve(
            CartesianCoordinate(5 + offset + 3, 6 + offset - 3, tolerance),
            CartesianCoordinate(5 + offset - 3, 6 + offset + 3, tolerance),
            tolerance,
        )
        intersection = LinearCircularIntersection(tangent, CircularCurve(6.0, center, tolerance))
        assert intersection.are_tangent()

        points = intersection.intersection_coordinates()
        assert len(points) == 1
        assert_point(points[0], 9.242641, 10.242641)


# =============================================================================
# MISSES AND DEGENERATE INPUT
# =============================================================================


class TestNonIntersectingLines:
    """Тесты для прямых вне окружности и вырожденных прямых"""

    def test_line_outside_circle(self) -> None:
        """y = 7 не пересекает окружность r=6"""
        intersection = LinearCircularIntersection(line(-10, 7, 10, 7), CircularCurve(6.0))
        assert not intersection.are_intersecting()
        assert not intersection.are_tangent()
        assert intersection.discriminant() < 0
        assert intersection.intersection_coordinates() == []

    def test_translated_circle(self) -> None:
        """Вертикаль через центр (5, 6) окружности r=6"""
        points = LinearCircularIntersection(
            line(5, 0, 5, 20), CircularCurve(6.0, CartesianCoordinate(5, 6))
        ).intersection_coordinates()
        assert_point(points[0], 5.0, 12.0)
        assert_point(points[1], 5.0, 0.0)

    def test_zero_length_line_raises(self) -> None:
        """Прямая нулевой длины → DegenerateGeometryError"""
        intersection = LinearCircularIntersection(line(1, 1, 1, 1), CircularCurve(6.0))
        with pytest.raises(DegenerateGeometryError, match="zero length"):
            intersection.intersection_coordinates()

    def test_zero_length_line_is_not_classified(self) -> None:
        """Прямая нулевой длины не касается и не пересекает окружность"""
        for point in [(1, 1), (6, 0), (0, 0)]:
            intersection = LinearCircularIntersection(
                line(point[0], point[1], point[0], point[1]), CircularCurve(6.0)
            )
            assert not intersection.are_tangent()
            assert not intersection.are_intersecting()

    def test_determinant(self) -> None:
        """D = cross(p1, p2) в локальной системе окружности"""
        intersection = LinearCircularIntersection(line(10, 3, -10, 3), CircularCurve(6.0))
        assert intersection.determinant() == pytest.approx(60.0)
        assert intersection.discriminant() == pytest.approx(10800.0)
