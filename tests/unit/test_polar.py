"""
Тесты для модели PolarCoordinate

Проверяет:
1. Конверсию в декартовы координаты
2. Операции с азимутом и радиусом
3. Равенство с полярными и декартовыми точками
4. Деление на ноль
"""

import math

import pytest

from geokernel.core.domain import Angle, CartesianCoordinate, PolarCoordinate
from geokernel.core.exceptions import DivideByZeroError


class TestPolarConversion:
    """Тесты для to_cartesian"""

    def test_to_cartesian(self) -> None:
        """(2√2, π/4) → (2, 2)"""
        cartesian = PolarCoordinate(2.828427125, math.pi / 4).to_cartesian()
        assert cartesian.x == pytest.approx(2.0, abs=1e-6)
        assert cartesian.y == pytest.approx(2.0, abs=1e-6)

    def test_azimuth_accepts_angle_or_radians(self) -> None:
        """Азимут задаётся как Angle или как радианы"""
        from_radians = PolarCoordinate(1.0, math.pi / 2)
        from_angle = PolarCoordinate(1.0, Angle(math.pi / 2))
        assert from_radians == from_angle
        assert isinstance(from_radians.azimuth, Angle)

    def test_round_trip_through_cartesian(self) -> None:
        """polar → cartesian → polar"""
        polar = PolarCoordinate(3.0, -2.0, tolerance=1e-9)
        assert polar.to_cartesian().to_polar() == polar


class TestPolarOperations:
    """Тесты для операций с азимутом и радиусом"""

    @pytest.fixture
    def polar(self) -> PolarCoordinate:
        """Точка (2, π/4)"""
        return PolarCoordinate(2.0, math.pi / 4, tolerance=1e-9)

    def test_azimuth_radians(self, polar: PolarCoordinate) -> None:
        """Сложение и вычитание азимута в радианах"""
        assert polar.add_to_azimuth_radians(math.pi / 4).azimuth.radians == pytest.approx(
            math.pi / 2
        )
        assert polar.subtract_from_azimuth_radians(math.pi / 2).azimuth.radians == pytest.approx(
            -math.pi / 4
        )

    def test_azimuth_degrees(self, polar: PolarCoordinate) -> None:
        """Сложение и вычитание азимута в градусах"""
        assert polar.add_to_azimuth_degrees(45).azimuth.degrees == pytest.approx(90.0)
        assert polar.subtract_from_azimuth_degrees(90).azimuth.degrees == pytest.approx(-45.0)

    def test_azimuth_scaling(self, polar: PolarCoordinate) -> None:
        """Умножение и деление азимута"""
        assert polar.multiply_azimuth_by(2).azimuth.radians == pytest.approx(math.pi / 2)
        assert polar.divide_azimuth_by(2).azimuth.radians == pytest.approx(math.pi / 8)

    def test_radius_operations(self, polar: PolarCoordinate) -> None:
        """Операции с радиусом"""
        assert polar.add_to_radius(1.5).radius == 3.5
        assert polar.subtract_from_radius(0.5).radius == 1.5
        assert polar.multiply_radius_by(3).radius == 6.0
        assert polar.divide_radius_by(4).radius == 0.5

    def test_operators_scale_radius(self, polar: PolarCoordinate) -> None:
        """* и / масштабируют радиус"""
        assert (polar * 2).radius == 4.0
        assert (2 * polar).radius == 4.0
        assert (polar / 2).radius == 1.0
        assert (polar * 2).azimuth == polar.azimuth

    def test_divide_by_zero(self, polar: PolarCoordinate) -> None:
        """Деление радиуса или азимута на ноль → DivideByZeroError"""
        with pytest.raises(DivideByZeroError):
            polar.divide_radius_by(0)
        with pytest.raises(DivideByZeroError):
            polar.divide_azimuth_by(0)
        with pytest.raises(DivideByZeroError):
            polar / 0


class TestPolarEquality:
    """Тесты для равенства"""

    def test_polar_equality(self) -> None:
        """Радиус и азимут в пределах допуска"""
        assert PolarCoordinate(1.0, 0.5, 1e-6) == PolarCoordinate(1.0, 0.5 + 2 * math.pi, 1e-6)
        assert PolarCoordinate(1.0, 0.5) != PolarCoordinate(1.1, 0.5)

    def test_equality_with_cartesian(self) -> None:
        """Декартова точка сравнивается после конверсии"""
        polar = PolarCoordinate(1.0, math.pi, tolerance=1e-9)
        assert polar == CartesianCoordinate(-1.0, 0.0, tolerance=1e-9)

    def test_hash_matches_cartesian_conversion(self) -> None:
        """Полярная точка и её декартова конверсия: равны и совпадают по hash"""
        polar = PolarCoordinate(2.5, 0.75)
        cartesian = polar.to_cartesian()
        assert polar == cartesian
        assert hash(polar) == hash(cartesian)
        assert len({polar, cartesian}) == 1
