"""
Тесты для logging_utils

Проверяет:
1. Иерархию логгеров под пространством имён geokernel
2. configure_logging: уровень, единственный handler, изоляцию от root логгера
3. Диагностику вырожденной геометрии на уровне DEBUG
"""

import logging
from typing import Iterator, List

import pytest

from geokernel.core.domain import CartesianCoordinate
from geokernel.core.exceptions import DegenerateTransformationError
from geokernel.logging_utils import ROOT_LOGGER_NAME, configure_logging, get_logger
from geokernel.transforms import Transformations


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Сохраняет и восстанавливает состояние логгера geokernel"""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(root.handlers)
    level = root.level
    propagate = root.propagate
    yield root
    root.handlers = handlers
    root.setLevel(level)
    root.propagate = propagate


class TestGetLogger:
    """Тесты для get_logger"""

    def test_prefixes_namespace(self) -> None:
        """Имя вне пространства geokernel получает префикс"""
        assert get_logger("custom").name == "geokernel.custom"

    def test_keeps_namespaced_name(self) -> None:
        """Имена модулей пакета не меняются"""
        assert get_logger("geokernel.curves.linear").name == "geokernel.curves.linear"
        assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME

    def test_default_level_inherits(self) -> None:
        """Без явного уровня логгер наследует уровень родителя"""
        assert get_logger("inherits").level == logging.NOTSET

    def test_explicit_level(self) -> None:
        """Уровень задаётся строкой или числом"""
        assert get_logger("explicit_str", "warning").level == logging.WARNING
        assert get_logger("explicit_int", logging.ERROR).level == logging.ERROR

    def test_unknown_level_falls_back(self) -> None:
        """Неизвестное имя уровня → NOTSET"""
        assert get_logger("unknown_level", "LOUD").level == logging.NOTSET


class TestConfigureLogging:
    """Тесты для configure_logging"""

    def test_sets_level_and_isolates(self, root_logger: logging.Logger) -> None:
        """Уровень применяется, propagate отключается"""
        configured = configure_logging("DEBUG")
        assert configured is root_logger
        assert configured.level == logging.DEBUG
        assert configured.propagate is False

    def test_single_stream_handler(self, root_logger: logging.Logger) -> None:
        """Повторная настройка не дублирует handler, NullHandler убирается"""
        configure_logging("INFO")
        configure_logging("WARNING")
        assert not any(isinstance(h, logging.NullHandler) for h in root_logger.handlers)
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], logging.StreamHandler)
        assert root_logger.level == logging.WARNING


class TestDegenerateDiagnostics:
    """Тесты для DEBUG диагностики перед исключением"""

    def test_degenerate_transformation_logged(self, root_logger: logging.Logger) -> None:
        """Вырожденная система координат логируется на уровне DEBUG"""
        handler = _ListHandler()
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.DEBUG)

        with pytest.raises(DegenerateTransformationError):
            Transformations(CartesianCoordinate(1, 1), CartesianCoordinate(1, 1))

        messages = [record.getMessage() for record in handler.records]
        assert any("Degenerate transformation" in message for message in messages)
        assert all(record.levelno == logging.DEBUG for record in handler.records)
