"""Тесты для логирования delayed-writer."""

from __future__ import annotations

import logging
from io import StringIO

import pytest

from delayed_writer import DelayedWriter
from delayed_writer.adapters import MemoryLineReader, MemoryWriter
from delayed_writer.logging import get_logger, setup_logging


@pytest.fixture
def package_logger():
    """Сохраняет и восстанавливает настройки логгера delayed_writer."""
    logger = logging.getLogger("delayed_writer")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestLogging:
    """Тесты для логирования."""

    def test_get_logger(self) -> None:
        """Тест создания логгера."""
        logger = get_logger("wait(50)")
        assert logger.logger.name == "delayed_writer"
        assert logger.extra == {"operation": "wait(50)"}

    def test_get_logger_without_operation(self) -> None:
        """Тест создания логгера без описания операции."""
        logger = get_logger()
        assert logger.logger.name == "delayed_writer"
        assert logger.extra == {"operation": "core"}

    def test_call_extra_is_merged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Тест: поля extra вызова сохраняются вместе с полем operation."""
        with caplog.at_level(logging.INFO, logger="delayed_writer"):
            get_logger("wait(10)").info("Message", extra={"index": 3})

        record = caplog.records[-1]
        assert record.operation == "wait(10)"
        assert record.index == 3

    @pytest.mark.asyncio
    async def test_operation_records_carry_index(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Тест: записи об операциях содержат номер операции."""
        delayed = DelayedWriter(reader=MemoryLineReader(), writer=MemoryWriter())

        with caplog.at_level(logging.DEBUG, logger="delayed_writer"):
            await delayed.wait(0).write("a", 0).do()

        started = [
            record for record in caplog.records
            if record.getMessage() == "Starting operation"
        ]
        assert [(r.operation, r.index) for r in started] == [
            ("wait(0)", 0),
            ("emit('a')", 1),
        ]

    def test_setup_logging(self, package_logger: logging.Logger) -> None:
        """Тест настройки логирования."""
        setup_logging(logging.DEBUG)

        handler = package_logger.handlers[-1]
        assert isinstance(handler, logging.StreamHandler)
        assert package_logger.level == logging.DEBUG
        assert package_logger.propagate is False

        stream = StringIO()
        handler.setStream(stream)
        get_logger("emit('a')").info("Test message")

        assert stream.getvalue() == "[delayed-writer] emit('a'): Test message\n"

    @pytest.mark.asyncio
    async def test_do_logs_execution(self, package_logger: logging.Logger) -> None:
        """Тест логирования выполнения очереди."""
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter("%(operation)s: %(message)s"))
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.DEBUG)

        delayed = DelayedWriter(reader=MemoryLineReader(["x"]), writer=MemoryWriter())
        await delayed.write("a", 0).input().do()

        output = stream.getvalue()
        assert "core: Starting execution of 2 operations" in output
        assert "emit('a'): Starting operation" in output
        assert "request_line(): Starting operation" in output
        assert "core: Execution finished" in output
