"""Фикстуры pytest для тестирования delayed-writer."""

from __future__ import annotations

import pytest

from delayed_writer import DelayedWriter
from delayed_writer.adapters import MemoryLineReader, MemoryWriter


class FailingWriter(MemoryWriter):
    """Приемник, отказывающий на записи с заданным номером."""

    def __init__(self, fail_on: int, error: Exception | None = None) -> None:
        super().__init__()
        self.fail_on = fail_on
        self.error = error or OSError("sink closed")
        self.calls = 0

    async def write(self, data: bytes) -> int:
        self.calls += 1
        if self.calls == self.fail_on:
            raise self.error
        return await super().write(data)


@pytest.fixture
def memory_writer() -> MemoryWriter:
    """Создает пустой MemoryWriter."""
    return MemoryWriter()


@pytest.fixture
def line_reader() -> MemoryLineReader:
    """Создает MemoryLineReader без строк."""
    return MemoryLineReader()


@pytest.fixture
def delayed_writer(
    memory_writer: MemoryWriter, line_reader: MemoryLineReader
) -> DelayedWriter:
    """Создает DelayedWriter с memory адаптерами и коротким интервалом."""
    return DelayedWriter(reader=line_reader, writer=memory_writer, interval=10)


@pytest.fixture
def failing_writer() -> FailingWriter:
    """Создает приемник, отказывающий на второй записи."""
    return FailingWriter(fail_on=2)
