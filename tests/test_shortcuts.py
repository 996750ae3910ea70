"""Тесты для коротких функций wait, write, do_wait, do_write."""

from __future__ import annotations

import asyncio

import pytest

from delayed_writer import CancelSignal, DelayedWriter, do_wait, do_write, wait, write
from delayed_writer.operations import OperationKind


class TestBuilders:
    """Тесты для wait и write."""

    def test_wait(self) -> None:
        """Тест создания очереди с паузой."""
        writer = wait(100)
        assert isinstance(writer, DelayedWriter)
        assert [(op.kind, op.argument) for op in writer.queue] == [
            (OperationKind.WAIT, 100)
        ]
        assert writer.interval == 100

    def test_write(self) -> None:
        """Тест создания очереди с выводом текста."""
        writer = write("ok", 0)
        assert [(op.kind, op.argument) for op in writer.queue] == [
            (OperationKind.EMIT, "ok")
        ]

    def test_each_call_creates_new_writer(self) -> None:
        """Тест: каждый вызов создает новый DelayedWriter."""
        assert wait(1) is not wait(1)


class TestRunners:
    """Тесты для do_wait и do_write."""

    @pytest.mark.asyncio
    async def test_do_write(self, capsysbinary: pytest.CaptureFixture[bytes]) -> None:
        """Тест вывода текста в стандартный вывод."""
        result = await do_write("hi\n", 10)

        assert result is None
        assert capsysbinary.readouterr().out == b"hi\n"

    @pytest.mark.asyncio
    async def test_do_write_cancelled(
        self, capsysbinary: pytest.CaptureFixture[bytes]
    ) -> None:
        """Тест прерывания вывода сигналом."""
        signal = CancelSignal()
        asyncio.get_running_loop().call_later(0.02, signal.cancel)

        await do_write("abcdef", 600, signal)

        assert len(capsysbinary.readouterr().out) < 6

    @pytest.mark.asyncio
    async def test_do_wait(self) -> None:
        """Тест паузы."""
        loop = asyncio.get_running_loop()
        started = loop.time()

        assert await do_wait(20) is None
        assert loop.time() - started >= 0.015

    @pytest.mark.asyncio
    async def test_do_wait_cancelled(self) -> None:
        """Тест прерывания паузы сигналом."""
        loop = asyncio.get_running_loop()
        signal = CancelSignal()
        loop.call_later(0.01, signal.cancel)
        started = loop.time()

        await do_wait(1000, signal)

        assert loop.time() - started < 0.5
