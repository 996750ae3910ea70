"""Тесты для проверки публичного API и импортов."""

from __future__ import annotations

import pytest


class TestPublicAPI:
    """Тесты для проверки публичного API."""

    @pytest.mark.parametrize(
        "name",
        [
            "DelayedWriter",
            "DEFAULT_INTERVAL",
            "DEFAULT_ENCODING",
            "CancelSignal",
            "cancel_after",
            "Operation",
            "OperationKind",
            "OperationOutcome",
            "OperationStatus",
            "wait_operation",
            "emit_operation",
            "request_line_operation",
            "Writer",
            "LineReader",
            "DelayedWriterError",
            "ExecutionInProgressError",
            "wait",
            "write",
            "do_wait",
            "do_write",
            "get_logger",
            "setup_logging",
        ],
    )
    def test_exported(self, name: str) -> None:
        """Тест наличия имени в публичном API."""
        import delayed_writer

        assert name in delayed_writer.__all__
        assert getattr(delayed_writer, name) is not None

    def test_version(self) -> None:
        """Тест наличия версии."""
        from delayed_writer import __version__

        assert __version__ == "0.1.0"

    def test_import_adapters(self) -> None:
        """Тест импорта адаптеров."""
        from delayed_writer.adapters import (
            MemoryLineReader,
            MemoryWriter,
            StdinLineReader,
            StdoutWriter,
        )

        assert MemoryWriter is not None
        assert MemoryLineReader is not None
        assert StdoutWriter is not None
        assert StdinLineReader is not None
