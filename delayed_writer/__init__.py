"""
Delayed Writer - sequenced, cancellable delayed output with line input.

Builds a queue of timed operations (pauses, character-by-character output,
line input requests) and executes them strictly in order with cooperative
cancellation.

Основные компоненты:
    - DelayedWriter: Построитель и исполнитель очереди операций
    - CancelSignal, cancel_after: Сигнал отмены выполнения
    - Operation, OperationOutcome: Отложенная операция и ее результат
    - Writer, LineReader: Интерфейсы приемника вывода и источника строк
    - wait, write, do_wait, do_write: Короткие функции для одиночных операций

Пример использования:
    >>> import asyncio
    >>> from delayed_writer import DelayedWriter, cancel_after
    >>>
    >>> async def main() -> None:
    ...     signal, clear = cancel_after(10_000)
    ...     inputs = await (
    ...         DelayedWriter()
    ...         .write("Hello world!\\n", 500)
    ...         .wait()
    ...         .input("What is your name? ")
    ...         .do(signal)
    ...     )
    ...     clear()
    ...     print(inputs)
    >>>
    >>> asyncio.run(main())
"""

__version__ = "0.1.0"
from delayed_writer.core import DEFAULT_ENCODING, DEFAULT_INTERVAL, DelayedWriter
from delayed_writer.exceptions import DelayedWriterError, ExecutionInProgressError
from delayed_writer.interfaces import LineReader, Writer
from delayed_writer.logging import get_logger, setup_logging
from delayed_writer.operations import (
    Operation,
    OperationKind,
    OperationOutcome,
    OperationStatus,
    emit_operation,
    request_line_operation,
    wait_operation,
)
from delayed_writer.shortcuts import do_wait, do_write, wait, write
from delayed_writer.signals import CancelSignal, cancel_after

__all__ = [
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
]

# Адаптеры импортируются напрямую из delayed_writer.adapters
# Например: from delayed_writer.adapters import MemoryWriter
