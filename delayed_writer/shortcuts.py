"""Короткие функции для одиночных операций с очередью по умолчанию."""

from __future__ import annotations

from delayed_writer.core import DelayedWriter
from delayed_writer.signals import CancelSignal


def wait(duration: int | float) -> DelayedWriter:
    """Создает DelayedWriter с паузой в начале очереди.

    Args:
        duration: Длительность в миллисекундах

    Returns:
        Новый DelayedWriter со стандартным вводом и выводом
    """
    return DelayedWriter().wait(duration)


def write(text: str, duration: int | float) -> DelayedWriter:
    """Создает DelayedWriter с выводом текста в начале очереди.

    Пример использования:
        >>> await write("Hello world!\\n", 500).wait().write("Bye!\\n").do()

    Args:
        text: Текст для вывода
        duration: Длительность вывода в миллисекундах

    Returns:
        Новый DelayedWriter со стандартным вводом и выводом
    """
    return DelayedWriter().write(text, duration)


async def do_wait(duration: int | float, signal: CancelSignal | None = None) -> None:
    """Выполняет паузу, прерываемую сигналом."""
    await wait(duration).do(signal)


async def do_write(
    text: str, duration: int | float, signal: CancelSignal | None = None
) -> None:
    """Выводит текст посимвольно в стандартный вывод."""
    await write(text, duration).do(signal)
