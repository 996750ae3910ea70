"""Внешний сигнал отмены выполнения очереди."""

from __future__ import annotations

import asyncio
from typing import Callable

from delayed_writer.logging import get_logger
from delayed_writer.validators import validate_duration

Listener = Callable[[], None]


class CancelSignal:
    """Сигнал отмены с подпиской на срабатывание.

    Сигнал срабатывает один раз. При срабатывании вызываются все
    подписчики, зарегистрированные на этот момент. DelayedWriter
    держит подписанным только cancel текущей операции.

    Пример использования:
        >>> signal = CancelSignal()
        >>> task = asyncio.create_task(writer.do(signal))
        >>> signal.cancel("user pressed Ctrl+C")
        >>> inputs = await task

    Attributes:
        _cancelled: Флаг срабатывания
        _reason: Причина отмены (если указана)
        _listeners: Подписчики в порядке регистрации
    """

    def __init__(self) -> None:
        """Инициализирует несработавший сигнал."""
        self._cancelled = False
        self._reason: str | None = None
        self._listeners: list[Listener] = []

    @property
    def cancelled(self) -> bool:
        """True, если сигнал уже сработал."""
        return self._cancelled

    @property
    def reason(self) -> str | None:
        """Причина отмены, переданная в cancel()."""
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Активирует сигнал и вызывает подписчиков.

        Повторный вызов ничего не делает.

        Args:
            reason: Причина отмены (опционально)
        """
        if self._cancelled:
            return
        self._cancelled = True
        self._reason = reason
        get_logger().info(
            f"Cancel signal activated: {reason or 'no reason given'}",
            extra={"listeners": len(self._listeners)},
        )
        for listener in list(self._listeners):
            listener()

    def add_listener(self, listener: Listener) -> None:
        """Регистрирует подписчика.

        Args:
            listener: Функция без аргументов
        """
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Снимает подписчика. Отсутствующий подписчик игнорируется.

        Args:
            listener: Ранее зарегистрированная функция
        """
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listeners(self) -> list[Listener]:
        """Копия списка текущих подписчиков."""
        return list(self._listeners)


def cancel_after(delay: int | float) -> tuple[CancelSignal, Callable[[], None]]:
    """Создает сигнал, срабатывающий через delay миллисекунд.

    Должна вызываться при запущенном цикле событий.

    Args:
        delay: Задержка в миллисекундах

    Returns:
        Пара (signal, clear): clear() отменяет запланированное срабатывание

    Пример использования:
        >>> signal, clear = cancel_after(2000)
        >>> await writer.do(signal)
        >>> clear()
    """
    validate_duration(delay, "delay")
    signal = CancelSignal()
    handle = asyncio.get_running_loop().call_later(
        delay / 1000, signal.cancel, f"deadline of {delay} ms reached"
    )
    return signal, handle.cancel
