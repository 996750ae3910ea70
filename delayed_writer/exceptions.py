"""Исключения для delayed-writer."""

from __future__ import annotations


class DelayedWriterError(Exception):
    """Базовое исключение для всех ошибок delayed-writer.

    Все исключения компонента наследуются от этого класса.
    Отмена операций исключением не является и сюда не относится.
    """

    def __init__(self, message: str) -> None:
        """Инициализирует исключение.

        Args:
            message: Сообщение об ошибке
        """
        super().__init__(message)
        self.message = message


class ExecutionInProgressError(DelayedWriterError):
    """Исключение, возникающее при попытке изменить очередь во время выполнения.

    Выбрасывается методами wait(), write() и input(), если они вызваны
    пока выполняется do(). Очередь при этом не изменяется.
    """

    def __init__(
        self, message: str = "cannot add operation while executing"
    ) -> None:
        """Инициализирует исключение.

        Args:
            message: Описание ошибки
        """
        super().__init__(message)
