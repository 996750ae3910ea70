"""Интерфейсы внешних возможностей: приемник вывода и источник строк."""

from __future__ import annotations

from typing import Any, Awaitable, Protocol, runtime_checkable


@runtime_checkable
class Writer(Protocol):
    """Приемник байтового вывода.

    Метод write() может быть как корутиной, так и обычным методом:
    результат, поддерживающий await, дожидается операция emit,
    обычное значение считается завершенной записью.

    Пример использования:
        >>> class PrintWriter:
        ...     async def write(self, data: bytes) -> int:
        ...         print(data.decode(), end="")
        ...         return len(data)
    """

    def write(self, data: bytes) -> Awaitable[Any] | Any:
        """Передает байты приемнику.

        Args:
            data: Байты для записи

        Returns:
            Awaitable или значение, возвращаемое приемником
        """
        ...


@runtime_checkable
class LineReader(Protocol):
    """Источник строк ввода.

    Каждый вызов readline() возвращает одну строку вместе с признаком
    конца строки, либо пустое значение по достижении конца ввода.
    asyncio.StreamReader удовлетворяет этому протоколу.
    """

    async def readline(self) -> bytes | str:
        """Читает одну строку.

        Returns:
            Прочитанная строка (байты или текст)
        """
        ...
