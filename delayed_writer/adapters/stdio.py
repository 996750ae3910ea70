"""Адаптеры стандартного вывода и стандартного ввода."""

from __future__ import annotations

import asyncio
import sys
from typing import BinaryIO


class StdoutWriter:
    """Приемник вывода, пишущий в стандартный вывод.

    Поток определяется при записи, а не при создании, поэтому
    подмена sys.stdout после создания адаптера учитывается.

    Attributes:
        _stream: Бинарный поток (None - sys.stdout.buffer)
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        """Инициализирует адаптер.

        Args:
            stream: Бинарный поток для записи (по умолчанию sys.stdout.buffer)
        """
        self._stream = stream

    @property
    def stream(self) -> BinaryIO:
        """Поток, в который выполняется запись."""
        return self._stream if self._stream is not None else sys.stdout.buffer

    async def write(self, data: bytes) -> int:
        """Записывает байты и сбрасывает буфер потока.

        Args:
            data: Байты для записи

        Returns:
            Количество записанных байт
        """
        stream = self.stream
        written = stream.write(data)
        stream.flush()
        return len(data) if written is None else written


class StdinLineReader:
    """Источник строк, читающий стандартный ввод.

    Блокирующее чтение выполняется в пуле потоков цикла событий.
    Начатое чтение прервать нельзя.

    Attributes:
        _stream: Бинарный поток (None - sys.stdin.buffer)
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        """Инициализирует адаптер.

        Args:
            stream: Бинарный поток для чтения (по умолчанию sys.stdin.buffer)
        """
        self._stream = stream

    @property
    def stream(self) -> BinaryIO:
        """Поток, из которого выполняется чтение."""
        return self._stream if self._stream is not None else sys.stdin.buffer

    async def readline(self) -> bytes:
        """Читает одну строку из потока."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.stream.readline)
