"""Memory адаптеры приемника вывода и источника строк."""

from __future__ import annotations

from typing import Iterable


class MemoryWriter:
    """Приемник вывода, накапливающий данные в памяти.

    Используется для тестирования и простых сценариев,
    когда вывод нужно получить строкой, а не напечатать.

    Attributes:
        encoding: Кодировка для свойства text
        _chunks: Записанные фрагменты в порядке записи
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Инициализирует пустой приемник.

        Args:
            encoding: Кодировка для свойства text
        """
        self.encoding = encoding
        self._chunks: list[bytes] = []

    async def write(self, data: bytes) -> int:
        """Сохраняет фрагмент.

        Args:
            data: Байты для записи

        Returns:
            Количество записанных байт
        """
        self._chunks.append(bytes(data))
        return len(data)

    @property
    def chunks(self) -> list[bytes]:
        """Копия списка записанных фрагментов."""
        return list(self._chunks)

    def getvalue(self) -> bytes:
        """Возвращает все записанные байты одной строкой."""
        return b"".join(self._chunks)

    @property
    def text(self) -> str:
        """Записанные данные, декодированные в текст."""
        return self.getvalue().decode(self.encoding)

    def clear(self) -> None:
        """Удаляет записанные данные."""
        self._chunks.clear()


class MemoryLineReader:
    """Источник строк, воспроизводящий заранее заданные строки.

    Строки без признака конца строки дополняются "\\n".
    После исчерпания строк возвращает b"" (конец ввода).

    Attributes:
        encoding: Кодировка строк
        _lines: Оставшиеся строки
    """

    def __init__(self, lines: Iterable[str] = (), encoding: str = "utf-8") -> None:
        """Инициализирует источник.

        Args:
            lines: Строки для воспроизведения
            encoding: Кодировка строк
        """
        self.encoding = encoding
        self._lines = [
            line if line.endswith("\n") else f"{line}\n" for line in lines
        ]

    async def readline(self) -> bytes:
        """Возвращает следующую строку или b"" в конце ввода."""
        if not self._lines:
            return b""
        return self._lines.pop(0).encode(self.encoding)

    def feed(self, line: str) -> None:
        """Добавляет строку в конец источника.

        Args:
            line: Строка для воспроизведения
        """
        self._lines.append(line if line.endswith("\n") else f"{line}\n")

    @property
    def remaining(self) -> int:
        """Количество непрочитанных строк."""
        return len(self._lines)
