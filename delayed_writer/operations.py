"""Операции очереди: ожидание, вывод текста и запрос строки ввода.

Операция - это фабрика без аргументов. Вызов фабрики выполняет
побочный эффект (запускает таймер, запись или чтение) и сразу
возвращает пару (cancel, pending), где pending - asyncio.Future,
которая всегда завершается объектом OperationOutcome.
"""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from delayed_writer.interfaces import LineReader, Writer

CancelCallback = Callable[[], None]
StartedOperation = tuple[CancelCallback, "asyncio.Future[OperationOutcome]"]


class OperationKind(Enum):
    """Вид операции.

    Attributes:
        WAIT: Пауза заданной длительности
        EMIT: Запись фрагмента текста в приемник
        REQUEST_LINE: Чтение одной строки из источника
    """

    WAIT = "wait"
    EMIT = "emit"
    REQUEST_LINE = "request_line"


class OperationStatus(Enum):
    """Итог выполнения операции.

    Attributes:
        COMPLETED: Операция завершена успешно
        CANCELLED: Операция отменена через cancel
        FAILED: Операция завершилась ошибкой ввода-вывода
    """

    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationOutcome:
    """Результат операции, которым завершается pending.

    Attributes:
        status: Итог выполнения
        value: Значение, полученное операцией (строка для request_line)
        error: Исключение приемника или источника (для FAILED)
    """

    status: OperationStatus
    value: Any | None = None
    error: BaseException | None = None

    def __post_init__(self) -> None:
        """Валидация данных после инициализации."""
        if self.status is OperationStatus.FAILED and self.error is None:
            raise ValueError("failed outcome requires an error")
        if self.status is not OperationStatus.FAILED and self.error is not None:
            raise ValueError("only failed outcome can carry an error")

    @property
    def success(self) -> bool:
        """True, если статус COMPLETED."""
        return self.status is OperationStatus.COMPLETED

    @classmethod
    def completed(cls, value: Any | None = None) -> OperationOutcome:
        """Создает успешный результат."""
        return cls(status=OperationStatus.COMPLETED, value=value)

    @classmethod
    def cancelled(cls) -> OperationOutcome:
        """Создает результат отмененной операции."""
        return cls(status=OperationStatus.CANCELLED)

    @classmethod
    def failed(cls, error: BaseException) -> OperationOutcome:
        """Создает результат с ошибкой.

        Args:
            error: Исходное исключение приемника или источника
        """
        return cls(status=OperationStatus.FAILED, error=error)


@dataclass(frozen=True)
class Operation:
    """Отложенная операция очереди.

    Вызов экземпляра запускает операцию и возвращает пару
    (cancel, pending). До вызова операция не имеет побочных эффектов.

    Attributes:
        kind: Вид операции
        start: Фабрика, выполняющая запуск
        argument: Длительность для WAIT, текст для EMIT, None для REQUEST_LINE
    """

    kind: OperationKind
    start: Callable[[], StartedOperation]
    argument: int | float | str | None = None

    def __call__(self) -> StartedOperation:
        return self.start()

    def __str__(self) -> str:
        if self.kind is OperationKind.REQUEST_LINE:
            return f"{self.kind.value}()"
        return f"{self.kind.value}({self.argument!r})"


def _noop() -> None:
    pass


def _settle(pending: asyncio.Future, outcome: OperationOutcome) -> None:
    """Завершает pending, если он еще не завершен."""
    if not pending.done():
        pending.set_result(outcome)


def _track(
    result: Any, on_value: Callable[[Any], Any] | None = None
) -> asyncio.Future:
    """Переводит результат вызова приемника или источника в pending.

    Args:
        result: Awaitable или готовое значение
        on_value: Преобразование значения перед завершением (опционально)

    Returns:
        Future, завершаемая объектом OperationOutcome
    """
    loop = asyncio.get_running_loop()
    pending = loop.create_future()

    def finish(value: Any) -> None:
        try:
            if on_value is not None:
                value = on_value(value)
        except Exception as e:
            _settle(pending, OperationOutcome.failed(e))
            return
        _settle(pending, OperationOutcome.completed(value))

    if not inspect.isawaitable(result):
        finish(result)
        return pending

    task = asyncio.ensure_future(result)

    def done(task: asyncio.Future) -> None:
        if task.cancelled():
            _settle(pending, OperationOutcome.cancelled())
        elif task.exception() is not None:
            _settle(pending, OperationOutcome.failed(task.exception()))
        else:
            finish(task.result())

    task.add_done_callback(done)
    return pending


def _failed_pending(error: Exception) -> asyncio.Future:
    pending = asyncio.get_running_loop().create_future()
    pending.set_result(OperationOutcome.failed(error))
    return pending


def wait_operation(duration: int | float) -> Operation:
    """Создает операцию ожидания.

    Args:
        duration: Длительность паузы в миллисекундах

    Returns:
        Operation вида WAIT. cancel останавливает таймер и завершает
        pending результатом CANCELLED.
    """

    def start() -> StartedOperation:
        loop = asyncio.get_running_loop()
        pending = loop.create_future()
        handle = loop.call_later(
            duration / 1000, _settle, pending, OperationOutcome.completed()
        )

        def cancel() -> None:
            handle.cancel()
            _settle(pending, OperationOutcome.cancelled())

        return cancel, pending

    return Operation(OperationKind.WAIT, start, duration)


def emit_operation(writer: Writer, text: str, encoding: str = "utf-8") -> Operation:
    """Создает операцию записи фрагмента текста.

    Запись начинается сразу при запуске операции. Начатую запись
    прервать нельзя, поэтому cancel ничего не делает.

    Args:
        writer: Приемник вывода
        text: Фрагмент текста
        encoding: Кодировка текста

    Returns:
        Operation вида EMIT
    """

    def start() -> StartedOperation:
        try:
            result = writer.write(text.encode(encoding))
        except Exception as e:
            return _noop, _failed_pending(e)
        return _noop, _track(result)

    return Operation(OperationKind.EMIT, start, text)


def _strip_line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def request_line_operation(
    reader: LineReader,
    on_line: Callable[[str], None],
    encoding: str = "utf-8",
) -> Operation:
    """Создает операцию чтения одной строки.

    Прочитанная строка декодируется, лишается признака конца строки
    и передается в on_line. Конец ввода дает пустую строку.
    Чтение не прерывается: cancel ничего не делает, и отмена
    вступает в силу только после получения строки.

    Args:
        reader: Источник строк
        on_line: Получатель прочитанной строки
        encoding: Кодировка источника

    Returns:
        Operation вида REQUEST_LINE
    """

    def receive(raw: bytes | str | None) -> str:
        if raw is None:
            raw = ""
        line = raw.decode(encoding) if isinstance(raw, (bytes, bytearray)) else raw
        line = _strip_line_ending(line)
        on_line(line)
        return line

    def start() -> StartedOperation:
        try:
            result = reader.readline()
        except Exception as e:
            return _noop, _failed_pending(e)
        return _noop, _track(result, receive)

    return Operation(OperationKind.REQUEST_LINE, start)
