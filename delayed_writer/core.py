"""Ядро delayed_writer: DelayedWriter - построитель и исполнитель очереди операций."""

from __future__ import annotations

from typing import Callable

from delayed_writer.adapters.stdio import StdinLineReader, StdoutWriter
from delayed_writer.exceptions import ExecutionInProgressError
from delayed_writer.interfaces import LineReader, Writer
from delayed_writer.logging import get_logger
from delayed_writer.operations import (
    CancelCallback,
    Operation,
    OperationOutcome,
    OperationStatus,
    emit_operation,
    request_line_operation,
    wait_operation,
)
from delayed_writer.signals import CancelSignal
from delayed_writer.validators import (
    validate_duration,
    validate_encoding,
    validate_text,
)

# Интервал по умолчанию, миллисекунды
DEFAULT_INTERVAL = 500

DEFAULT_ENCODING = "utf-8"


class DelayedWriter:
    """Очередь отложенных операций вывода и ввода.

    Методы wait(), write() и input() добавляют операции в очередь и
    возвращают сам объект, что позволяет строить цепочки вызовов.
    Метод do() выполняет операции строго по очереди, поддерживает
    отмену через CancelSignal и возвращает строки, прочитанные
    операциями input(). После do() очередь всегда пуста, а объект
    готов к новому циклу построения и выполнения.

    Пример использования:
        >>> from delayed_writer import DelayedWriter
        >>>
        >>> writer = DelayedWriter(interval=500)
        >>> name, = await (
        ...     writer.write("Hello world!\\n")
        ...     .wait()
        ...     .input("What is your name? ", 0)
        ...     .do()
        ... )

    Attributes:
        reader: Источник строк
        writer: Приемник вывода
        encoding: Кодировка вывода и ввода
        _interval: Длительность по умолчанию для следующих вызовов
        _queue: Очередь операций в порядке выполнения
        _inputs: Строки, прочитанные в текущем выполнении
        _executing: Флаг выполнения do()
    """

    def __init__(
        self,
        reader: LineReader | None = None,
        writer: Writer | None = None,
        interval: int | float = DEFAULT_INTERVAL,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Инициализирует пустую очередь.

        Args:
            reader: Источник строк (по умолчанию стандартный ввод)
            writer: Приемник вывода (по умолчанию стандартный вывод)
            interval: Длительность по умолчанию в миллисекундах
            encoding: Кодировка вывода и ввода

        Raises:
            TypeError: Если interval не является числом
            ValueError: Если interval отрицательный или кодировка неизвестна
        """
        validate_duration(interval, "interval")
        validate_encoding(encoding)

        self.reader: LineReader = reader if reader is not None else StdinLineReader()
        self.writer: Writer = writer if writer is not None else StdoutWriter()
        self.encoding = encoding
        self._interval = interval
        self._queue: list[Operation] = []
        self._inputs: list[str] = []
        self._executing = False
        self._active_cancel: CancelCallback | None = None
        # Номер цикла построения и выполнения, увеличивается при очистке
        self._generation = 0

    @property
    def interval(self) -> int | float:
        """Длительность по умолчанию для вызовов без явной длительности."""
        return self._interval

    @property
    def is_executing(self) -> bool:
        """True, пока выполняется do()."""
        return self._executing

    @property
    def queue(self) -> tuple[Operation, ...]:
        """Копия очереди операций (только для чтения)."""
        return tuple(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def wait(self, duration: int | float | None = None) -> DelayedWriter:
        """Добавляет паузу.

        Args:
            duration: Длительность в миллисекундах
                (по умолчанию - последняя использованная)

        Returns:
            Этот же DelayedWriter

        Raises:
            ExecutionInProgressError: Если вызван во время do()
        """
        self._assert_not_executing()
        duration = self._resolve_duration(duration)
        self._push_wait(duration)
        return self

    def write(self, text: str, duration: int | float | None = None) -> DelayedWriter:
        """Добавляет посимвольный вывод текста.

        Длительность распределяется поровну между символами: перед каждым
        символом ставится пауза duration // len(text). При нулевой
        длительности текст выводится одной операцией.

        Args:
            text: Текст для вывода
            duration: Общая длительность вывода в миллисекундах
                (по умолчанию - последняя использованная)

        Returns:
            Этот же DelayedWriter

        Raises:
            ExecutionInProgressError: Если вызван во время do()
        """
        self._assert_not_executing()
        validate_text(text)
        duration = self._resolve_duration(duration)
        self._push_write(text, duration)
        return self

    def input(
        self, prompt: str | None = None, duration: int | float | None = None
    ) -> DelayedWriter:
        """Добавляет запрос строки ввода с необязательным приглашением.

        Непустое приглашение выводится так же, как в write().
        Прочитанная строка попадает в результат do().

        Args:
            prompt: Текст приглашения (опционально)
            duration: Длительность вывода приглашения в миллисекундах
                (по умолчанию - последняя использованная)

        Returns:
            Этот же DelayedWriter

        Raises:
            ExecutionInProgressError: Если вызван во время do()
        """
        self._assert_not_executing()
        if prompt is not None:
            validate_text(prompt, "prompt")
        duration = self._resolve_duration(duration)
        if prompt:
            self._push_write(prompt, duration)
        self._queue.append(
            request_line_operation(self.reader, self._input_collector(), self.encoding)
        )
        return self

    async def do(self, signal: CancelSignal | None = None) -> list[str]:
        """Выполняет очередь операций по порядку.

        Отмена через signal останавливает выполнение без исключения.
        Ошибка приемника или источника пробрасывается вызывающему коду
        после очистки. В любом случае очередь очищается.

        Args:
            signal: Сигнал отмены (опционально)

        Returns:
            Строки, прочитанные операциями input(), в порядке очереди

        Raises:
            Exception: Исходная ошибка приемника или источника
        """
        self._executing = True
        logger = get_logger()
        logger.info(
            f"Starting execution of {len(self._queue)} operations",
            extra={"queued": len(self._queue), "signal": signal is not None},
        )

        try:
            await self._drain(signal)
        finally:
            inputs = self._cleanup(signal)

        logger.info(
            "Execution finished",
            extra={"inputs": len(inputs)},
        )
        return inputs

    async def _drain(self, signal: CancelSignal | None) -> None:
        """Выполняет операции до конца очереди, отмены или ошибки.

        Args:
            signal: Сигнал отмены (опционально)

        Raises:
            Exception: Исходная ошибка приемника или источника
        """
        for index, operation in enumerate(self._queue):
            logger = get_logger(str(operation))

            if signal is not None and signal.cancelled:
                logger.info(
                    "Signal already cancelled, skipping remaining operations",
                    extra={"index": index, "remaining": len(self._queue) - index},
                )
                return

            logger.debug("Starting operation", extra={"index": index})
            cancel, pending = operation()
            self._active_cancel = cancel

            if signal is not None:
                signal.add_listener(cancel)
            try:
                outcome: OperationOutcome = await pending
            finally:
                if signal is not None:
                    signal.remove_listener(cancel)

            self._active_cancel = None

            if outcome.status is OperationStatus.CANCELLED:
                logger.info(
                    "Operation cancelled, stopping execution",
                    extra={"index": index, "remaining": len(self._queue) - index - 1},
                )
                return
            if outcome.status is OperationStatus.FAILED:
                logger.error(
                    f"Operation failed: {outcome.error}",
                    exc_info=outcome.error,
                )
                raise outcome.error

            logger.debug("Operation completed", extra={"index": index})

    def _cleanup(self, signal: CancelSignal | None) -> list[str]:
        """Возвращает объект в исходное состояние.

        Выполняется ровно один раз на каждый вызов do().

        Args:
            signal: Сигнал отмены, переданный в do()

        Returns:
            Строки, прочитанные за время выполнения
        """
        cancel = self._active_cancel
        self._active_cancel = None

        if cancel is not None:
            if signal is not None:
                signal.remove_listener(cancel)
            # do() прерван снаружи: останавливаем таймер текущей операции
            cancel()

        self._queue.clear()
        inputs = list(self._inputs)
        self._inputs.clear()
        self._generation += 1
        self._executing = False
        return inputs

    def _assert_not_executing(self) -> None:
        """Проверяет, что do() не выполняется.

        Raises:
            ExecutionInProgressError: Если do() выполняется
        """
        if self._executing:
            raise ExecutionInProgressError()

    def _input_collector(self) -> Callable[[str], None]:
        """Создает получателя строк для операции текущего цикла.

        Строка, прочитанная после очистки (например, когда задача с do()
        была отменена во время чтения), отбрасывается и не попадает
        в результат следующего выполнения.

        Returns:
            Функция, добавляющая строку в собранный ввод
        """
        generation = self._generation

        def collect(line: str) -> None:
            if generation != self._generation:
                get_logger().warning(
                    "Discarding line read after its execution ended",
                    extra={"generation": generation},
                )
                return
            self._inputs.append(line)

        return collect

    def _resolve_duration(self, duration: int | float | None) -> int | float:
        """Проверяет длительность и обновляет интервал по умолчанию.

        Args:
            duration: Явная длительность или None

        Returns:
            Длительность для добавляемых операций
        """
        if duration is None:
            return self._interval
        validate_duration(duration)
        self._interval = duration
        return duration

    def _push_wait(self, duration: int | float) -> None:
        self._queue.append(wait_operation(duration))

    def _push_write(self, text: str, duration: int | float) -> None:
        if duration == 0:
            self._queue.append(emit_operation(self.writer, text, self.encoding))
            return

        if not text:
            return

        delay = duration // len(text)
        for char in text:
            self._queue.append(wait_operation(delay))
            self._queue.append(emit_operation(self.writer, char, self.encoding))
