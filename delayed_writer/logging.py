"""Логирование для delayed-writer."""

from __future__ import annotations

import logging
from logging import LoggerAdapter
from typing import Any, MutableMapping

# Логгер для delayed-writer
_logger = logging.getLogger("delayed_writer")


class OperationLoggerAdapter(LoggerAdapter):
    """LoggerAdapter, дополняющий extra вызова описанием операции.

    Стандартный LoggerAdapter заменяет extra вызова своим словарем,
    этот объединяет оба: поля вызова (index, remaining и т.д.)
    попадают в запись вместе с полем operation.
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def get_logger(operation: str | None = None) -> OperationLoggerAdapter:
    """Создает логгер с префиксом для delayed-writer.

    Args:
        operation: Описание операции (опционально)

    Returns:
        OperationLoggerAdapter с описанием операции в поле operation

    Пример использования:
        >>> logger = get_logger("wait(50)")
        >>> logger.debug("Starting operation", extra={"index": 0})
        # Выведет: [delayed-writer] wait(50): Starting operation
    """
    return OperationLoggerAdapter(_logger, {"operation": operation or "core"})


def setup_logging(level: int = logging.INFO) -> None:
    """Настраивает логирование для delayed-writer.

    Args:
        level: Уровень логирования (по умолчанию INFO)

    Пример использования:
        >>> from delayed_writer.logging import setup_logging
        >>> import logging
        >>> setup_logging(logging.DEBUG)
    """
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "[delayed-writer] %(operation)s: %(message)s", style="%"
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)
    _logger.setLevel(level)
    _logger.propagate = False
