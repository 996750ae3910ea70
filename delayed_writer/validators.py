"""Валидаторы аргументов для построителя очереди операций."""

from __future__ import annotations

import codecs
from numbers import Real
from typing import Any


def validate_duration(duration: Any, name: str = "duration") -> None:
    """Проверяет длительность в миллисекундах.

    Args:
        duration: Проверяемое значение
        name: Имя аргумента для сообщения об ошибке

    Raises:
        TypeError: Если значение не является числом
        ValueError: Если значение отрицательное
    """
    # bool наследуется от int, но длительностью не является
    if isinstance(duration, bool) or not isinstance(duration, Real):
        raise TypeError(
            f"{name} must be a number of milliseconds, "
            f"got {type(duration).__name__}"
        )
    if duration < 0:
        raise ValueError(f"{name} cannot be negative")


def validate_text(text: Any, name: str = "text") -> None:
    """Проверяет, что текст для вывода является строкой.

    Args:
        text: Проверяемое значение
        name: Имя аргумента для сообщения об ошибке

    Raises:
        TypeError: Если значение не является строкой
    """
    if not isinstance(text, str):
        raise TypeError(f"{name} must be a string, got {type(text).__name__}")


def validate_encoding(encoding: Any) -> None:
    """Проверяет, что кодировка известна интерпретатору.

    Args:
        encoding: Имя кодировки

    Raises:
        ValueError: Если кодировка неизвестна
    """
    validate_text(encoding, "encoding")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ValueError(f"Unknown encoding '{encoding}'") from e
