"""Адаптеры приемника вывода и источника строк."""

from __future__ import annotations

from delayed_writer.adapters.memory import MemoryLineReader, MemoryWriter
from delayed_writer.adapters.stdio import StdinLineReader, StdoutWriter

__all__ = [
    "MemoryLineReader",
    "MemoryWriter",
    "StdinLineReader",
    "StdoutWriter",
]
