"""
Пример отмены выполнения по таймауту.

Вывод длинного текста прерывается через две секунды: do() завершается
без исключения, оставшиеся операции отбрасываются.
"""

from __future__ import annotations

import asyncio
import logging

from delayed_writer import DelayedWriter, cancel_after
from delayed_writer.logging import setup_logging


async def main() -> None:
    """Основная функция для запуска примера."""
    setup_logging(logging.INFO)

    signal, clear = cancel_after(2000)
    writer = DelayedWriter()

    await (
        writer.write("This sentence is far too long to finish in time...\n", 5000)
        .write("...and this one is never reached.\n", 0)
        .do(signal)
    )
    clear()

    await writer.write("\nStopped: ", 0).write(f"{signal.reason}\n", 0).do()


if __name__ == "__main__":
    asyncio.run(main())
