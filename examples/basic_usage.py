"""
Базовый пример использования delayed-writer.

Демонстрирует простейший сценарий: посимвольный вывод нескольких строк
с паузами между ними.
"""

from __future__ import annotations

import asyncio

from delayed_writer import write


async def main() -> None:
    """Основная функция для запуска примера."""
    await (
        write("Hello world!\n", 500)
        .wait()
        .write("How are you?\n")
        .wait()
        .write("I'm glad you're fine!\n")
        .do()
    )


if __name__ == "__main__":
    asyncio.run(main())
