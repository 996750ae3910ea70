"""
Пример запроса строк ввода.

Приглашения выводятся посимвольно, прочитанные строки возвращаются
из do() в порядке очереди.
"""

from __future__ import annotations

import asyncio

from delayed_writer import DelayedWriter


async def main() -> None:
    """Основная функция для запуска примера."""
    writer = DelayedWriter(interval=400)

    name, city = await (
        writer.input("What is your name? ")
        .input("Where do you live? ")
        .do()
    )

    await writer.write(f"Nice to meet you, {name} from {city}!\n", 800).do()


if __name__ == "__main__":
    asyncio.run(main())
