import asyncio
from typing import Callable


class ConsoleOperator:
    """Line-based prompt/response exchange with the person running the program."""

    def __init__(self, read: Callable[[str], str] = input, write: Callable[[str], None] = print):
        self._read = read
        self._write = write

    async def ask(self, prompt: str) -> str:
        # input() blocks, keep it off the event loop
        return await asyncio.to_thread(self._read, prompt)

    def say(self, text: str) -> None:
        self._write(text)
