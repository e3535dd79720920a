"""
This module contains the IOInterface abstract base class and its implementations.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import aiofiles


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the text input/output operations a console adapter
    needs. Implementations may talk to a terminal, a file, or a test fixture.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass


class TestIOInterface(IOInterface):
    """
    A test IO interface. Collects output messages and replays queued input.

    Once the queued responses run out, ``input`` returns ``exhausted_response``.
    """

    __test__ = False

    def __init__(
        self,
        input_responses: Optional[List[str]] = None,
        exhausted_response: str = "E",
    ):
        self.sent_messages: List[str] = []
        self.prompts: List[str] = []
        self.input_responses = list(input_responses or [])
        self.exhausted_response = exhausted_response

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        return self.exhausted_response

    def add_input(self, response: str) -> None:
        """Queue a line of input."""
        self.input_responses.append(response)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)


class LoggingIOInterface(IOInterface):
    """
    An IO interface that appends every output message to a transcript file.

    Input is delegated to ``inner`` when one is given (so a console session
    can be recorded while it is played). Without one, the prompt is logged and
    ``exhausted_response`` is returned, which ends a game loop.
    """

    def __init__(
        self,
        log_file_path: str,
        inner: Optional[IOInterface] = None,
        exhausted_response: str = "E",
    ):
        self.log_file_path = log_file_path
        self.inner = inner
        self.exhausted_response = exhausted_response

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")
        if self.inner is not None:
            self.inner.output(message)

    def input(self, prompt: str) -> str:
        """Log the prompt, then read from the wrapped interface if any."""
        if self.inner is None:
            self.output(f"[INPUT PROMPT] {prompt}")
            return self.exhausted_response
        response = self.inner.input(prompt)
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(f"{prompt}{response}\n")
        return response

    async def output_async(self, message: str) -> None:
        """Async version of output for compatibility."""
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")
        if self.inner is not None:
            self.inner.output(message)


class AsyncIOInterfaceWrapper:
    """
    A wrapper class to facilitate asynchronous execution of synchronous IO operations
    defined in an IOInterface implementation. Blocking calls such as reading a line
    from the terminal run in a ThreadPoolExecutor so they can be awaited without
    stalling the event loop.
    """

    def __init__(self, io_interface: IOInterface):
        self.io_interface = io_interface
        self.executor = ThreadPoolExecutor(max_workers=1)

    async def output(self, message: str) -> None:
        output_async = getattr(self.io_interface, "output_async", None)
        if output_async is not None:
            await output_async(message)
            return
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(self.executor, self.io_interface.output, message)

    async def input(self, prompt: str) -> str:
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(
            self.executor, self.io_interface.input, prompt
        )
        return result

    def close(self) -> None:
        self.executor.shutdown(wait=False)
