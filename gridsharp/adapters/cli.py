"""
Command-line interface adapter for the Gridsharp engine.

This module provides an adapter for console-based play: it clears the
screen, draws the board with the current player and status, and reads one
command per line.
"""

from typing import Dict, Any, List, Optional, Union
from enum import Enum
import logging

from gridsharp.adapters.base import PlatformAdapter
from gridsharp.adapters.commands import EXIT_KEY, RESET_KEY
from gridsharp.common.io_interface import (
    AsyncIOInterfaceWrapper,
    ConsoleIOInterface,
    IOInterface,
)

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033c"
HEADER = "######## Tic-Tac-Toe ########"


class CLIAdapter(PlatformAdapter):
    """
    Command-line interface adapter for the Gridsharp engine.

    This adapter uses an IOInterface (the console by default) for
    input/output, providing a simple text-based interface to the game.
    """

    def __init__(
        self, io_interface: Optional[IOInterface] = None, clear_screen: bool = True
    ):
        """
        Initialize the CLI adapter.

        Args:
            io_interface: Optional IOInterface to use for I/O. If None, a
                          console IOInterface is used.
            clear_screen: Whether to clear the terminal before every render
        """
        self.io_interface = io_interface or ConsoleIOInterface()
        self.clear_screen = clear_screen
        self._async_io = AsyncIOInterfaceWrapper(self.io_interface)

    async def shutdown(self) -> None:
        """Release the input thread."""
        self._async_io.close()

    def format_game_state(self, state: Dict[str, Any]) -> List[str]:
        """
        Build the lines of one screen.

        Args:
            state: Adapter-format game state

        Returns:
            Lines to print, without the clear-screen sequence
        """
        lines = [
            HEADER,
            f"Current Player: {state.get('current_player', '')}",
            f"Status: {state.get('status', '')}",
        ]
        lines.extend(" : ".join(row) for row in state.get("rows", []))
        lines.append(f"{RESET_KEY}: for resetting game")
        lines.append(f"{EXIT_KEY}: for exit")
        return lines

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current game state to the console.

        Args:
            state: The current game state
        """
        screen = "\n".join(self.format_game_state(state))
        if self.clear_screen:
            screen = CLEAR_SCREEN + screen
        await self._async_io.output(screen)

    async def request_command(self, prompt: str = "") -> str:
        """
        Read a command line from the console.

        End of input is treated as an exit request.
        """
        try:
            return await self._async_io.input(prompt)
        except EOFError:
            logger.debug("End of input, exiting")
            return EXIT_KEY

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Log a game event; the next render shows its effect on screen.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name
        logger.debug("Event %s: %s", event_type, data)
