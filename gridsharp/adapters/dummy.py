"""
Dummy adapter for the Gridsharp engine, used for testing and simulation.

This module provides a non-interactive adapter that replays a scripted list
of commands and records everything the engine sends it.
"""

from typing import List, Dict, Any, Optional, Union
from enum import Enum

from gridsharp.adapters.base import PlatformAdapter
from gridsharp.adapters.commands import EXIT_KEY


class DummyAdapter(PlatformAdapter):
    """
    Dummy adapter for testing and simulation.

    This adapter doesn't interact with any real platform. It feeds the engine
    a fixed sequence of command lines and then asks it to exit.
    """

    def __init__(self, commands: Optional[List[str]] = None, verbose: bool = False):
        """
        Initialize the dummy adapter.

        Args:
            commands: Command lines to return from request_command, in order
            verbose: Whether to print states and events to stdout
        """
        self.commands = list(commands or [])
        self.verbose = verbose

        self.command_index = 0

        # Track events for later inspection
        self.events = []

        # Track rendered states for testing
        self.rendered_states = []

        self.initialized = False
        self.shut_down = False

    async def initialize(self) -> None:
        self.initialized = True

    async def shutdown(self) -> None:
        self.shut_down = True

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Store the game state for later inspection.

        Args:
            state: The current game state
        """
        self.rendered_states.append(state)

        if self.verbose:
            print(f"{state.get('current_player')} to play - {state.get('status')}")
            print(state.get("board_text", ""))

    async def request_command(self, prompt: str = "") -> str:
        """
        Return the next scripted command, or the exit command once exhausted.
        """
        if self.command_index < len(self.commands):
            command = self.commands[self.command_index]
            self.command_index += 1
        else:
            command = EXIT_KEY

        if self.verbose:
            print(f"> {command}")

        return command

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Store the event for later inspection.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type

        self.events.append((event_type_str, data))

        if self.verbose:
            print(f"Event: {event_type_str}")
            for key, value in data.items():
                print(f"  {key}: {value}")

    def get_events_by_type(self, event_type: Union[str, Enum]) -> List[Dict[str, Any]]:
        """
        Get all events of a specific type.

        Args:
            event_type: The type of events to retrieve

        Returns:
            A list of event data dictionaries
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        return [data for typ, data in self.events if typ == event_type_str]

    def clear(self) -> None:
        """Clear all stored events and states."""
        self.events.clear()
        self.rendered_states.clear()
        self.command_index = 0
