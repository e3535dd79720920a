"""
Base adapter interface for the Gridsharp engine.

This module defines the interface that platform-specific adapters must implement
to interact with the Gridsharp engine.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Union
from enum import Enum


class PlatformAdapter(ABC):
    """
    Base interface for platform-specific adapters.

    This abstract class defines the methods that platform-specific adapters
    must implement to interact with the Gridsharp engine. These methods handle
    rendering the game state, reading player commands, and notifying of
    game events.
    """

    @abstractmethod
    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current game state to the platform.

        Args:
            state: The engine's adapter-format state (current player, status,
                   board rows)
        """
        pass

    @abstractmethod
    async def request_command(self, prompt: str = "") -> str:
        """
        Read one line of player input.

        Args:
            prompt: Text shown before reading

        Returns:
            The raw line; the engine parses it
        """
        pass

    @abstractmethod
    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the platform of a game event.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        pass

    # The following methods have default implementations but can be overridden

    async def initialize(self) -> None:
        """
        Initialize the adapter.

        This method is called when the adapter is first connected to the engine.
        """
        pass

    async def shutdown(self) -> None:
        """
        Shutdown the adapter.

        This method is called when the engine is shutting down.
        """
        pass
