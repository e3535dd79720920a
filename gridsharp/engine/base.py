"""
Base engine class for the Gridsharp framework.

This module provides the abstract base class for all game engines in the
Gridsharp framework. It defines the common interface that all game engines
must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

from gridsharp.adapters import PlatformAdapter
from gridsharp.events import EventBus


class GridsharpEngine(ABC):
    """
    Abstract base class for all game engines.

    This class defines the common interface that all game engines must implement,
    providing methods for starting games and rendering the game state.
    """

    def __init__(self, adapter: PlatformAdapter, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options for the game
        """
        self.adapter = adapter
        self.config = config or {}
        self.event_bus = EventBus.get_instance()
        self.state = None

    @abstractmethod
    async def initialize(self) -> None:
        """
        Initialize the engine and prepare for a game.
        """
        await self.adapter.initialize()

    @abstractmethod
    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        await self.adapter.shutdown()

    @abstractmethod
    async def start_game(self) -> None:
        """
        Start a new game.
        """
        pass

    @abstractmethod
    async def render_state(self) -> None:
        """
        Render the current game state.
        """
        pass
