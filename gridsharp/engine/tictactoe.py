"""
Tic-tac-toe engine implementation.

This module provides the TicTacToeEngine class, which implements the
GridsharpEngine interface on top of the synchronous GameEngine rules.
"""

from typing import Dict, Any, Optional, Union
from enum import Enum
import asyncio
import logging
import time
import uuid

from gridsharp.adapters import PlatformAdapter
from gridsharp.adapters.commands import CommandType, parse_command
from gridsharp.common.errors import InvalidCoordinateError
from gridsharp.engine.base import GridsharpEngine
from gridsharp.events import EngineEventType
from gridsharp.state.models import GameOutcome
from gridsharp.tictactoe.game import GameEngine

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 3


class TicTacToeEngine(GridsharpEngine):
    """
    Engine implementation for tic-tac-toe.

    Moves and resets are serialized by one lock: outcome detection reads the
    board and then updates the outcome machine, and no other move may run in
    between.
    """

    def __init__(self, adapter: PlatformAdapter, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the tic-tac-toe engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options; ``board_size`` sets the grid dimension
        """
        super().__init__(adapter, config)
        self.board_size = self.config.get("board_size", DEFAULT_BOARD_SIZE)
        self.state = GameEngine(self.board_size)
        self.game_id = str(uuid.uuid4())
        self._lock = asyncio.Lock()

    @property
    def game(self) -> GameEngine:
        return self.state

    async def _emit(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        data = {"game_id": self.game_id, "timestamp": time.time(), **data}
        self.event_bus.emit(event_type, data)
        await self.adapter.notify_game_event(event_type, data)

    async def initialize(self) -> None:
        """
        Initialize the engine and prepare for a game.
        """
        await super().initialize()

        self.event_bus.emit(
            EngineEventType.ENGINE_INIT,
            {
                "engine_type": "tictactoe",
                "config": self.config,
                "timestamp": time.time(),
            },
        )

    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        self.event_bus.emit(EngineEventType.ENGINE_SHUTDOWN, {"timestamp": time.time()})

        await super().shutdown()

    async def start_game(self) -> None:
        """
        Start a new game on a blank board.
        """
        async with self._lock:
            self.state.reset()
            self.game_id = str(uuid.uuid4())

        await self._emit(EngineEventType.GAME_CREATED, {"board_size": self.board_size})

    async def move(self, row: int, col: int) -> bool:
        """
        Place the current player's mark.

        Args:
            row: Zero-based row
            col: Zero-based column

        Returns:
            True if the move was accepted

        Raises:
            InvalidCoordinateError: If the cell is outside the board
        """
        async with self._lock:
            previous_outcome = self.state.outcome
            mark = self.state.turn

            if not self.state.move(row, col):
                reason = "game_over" if self.state.is_over else "cell_occupied"
                await self._emit(
                    EngineEventType.MOVE_REJECTED,
                    {"row": row, "col": col, "mark": mark, "reason": reason},
                )
                return False

            if previous_outcome == GameOutcome.NOT_STARTED:
                await self._emit(EngineEventType.GAME_STARTED, {"first_mark": mark})

            await self._emit(
                EngineEventType.MARK_PLACED, {"row": row, "col": col, "mark": mark}
            )
            await self._emit(
                EngineEventType.TURN_CHANGED,
                {"previous": mark, "current": self.state.turn},
            )

            if self.state.is_over:
                await self._emit(
                    EngineEventType.GAME_ENDED,
                    {
                        "outcome": self.state.outcome,
                        "winner": self.state.winner,
                        "winning_line": self.state.winning_line,
                    },
                )
            return True

    async def reset(self) -> None:
        """
        Clear the board and restart both state machines.
        """
        async with self._lock:
            self.state.reset()
            await self._emit(EngineEventType.GAME_RESET, {})

    async def handle_command(self, text: Optional[str]) -> bool:
        """
        Apply one line of player input.

        Malformed input and moves outside the board are ignored.

        Args:
            text: Raw input line

        Returns:
            False if the player asked to exit, True otherwise
        """
        command = parse_command(text)
        if command is None:
            logger.debug("Ignoring malformed input %r", text)
            return True

        if command.type == CommandType.EXIT:
            return False
        if command.type == CommandType.RESET:
            await self.reset()
            return True

        try:
            await self.move(command.row, command.col)
        except InvalidCoordinateError as e:
            logger.debug("Ignoring move outside the board: %s", e)
        return True

    async def play(self) -> Dict[str, Any]:
        """
        Run the interactive loop until the adapter sends an exit command.

        Returns:
            Dictionary describing the final game state
        """
        while True:
            await self.render_state()
            text = await self.adapter.request_command()
            if not await self.handle_command(text):
                break

        return self.state.to_dict()

    async def render_state(self) -> None:
        """
        Render the current game state.
        """
        await self.adapter.render_game_state(self.state.to_adapter_format())
