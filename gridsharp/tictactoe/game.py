"""
The tic-tac-toe rule engine.

GameEngine composes a Board with a turn machine and an outcome machine and
implements the move protocol. It is synchronous and holds no resources; the
async TicTacToeEngine in ``gridsharp.engine`` wraps it for adapters.
"""

from typing import Any, Dict, Iterable, Optional
import logging

from gridsharp.common.board import BLANK_CELL, Board
from gridsharp.state.machine import StateMachine
from gridsharp.state.models import (
    GameOutcome,
    OutcomeAction,
    TurnAction,
    outcome_state_machine,
    turn_state_machine,
    winner_of,
)
from gridsharp.tictactoe.rules import Line, detect_outcome, find_winner

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Board plus turn and outcome state machines.

    >>> game = GameEngine()
    >>> game.move(0, 0)
    True
    >>> game.turn, game.outcome
    ('O', 'Playing')
    >>> game.move(0, 0)
    False
    """

    def __init__(self, size: int = 3):
        """
        Initialize a fresh game.

        Args:
            size: Board dimension
        """
        self._board = Board(size)
        self._turn = turn_state_machine()
        self._outcome = outcome_state_machine()

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turn_machine(self) -> StateMachine:
        return self._turn

    @property
    def outcome_machine(self) -> StateMachine:
        return self._outcome

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def turn(self) -> str:
        """The mark that moves next."""
        return self._turn.get()

    @property
    def outcome(self) -> str:
        """The outcome machine's current label."""
        return self._outcome.get()

    @property
    def is_over(self) -> bool:
        return self._outcome.get() in GameOutcome.TERMINAL

    @property
    def winner(self) -> Optional[str]:
        """The winning mark once the game is won, None otherwise."""
        return winner_of(self._outcome.get())

    @property
    def winning_line(self) -> Optional[Line]:
        """Cells of the line that won the game, None unless it is won."""
        if self.winner is None:
            return None
        found = find_winner(self._board)
        return found[1] if found else None

    def cells(self) -> Iterable[str]:
        """The board's marks in row-major order."""
        return self._board.cells()

    def reset(self) -> None:
        """Return board and both machines to their initial states."""
        self._outcome.reset()
        self._turn.reset()
        self._board.reset()
        logger.debug("Game reset")

    def move(self, row: int, col: int) -> bool:
        """
        Place the current turn's mark at (row, col).

        The move is ignored when the cell is taken or the game is over.

        Returns:
            True if the mark was placed, False if the move was rejected

        Raises:
            InvalidCoordinateError: If row or col is outside the board
        """
        if self._board.value_at(row, col) != BLANK_CELL:
            logger.debug("Rejected move at (%d, %d): cell occupied", row, col)
            return False
        if not self._outcome.transition(OutcomeAction.MOVE):
            logger.debug("Rejected move at (%d, %d): game is %s", row, col, self.outcome)
            return False

        mark = self._turn.get()
        self._board.assign(row, col, mark)
        self._turn.transition(TurnAction.MOVE)
        logger.debug("%s placed at (%d, %d)", mark, row, col)

        self._update_outcome()
        return True

    def _update_outcome(self) -> None:
        action = detect_outcome(self._board)
        if action is not None:
            self._outcome.transition(action)
            logger.info("Game finished: %s", self.outcome)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the game to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the game
        """
        return {
            "size": self.size,
            "turn": self.turn,
            "outcome": self.outcome,
            "is_over": self.is_over,
            "winner": self.winner,
            "winning_line": self.winning_line,
            "cells": list(self.cells()),
        }

    def to_adapter_format(self) -> Dict[str, Any]:
        """
        Convert the game to a format suitable for platform adapters.

        Returns:
            Dictionary in adapter-friendly format
        """
        return {
            "current_player": self.turn,
            "status": self.outcome,
            "rows": [list(row) for row in self._board.rows()],
            "board_text": self._board.render(),
        }

    def __repr__(self) -> str:
        return f"GameEngine(size={self.size}, turn={self.turn!r}, outcome={self.outcome!r})"
