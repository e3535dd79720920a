"""
Tic-tac-toe rules for the Gridsharp engine.

This package provides the synchronous rule engine (GameEngine), outcome
detection, and the interactive console entry point.
"""

from gridsharp.tictactoe.game import GameEngine
from gridsharp.tictactoe.rules import (
    detect_outcome,
    find_winner,
    line_owner,
    winning_lines,
)

__all__ = [
    "GameEngine",
    "detect_outcome",
    "find_winner",
    "line_owner",
    "winning_lines",
]
