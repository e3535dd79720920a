"""
Core engine for the Gridsharp framework.

This package provides the async game engines that connect the rule engine
to platform adapters and the event bus.
"""

from gridsharp.engine.base import GridsharpEngine
from gridsharp.engine.tictactoe import TicTacToeEngine

__all__ = ["GridsharpEngine", "TicTacToeEngine"]
