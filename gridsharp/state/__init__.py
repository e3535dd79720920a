"""
State machines for the Gridsharp engine.

This package provides the generic transition-table state machine and the
two tables the tic-tac-toe rules are built from: whose turn it is, and how
far the game has progressed.
"""

from gridsharp.state.machine import StateMachine
from gridsharp.state.models import (
    TurnState,
    TurnAction,
    GameOutcome,
    OutcomeAction,
    TURN_TRANSITIONS,
    OUTCOME_TRANSITIONS,
    turn_state_machine,
    outcome_state_machine,
    won_action_for,
    winner_of,
)

__all__ = [
    "StateMachine",
    "TurnState",
    "TurnAction",
    "GameOutcome",
    "OutcomeAction",
    "TURN_TRANSITIONS",
    "OUTCOME_TRANSITIONS",
    "turn_state_machine",
    "outcome_state_machine",
    "won_action_for",
    "winner_of",
]
