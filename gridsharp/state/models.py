"""
Transition tables for the tic-tac-toe state machines.

Two machines drive a game: the turn machine, whose state is the mark that
moves next, and the outcome machine, whose state is the game's progress.
Adding a new outcome (a forfeit, say) means adding table entries here; the
engine's logic does not change.
"""

from typing import Dict

from gridsharp.common.board import MARK_O, MARK_X
from gridsharp.state.machine import StateMachine


class TurnState:
    """States of the turn machine: the mark to play next."""

    X = MARK_X
    O = MARK_O


class TurnAction:
    """Actions accepted by the turn machine."""

    MOVE = "move"


class GameOutcome:
    """States of the outcome machine."""

    NOT_STARTED = "Not Started"
    PLAYING = "Playing"
    DRAW = "Draw"
    X_WON = "X Won"
    O_WON = "O Won"

    TERMINAL = frozenset({DRAW, X_WON, O_WON})


class OutcomeAction:
    """Actions accepted by the outcome machine."""

    MOVE = "move"
    DRAW = "draw"
    X_WON = "x-won"
    O_WON = "o-won"


TURN_TRANSITIONS: Dict[str, Dict[str, str]] = {
    TurnState.X: {TurnAction.MOVE: TurnState.O},
    TurnState.O: {TurnAction.MOVE: TurnState.X},
}

OUTCOME_TRANSITIONS: Dict[str, Dict[str, str]] = {
    GameOutcome.NOT_STARTED: {
        OutcomeAction.MOVE: GameOutcome.PLAYING,
    },
    GameOutcome.PLAYING: {
        OutcomeAction.MOVE: GameOutcome.PLAYING,
        OutcomeAction.DRAW: GameOutcome.DRAW,
        OutcomeAction.X_WON: GameOutcome.X_WON,
        OutcomeAction.O_WON: GameOutcome.O_WON,
    },
    GameOutcome.DRAW: {},
    GameOutcome.X_WON: {},
    GameOutcome.O_WON: {},
}

_WON_ACTIONS = {MARK_X: OutcomeAction.X_WON, MARK_O: OutcomeAction.O_WON}
_WINNERS = {GameOutcome.X_WON: MARK_X, GameOutcome.O_WON: MARK_O}


def turn_state_machine() -> StateMachine:
    """Build a turn machine; X moves first."""
    return StateMachine(TurnState.X, TURN_TRANSITIONS, name="turn")


def outcome_state_machine() -> StateMachine:
    """Build an outcome machine in the Not Started state."""
    return StateMachine(GameOutcome.NOT_STARTED, OUTCOME_TRANSITIONS, name="outcome")


def won_action_for(mark: str) -> str:
    """
    Map a winning mark to the outcome action that records it.

    >>> won_action_for("O")
    'o-won'
    """
    return _WON_ACTIONS[mark]


def winner_of(outcome: str):
    """Return the mark that won for a won outcome, None otherwise."""
    return _WINNERS.get(outcome)
