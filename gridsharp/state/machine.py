"""
Transition-table state machine for the Gridsharp engine.

A machine is defined entirely by data: an initial state and a table mapping
each state to the actions it accepts and the state each action leads to.
Both the turn tracker and the game outcome tracker are instances of the same
class built from different tables.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping
import logging

logger = logging.getLogger(__name__)


class StateMachine:
    """
    Finite-state machine driven by an immutable transition table.

    ``transition`` is the only mutator besides ``reset``. An action with no
    entry for the current state is rejected by returning False; it is not an
    error.

    >>> machine = StateMachine("off", {"off": {"flip": "on"}, "on": {"flip": "off"}})
    >>> machine.transition("flip")
    True
    >>> machine.get()
    'on'
    >>> machine.transition("smash")
    False
    >>> machine.get()
    'on'
    """

    def __init__(
        self,
        initial_state: str,
        transitions: Mapping[str, Mapping[str, str]],
        name: str = "state",
    ):
        """
        Initialize the machine in its initial state.

        Args:
            initial_state: State the machine starts in and returns to on reset
            transitions: Mapping of state -> {action: next_state}
            name: Label used in log messages

        Raises:
            ValueError: If the initial state or any target state is not a key
                of the table
        """
        if initial_state not in transitions:
            raise ValueError(f"Initial state {initial_state!r} is not in the table")
        for state, actions in transitions.items():
            for action, next_state in actions.items():
                if next_state not in transitions:
                    raise ValueError(
                        f"Transition {state!r} --{action}--> {next_state!r} "
                        "targets an unknown state"
                    )

        self.name = name
        self._initial_state = initial_state
        self._transitions: Mapping[str, Mapping[str, str]] = MappingProxyType(
            {state: MappingProxyType(dict(actions)) for state, actions in transitions.items()}
        )
        self._state = initial_state

    @property
    def initial_state(self) -> str:
        return self._initial_state

    @property
    def transitions(self) -> Mapping[str, Mapping[str, str]]:
        """Read-only view of the transition table."""
        return self._transitions

    @property
    def state(self) -> str:
        return self._state

    def get(self) -> str:
        """Return the current state."""
        return self._state

    def reset(self) -> None:
        """Force the machine back to its initial state."""
        self._state = self._initial_state

    def allowed_actions(self) -> List[str]:
        """Actions that have an entry for the current state."""
        return list(self._transitions[self._state])

    def is_terminal(self) -> bool:
        """Check whether the current state accepts no actions."""
        return not self._transitions[self._state]

    def transition(self, action: str) -> bool:
        """
        Apply an action.

        Returns:
            True if the table had an entry and the state moved, False if the
            action is illegal in the current state (state unchanged)
        """
        next_state = self._transitions[self._state].get(action)
        if next_state is None:
            logger.debug(
                "%s machine rejected %r in state %r", self.name, action, self._state
            )
            return False
        logger.debug("%s machine %r --%s--> %r", self.name, self._state, action, next_state)
        self._state = next_state
        return True

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "state": self._state}

    def __repr__(self) -> str:
        return f"StateMachine(name={self.name!r}, state={self._state!r})"
