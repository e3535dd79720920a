"""
Player commands understood by Gridsharp adapters.

A line of input is either ``R`` (reset), ``E`` (exit), or two
whitespace-separated integers ``row col``. Anything else is malformed and
parses to None.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class CommandType(Enum):
    """Kinds of player command."""

    MOVE = auto()
    RESET = auto()
    EXIT = auto()


@dataclass(frozen=True)
class Command:
    """
    A parsed player command.

    Attributes:
        type: What the player asked for
        row: Target row for MOVE commands
        col: Target column for MOVE commands
    """

    type: CommandType
    row: Optional[int] = None
    col: Optional[int] = None

    @classmethod
    def move(cls, row: int, col: int) -> "Command":
        return cls(CommandType.MOVE, row, col)


RESET_KEY = "R"
EXIT_KEY = "E"


def parse_command(text: Optional[str]) -> Optional[Command]:
    """
    Parse a line of player input.

    >>> parse_command("1 2")
    Command(type=<CommandType.MOVE: 1>, row=1, col=2)
    >>> parse_command("r").type
    <CommandType.RESET: 2>
    >>> parse_command("1 x") is None
    True
    """
    if text is None:
        return None
    text = text.strip()
    if text.upper() == RESET_KEY:
        return Command(CommandType.RESET)
    if text.upper() == EXIT_KEY:
        return Command(CommandType.EXIT)

    parts = text.split(maxsplit=1)
    if len(parts) != 2:
        return None
    try:
        return Command.move(int(parts[0]), int(parts[1]))
    except ValueError:
        return None
