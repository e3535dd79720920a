"""
Outcome detection for tic-tac-toe.

After every accepted move the board is scanned in a fixed order: rows,
columns, the main diagonal, then the anti-diagonal. The first line whose
cells all hold the same non-blank mark decides the game. If no line is
complete and no blank cell remains, the game is a draw.
"""

from typing import Iterator, List, Optional, Tuple

from gridsharp.common.board import BLANK_CELL, Board
from gridsharp.state.models import OutcomeAction, won_action_for

Line = List[Tuple[int, int]]


def winning_lines(size: int) -> Iterator[Line]:
    """
    Yield every line that can win, in scan order.

    >>> [line[0] for line in winning_lines(2)]
    [(0, 0), (1, 0), (0, 0), (0, 1), (0, 0), (0, 1)]
    """
    for row in range(size):
        yield [(row, col) for col in range(size)]
    for col in range(size):
        yield [(row, col) for row in range(size)]
    yield [(i, i) for i in range(size)]
    yield [(i, size - 1 - i) for i in range(size)]


def line_owner(board: Board, line: Line) -> Optional[str]:
    """Return the mark filling every cell of ``line``, or None."""
    first = board.value_at(*line[0])
    if first == BLANK_CELL:
        return None
    if all(board.value_at(row, col) == first for row, col in line[1:]):
        return first
    return None


def find_winner(board: Board) -> Optional[Tuple[str, Line]]:
    """
    Find the first complete line on the board.

    Returns:
        (mark, line) for the first winning line in scan order, or None
    """
    for line in winning_lines(board.size):
        mark = line_owner(board, line)
        if mark is not None:
            return mark, line
    return None


def detect_outcome(board: Board) -> Optional[str]:
    """
    Decide which outcome action, if any, the board calls for.

    >>> board = Board(3)
    >>> for col in range(3):
    ...     board.assign(0, col, "X")
    >>> detect_outcome(board)
    'x-won'
    >>> detect_outcome(Board(3)) is None
    True
    """
    found = find_winner(board)
    if found is not None:
        return won_action_for(found[0])
    if board.is_full():
        return OutcomeAction.DRAW
    return None
