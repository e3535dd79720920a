"""
This module contains the Board class, which represents a square grid of marks.

>>> board = Board(3)
>>> board.size
3
>>> board.assign(1, 1, "X")
>>> board.value_at(1, 1)
'X'
>>> board.is_full()
False
"""

from typing import Iterable, Iterator, List

from gridsharp.common.errors import InvalidCoordinateError

BLANK_CELL = " "
MARK_X = "X"
MARK_O = "O"


class Board:
    """
    A class representing a square game board.

    Cells are stored in a flat list addressed by ``row * size + col``.
    """

    def __init__(self, size: int = 3):
        """
        Initialize a Board instance with every cell blank.

        :param size: The number of rows (and columns) of the board.
        :raises ValueError: If size is not a positive integer.
        >>> Board(4).size
        4
        """
        if size < 1:
            raise ValueError("size must be > 0")
        self._size = size
        self._num_cells = size * size
        self._cells: List[str] = []
        self.reset()

    def _index(self, row: int, col: int) -> int:
        if not 0 <= row < self._size:
            raise InvalidCoordinateError("row", row, self._size)
        if not 0 <= col < self._size:
            raise InvalidCoordinateError("col", col, self._size)
        return row * self._size + col

    @property
    def size(self) -> int:
        """
        Return the fixed dimension of the board.

        >>> Board().size
        3
        """
        return self._size

    def reset(self):
        """
        Reset every cell to blank.

        >>> board = Board(2)
        >>> board.assign(0, 0, "O")
        >>> board.reset()
        >>> list(board.cells())
        [' ', ' ', ' ', ' ']
        """
        self._cells = [BLANK_CELL] * self._num_cells

    def assign(self, row: int, col: int, mark: str) -> None:
        """
        Write a mark into a cell.

        The board does not check whether the cell is already occupied; that is
        the caller's responsibility.

        :raises InvalidCoordinateError: If row or col is out of range.
        """
        self._cells[self._index(row, col)] = mark

    def value_at(self, row: int, col: int) -> str:
        """
        Read the mark held by a cell.

        :raises InvalidCoordinateError: If row or col is out of range.
        >>> Board().value_at(2, 2)
        ' '
        """
        return self._cells[self._index(row, col)]

    def cells(self) -> Iterable[str]:
        """
        Return the cells in row-major order.

        The result is a snapshot and can be iterated any number of times.

        >>> board = Board(2)
        >>> board.assign(0, 1, "X")
        >>> board.cells()
        (' ', 'X', ' ', ' ')
        """
        return tuple(self._cells)

    def rows(self) -> Iterator[List[str]]:
        """Yield the board one row at a time."""
        for row in range(self._size):
            start = row * self._size
            yield self._cells[start : start + self._size]

    def is_full(self) -> bool:
        """Check whether no blank cell remains."""
        return BLANK_CELL not in self._cells

    def render(self) -> str:
        """
        Render the board as text, one line per row.

        >>> board = Board(2)
        >>> board.assign(0, 0, "X")
        >>> board.render().splitlines()
        ['X :  ', '  :  ']
        """
        return "\n".join(" : ".join(row) for row in self.rows())

    def __iter__(self) -> Iterator[str]:
        return iter(self.cells())

    def __len__(self) -> int:
        return self._num_cells

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the board.

        >>> repr(Board(1))
        "Board(1, [' '])"
        """
        return f"Board({self._size}, {self._cells!r})"

    def __str__(self) -> str:
        return self.render()
