"""Exceptions raised by the Gridsharp engine."""


class GridsharpError(Exception):
    """Base class for all Gridsharp errors."""


class InvalidCoordinateError(GridsharpError, ValueError):
    """Raised when a board coordinate falls outside ``[0, size)``."""

    def __init__(self, axis: str, value: int, size: int):
        self.axis = axis
        self.value = value
        self.size = size
        super().__init__(f"{axis} must be within size (got {value}, size {size})")
