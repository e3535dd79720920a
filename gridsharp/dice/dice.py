"""
Dice with a bounded roll history.

A DieWithHistory delegates each roll to a RollGenerator and remembers the
last few results in a CircularBuffer. The generator can be swapped at any
time, which is how tests make rolls deterministic.

>>> die = DieWithHistory(6, 3, roll_generator=SequenceRollGenerator([2, 5]))
>>> die.roll(), die.roll(), die.roll()
(2, 5, 2)
>>> list(die)
[2, 5, 2]
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Sequence
import logging
import random

from gridsharp.common.buffer import CircularBuffer

logger = logging.getLogger(__name__)


class RollGenerator(ABC):
    """
    A source of die values.
    """

    @abstractmethod
    def roll(self) -> int:
        """Produce the next value."""


class FairRollGenerator(RollGenerator):
    """
    Uniformly distributed values in ``[1, faces]``.

    By default the generator owns a ``random.Random`` seeded from system
    entropy; pass ``seed`` or ``rng`` for a reproducible sequence.
    """

    def __init__(
        self,
        faces: int,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        if faces < 1:
            raise ValueError("faces must be > 0")
        self.faces = faces
        self._random = rng if rng is not None else random.Random(seed)

    def roll(self) -> int:
        return self._random.randint(1, self.faces)

    def __repr__(self) -> str:
        return f"FairRollGenerator(faces={self.faces})"


class SequenceRollGenerator(RollGenerator):
    """
    Replays a fixed sequence of values, starting over when it runs out.

    >>> generator = SequenceRollGenerator([4, 1])
    >>> [generator.roll() for _ in range(3)]
    [4, 1, 4]
    """

    def __init__(self, values: Sequence[int]):
        if not values:
            raise ValueError("values must not be empty")
        self.values: List[int] = list(values)
        self._position = 0

    def roll(self) -> int:
        value = self.values[self._position]
        self._position = (self._position + 1) % len(self.values)
        return value


class DieWithHistory:
    """
    A die that remembers its most recent rolls.

    :param faces: Number of faces for the default fair generator
    :param max_history: Capacity of the roll history
    :param roll_generator: Optional generator to use instead of a fair one
    """

    def __init__(
        self,
        faces: int = 6,
        max_history: int = 10,
        roll_generator: Optional[RollGenerator] = None,
    ):
        self.faces = faces
        self.history: CircularBuffer[int] = CircularBuffer(max_history)
        self.roll_generator = roll_generator or FairRollGenerator(faces)
        self._value = 1

    @property
    def value(self) -> int:
        """The result of the latest roll (1 before the first roll)."""
        return self._value

    def set_roll_generator(self, roll_generator: RollGenerator) -> None:
        """Replace the roll strategy; history is kept."""
        logger.debug("Roll generator replaced by %r", roll_generator)
        self.roll_generator = roll_generator

    def roll(self) -> int:
        """Roll the die, record the result and return it."""
        self._value = self.roll_generator.roll()
        self.history.add(self._value)
        return self._value

    def __iter__(self) -> Iterator[int]:
        """Iterate over the history, most recent roll first."""
        return iter(self.history)

    def __repr__(self) -> str:
        return f"DieWithHistory(faces={self.faces}, value={self._value})"
