"""
Dice with roll history for the Gridsharp engine.
"""

from gridsharp.dice.dice import (
    RollGenerator,
    FairRollGenerator,
    SequenceRollGenerator,
    DieWithHistory,
)

__all__ = [
    "RollGenerator",
    "FairRollGenerator",
    "SequenceRollGenerator",
    "DieWithHistory",
]
