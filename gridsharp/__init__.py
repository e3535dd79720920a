"""
Gridsharp: a turn-based grid game engine.

The rule engine (board, transition-table state machines, outcome detection)
is platform-agnostic; adapters bridge it to a console or to scripted tests.
"""

__version__ = "0.1.0"
