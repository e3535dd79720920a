"""
Platform adapters for the Gridsharp engine.

This package provides adapters that translate between the core game engine
and the platforms it is played on (console, scripted tests).
"""

from gridsharp.adapters.base import PlatformAdapter
from gridsharp.adapters.commands import Command, CommandType, parse_command
from gridsharp.adapters.cli import CLIAdapter
from gridsharp.adapters.dummy import DummyAdapter

__all__ = [
    "PlatformAdapter",
    "Command",
    "CommandType",
    "parse_command",
    "CLIAdapter",
    "DummyAdapter",
]
