"""
Event system for the Gridsharp engine.

Engines emit events on a process-wide bus; adapters, loggers and tests
subscribe to them.
"""

from gridsharp.events.emitter import EventEmitter, EventBus, EngineEventType

__all__ = ["EventEmitter", "EventBus", "EngineEventType"]
