"""
Event emitter and global event bus for the Gridsharp engine.

Engines emit one event per game change (a mark placed, a move rejected, a
game ended); listeners subscribe by event type. A failing listener is logged
and does not stop the others.
"""

from collections import defaultdict
from typing import Any, Dict, Callable, Union
import threading
import logging
from enum import Enum

logger = logging.getLogger("gridsharp.events")


class EventEmitter:
    """
    Event emitter keyed by event type name.

    Enum event types are stored under their ``name``, so
    ``EngineEventType.MARK_PLACED`` and ``"MARK_PLACED"`` reach the same
    listeners. Listeners run in subscription order.
    """

    def __init__(self):
        self._listeners = defaultdict(list)
        self._listener_lock = threading.RLock()

    @staticmethod
    def _key(event_type: Union[str, Enum]) -> str:
        return event_type.name if isinstance(event_type, Enum) else event_type

    def on(self, event_type: Union[str, Enum], callback: Callable) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Function to call when event occurs, signature: fn(event_data)

        Returns:
            Function that removes this subscription
        """
        key = self._key(event_type)
        with self._listener_lock:
            self._listeners[key].append(callback)

        def unsubscribe():
            with self._listener_lock:
                if callback in self._listeners[key]:
                    self._listeners[key].remove(callback)

        return unsubscribe

    def emit(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Call every listener of ``event_type`` with ``data``.

        Args:
            event_type: The type of event to emit
            data: The data to include with the event
        """
        key = self._key(event_type)
        with self._listener_lock:
            callbacks = list(self._listeners.get(key, []))

        # Listeners may subscribe or unsubscribe while being called
        for callback in callbacks:
            try:
                callback(data)
            except Exception as e:
                logger.error(f"Error in event handler for {key}: {e}", exc_info=True)


class EventBus:
    """
    Process-wide event bus shared by engines and their listeners.
    """

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> EventEmitter:
        """
        Get the singleton instance of the EventBus.

        Returns:
            EventEmitter instance
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = EventEmitter()
        return cls._instance


class EngineEventType(Enum):
    """
    Event types emitted by Gridsharp engines.
    """

    # Core lifecycle events
    ENGINE_INIT = "engine_init"
    ENGINE_SHUTDOWN = "engine_shutdown"

    # Game lifecycle
    GAME_CREATED = "game_created"
    GAME_STARTED = "game_started"
    GAME_ENDED = "game_ended"
    GAME_RESET = "game_reset"

    # Moves
    MARK_PLACED = "mark_placed"
    MOVE_REJECTED = "move_rejected"
    TURN_CHANGED = "turn_changed"
