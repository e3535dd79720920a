"""
Tests for the event emitter and the bus the tic-tac-toe engine publishes on.
"""

from unittest.mock import MagicMock

import pytest

from gridsharp.adapters import DummyAdapter
from gridsharp.engine import TicTacToeEngine
from gridsharp.events import EventEmitter, EventBus, EngineEventType


def test_enum_and_name_reach_the_same_listener():
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.on(EngineEventType.MARK_PLACED, callback)
    emitter.emit("MARK_PLACED", {"mark": "X"})
    emitter.emit(EngineEventType.MARK_PLACED, {"mark": "O"})
    emitter.emit(EngineEventType.TURN_CHANGED, {"previous": "O", "current": "X"})

    assert [c.args[0]["mark"] for c in callback.call_args_list] == ["X", "O"]


def test_unsubscribe_stops_delivery():
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on(EngineEventType.GAME_RESET, callback)
    emitter.emit(EngineEventType.GAME_RESET, {})
    unsubscribe()
    emitter.emit(EngineEventType.GAME_RESET, {})
    # Removing twice is harmless
    unsubscribe()

    callback.assert_called_once_with({})


def test_listeners_run_in_subscription_order():
    emitter = EventEmitter()
    calls = []

    emitter.on(EngineEventType.GAME_ENDED, lambda data: calls.append("log"))
    emitter.on(EngineEventType.GAME_ENDED, lambda data: calls.append("score"))
    emitter.emit(EngineEventType.GAME_ENDED, {"outcome": "Draw"})

    assert calls == ["log", "score"]


def test_failing_listener_is_logged_and_others_still_run(caplog):
    emitter = EventEmitter()
    after = MagicMock()

    def broken(data):
        raise KeyError("winner")

    emitter.on(EngineEventType.GAME_ENDED, broken)
    emitter.on(EngineEventType.GAME_ENDED, after)
    emitter.emit(EngineEventType.GAME_ENDED, {"outcome": "X Won"})

    after.assert_called_once_with({"outcome": "X Won"})
    assert "Error in event handler for GAME_ENDED" in caplog.text


def test_event_bus_singleton():
    bus1 = EventBus.get_instance()
    bus2 = EventBus.get_instance()

    assert bus1 is bus2
    assert isinstance(bus1, EventEmitter)


@pytest.mark.asyncio
async def test_engine_publishes_mark_placed_payloads():
    engine = TicTacToeEngine(DummyAdapter())
    placed = []
    EventBus.get_instance().on(EngineEventType.MARK_PLACED, placed.append)

    await engine.start_game()
    await engine.move(1, 1)
    await engine.move(0, 2)

    assert [(d["row"], d["col"], d["mark"]) for d in placed] == [
        (1, 1, "X"),
        (0, 2, "O"),
    ]
    assert all(d["game_id"] == engine.game_id for d in placed)


@pytest.mark.asyncio
async def test_engine_publishes_game_ended_with_winning_line():
    engine = TicTacToeEngine(DummyAdapter())
    ended = []
    EventBus.get_instance().on(EngineEventType.GAME_ENDED, ended.append)

    for row, col in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        await engine.move(row, col)

    assert len(ended) == 1
    assert ended[0]["outcome"] == "X Won"
    assert ended[0]["winner"] == "X"
    assert list(ended[0]["winning_line"]) == [(0, 0), (0, 1), (0, 2)]
