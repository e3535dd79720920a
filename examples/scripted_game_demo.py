#!/usr/bin/env python3
"""
Example demonstrating the TicTacToeEngine driven by a scripted adapter.

The DummyAdapter replays a fixed list of commands while event bus listeners
print what happens.
"""

import asyncio
import argparse

from gridsharp.adapters import DummyAdapter
from gridsharp.engine import TicTacToeEngine
from gridsharp.events import EventBus, EngineEventType

DEFAULT_SCRIPT = ["0 0", "1 1", "0 1", "1 0", "1 1", "0 2", "2 2", "R", "2 2"]


async def main():
    parser = argparse.ArgumentParser(description="Replay a scripted tic-tac-toe game.")
    parser.add_argument(
        "commands",
        nargs="*",
        default=DEFAULT_SCRIPT,
        help="commands to replay: 'row col', R or E",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="print every rendered board"
    )
    args = parser.parse_args()

    adapter = DummyAdapter(args.commands, verbose=args.verbose)
    engine = TicTacToeEngine(adapter)

    event_bus = EventBus.get_instance()

    def on_mark_placed(data):
        print(f"{data['mark']} -> ({data['row']}, {data['col']})")

    def on_move_rejected(data):
        print(f"rejected ({data['row']}, {data['col']}): {data['reason']}")

    def on_game_ended(data):
        print(f"Game over: {data['outcome']}")

    event_bus.on(EngineEventType.MARK_PLACED, on_mark_placed)
    event_bus.on(EngineEventType.MOVE_REJECTED, on_move_rejected)
    event_bus.on(EngineEventType.GAME_ENDED, on_game_ended)
    event_bus.on(EngineEventType.GAME_RESET, lambda data: print("Board reset"))

    await engine.initialize()
    await engine.start_game()
    result = await engine.play()
    await engine.shutdown()

    print(engine.game.board.render())
    print(f"Status: {result['outcome']}")


if __name__ == "__main__":
    asyncio.run(main())
