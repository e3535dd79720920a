import argparse
import asyncio
import logging

from gridsharp.adapters import CLIAdapter
from gridsharp.common.io_interface import ConsoleIOInterface, LoggingIOInterface
from gridsharp.engine import TicTacToeEngine


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play tic-tac-toe on the console.")
    parser.add_argument(
        "-s", "--size", type=int, default=3, help="board dimension (default: 3)"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="do not clear the screen between moves",
    )
    parser.add_argument(
        "-t",
        "--transcript",
        default=None,
        help="append everything shown on screen to this file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error("size must be a positive integer")
    return args


async def run(args) -> dict:
    io_interface = ConsoleIOInterface()
    if args.transcript:
        io_interface = LoggingIOInterface(args.transcript, inner=io_interface)

    adapter = CLIAdapter(io_interface, clear_screen=not args.no_clear)
    engine = TicTacToeEngine(adapter, {"board_size": args.size})

    await engine.initialize()
    try:
        await engine.start_game()
        return await engine.play()
    finally:
        await engine.shutdown()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
