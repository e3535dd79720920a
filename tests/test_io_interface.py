import asyncio

import pytest
from gridsharp.adapters import CLIAdapter
from gridsharp.common.io_interface import (
    AsyncIOInterfaceWrapper,
    ConsoleIOInterface,
    LoggingIOInterface,
    TestIOInterface,
)
from gridsharp.engine import TicTacToeEngine


def test_console_io_interface_methods(mocker, capsys):
    interface = ConsoleIOInterface()

    mocker.patch("builtins.input", side_effect=["1 1", "R"])

    interface.output("Test message")
    assert capsys.readouterr().out == "Test message\n"

    assert interface.input("> ") == "1 1"
    assert interface.input("> ") == "R"


def test_test_io_interface_methods():
    interface = TestIOInterface(["0 0"])

    interface.output("Test")
    assert interface.sent_messages == ["Test"]

    assert interface.input("first? ") == "0 0"
    # Falls back to the exit command once the queue is empty
    assert interface.input("second? ") == "E"
    assert interface.prompts == ["first? ", "second? "]

    interface.add_input("R")
    assert interface.input("") == "R"


def test_logging_io_interface_writes_transcript(tmp_path):
    log_file = tmp_path / "transcript.txt"
    interface = LoggingIOInterface(str(log_file))

    interface.output("Status: Playing")
    assert interface.input("move? ") == "E"

    assert log_file.read_text(encoding="utf-8").splitlines() == [
        "Status: Playing",
        "[INPUT PROMPT] move? ",
    ]


def test_logging_io_interface_wraps_inner(tmp_path):
    log_file = tmp_path / "transcript.txt"
    inner = TestIOInterface(["1 2"])
    interface = LoggingIOInterface(str(log_file), inner=inner)

    interface.output("board")
    assert interface.input("> ") == "1 2"

    assert inner.sent_messages == ["board"]
    assert log_file.read_text(encoding="utf-8").splitlines() == ["board", "> 1 2"]


@pytest.mark.asyncio
async def test_logging_io_interface_output_async(tmp_path):
    log_file = tmp_path / "transcript.txt"
    interface = LoggingIOInterface(str(log_file))

    await interface.output_async("line one")
    await interface.output_async("line two")

    assert log_file.read_text(encoding="utf-8") == "line one\nline two\n"


@pytest.mark.asyncio
async def test_async_wrapper_delegates():
    inner = TestIOInterface(["2 2"])
    wrapper = AsyncIOInterfaceWrapper(inner)
    try:
        await wrapper.output("hello")
        assert await wrapper.input("> ") == "2 2"
    finally:
        wrapper.close()

    assert inner.sent_messages == ["hello"]


@pytest.mark.asyncio
async def test_play_ends_when_transcript_has_no_input_source(tmp_path):
    log_file = tmp_path / "transcript.txt"
    adapter = CLIAdapter(LoggingIOInterface(str(log_file)), clear_screen=False)
    engine = TicTacToeEngine(adapter)

    try:
        result = await asyncio.wait_for(engine.play(), timeout=2)
    finally:
        await adapter.shutdown()

    assert result["outcome"] == "Not Started"
    assert "[INPUT PROMPT] " in log_file.read_text(encoding="utf-8")
