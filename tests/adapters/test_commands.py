import pytest

from gridsharp.adapters import Command, CommandType, parse_command


@pytest.mark.parametrize(
    "text, row, col",
    [("0 0", 0, 0), ("1 2", 1, 2), ("  2\t1 ", 2, 1), ("-1 5", -1, 5)],
)
def test_parse_move(text, row, col):
    assert parse_command(text) == Command.move(row, col)


@pytest.mark.parametrize("text", ["R", "r", " R "])
def test_parse_reset(text):
    assert parse_command(text).type == CommandType.RESET


@pytest.mark.parametrize("text", ["E", "e"])
def test_parse_exit(text):
    assert parse_command(text).type == CommandType.EXIT


@pytest.mark.parametrize(
    "text", [None, "", "   ", "1", "a b", "1 b", "1 2 3", "1.5 2", "reset", "exit"]
)
def test_malformed_input_is_none(text):
    assert parse_command(text) is None
