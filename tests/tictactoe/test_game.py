"""
Tests for the GameEngine move protocol.
"""

import pytest

from gridsharp.common.board import BLANK_CELL
from gridsharp.common.errors import InvalidCoordinateError
from gridsharp.state.models import GameOutcome
from gridsharp.tictactoe.game import GameEngine


def play(game, moves):
    return [game.move(row, col) for row, col in moves]


# No line for either mark:
#   X O X
#   X O O
#   O X X
DRAW_MOVES = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


@pytest.fixture
def game():
    return GameEngine()


def test_new_game(game):
    assert game.size == 3
    assert game.turn == "X"
    assert game.outcome == GameOutcome.NOT_STARTED
    assert list(game.cells()) == [BLANK_CELL] * 9
    assert not game.is_over
    assert game.winner is None


def test_first_move_starts_game(game):
    assert game.move(1, 1) is True
    assert game.board.value_at(1, 1) == "X"
    assert game.turn == "O"
    assert game.outcome == GameOutcome.PLAYING


def test_turn_alternates_strictly(game):
    marks = []
    for row, col in [(0, 0), (1, 1), (2, 2), (0, 2)]:
        marks.append(game.turn)
        assert game.move(row, col)
        assert game.board.value_at(row, col) == marks[-1]
    assert marks == ["X", "O", "X", "O"]


def test_move_on_occupied_cell_is_ignored(game):
    game.move(0, 0)
    cells = list(game.cells())
    turn, outcome = game.turn, game.outcome

    assert game.move(0, 0) is False
    assert list(game.cells()) == cells
    assert game.turn == turn
    assert game.outcome == outcome


def test_move_out_of_range_raises(game):
    with pytest.raises(InvalidCoordinateError):
        game.move(3, 0)
    assert game.outcome == GameOutcome.NOT_STARTED
    assert game.turn == "X"


def test_row_win_scenario(game):
    play(game, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
    assert game.outcome == GameOutcome.X_WON
    assert game.winner == "X"
    assert game.is_over
    assert game.winning_line == [(0, 0), (0, 1), (0, 2)]

    cells = list(game.cells())
    assert game.move(2, 2) is False
    assert list(game.cells()) == cells
    assert game.board.value_at(2, 2) == BLANK_CELL


def test_column_win_for_o(game):
    play(game, [(0, 0), (0, 1), (2, 2), (1, 1), (1, 0), (2, 1)])
    assert game.outcome == GameOutcome.O_WON
    assert game.winner == "O"
    assert game.winning_line == [(0, 1), (1, 1), (2, 1)]


def test_main_diagonal_win(game):
    play(game, [(0, 0), (0, 1), (1, 1), (0, 2), (2, 2)])
    assert game.outcome == GameOutcome.X_WON
    assert game.winning_line == [(0, 0), (1, 1), (2, 2)]


def test_anti_diagonal_win(game):
    play(game, [(0, 2), (0, 0), (1, 1), (0, 1), (2, 0)])
    assert game.outcome == GameOutcome.X_WON
    assert game.winning_line == [(0, 2), (1, 1), (2, 0)]


def test_draw_scenario(game):
    assert all(play(game, DRAW_MOVES))
    assert game.outcome == GameOutcome.DRAW
    assert game.winner is None
    assert game.winning_line is None
    assert game.is_over


def test_no_move_after_draw(game):
    play(game, DRAW_MOVES)
    assert game.outcome == GameOutcome.DRAW
    # Every cell is taken; a freed cell is refused as well
    game.board.assign(0, 0, BLANK_CELL)
    assert game.move(0, 0) is False
    assert game.board.value_at(0, 0) == BLANK_CELL


def test_win_on_last_cell_beats_draw(game):
    #   X O X
    #   O X O
    #   O X X   <- ninth mark fills the board and completes the diagonal
    moves = [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (2, 0), (2, 1), (1, 2), (2, 2)]
    assert all(play(game, moves))
    assert game.board.is_full()
    assert game.outcome == GameOutcome.X_WON
    assert game.winning_line == [(0, 0), (1, 1), (2, 2)]


def test_reset_restores_everything(game):
    play(game, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
    board = game.board
    game.reset()

    assert game.board is board
    assert game.turn == "X"
    assert game.outcome == GameOutcome.NOT_STARTED
    assert list(game.cells()) == [BLANK_CELL] * 9
    assert game.move(2, 2) is True


@pytest.mark.parametrize("size", [1, 2, 4])
def test_other_board_sizes(size):
    game = GameEngine(size)
    assert len(list(game.cells())) == size * size
    for col in range(size):
        game.move(0, col)
        if game.is_over:
            break
        if size > 1:
            game.move(size - 1, col)
    assert game.outcome == GameOutcome.X_WON


def test_single_cell_board_is_won_immediately():
    game = GameEngine(1)
    assert game.move(0, 0)
    assert game.outcome == GameOutcome.X_WON


def test_to_dict_and_adapter_format(game):
    play(game, [(0, 0), (1, 1)])
    data = game.to_dict()
    assert data["turn"] == "X"
    assert data["outcome"] == GameOutcome.PLAYING
    assert data["cells"][0] == "X"
    assert data["cells"][4] == "O"
    assert data["winner"] is None

    adapter_state = game.to_adapter_format()
    assert adapter_state["current_player"] == "X"
    assert adapter_state["status"] == "Playing"
    assert adapter_state["rows"][1] == [" ", "O", " "]
    assert adapter_state["board_text"] == game.board.render()
