import pytest

from tictactoe.board import Board, LINES
from tictactoe.enums import Cell, Player


def fill(board, marks):
    """Place marks row by row from a 3-line picture ('X', 'O' or '.')."""
    for r, row in enumerate(marks):
        for c, ch in enumerate(row):
            if ch != '.':
                board.set_value(r, c, Player(ch))


def test_new_board_is_empty():
    board = Board()
    assert board.get_move_count() == 0
    assert all(board.get_value(r, c) is Cell.EMPTY
               for r in range(3) for c in range(3))
    assert len(board.empty_cells()) == 9


def test_each_cell_valid_until_occupied():
    board = Board()
    for r in range(3):
        for c in range(3):
            assert board.is_valid_move(r, c)
            board.set_value(r, c, Player.X)
            assert not board.is_valid_move(r, c)
    assert board.is_full()


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3), (1.0, 1), (None, 0)])
def test_out_of_range_is_not_a_valid_move(row, col):
    assert not Board().is_valid_move(row, col)


def test_set_value_ignores_occupied_and_out_of_range():
    board = Board()
    board.set_value(1, 1, Player.X)
    board.set_value(1, 1, Player.O)
    board.set_value(5, 5, Player.O)
    assert board.get_value(1, 1) is Cell.X
    assert board.get_move_count() == 1


def test_get_value_off_board_raises():
    board = Board()
    with pytest.raises(IndexError):
        board.get_value(3, 0)
    with pytest.raises(IndexError):
        board.get_value(-1, 2)


def test_there_are_eight_lines():
    assert len(LINES) == 8
    assert len(set(LINES)) == 8


@pytest.mark.parametrize("picture, winner", [
    (["XXX", "OO.", "..."], Player.X),
    (["O..", "XO.", "X.O"], Player.O),
    (["X.O", "XO.", "O.X"], Player.O),
    ([".X.", "OXO", ".X."], Player.X),
])
def test_is_winner_detects_lines(picture, winner):
    board = Board()
    fill(board, picture)
    assert board.is_winner(winner)
    assert not board.is_winner(winner.opposite())


def test_no_winner_on_partial_line():
    board = Board()
    fill(board, ["XX.", "OO.", "..."])
    assert not board.is_winner(Player.X)
    assert not board.is_winner(Player.O)


def test_full_board_is_tie():
    board = Board()
    fill(board, ["XOX", "XOO", "OXX"])
    assert board.is_full()
    assert board.is_tie()


def test_early_tie_with_empty_cell():
    # every row, col and diagonal already holds both marks
    board = Board()
    fill(board, ["XOX", "XOO", "OX."])
    assert board.get_move_count() == 8
    assert not board.is_full()
    assert board.is_tie()


def test_two_open_cells_never_tie():
    # the two blanks share no line, yet some line always stays one-coloured
    board = Board()
    fill(board, ["XOX", "XOO", ".X."])
    assert board.get_move_count() == 7
    assert not board.is_tie()


def test_open_line_is_not_tie():
    board = Board()
    fill(board, ["XOX", "OXO", "..."])
    assert not board.is_tie()


def test_clear_resets_everything():
    board = Board()
    fill(board, ["XO.", ".X.", "..O"])
    board.clear()
    assert board.get_move_count() == 0
    assert board.empty_cells() == [(r, c) for r in range(3) for c in range(3)]


def test_str_shows_marks():
    board = Board()
    board.set_value(0, 0, Player.X)
    board.set_value(2, 2, Player.O)
    text = str(board)
    assert text.startswith("0  X |   | ")
    assert text.endswith("2    |   | O")
