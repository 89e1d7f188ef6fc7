import numpy as np
import pytest

from connect_four.utils import (ROWS, COLS, Cell, GameResult, MatchOutcome, MoveResult,
                                Player, find_winning_line, is_valid_position,
                                render_board_ascii)


def empty_grid():
    return np.zeros((ROWS, COLS), dtype=int)


def test_cell_other():
    assert Cell.PLAYER_ONE.other() == Cell.PLAYER_TWO
    assert Cell.PLAYER_TWO.other() == Cell.PLAYER_ONE
    assert Cell.EMPTY.other() == Cell.EMPTY


def test_cell_symbols():
    assert [str(c) for c in Cell] == [".", "X", "O"]


def test_result_flags():
    assert MoveResult.ACCEPTED.accepted
    assert not MoveResult.COLUMN_FULL.accepted
    assert not GameResult.IN_PROGRESS.is_game_over()
    assert GameResult.WON.is_game_over()
    assert GameResult.DRAWN.is_game_over()


@pytest.mark.parametrize("row, col, expected", [
    (0, 0, True), (ROWS - 1, COLS - 1, True), (-1, 0, False),
    (0, -1, False), (ROWS, 0, False), (0, COLS, False),
])
def test_is_valid_position(row, col, expected):
    assert is_valid_position(row, col) is expected


def test_horizontal_line():
    grid = empty_grid()
    for col in range(2, 6):
        grid[ROWS - 3, col] = Cell.PLAYER_TWO.value
    assert find_winning_line(grid) == [(3, 2), (3, 3), (3, 4), (3, 5)]


def test_vertical_line():
    grid = empty_grid()
    for row in range(ROWS - 1, ROWS - 5, -1):
        grid[row, 3] = Cell.PLAYER_ONE.value
    assert find_winning_line(grid) == [(2, 3), (3, 3), (4, 3), (5, 3)]


def test_down_right_line():
    grid = empty_grid()
    for i in range(4):
        grid[i, i] = Cell.PLAYER_TWO.value
    assert find_winning_line(grid) == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_down_left_line():
    grid = empty_grid()
    for i in range(4):
        grid[ROWS - 1 - i, i] = Cell.PLAYER_ONE.value
    assert find_winning_line(grid) == [(2, 3), (3, 2), (4, 1), (5, 0)]


def test_three_in_a_row_is_not_a_line():
    grid = empty_grid()
    for col in range(3):
        grid[ROWS - 2, col] = Cell.PLAYER_ONE.value
    assert find_winning_line(grid) == []


def test_broken_sequence_is_not_a_line():
    grid = empty_grid()
    for col in range(5):
        if col != 2:
            grid[ROWS - 1, col] = Cell.PLAYER_ONE.value
    assert find_winning_line(grid) == []


def test_mixed_marks_are_not_a_line():
    grid = empty_grid()
    grid[ROWS - 1, 0:4] = [1, 1, 2, 1]
    assert find_winning_line(grid) == []


def test_lines_do_not_wrap_between_rows():
    grid = empty_grid()
    grid[4, 5] = grid[4, 6] = Cell.PLAYER_ONE.value
    grid[5, 0] = grid[5, 1] = Cell.PLAYER_ONE.value
    assert find_winning_line(grid) == []


def test_render_board_ascii():
    grid = empty_grid()
    grid[5, 0] = Cell.PLAYER_ONE.value
    grid[5, 1] = Cell.PLAYER_TWO.value
    lines = render_board_ascii(grid).split("\n")
    assert len(lines) == ROWS + 1
    assert lines[0] == ". . . . . . ."
    assert lines[5] == "X O . . . . ."
    assert lines[6] == "1 2 3 4 5 6 7"


def test_match_outcome():
    alice = Player("Alice", Cell.PLAYER_ONE)
    win = MatchOutcome.win(alice, [(5, 0), (5, 1), (5, 2), (5, 3)])
    assert not win.is_draw
    assert win.winner == alice
    assert win.winning_line == ((5, 0), (5, 1), (5, 2), (5, 3))
    assert str(win) == "Win(Alice)"

    draw = MatchOutcome.draw()
    assert draw.is_draw
    assert draw.winning_line == ()
    assert str(draw) == "Draw"


def test_player_symbol():
    assert Player("", Cell.PLAYER_TWO).symbol == "O"
