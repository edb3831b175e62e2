import pytest

from sudoku_solver.errors import MalformedInputError
from sudoku_solver.grid.board import create_grid, grid_values, load_clues
from sudoku_solver.grid.loader import load_board
from sudoku_solver.grid.parser import normalize_grid
from sudoku_solver.csp.coordinator import Coordinator

BOARD_TEXT = """\
# comment lines and blank lines are skipped

5 3 x x 7 x x x x
6 x x 1 9 5 x x x
x 9 8 x x x x 6 x
8 x x x 6 x x x 3
4 x x 8 x 3 x x 1
7 x x x 2 x x x 6

x 6 x x x x 2 8 x
x x x 4 1 9 x x 5
x x x x 8 x x 7 9
"""


def test_load_board_reads_tokens_as_strings(write_board):
    df = load_board(write_board("classic.txt", BOARD_TEXT))
    assert df.shape == (9, 9)
    assert df.iat[0, 0] == "5"
    assert df.iat[0, 2] == "x"
    assert df.iat[4, 0] == "4"


def test_load_board_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_board(tmp_path / "nope.txt")


def test_load_board_empty_file(write_board):
    with pytest.raises(MalformedInputError):
        load_board(write_board("empty.txt", ""))


def test_load_board_ragged_line(write_board):
    text = "x x x x x x x x x\n" + "x x x x x x x x x x\n" + "x x x x x x x x x\n" * 7
    with pytest.raises(MalformedInputError):
        load_board(write_board("ragged.txt", text))


def test_short_line_is_blank_unless_strict(write_board):
    text = "1 2 3 4 5 6 7 8 9\n" + "x x x x x x x x\n" + "x x x x x x x x x\n" * 7
    df = load_board(write_board("short.txt", text))
    board = normalize_grid(df, strict=False)
    assert board[1].tolist() == [0] * 9
    with pytest.raises(MalformedInputError):
        normalize_grid(df, strict=True)


def test_load_clues_fixes_and_eliminates(make_board, classic_rows):
    grid = create_grid()
    coordinator = Coordinator(grid)
    n = load_clues(grid, coordinator, make_board(classic_rows))

    assert n == 30
    assert grid[0][0].is_fixed() and grid[0][0].value == 5
    assert grid[0][0].candidates == frozenset()
    # 5 is gone from the row, column and block of (0,0)
    assert 5 not in grid[0][8].candidates
    assert 5 not in grid[2][0].candidates
    assert 5 not in grid[1][2].candidates
    assert 5 not in grid[8][0].candidates
    # (2,3) loses row 2 {9,8,6}, column 3 {1,8,4} and block 1 {7,1,9,5}
    assert grid[2][3].candidates == frozenset({2, 3})


def test_grid_values_round_trip(make_board, classic_rows, load_puzzle):
    grid, _ = load_puzzle(classic_rows)
    assert (grid_values(grid) == make_board(classic_rows)).all()


def test_load_board_invalid_utf8(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"\xe9 x x x x x x x x\n" * 9)
    with pytest.raises(MalformedInputError):
        load_board(path)
