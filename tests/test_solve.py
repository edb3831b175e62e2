from pathlib import Path

import numpy as np
import pytest

from sudoku_solver import default_strategies, solve, solve_file
from sudoku_solver.csp.search import BacktrackingStrategy
from sudoku_solver.errors import InconsistentStateError, MalformedInputError
from sudoku_solver.eval.verification import clues_preserved, is_valid_solution
from sudoku_solver.grid.board import grid_values

PUZZLE_DIR = Path(__file__).resolve().parents[1] / "puzzles"

EULER_SOLUTION = np.array(
    [
        [4, 8, 3, 9, 2, 1, 6, 5, 7],
        [9, 6, 7, 3, 4, 5, 8, 2, 1],
        [2, 5, 1, 8, 7, 6, 4, 9, 3],
        [5, 4, 8, 1, 3, 2, 9, 7, 6],
        [7, 2, 9, 5, 6, 4, 1, 3, 8],
        [1, 3, 6, 7, 9, 8, 2, 4, 5],
        [3, 7, 2, 6, 8, 9, 5, 1, 4],
        [8, 1, 4, 2, 5, 3, 7, 6, 9],
        [6, 9, 5, 4, 1, 7, 3, 8, 2],
    ]
)


def test_solve_classic(make_df, make_board, classic_rows, classic_solution):
    result = solve(make_df(classic_rows))

    assert result.solved is True
    values = grid_values(result.grid)
    assert (values == classic_solution).all()
    assert is_valid_solution(values)
    assert clues_preserved(make_board(classic_rows), values)
    assert result.steps > 0
    assert result.elapsed_ms >= result.solve_ms >= 0.0


def test_solve_without_naked_single_gives_same_answer(make_df, classic_rows, classic_solution):
    result = solve(make_df(classic_rows), strategies=default_strategies(use_naked_single=False))
    assert result.solved
    assert result.promoted is False
    assert (grid_values(result.grid) == classic_solution).all()


def test_solve_unsolvable_is_a_result_not_an_error(make_df):
    result = solve(make_df(["77......."] + ["........."] * 8))
    assert result.solved is False
    values = grid_values(result.grid)
    assert values[0, 0] == values[0, 1] == 7
    assert int((values != 0).sum()) == 2


def test_solve_inconsistent_state_propagates(make_df):
    with pytest.raises(InconsistentStateError):
        solve(make_df(["12345678.", "........9"] + ["........."] * 7))


def test_solve_strict_rejects_unknown_token(make_df, classic_rows):
    df = make_df(classic_rows)
    df.iat[0, 2] = "?"
    with pytest.raises(MalformedInputError):
        solve(df, strict=True)
    # lenient mode treats it as a blank
    assert solve(df, strict=False).solved


def test_solve_custom_strategy_list(make_df, classic_rows):
    result = solve(make_df(classic_rows), strategies=[BacktrackingStrategy()])
    assert result.solved


def test_solve_file_classic(classic_solution):
    result = solve_file(PUZZLE_DIR / "classic.txt")
    assert result.solved
    assert result.source.endswith("classic.txt")
    assert (grid_values(result.grid) == classic_solution).all()


def test_solve_file_newspaper_uses_naked_singles():
    result = solve_file(PUZZLE_DIR / "newspaper.txt")
    assert result.solved
    assert result.promoted is True
    assert (grid_values(result.grid) == EULER_SOLUTION).all()


def test_is_valid_solution_detects_errors(classic_solution):
    assert is_valid_solution(classic_solution)

    broken = classic_solution.copy()
    broken[0, 0], broken[0, 1] = broken[0, 1], broken[0, 0]
    assert not is_valid_solution(broken)
    assert not is_valid_solution(classic_solution[:8])


class _PlainSearch:
    """process() だけを持つストラテジ（steps / promoted 属性なし）。"""

    name = "plain"

    def __init__(self):
        self._inner = BacktrackingStrategy()

    def process(self, grid, coordinator):
        return self._inner.process(grid, coordinator)


def test_solve_accepts_strategy_without_metrics(make_df, classic_rows, classic_solution):
    result = solve(make_df(classic_rows), strategies=[_PlainSearch()])
    assert result.solved
    assert (grid_values(result.grid) == classic_solution).all()
    assert result.steps == 0
    assert result.promoted is False
