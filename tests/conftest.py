# tests/conftest.py
import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

# Add project root to sys.path so "sudoku_solver" and "api_proto" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_solver.csp.coordinator import Coordinator  # noqa: E402
from sudoku_solver.grid.board import create_grid, load_clues  # noqa: E402

# "." marks a blank cell in these row strings
CLASSIC = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]

CLASSIC_SOLUTION = [
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
]


def _to_board(rows):
    return np.array([[0 if ch == "." else int(ch) for ch in row] for row in rows], dtype=int)


@pytest.fixture
def classic_rows():
    return list(CLASSIC)


@pytest.fixture
def classic_solution():
    return _to_board(CLASSIC_SOLUTION)


@pytest.fixture
def make_df():
    """Row strings -> DataFrame of single-character tokens ('.' becomes 'x')."""

    def _make(rows):
        return pd.DataFrame([["x" if ch == "." else ch for ch in row] for row in rows])

    return _make


@pytest.fixture
def make_board():
    return _to_board


@pytest.fixture
def grid():
    return create_grid()


@pytest.fixture
def coordinator(grid):
    return Coordinator(grid)


@pytest.fixture
def load_puzzle():
    """Row strings -> (grid, coordinator) with clues loaded per the loader contract."""

    def _load(rows):
        g = create_grid()
        coord = Coordinator(g)
        load_clues(g, coord, _to_board(rows))
        return g, coord

    return _load


@pytest.fixture
def write_board(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
