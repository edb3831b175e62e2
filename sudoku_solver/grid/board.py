# -*- coding: utf-8 -*-
"""
Cell の 9x9 配列（Grid）を作り、ヒントを流し込むモジュールです。

ヒントを流し込むときの約束（ローダー契約）:
1. ヒントのマスには set_fixed(v) を呼ぶ
2. 続けて Coordinator.eliminate(v, row, col) を呼び、
   同じ行・列・ブロックのセルの候補から v を除外する

2 を忘れると、前処理や探索がすでに使われた数字を候補として扱ってしまいます。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from ..config import GRID_SIZE, UNSET_VALUE
from ..types import Cell, Grid

if TYPE_CHECKING:
    from ..csp.coordinator import Coordinator


def create_grid() -> Grid:
    """すべて未設定の 9x9 Grid を作ります。"""
    return [[Cell() for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]


def load_clues(grid: Grid, coordinator: "Coordinator", board: np.ndarray) -> int:
    """
    正規化済みの盤面（0 = 空きマス）から、ヒントを Grid に設定します。

    Returns
    -------
    int
        設定したヒントの数。
    """
    count = 0
    for (row, col), v in np.ndenumerate(board):
        value = int(v)
        if value == UNSET_VALUE:
            continue
        grid[row][col].set_fixed(value)
        coordinator.eliminate(value, row, col)
        count += 1
    return count


def grid_values(grid: Grid) -> np.ndarray:
    """Grid の現在値を 9x9 の整数配列として取り出します。"""
    return np.array([[cell.value for cell in row] for row in grid], dtype=int)
