# -*- coding: utf-8 -*-
"""
解いた盤面の最終確認を行うモジュールです。

- find_invalid_views : Coordinator の 27 ビューのうち ACCEPT でないもの
- is_valid_solution  : numpy 配列の盤面が完成していて正しいか
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..config import ALL_VALUES, BLOCK_SIZE, GRID_SIZE
from ..csp.coordinator import Coordinator
from ..csp.views import ConstraintView
from ..types import Status

_EXPECTED = np.array(ALL_VALUES, dtype=int)


def find_invalid_views(coordinator: Coordinator) -> List[ConstraintView]:
    return [v for v in coordinator.views() if v.validate() is not Status.ACCEPT]


def is_valid_solution(board: np.ndarray) -> bool:
    """
    すべての行・列・ブロックに 1〜9 がちょうど 1 回ずつ現れるかを調べます。
    """
    board = np.asarray(board, dtype=int)
    if board.shape != (GRID_SIZE, GRID_SIZE):
        return False

    rows_ok = (np.sort(board, axis=1) == _EXPECTED).all()
    cols_ok = (np.sort(board, axis=0).T == _EXPECTED).all()

    # (br, r, bc, c) に並べ替えて、ブロックごとに 9 要素へまとめる
    n = GRID_SIZE // BLOCK_SIZE
    blocks = (
        board.reshape(n, BLOCK_SIZE, n, BLOCK_SIZE)
        .transpose(0, 2, 1, 3)
        .reshape(GRID_SIZE, GRID_SIZE)
    )
    blocks_ok = (np.sort(blocks, axis=1) == _EXPECTED).all()

    return bool(rows_ok and cols_ok and blocks_ok)


def clues_preserved(original: np.ndarray, solved: np.ndarray) -> bool:
    """元のヒント（0 以外）が解いた盤面でも同じ値のままかを調べます。"""
    original = np.asarray(original, dtype=int)
    solved = np.asarray(solved, dtype=int)
    mask = original != 0
    return bool((original[mask] == solved[mask]).all())
