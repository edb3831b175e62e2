# -*- coding: utf-8 -*-
"""
制約伝播（propagation）を行うモジュールです。

ここでの伝播は「naked single」1 種類だけです。
- 候補が 1 つしか残っていないセルは、その値で確定できる

ヒント読み込み時の eliminate() で候補が絞られているので、
探索前に 1 回だけ全マスを走査して、確定できるものを確定させます。

なお、1 回走査するだけで、不動点まで繰り返すことはしません。
また、ここで確定した値については Coordinator.eliminate() を呼びません。
（衝突する仮置きは探索側の test() で REJECT されるため、正しさは変わりません）
"""

from __future__ import annotations

from ..config import GRID_SIZE
from ..logging_utils import get_logger
from ..types import Grid
from .coordinator import Coordinator

logger = get_logger()


def promote_naked_singles(grid: Grid) -> int:
    """
    候補が 1 つだけのセルを set_fixed() で確定させます。

    走査順は行優先（row 0 の col 0..8、row 1 ...）です。

    Returns
    -------
    int
        確定させたセルの数。
    """
    promoted = 0
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            cell = grid[row][col]
            cands = cell.candidates
            if len(cands) != 1:
                continue
            (value,) = cands
            # set_fixed() は候補集合も空にする
            cell.set_fixed(value)
            promoted += 1
            logger.debug("[naked single] cell[%d,%d] -> %d", row, col, value)
    return promoted


class NakedSingleStrategy:
    """
    バックトラック探索の前に 1 回だけ走らせる前処理ストラテジです。

    省略しても結果は変わらず、探索の深さが変わるだけです。
    """

    name = "naked_single"

    def __init__(self) -> None:
        self.promoted = 0

    def process(self, grid: Grid, coordinator: Coordinator) -> bool:
        """確定したセルがあれば True を返します（情報用）。"""
        self.promoted = promote_naked_singles(grid)
        logger.info("Naked single promoted %d cells.", self.promoted)
        return self.promoted > 0
