# -*- coding: utf-8 -*-
"""
バックトラック探索を行うモジュールです。

ざっくり流れ
------------
1. 盤面を行優先（row 0 の col 0..8 → row 1 → ... → row 8）で 1 マスずつ進む
2. 未設定のマスには、候補を小さい順に仮置きして Coordinator.test() で判定
3. 判定に応じて
   - ACCEPT  : 次のマスへ再帰
   - UNKNOWN : 次のマスへ再帰し、REJECT でなければこのマスを判定し直す
   - REJECT  : 次の候補を試す。候補がなければ REJECT を親に返す
4. REJECT で抜けるときは、必ず仮置きを取り消す（try/finally）
5. row が 9 に達したら ACCEPT（盤面がすべて正しく埋まった）

MRV のような「制約の強いマスから選ぶ」ヒューリスティックは使いません。
走査順と候補の試行順は固定で、結果もそれに依存します。

再帰の深さは最大でも 81 なので、Python の再帰上限には届きません。
"""

from __future__ import annotations

from typing import Iterator, Optional

from ..config import GRID_SIZE, SEARCH_PROGRESS_INTERVAL
from ..errors import InconsistentStateError
from ..logging_utils import get_logger
from ..types import CellCoord, Grid, Status
from .coordinator import Coordinator

logger = get_logger()


def successor(row: int, col: int) -> CellCoord:
    """行優先で次のマスの座標を返します。最後のマスの次は (9, 0)。"""
    if col + 1 < GRID_SIZE:
        return row, col + 1
    return row + 1, 0


def _next_candidate(remaining: Iterator[int]) -> Optional[int]:
    return next(remaining, None)


class BacktrackingStrategy:
    """
    深さ優先のバックトラック探索です。

    Attributes
    ----------
    steps : int
        直近の process() で訪れたフレーム数（ログ・計測用）。
    """

    name = "backtracking"

    def __init__(self, progress_interval: int = SEARCH_PROGRESS_INTERVAL) -> None:
        self.progress_interval = progress_interval
        self.steps = 0

    def process(self, grid: Grid, coordinator: Coordinator) -> bool:
        """
        探索のエントリポイント。

        Returns
        -------
        bool
            最終判定が REJECT でなければ True（解けた）。
            False の場合、仮置きはすべて取り消されています。

        Raises
        ------
        InconsistentStateError
            未設定のマスに候補が 1 つも残っていなかった場合。
        """
        self.steps = 0
        status = self._visit(grid, coordinator, 0, 0)
        logger.info("[search] finished: status=%s, steps=%d", status.name, self.steps)
        return status is not Status.REJECT

    def _visit(self, grid: Grid, coordinator: Coordinator, row: int, col: int) -> Status:
        if row == GRID_SIZE:
            return Status.ACCEPT

        self.steps += 1
        if self.progress_interval and self.steps % self.progress_interval == 0:
            logger.debug("[search] steps = %d, cell[%d,%d]", self.steps, row, col)

        next_row, next_col = successor(row, col)
        cell = grid[row][col]
        # このフレームで試す候補の順番（小さい順）
        remaining = iter(sorted(cell.candidates))
        status = cell.status()

        if cell.is_unset():
            value = _next_candidate(remaining)
            if value is None:
                raise InconsistentStateError(row, col)
            cell.propose(value)
            status = coordinator.test(row, col)

        try:
            while True:
                if status is Status.ACCEPT:
                    status = self._visit(grid, coordinator, next_row, next_col)
                elif status is Status.UNKNOWN:
                    # 下流を埋めてみないと、このマスの正否は決まらない
                    status = self._visit(grid, coordinator, next_row, next_col)
                    if status is not Status.REJECT:
                        status = coordinator.test(row, col)
                else:
                    value = _next_candidate(remaining)
                    if value is None:
                        return status
                    cell.propose(value)
                    status = coordinator.test(row, col)

                if status is Status.ACCEPT:
                    break
        finally:
            # どの経路で抜けても、REJECT なら仮置きを取り消す
            if status is Status.REJECT:
                cell.undo()

        return status
