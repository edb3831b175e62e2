# -*- coding: utf-8 -*-
"""
27 個のビュー（9 行・9 列・9 ブロック）をまとめるモジュールです。

Coordinator 自身はパズルの値を持ちません。
判定はいつも、参照しているセルの現在値から計算し直します。
"""

from __future__ import annotations

from typing import Iterator, List

from ..config import BLOCK_SIZE, GRID_SIZE
from ..types import Grid, Status
from .views import ConstraintView, block_view, column_view, row_view


class Coordinator:
    """
    座標 (row, col) から、そのセルを含む 3 つのビューを引き、
    制約チェックと候補除外をまとめて行います。

    Parameters
    ----------
    grid : Grid
        9x9 の Cell 配列。Coordinator は借りるだけで、コピーはしません。
    """

    def __init__(self, grid: Grid) -> None:
        if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
            raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}")

        n_blocks = GRID_SIZE // BLOCK_SIZE
        self.rows: List[ConstraintView] = [row_view(grid, r) for r in range(GRID_SIZE)]
        self.columns: List[ConstraintView] = [
            column_view(grid, c) for c in range(GRID_SIZE)
        ]
        self.blocks: List[List[ConstraintView]] = [
            [block_view(grid, br, bc) for bc in range(n_blocks)]
            for br in range(n_blocks)
        ]

    @classmethod
    def build(cls, grid: Grid) -> "Coordinator":
        return cls(grid)

    def block_for(self, row: int, col: int) -> ConstraintView:
        return self.blocks[row // BLOCK_SIZE][col // BLOCK_SIZE]

    def views(self) -> Iterator[ConstraintView]:
        """27 個すべてのビューを 行 → 列 → ブロック の順に返します。"""
        yield from self.rows
        yield from self.columns
        for block_row in self.blocks:
            yield from block_row

    def eliminate(self, value: int, row: int, col: int) -> None:
        """(row, col) を含む行・列・ブロックのセルの候補から value を除外します。"""
        self.rows[row].eliminate(value)
        self.columns[col].eliminate(value)
        self.block_for(row, col).eliminate(value)

    def test(self, row: int, col: int) -> Status:
        """(row, col) を含む 3 つのビューを検証し、combine でまとめます。"""
        return self.combine(
            self.rows[row].validate(),
            self.columns[col].validate(),
            self.block_for(row, col).validate(),
        )

    @staticmethod
    def combine(*statuses: Status) -> Status:
        """
        複数の判定を 1 つにまとめます。

        - どれか 1 つでも REJECT → REJECT（位置に関係なく優先）
        - そうでなく、どれかが UNKNOWN → UNKNOWN
        - 全部 ACCEPT → ACCEPT
        """
        result = Status.ACCEPT
        for status in statuses:
            if status is Status.REJECT:
                return Status.REJECT
            if status is Status.UNKNOWN:
                result = Status.UNKNOWN
        return result
