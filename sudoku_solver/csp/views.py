# -*- coding: utf-8 -*-
"""
行・列・ブロックの「ビュー」を表すモジュールです。

ビューは 9 個のセルへの参照を持つだけで、値そのものは持ちません。
行・列・ブロックの違いは「どの 9 マスを選ぶか」だけなので、
検証ロジックは ConstraintView 1 つにまとめ、
メンバーの座標計算だけを関数（row_coords など）に分けています。
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..config import BLOCK_SIZE, GRID_SIZE
from ..types import Cell, CellCoord, Grid, Status


def row_coords(row: int) -> List[CellCoord]:
    return [(row, col) for col in range(GRID_SIZE)]


def column_coords(col: int) -> List[CellCoord]:
    return [(row, col) for row in range(GRID_SIZE)]


def block_coords(block_row: int, block_col: int) -> List[CellCoord]:
    """
    ブロック (block_row, block_col) の 9 マスの座標を行優先で返します。

    ブロック (br, bc) は 行 3br..3br+2、列 3bc..3bc+2 を占めます。
    """
    r0 = block_row * BLOCK_SIZE
    c0 = block_col * BLOCK_SIZE
    return [
        (r0 + dr, c0 + dc)
        for dr in range(BLOCK_SIZE)
        for dc in range(BLOCK_SIZE)
    ]


class ConstraintView:
    """
    「1〜9 は高々 1 回ずつ」という制約がかかる 9 マスのグループです。

    Attributes
    ----------
    kind : str
        "row" / "column" / "block"
    index : int
        行番号・列番号、またはブロック番号（行優先で 0〜8）
    cells : tuple of Cell
        参照している 9 個のセル（盤面上の Cell そのもの）
    """

    __slots__ = ("kind", "index", "cells")

    def __init__(self, kind: str, index: int, cells: Sequence[Cell]) -> None:
        if len(cells) != GRID_SIZE:
            raise ValueError(f"A view needs exactly {GRID_SIZE} cells, got {len(cells)}")
        self.kind = kind
        self.index = index
        self.cells: Tuple[Cell, ...] = tuple(cells)

    def __repr__(self) -> str:
        return f"ConstraintView({self.kind}={self.index})"

    @classmethod
    def from_coords(
        cls, grid: Grid, kind: str, index: int, coords: Sequence[CellCoord]
    ) -> "ConstraintView":
        return cls(kind, index, [grid[r][c] for r, c in coords])

    def validate(self) -> Status:
        """
        9 マスの現在値を数え上げて判定します。

        - 1〜9 がちょうど 1 回ずつ → ACCEPT（埋まっていて正しい）
        - 1〜9 のどれかが 2 回以上 → REJECT（空きマスが残っていても）
        - それ以外（重複なし・空きあり） → UNKNOWN
        """
        counts = [0] * (GRID_SIZE + 1)
        for cell in self.cells:
            counts[cell.value] += 1

        tallies = counts[1:]
        if all(n == 1 for n in tallies):
            return Status.ACCEPT
        if max(tallies) > 1:
            return Status.REJECT
        return Status.UNKNOWN

    def eliminate(self, value: int) -> None:
        """すべてのメンバーセルの候補から value を除外します。"""
        for cell in self.cells:
            cell.eliminate(value)


def row_view(grid: Grid, row: int) -> ConstraintView:
    return ConstraintView.from_coords(grid, "row", row, row_coords(row))


def column_view(grid: Grid, col: int) -> ConstraintView:
    return ConstraintView.from_coords(grid, "column", col, column_coords(col))


def block_view(grid: Grid, block_row: int, block_col: int) -> ConstraintView:
    index = block_row * (GRID_SIZE // BLOCK_SIZE) + block_col
    return ConstraintView.from_coords(
        grid, "block", index, block_coords(block_row, block_col)
    )
