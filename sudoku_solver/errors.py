# -*- coding: utf-8 -*-
"""
sudoku_solver で使う例外クラスをまとめたモジュールです。

「解なし」は例外ではありません。
SolveResult.solved == False として呼び出し側に返します。
ここにあるのは、入力が壊れている場合と、内部状態が壊れている場合だけです。
"""

from __future__ import annotations

from typing import Any, Optional


class SudokuError(Exception):
    """sudoku_solver が送出する例外の基底クラス。"""

    pass


class MalformedInputError(SudokuError, ValueError):
    """盤面のトークン、または盤面の形が解釈できないときに送出します。"""

    def __init__(
        self,
        message: str,
        row: Optional[int] = None,
        col: Optional[int] = None,
        token: Any = None,
    ) -> None:
        super().__init__(message)
        self.row = row
        self.col = col
        self.token = token


class InconsistentStateError(SudokuError, RuntimeError):
    """
    探索が、候補の残っていない未設定マスに到達したときに送出します。

    内部の不変条件が壊れている状態で、「解なし」とは区別します。
    """

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"No viable value; cell[{row},{col}]")
        self.row = row
        self.col = col
