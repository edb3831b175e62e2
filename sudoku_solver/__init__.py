# sudoku_solver/__init__.py
# -*- coding: utf-8 -*-
"""
sudoku_solver パッケージの入口となるモジュールです。

CLI や api_proto/local_api.py などから:

    from sudoku_solver import solve, solve_file

と呼び出されることを想定しています。

ここでは、盤面（pandas.DataFrame）を受け取り、
1. 盤面の正規化（トークン → 9x9 の整数配列）
2. Grid（Cell の 9x9 配列）と Coordinator の構築
3. ヒントの流し込み（set_fixed + 候補除外）
4. ストラテジの順次実行（naked single → バックトラック探索）
5. 最終確認と計測時間の記録
を順番に呼び出します。

Grid の所有者はこのモジュール（solve()）です。
Coordinator と各ストラテジは、1 回の solve の間だけ Grid を借りて使います。

ストラテジは process(grid, coordinator) -> bool を持つオブジェクトなら何でもよく、
最後に実行したストラテジの戻り値を「解けたかどうか」とみなします。
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from .config import STRICT_INPUT, USE_NAKED_SINGLE
from .csp.coordinator import Coordinator
from .csp.propagation import NakedSingleStrategy
from .csp.search import BacktrackingStrategy
from .errors import InconsistentStateError, MalformedInputError, SudokuError
from .eval.verification import find_invalid_views
from .grid.board import create_grid, load_clues
from .grid.loader import load_board
from .grid.parser import normalize_grid
from .logging_utils import get_logger
from .types import SolveResult, Status

logger = get_logger()

__all__ = [
    "solve",
    "solve_file",
    "default_strategies",
    "SolveResult",
    "Status",
    "SudokuError",
    "MalformedInputError",
    "InconsistentStateError",
]


def default_strategies(use_naked_single: bool = USE_NAKED_SINGLE) -> list:
    """naked single（任意）→ バックトラック探索 の順のストラテジ列を返します。"""
    strategies: list = []
    if use_naked_single:
        strategies.append(NakedSingleStrategy())
    strategies.append(BacktrackingStrategy())
    return strategies


def solve(
    df: pd.DataFrame,
    strict: bool = STRICT_INPUT,
    strategies: Optional[Sequence] = None,
    source: Optional[str] = None,
) -> SolveResult:
    """
    数独を解くメイン関数。

    Parameters
    ----------
    df : pandas.DataFrame
        9x9 の盤面。各セルは "1"〜"9" か空きマス記号（"x" など）。
    strict : bool
        True なら不正トークンで MalformedInputError を送出します。
    strategies : sequence, optional
        実行するストラテジ。省略時は default_strategies()。
    source : str, optional
        表示用の盤面名（ファイルパスなど）。

    Returns
    -------
    SolveResult
        solved=False は「解なし」で、例外ではありません。

    Raises
    ------
    MalformedInputError
        盤面の形が 9x9 でない、または strict=True で不正トークンがある場合。
    InconsistentStateError
        探索中に、候補のない未設定マスに到達した場合。
    """
    game_start = time.perf_counter()
    logger.info("=== solve() START === %s", source or "")

    # 1) 盤面パース
    board = normalize_grid(df, strict=strict)

    # 2) Grid と Coordinator
    grid = create_grid()
    coordinator = Coordinator.build(grid)

    # 3) ヒントの流し込み
    n_clues = load_clues(grid, coordinator, board)
    logger.info("Loaded %d clues.", n_clues)

    # 4) ストラテジの実行
    if strategies is None:
        strategies = default_strategies()

    proc_start = time.perf_counter()
    solved = False
    promoted = False
    steps = 0
    for strategy in strategies:
        ok = strategy.process(grid, coordinator)
        # 計測用の属性は、持っているストラテジからだけ拾う
        promoted = promoted or getattr(strategy, "promoted", 0) > 0
        steps = getattr(strategy, "steps", steps)
        solved = ok
    now = time.perf_counter()

    # 5) 最終確認（全ビューが ACCEPT になっているか）
    if solved:
        invalid = find_invalid_views(coordinator)
        for view in invalid:
            logger.warning("[WARNING] %r is not complete after solve.", view)
        solved = not invalid

    result = SolveResult(
        solved=solved,
        grid=grid,
        promoted=promoted,
        steps=steps,
        elapsed_ms=(now - game_start) * 1000.0,
        solve_ms=(now - proc_start) * 1000.0,
        source=source,
    )
    logger.info(
        "=== solve() END === solved=%s, steps=%d, %.1f ms",
        result.solved,
        result.steps,
        result.solve_ms,
    )
    return result


def solve_file(path: str | Path, strict: bool = STRICT_INPUT) -> SolveResult:
    """盤面ファイルを 1 つ読み込んで解きます。"""
    df = load_board(path)
    return solve(df, strict=strict, source=str(path))
