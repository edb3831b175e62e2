# -*- coding: utf-8 -*-
"""
sudoku_solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 盤面入力の厳しさ（不正トークンをエラーにするか）
- 前処理（naked single）の有無
- 探索ログの出力間隔
- 表示時に残り候補を出すかどうか
などを簡単に変更できます。
"""

from __future__ import annotations

import os
from typing import FrozenSet, Tuple

# ==== 盤面サイズ ===========================================================

# 9x9 盤面・3x3 ブロック以外はサポートしない
GRID_SIZE: int = 9
BLOCK_SIZE: int = 3

# 「未設定」を表す値（正規の数字としては使われない）
UNSET_VALUE: int = 0

# セルが取り得る数字 1〜9
ALL_VALUES: Tuple[int, ...] = tuple(range(1, GRID_SIZE + 1))

# ==== 盤面入力関連 =========================================================

# 空きマスとして扱うトークン
# 例: "x" が一般的だが、"." や "0" で書かれた盤面もよくある
BLANK_TOKENS: FrozenSet[str] = frozenset({"x", "X", ".", "0", "_", "-", "*"})

# True にすると、数字でも空きマス記号でもないトークンを
# MalformedInputError として報告します。
# False（デフォルト）の場合は、空きマスとして寛容に扱います。
STRICT_INPUT: bool = False

# 盤面ファイルのコメント行の先頭文字
COMMENT_CHAR: str = "#"

# CLI で引数が省略されたときに読むディレクトリ
DEFAULT_PUZZLE_DIR: str = "puzzles"

# ==== 戦略（ストラテジ）関連 ===============================================

# バックトラック探索の前に naked single の前処理を行うかどうか。
# 正しさには影響せず、探索の深さだけが変わります。
USE_NAKED_SINGLE: bool = True

# バックトラック探索で、何フレームごとに進捗ログ（DEBUG）を出すか
SEARCH_PROGRESS_INTERVAL: int = 10000

# ==== 表示関連 =============================================================

# 解いた後の表示で、各セルの残り候補も出すかどうか
SHOW_CANDIDATES: bool = True

# 候補表示テーブルの 1 列の幅
DISPLAY_COLUMN_WIDTH: int = 19

# ==== ログ関連 =============================================================

# 環境変数 SUDOKU_LOG_LEVEL で上書きできます
LOG_LEVEL: str = os.getenv("SUDOKU_LOG_LEVEL", "INFO")
