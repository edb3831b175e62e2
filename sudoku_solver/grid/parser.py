# -*- coding: utf-8 -*-
"""
盤面のセルを内部表現に正規化するモジュールです。

主な役割:
- 個々のトークンを Clue（ヒントの数字）/ Blank（空きマス）に分類
- pandas.DataFrame を 9x9 の numpy 整数配列に変換（空きマスは 0）

数字かどうかの判定に例外（int() の失敗）は使いません。
トークナイザが Clue / Blank のどちらかを明示的に返します。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

import numpy as np
import pandas as pd

from ..config import BLANK_TOKENS, GRID_SIZE, STRICT_INPUT, UNSET_VALUE
from ..errors import MalformedInputError
from ..logging_utils import get_logger

logger = get_logger()

# ヒントとして有効な数字は 1〜9 の 1 文字だけ
CLUE_RE = re.compile(r"^[1-9]$")


@dataclass(frozen=True)
class Clue:
    """ヒントの数字（1〜9）。"""

    value: int


@dataclass(frozen=True)
class Blank:
    """空きマス。raw には元のトークンを残しておきます（ログ用）。"""

    raw: str = ""


Token = Union[Clue, Blank]


def _is_missing(x: Any) -> bool:
    if x is None:
        return True
    if isinstance(x, str):
        return not x.strip()
    return bool(pd.isna(x))


def tokenize_cell(x: Any, row: int, col: int, strict: bool = STRICT_INPUT) -> Token:
    """
    個々のセルの値を Clue / Blank に分類します。

    変換ルール
    ----------
    - "1"〜"9"（前後の空白は無視）: Clue
    - 整数値の float（5.0 など）は整数とみなす
    - BLANK_TOKENS に含まれる記号（"x" など）: Blank
    - それ以外:
        - strict=False なら警告ログを出して Blank
        - strict=True なら MalformedInputError
    - 欠けているセル（行のトークン数が足りない等）も同じ扱いです。
    """
    if _is_missing(x):
        if strict:
            raise MalformedInputError(
                f"Missing token at row {row}, col {col}", row=row, col=col, token=x
            )
        return Blank()

    # 数値列は float64 になりがちなので 5.0 → 5 に戻す
    if isinstance(x, (float, np.floating)) and float(x).is_integer():
        x = int(x)

    s = str(x).strip()

    if CLUE_RE.match(s):
        return Clue(int(s))

    if s in BLANK_TOKENS:
        return Blank(s)

    if strict:
        raise MalformedInputError(
            f"Unrecognized token {s!r} at row {row}, col {col}",
            row=row,
            col=col,
            token=s,
        )

    logger.warning("Unrecognized token %r at row %d, col %d; treated as blank.", s, row, col)
    return Blank(s)


def normalize_grid(df: pd.DataFrame, strict: bool = STRICT_INPUT) -> np.ndarray:
    """
    DataFrame から 9x9 の numpy 整数配列に変換します。

    Parameters
    ----------
    df : pandas.DataFrame
        入力の盤面データ（各セルは文字列でも整数でもよい）。
    strict : bool
        不正トークンをエラーにするかどうか。

    Returns
    -------
    numpy.ndarray
        shape = (9, 9), dtype = int の配列。空きマスは 0。

    Raises
    ------
    MalformedInputError
        盤面の形が 9x9 でない場合（strict に関係なく）、
        または strict=True で不正トークンがあった場合。
    """
    rows, cols = df.shape
    if (rows, cols) != (GRID_SIZE, GRID_SIZE):
        raise MalformedInputError(
            f"Board must be {GRID_SIZE}x{GRID_SIZE}, got {rows}x{cols}"
        )

    board = np.full((GRID_SIZE, GRID_SIZE), UNSET_VALUE, dtype=int)

    for i in range(rows):
        for j in range(cols):
            token = tokenize_cell(df.iat[i, j], i, j, strict=strict)
            if isinstance(token, Clue):
                board[i, j] = token.value

    return board
