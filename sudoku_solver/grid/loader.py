# -*- coding: utf-8 -*-
"""
盤面テキストファイルを読み込むモジュールです。

ファイル形式:
- 9 行。各行に空白区切りで 9 個のトークン
- トークンは 1〜9 の数字（ヒント）か、"x" などの空きマス記号
- 空行と "#" から始まるコメント行は無視

戻り値は文字列の DataFrame で、解釈は grid.parser に任せます。
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..config import COMMENT_CHAR
from ..errors import MalformedInputError
from ..logging_utils import get_logger

logger = get_logger()


def load_board(path: str | Path) -> pd.DataFrame:
    """
    盤面テキストを読み込み、文字列の DataFrame にして返します。

    Parameters
    ----------
    path : str or Path
        盤面ファイルのパス。

    Returns
    -------
    pandas.DataFrame
        header なし、各セルが文字列の DataFrame。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Puzzle file not found: {p}")

    logger.info("Loading %s", p)

    try:
        df = pd.read_csv(
            p,
            sep=r"\s+",
            header=None,
            dtype=str,
            comment=COMMENT_CHAR,
            skip_blank_lines=True,
            keep_default_na=False,
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError as e:
        raise MalformedInputError(f"Puzzle file is empty: {p}") from e
    except pd.errors.ParserError as e:
        raise MalformedInputError(f"Puzzle file could not be parsed: {p}: {e}") from e
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Puzzle file is not valid UTF-8: {p}: {e}") from e

    # index を 0 から振り直しておくと扱いやすい
    df = df.reset_index(drop=True)
    df.columns = range(df.shape[1])

    return df


def board_from_rows(rows: list) -> pd.DataFrame:
    """
    API などから受け取った 2 次元配列を DataFrame に変換します。

    dtype=object にしておかないと、整数と None が混ざった列が
    float64 になり、ヒントが "5.0" のような文字列で届いてしまいます。
    """
    return pd.DataFrame(rows, dtype=object)
