# -*- coding: utf-8 -*-
"""
数独 solver で使う主なデータ構造（型）をまとめたモジュールです。

- Status     : 制約チェックの 3 値の判定（ACCEPT / REJECT / UNKNOWN）
- Acceptance : セルの値が確定（FIXED）か仮置き（TENTATIVE）か
- Cell       : 盤面の 1 マス。値・確定状態・残り候補を持つ
- SolveResult: 1 問を解いた結果

Status が bool ではなく 3 値であることが重要です。
「まだ判断できない（UNKNOWN）」と「違反している（REJECT）」は
探索の中でまったく違う扱いになります。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional, Set, Tuple

from .config import ALL_VALUES, UNSET_VALUE

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]


class Status(Enum):
    """ビュー（行・列・ブロック）の制約チェック結果。"""

    ACCEPT = "accept"
    REJECT = "reject"
    UNKNOWN = "unknown"


class Acceptance(Enum):
    FIXED = "fixed"
    TENTATIVE = "tentative"


class Cell:
    """
    盤面の 1 マスを表すクラスです。

    Attributes
    ----------
    value : int
        現在の値。0 は「未設定」。
    acceptance : Acceptance
        FIXED は与えられたヒント、または伝播で確定した値で、
        探索によって書き換えられることはありません。
        TENTATIVE は探索中の仮置きです。
    candidates : frozenset of int
        まだ除外されていない数字の集合。最初は {1..9} で、
        eliminate() によって小さくなる一方です。

    value と acceptance は別々のアクセサで読み出します。
    内部の状態をまとめて返すことはしません。
    """

    __slots__ = ("_value", "_acceptance", "_candidates")

    def __init__(self) -> None:
        self._value: int = UNSET_VALUE
        self._acceptance: Acceptance = Acceptance.TENTATIVE
        self._candidates: Set[int] = set(ALL_VALUES)

    def __repr__(self) -> str:
        return (
            f"Cell(value={self._value}, acceptance={self._acceptance.name}, "
            f"candidates={sorted(self._candidates)})"
        )

    @property
    def value(self) -> int:
        return self._value

    @property
    def acceptance(self) -> Acceptance:
        return self._acceptance

    @property
    def candidates(self) -> FrozenSet[int]:
        """残り候補の読み取り専用コピーを返します。"""
        return frozenset(self._candidates)

    def set_fixed(self, value: int) -> None:
        """
        値を確定させます（ヒントや naked single 用）。

        現在の状態に関係なく上書きし、確定後は候補を空にします。
        """
        self._value = value
        self._acceptance = Acceptance.FIXED
        self._candidates.clear()

    def propose(self, value: int) -> None:
        """探索で値を仮置きします。確定済みセルでは何もしません。"""
        if self._acceptance is Acceptance.FIXED:
            return
        self._value = value
        self._acceptance = Acceptance.TENTATIVE

    def undo(self) -> None:
        """仮置きを取り消して未設定に戻します。確定済みセルでは何もしません。"""
        if self._acceptance is Acceptance.FIXED:
            return
        self._value = UNSET_VALUE
        self._acceptance = Acceptance.TENTATIVE

    def eliminate(self, value: int) -> None:
        self._candidates.discard(value)

    def is_unset(self) -> bool:
        return self._value == UNSET_VALUE

    def is_fixed(self) -> bool:
        return self._acceptance is Acceptance.FIXED

    def status(self) -> Status:
        """
        探索がこのセルに入ったときの初期判定。

        確定済みなら ACCEPT、それ以外はまだ何も言えないので UNKNOWN。
        """
        return Status.ACCEPT if self.is_fixed() else Status.UNKNOWN


# 9x9 のセル配列。所有者は呼び出し側（solve()）で、
# Coordinator や各ストラテジは 1 回の solve の間だけ借りて使います。
Grid = List[List[Cell]]


@dataclass
class SolveResult:
    """
    1 問を解いた結果を表すクラスです。

    Attributes
    ----------
    solved : bool
        False は「全探索したが解がない」ことを意味します（例外ではない）。
    grid : Grid
        解いた後の盤面。表示用に読み取り専用で使います。
    promoted : bool
        naked single の前処理で確定したセルがあったかどうか。
    steps : int
        バックトラック探索で訪れたフレーム数。
    elapsed_ms : float
        盤面生成〜読み込み〜探索終了までの時間（ミリ秒）。
    solve_ms : float
        ストラテジ実行だけにかかった時間（ミリ秒）。
    source : str or None
        盤面ファイルのパス（ファイルから読んだ場合）。
    """

    solved: bool
    grid: Grid
    promoted: bool = False
    steps: int = 0
    elapsed_ms: float = 0.0
    solve_ms: float = 0.0
    source: Optional[str] = None
