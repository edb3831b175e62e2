# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。

Grid は読み取りだけで、ここから値を書き換えることはありません。
各セルについて使うのは value と candidates の 2 つだけです。
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..config import DISPLAY_COLUMN_WIDTH, GRID_SIZE
from ..grid.board import grid_values
from ..types import Grid, SolveResult


def format_candidates(candidates: Iterable[int]) -> str:
    """
    候補集合を表示用の文字列にします。

    - 9 個全部残っている → "[*]"
    - それ以外 → "[1,4,7]" のように小さい順
    """
    values = sorted(candidates)
    if len(values) == GRID_SIZE:
        return "[*]"
    return "[" + ",".join(str(v) for v in values) + "]"


def grid_candidates(grid: Grid) -> List[List[List[int]]]:
    return [[sorted(cell.candidates) for cell in row] for row in grid]


def format_board(grid: Grid, include_candidates: bool = True) -> str:
    """
    盤面をテキストにします。

    1 行に 1 行分の値を空白区切りで並べます。
    include_candidates=True の場合は、その後ろに
    「値の行」と「残り候補の行」を交互に並べた表を付けます。
    """
    lines: List[str] = []
    for row in grid:
        lines.append(" ".join(str(cell.value) for cell in row))

    if not include_candidates:
        return "\n".join(lines)

    lines.append("")
    for row in grid:
        lines.append("".join(str(cell.value).rjust(DISPLAY_COLUMN_WIDTH) for cell in row))
        lines.append(
            "".join(
                format_candidates(cell.candidates).rjust(DISPLAY_COLUMN_WIDTH)
                for cell in row
            )
        )
    return "\n".join(lines)


def format_timing(result: SolveResult) -> str:
    return (
        f"Total Time (game_start -> load/setup -> solved): [milliseconds] {result.elapsed_ms:.0f}\n"
        f"Total Time (solve): [milliseconds] {result.solve_ms:.0f}"
    )


def render_text(result: SolveResult, include_candidates: bool = True) -> str:
    """CLI 用に、計測時間・結果・盤面をまとめた文字列を作ります。"""
    header = result.source or "<board>"
    verdict = "solved" if result.solved else "unsolvable"
    return "\n".join(
        [
            f"{header}: {verdict} (steps={result.steps})",
            format_timing(result),
            format_board(result.grid, include_candidates=include_candidates),
        ]
    )


def build_result(result: SolveResult) -> Dict[str, Any]:
    """
    API などに返す dict を作ります。

    numpy 配列や DataFrame は返さず、素の list / int だけにします。
    """
    return {
        "status": "solved" if result.solved else "unsolvable",
        "solved_board": grid_values(result.grid).tolist(),
        "candidates": grid_candidates(result.grid),
        "promoted": result.promoted,
        "steps": result.steps,
        "timing": {
            "total_ms": round(result.elapsed_ms, 3),
            "solve_ms": round(result.solve_ms, 3),
        },
        "source": result.source,
    }
