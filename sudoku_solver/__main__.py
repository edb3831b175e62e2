# -*- coding: utf-8 -*-
"""
コマンドラインから複数の盤面をまとめて解くためのエントリポイントです。

Usage:
    python -m sudoku_solver puzzles/
    python -m sudoku_solver puzzles/ --strict --no-candidates

ディレクトリ内の各ファイルを 1 問ずつ独立に読み込み、解いて表示します。
1 問でも解けなかった（または例外になった）場合、終了コードは 1 です。
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from . import solve_file
from .config import DEFAULT_PUZZLE_DIR, SHOW_CANDIDATES, STRICT_INPUT
from .errors import SudokuError
from .logging_utils import get_logger, set_log_level
from .postprocess.render_result import render_text

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku_solver",
        description="Solve every 9x9 Sudoku board file in a directory.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=DEFAULT_PUZZLE_DIR,
        help="Directory of board files (9 lines of 9 tokens; digits or 'x').",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=STRICT_INPUT,
        help="Reject tokens that are neither a digit 1-9 nor a blank marker.",
    )
    parser.add_argument(
        "--no-candidates",
        dest="show_candidates",
        action="store_false",
        default=SHOW_CANDIDATES,
        help="Do not print the remaining-candidates table.",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser


def puzzle_files(directory: Path) -> List[Path]:
    return sorted(p for p in directory.iterdir() if p.is_file())


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_log_level(args.log_level)

    directory = Path(args.directory)
    if not directory.is_dir():
        parser.error(f"not a directory: {directory}")

    failures = 0
    for path in puzzle_files(directory):
        try:
            result = solve_file(path, strict=args.strict)
        except SudokuError:
            logger.exception("Failed to solve %s", path)
            failures += 1
            continue

        print(render_text(result, include_candidates=args.show_candidates))
        print()
        if not result.solved:
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
