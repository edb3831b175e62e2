# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 「ログ」とは、プログラムの実行状況を記録するメッセージのことです。
- 探索が何ステップかかったか、どのファイルを読んだか、などを
  確認するのに役立ちます。
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import LOG_LEVEL

# sudoku_solver パッケージ共通で使うロガー名
LOGGER_NAME = "sudoku_solver"


def get_logger() -> logging.Logger:
    """
    sudoku_solver 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）に LOG_LEVEL のログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL.upper())

    return logger


def set_log_level(level: Optional[str]) -> None:
    """CLI などから、共通 logger のレベルを変更します。"""
    if not level:
        return
    get_logger().setLevel(level.upper())
