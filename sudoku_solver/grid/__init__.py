# -*- coding: utf-8 -*-
"""
sudoku_solver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- loader.py : 盤面テキストファイルから DataFrame への読み込み
- parser.py : トークンの分類（Clue / Blank）と numpy 配列への正規化
- board.py  : Cell の Grid 作成と、ヒントの流し込み
"""
