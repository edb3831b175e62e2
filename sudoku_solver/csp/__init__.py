# -*- coding: utf-8 -*-
"""
sudoku_solver.csp パッケージ

制約充足（行・列・ブロックの「同じ数字は 1 回だけ」）に関する処理をまとめています。

- views.py       : 行・列・ブロックのビューと 3 値の検証
- coordinator.py : 27 個のビューの管理と判定の集約
- propagation.py : naked single による前処理
- search.py      : 行優先のバックトラック探索
"""
