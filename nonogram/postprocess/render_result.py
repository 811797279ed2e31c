# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from ..config import BLOCKED_SYMBOL, FILLED_SYMBOL, UNKNOWN_SYMBOL
from ..csp.consistency import check_consistency, is_solved
from ..grid.parser import board_to_dict
from ..types import Board, CellState

SYMBOLS = {
    CellState.FILLED: FILLED_SYMBOL,
    CellState.BLOCKED: BLOCKED_SYMBOL,
    CellState.UNKNOWN: UNKNOWN_SYMBOL,
}


def grid_to_int_list(grid: np.ndarray) -> List[List[int]]:
    """CellState 配列を -1 / 0 / 1 の 2 次元リストに変換します。"""
    return [[cell.value for cell in row] for row in grid]


def grid_to_frame(grid: np.ndarray) -> pd.DataFrame:
    """
    グリッドを記号（"#", "x", "."）の DataFrame に変換します。

    Jupyter などで盤面をそのまま眺めるときに便利です。
    """
    rows, cols = grid.shape
    symbols = [[SYMBOLS[cell] for cell in row] for row in grid]
    return pd.DataFrame(symbols, index=range(rows), columns=range(cols))


def render_text(grid: np.ndarray) -> str:
    """
    グリッドを 1 行 1 文字列のテキストにします。

    例::

        ..#..
        .###.
        #####
    """
    return "\n".join("".join(SYMBOLS[cell] for cell in row) for row in grid)


def build_result(
    board: Board,
    solutions: Optional[Sequence[np.ndarray]] = None,
    aborted: bool = False,
) -> Dict[str, Any]:
    """
    UI / API にそのまま返せる dict を作ります。

    - "grid" には 1 つ目の解を入れます（解が無ければ None）。
      元の Web アプリの「解く」ボタンと同じく、最初の解を盤面に適用した形です。
    - "consistent" / "solved" は、返す "grid" の盤面について判定します。
      解が無い場合は、入力された盤面についての判定です。
    """
    solutions = list(solutions or [])
    payload = board_to_dict(board)

    shown = board
    if solutions:
        shown = board.copy()
        shown.restore(solutions[0])

    payload.update(
        {
            "grid": grid_to_int_list(solutions[0]) if solutions else None,
            "shape": (board.height, board.width),
            "consistent": check_consistency(shown),
            "solved": is_solved(shown),
            "found": bool(solutions),
            "solutions": [grid_to_int_list(s) for s in solutions],  # ★ ndarray を返さない
            "aborted": aborted,
        }
    )
    return payload
