# -*- coding: utf-8 -*-
"""
パズル定義を内部表現（Board）に正規化するモジュールです。

主な役割:
- JSON 由来の dict（width / height / rowClues / colClues / grid）を Board に変換
- グリッド（list / numpy 配列 / pandas.DataFrame）を CellState の numpy 配列に変換
- 構造的に壊れた入力を MalformedPuzzleInput として入口で弾く
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from ..config import MAX_BOARD_SIDE
from ..errors import MalformedPuzzleInput
from ..types import Board, CellState, Clue

# 受け付けるキー名の別名。
# 左から順に探し、最初に見つかったものを使います。
# - camelCase: 外部アプリの JSON
# - snake_case: Python から直接呼ぶ場合
# - w / h / rows / cols: 元の Web アプリの「JSON 貼り付け」形式
WIDTH_KEYS = ("width", "w")
HEIGHT_KEYS = ("height", "h")
ROW_CLUE_KEYS = ("rowClues", "row_clues", "rows")
COL_CLUE_KEYS = ("colClues", "col_clues", "cols")


def _pick(data: Mapping[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _parse_dimension(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise MalformedPuzzleInput(f"{name} must be an integer: {value!r}")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, np.integer):
        value = int(value)
    if not isinstance(value, int):
        raise MalformedPuzzleInput(f"{name} must be an integer: {value!r}")
    if value < 1 or value > MAX_BOARD_SIDE:
        raise MalformedPuzzleInput(f"{name} must be between 1 and {MAX_BOARD_SIDE}: {value}")
    return value


def parse_clues(raw: Any, name: str) -> List[Clue]:
    """
    ヒントのリスト（例: [[1, 1], [3], [0], []]）を Clue のリストに変換します。
    """
    if raw is None:
        raise MalformedPuzzleInput(f"missing {name}")
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise MalformedPuzzleInput(f"{name} must be a list of clues")
    return [Clue.of(c) for c in raw]


def normalize_cell(x: Any) -> CellState:
    """
    個々のセルの値を CellState に変換します。

    変換ルール
    ----------
    - CellState: そのまま
    - -1 / 0 / 1（int, float, 数字文字列）: 対応する CellState
    - None / NaN / 空文字: UNKNOWN
    - それ以外: MalformedPuzzleInput
    """
    if isinstance(x, CellState):
        return x
    if x is None:
        return CellState.UNKNOWN
    if isinstance(x, float):
        if np.isnan(x):
            return CellState.UNKNOWN
        if not x.is_integer():
            raise MalformedPuzzleInput(f"invalid cell value: {x!r}")
    if isinstance(x, str):
        s = x.strip()
        if not s:
            return CellState.UNKNOWN
        try:
            x = int(s)
        except ValueError:
            raise MalformedPuzzleInput(f"invalid cell value: {x!r}") from None
    return CellState.from_value(x)


def normalize_grid(grid: Any, width: int, height: int) -> np.ndarray:
    """
    グリッドを shape = (height, width) の CellState 配列に変換します。

    Parameters
    ----------
    grid : list of list, numpy.ndarray or pandas.DataFrame
        -1 / 0 / 1 の 2 次元データ。None なら全セル UNKNOWN。
    width, height : int
        期待する盤面サイズ。

    Returns
    -------
    numpy.ndarray
        dtype=object の 2 次元配列。
    """
    if grid is None:
        return np.full((height, width), CellState.UNKNOWN, dtype=object)

    if isinstance(grid, pd.DataFrame):
        rows_data = grid.values.tolist()
    elif isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            raise MalformedPuzzleInput(f"grid must be 2-dimensional, got {grid.ndim} dimensions")
        rows_data = grid.tolist()
    elif isinstance(grid, Sequence) and not isinstance(grid, (str, bytes)):
        rows_data = list(grid)
    else:
        raise MalformedPuzzleInput("grid must be a 2-D array")

    if len(rows_data) != height:
        raise MalformedPuzzleInput(f"grid has {len(rows_data)} rows, expected {height}")

    out = np.empty((height, width), dtype=object)
    for i, row in enumerate(rows_data):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise MalformedPuzzleInput(f"grid row {i} is not a list")
        if len(row) != width:
            raise MalformedPuzzleInput(f"grid row {i} has {len(row)} cells, expected {width}")
        for j, cell in enumerate(row):
            out[i, j] = normalize_cell(cell)

    return out


def build_board(
    row_clues: Sequence,
    col_clues: Sequence,
    grid: Any = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Board:
    """
    ヒントと（任意の）グリッドから Board を組み立てます。

    width / height を省略した場合は、ヒントの本数から決めます。
    """
    rows = parse_clues(row_clues, "row clues")
    cols = parse_clues(col_clues, "column clues")

    w = _parse_dimension(width if width is not None else len(cols), "width")
    h = _parse_dimension(height if height is not None else len(rows), "height")

    return Board(
        width=w,
        height=h,
        row_clues=tuple(rows),
        col_clues=tuple(cols),
        grid=normalize_grid(grid, w, h),
    )


def load_puzzle(data: Mapping[str, Any]) -> Board:
    """
    パズル定義（dict）から Board を作ります。

    例::

        load_puzzle({
            "width": 5, "height": 5,
            "rowClues": [[1], [3], [5], [3], [1]],
            "colClues": [[1], [3], [5], [3], [1]],
        })
    """
    if not isinstance(data, Mapping):
        raise MalformedPuzzleInput("puzzle definition must be a mapping")

    return build_board(
        row_clues=_pick(data, ROW_CLUE_KEYS),
        col_clues=_pick(data, COL_CLUE_KEYS),
        grid=data.get("grid"),
        width=_pick(data, WIDTH_KEYS),
        height=_pick(data, HEIGHT_KEYS),
    )


def board_to_dict(board: Board) -> Dict[str, Any]:
    """Board を外部向けの dict（camelCase）に変換します。"""
    return {
        "width": board.width,
        "height": board.height,
        "rowClues": [c.to_list() for c in board.row_clues],
        "colClues": [c.to_list() for c in board.col_clues],
        "grid": board.to_int_grid(),
    }
