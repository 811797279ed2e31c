# -*- coding: utf-8 -*-
"""
盤面から「ライン」（行・列）を取り出すモジュールです。

- 横方向（row）のライン
- 縦方向（col）のライン
を同じ形（1 次元の CellState 列）で扱えるようにします。

numpy のスライスはビュー（元配列と同じメモリを指す）なので、
get_line() で得たラインに書き込むと、盤面にもそのまま反映されます。
"""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

import numpy as np

from ..types import Board, CellState, Clue, LineRef


def get_line(board: Board, line: LineRef) -> np.ndarray:
    """
    ラインのビュー（書き込み可能）を返します。

    保存して使い回さず、その場で読み書きするためだけに使ってください。
    """
    if line.axis == "row":
        return board.grid[line.index, :]
    return board.grid[:, line.index]


def set_line(board: Board, line: LineRef, values: Sequence[CellState]) -> None:
    """ラインの各セルを values で上書きします。"""
    view = get_line(board, line)
    if len(values) != len(view):
        raise ValueError(f"{line}: expected {len(view)} cells, got {len(values)}")
    for i, state in enumerate(values):
        view[i] = state


def iter_line_refs(board: Board) -> Iterator[LineRef]:
    """すべての行 → すべての列 の順に LineRef を返します。"""
    for r in range(board.height):
        yield LineRef.row(r)
    for c in range(board.width):
        yield LineRef.col(c)


def iter_lines(board: Board) -> Iterator[Tuple[LineRef, Clue, np.ndarray]]:
    """
    (LineRef, Clue, ラインのビュー) を行 → 列の順に列挙します。
    """
    for ref in iter_line_refs(board):
        yield ref, board.clue_for(ref), get_line(board, ref)
