# -*- coding: utf-8 -*-
"""
盤面がヒントと矛盾していないかを「軽く」確認するモジュールです。

check_consistency() は配置の列挙をせず、
各ラインの塗りマスの連続（ラン）の長さをヒントと比べるだけなので、
1 マス塗るたびに呼んでも十分に速いです。
その代わり「解けること」までは保証しません
（すでに壊れているルールが無い、ということだけを確認します）。

is_solved() は逆に厳密なチェックで、
全ラインがヒントと完全に一致しているかを確認します。
"""

from __future__ import annotations

from typing import Iterable, List

from ..grid.line_extractor import iter_lines
from ..types import Board, CellState, Clue


def filled_runs(line: Iterable[CellState]) -> List[int]:
    """ラインに含まれる塗りマスのランの長さを、左（上）から順に返します。"""
    runs: List[int] = []
    run = 0
    for cell in line:
        if cell is CellState.FILLED:
            run += 1
        elif run > 0:
            runs.append(run)
            run = 0
    if run > 0:
        runs.append(run)
    return runs


def line_is_consistent(clue: Clue, line: Iterable[CellState]) -> bool:
    """
    ラインが明らかにヒントに違反していないかを確認します。

    - i 番目のランが、ヒントの i 番目より長ければ違反
    - ランの個数がヒントの個数より多ければ違反
    """
    runs = filled_runs(line)
    if len(runs) > len(clue):
        return False
    return all(run <= block for run, block in zip(runs, clue.blocks))


def check_consistency(board: Board) -> bool:
    """全行 -> 全列 を line_is_consistent() で確認します。"""
    return all(line_is_consistent(clue, view) for _, clue, view in iter_lines(board))


def line_matches_clue(clue: Clue, line: Iterable[CellState]) -> bool:
    """未確定セルが無く、ランの並びがヒントと完全に一致すれば True。"""
    cells = list(line)
    if any(cell is CellState.UNKNOWN for cell in cells):
        return False
    return filled_runs(cells) == list(clue.blocks)


def is_solved(board: Board) -> bool:
    """全ラインがヒントと完全に一致していれば True。"""
    return all(line_matches_clue(clue, view) for _, clue, view in iter_lines(board))
