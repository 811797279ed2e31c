# -*- coding: utf-8 -*-
"""
制約伝播（propagation）を行うモジュールです。

ここでの制約伝播は、
- 全行 -> 全列 の順に deduce_line() を適用し
- 確定したセルをその場で盤面に書き戻す
という「スイープ」を、1 回のスイープで何も変わらなくなるまで
（不動点に達するまで）繰り返すものです。

あるラインで有効な配置が 0 個になった時点で「矛盾」として打ち切ります。
このとき盤面は途中まで書き換わった状態のままなので、
元に戻したい呼び出し側は事前に board.snapshot() を取っておく必要があります。

各推論は UNKNOWN -> FILLED/BLOCKED の一方向にしか進まないので、
スイープ回数は高々 W*H + 1 回で必ず止まります。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import MAX_PROPAGATION_PASSES
from ..errors import ContradictionError
from ..grid.line_extractor import iter_lines, set_line
from ..logging_utils import get_logger
from ..types import Board, LineRef
from .deduction import deduce_line

logger = get_logger()


@dataclass
class PropagationResult:
    """
    propagate() の結果です。

    Attributes
    ----------
    success : bool
        矛盾なく不動点に達したら True。
    passes : int
        実行したスイープ（全行+全列）の回数。
    changed_cells : int
        伝播全体で新たに確定したセルの数。
    contradiction : LineRef or None
        矛盾が見つかったライン。
    """

    success: bool
    passes: int = 0
    changed_cells: int = 0
    contradiction: Optional[LineRef] = None

    def __bool__(self) -> bool:
        return self.success


def sweep(board: Board) -> int:
    """
    全行 -> 全列 を 1 回ずつ推論し、書き換えたセル数を返します。

    矛盾したラインがあれば ContradictionError を送出します。
    """
    changed_cells = 0
    for ref, clue, view in iter_lines(board):
        deduction = deduce_line(len(view), clue, view)
        deduction.raise_for_contradiction(ref)
        if deduction.changed:
            changed_cells += sum(
                1 for before, after in zip(view, deduction.result) if before is not after
            )
            set_line(board, ref, deduction.result)
    return changed_cells


def propagate(board: Board, max_passes: Optional[int] = MAX_PROPAGATION_PASSES) -> PropagationResult:
    """
    不動点に達するまでスイープを繰り返します。

    Parameters
    ----------
    board : Board
        対象の盤面。その場で書き換えます。
    max_passes : int, optional
        スイープ回数の上限。None なら W*H + 1。

    Returns
    -------
    PropagationResult
        success=False の場合、盤面は矛盾発見時点の状態のままです。
    """
    limit = max_passes if max_passes is not None else board.width * board.height + 1
    total_changed = 0
    passes = 0

    while passes < limit:
        passes += 1
        try:
            changed = sweep(board)
        except ContradictionError as exc:
            logger.debug("propagate: contradiction at %s (pass %d)", exc.line, passes)
            return PropagationResult(
                success=False,
                passes=passes,
                changed_cells=total_changed,
                contradiction=exc.line,
            )

        total_changed += changed
        if changed == 0:
            logger.debug("propagate: fixpoint after %d passes, %d cells fixed", passes, total_changed)
            return PropagationResult(success=True, passes=passes, changed_cells=total_changed)

    # max_passes を小さく指定した場合のみここに来る（未収束だが矛盾もない）
    logger.debug("propagate: stopped after %d passes without reaching fixpoint", passes)
    return PropagationResult(success=True, passes=passes, changed_cells=total_changed)
