# nonogram/__init__.py
# -*- coding: utf-8 -*-
"""
nonogram パッケージの入口となるモジュールです。

UI や api_proto/local_api.py などから:

    from nonogram import load_puzzle, solve

と呼び出されることを想定しています。

エンジンが UI に提供する操作は次の 4 種類です。
1. check_consistency() : 1 マス塗るたびに呼べる軽い整合性チェック
2. propagate() / hint() : 制約伝播による推論（「ヒント」ボタン）
3. solve()             : 制約伝播 + バックトラックで解を求める（「解く」ボタン）
4. line_configurations() / deduce_line() : 1 ライン単位の低レベル操作
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .config import DEFAULT_SOLUTION_LIMIT
from .errors import ContradictionError, MalformedPuzzleInput, NonogramError, SearchAborted
from .logging_utils import get_logger
from .types import Board, CellState, Clue, LineRef
from .grid.parser import board_to_dict, build_board, load_puzzle
from .csp.configurations import count_line_configurations, line_configurations
from .csp.deduction import LineDeduction, deduce_line
from .csp.propagation import PropagationResult, propagate
from .csp.consistency import check_consistency, is_solved, line_is_consistent, line_matches_clue
from .csp.search import SearchResult, backtracking_search, choose_branch_line

logger = get_logger()

__all__ = [
    "Board",
    "CellState",
    "Clue",
    "LineRef",
    "ContradictionError",
    "MalformedPuzzleInput",
    "NonogramError",
    "SearchAborted",
    "LineDeduction",
    "PropagationResult",
    "SearchResult",
    "HintResult",
    "load_puzzle",
    "build_board",
    "board_to_dict",
    "line_configurations",
    "count_line_configurations",
    "deduce_line",
    "propagate",
    "hint",
    "check_consistency",
    "line_is_consistent",
    "line_matches_clue",
    "is_solved",
    "choose_branch_line",
    "backtracking_search",
    "solve",
    "apply_solution",
]


@dataclass
class HintResult:
    """
    hint() の結果です。

    Attributes
    ----------
    success : bool
        矛盾なく推論できたら True。
    changed : bool
        1 マスでも新たに確定したら True。
    changed_cells : int
        新たに確定したセル数。
    contradiction : LineRef or None
        矛盾が見つかったライン。
    """

    success: bool
    changed: bool
    changed_cells: int = 0
    contradiction: Optional[LineRef] = None

    @property
    def status(self) -> str:
        if not self.success:
            return "contradiction"
        return "deduced" if self.changed else "no_deduction"


def hint(board: Board) -> HintResult:
    """
    「ヒント」ボタン相当の処理です。

    制約伝播を 1 回行い、何マス確定したかを返します。
    矛盾した場合、盤面は矛盾発見時点の状態のまま残します
    （UI 側で「どこがおかしいか」を表示できるようにするため）。
    """
    before = board.snapshot()
    result = propagate(board)
    changed_cells = int(np.count_nonzero(before != board.grid))

    if not result.success:
        logger.info("hint: contradiction at %s", result.contradiction)
    elif changed_cells:
        logger.info("hint: %d cells deduced", changed_cells)
    else:
        logger.info("hint: no deduction found")

    return HintResult(
        success=result.success,
        changed=changed_cells > 0,
        changed_cells=changed_cells,
        contradiction=result.contradiction,
    )


def solve(
    board: Board,
    limit: int = DEFAULT_SOLUTION_LIMIT,
    max_nodes: Optional[int] = None,
    time_limit: Optional[float] = None,
) -> List[np.ndarray]:
    """
    盤面の解を最大 limit 個求めます。

    board 自体は書き換えません。盤面に反映したい場合は
    apply_solution(board, solutions[0]) を呼んでください。

    Returns
    -------
    list of numpy.ndarray
        shape = (H, W) の CellState 配列のリスト。解が無ければ空リスト。

    Raises
    ------
    SearchAborted
        max_nodes / time_limit で打ち切られ、解が 1 つも見つかっていない場合。
        （「解が無い」ことが確かめられたわけではないので、空リストは返しません）
    """
    result = backtracking_search(board, limit=limit, max_nodes=max_nodes, time_limit=time_limit)
    if result.aborted and not result.found:
        raise SearchAborted(result.abort_reason, result.nodes_visited)
    if not result.found:
        logger.info("solve: no solution found")
    return result.solutions


def apply_solution(board: Board, solution: np.ndarray) -> None:
    """solve() が返した解を盤面に書き込みます。"""
    if solution.shape != board.grid.shape:
        raise ValueError(f"solution shape {solution.shape} does not match board {board.grid.shape}")
    board.restore(solution)
