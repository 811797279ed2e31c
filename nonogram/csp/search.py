# -*- coding: utf-8 -*-
"""
バックトラック探索で盤面を完成させるモジュールです。

制約伝播だけでは埋まらない盤面（複数解がある、または推論が足りない盤面）を、
「あるラインの配置を仮に決めて、続きを解いてみる」ことで完成させます。

ざっくり流れ
------------
1. 制約伝播（propagate）する。矛盾したらこの枝は失敗
2. 全セルが確定していれば、解として記録する
3. 配置候補が 2 個以上あるラインのうち、候補が最も少ないものを選ぶ
   （MRV: Minimum Remaining Values の考え方。同数なら 行 -> 列、番号の小さい順）
4. 盤面のスナップショットを取り、候補を 1 つずつ書き込んで 1. から再帰
5. 1 つ試すたびにスナップショットへ戻す

注意
----
ノノグラムを厳密に解く問題は NP 困難です。
人が作ったパズルなら探索はすぐ終わりますが、意地悪な盤面では
指数的な数の状態を調べることになり得ます。
そのため、探索ノード数（max_nodes）と制限時間（time_limit）で
外から打ち切れるようにしています。
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ..config import DEFAULT_SOLUTION_LIMIT, SEARCH_LOG_INTERVAL
from ..errors import SearchAborted
from ..grid.line_extractor import iter_lines, set_line
from ..logging_utils import get_logger
from ..types import Board, LineConfig, LineRef
from .configurations import line_configurations
from .consistency import is_solved
from .propagation import propagate

logger = get_logger()


@dataclass
class BranchChoice:
    """
    分岐に使うラインと、その配置候補です。

    count == 0 の場合は「このラインはもう満たせない」（行き止まり）を表します。
    """

    line: LineRef
    configs: List[LineConfig]

    @property
    def count(self) -> int:
        return len(self.configs)


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。
    """

    limit: int
    max_nodes: Optional[int] = None
    deadline: Optional[float] = None

    nodes_visited: int = 0
    solutions: List[np.ndarray] = field(default_factory=list)

    @property
    def done(self) -> bool:
        return len(self.solutions) >= self.limit

    def tick(self) -> None:
        """
        打ち切り条件を確認してから、ノードを 1 つ訪問したことを記録します。

        上限に達していれば SearchAborted を送出します（そのノードは数えません）。
        """
        if self.max_nodes is not None and self.nodes_visited >= self.max_nodes:
            raise SearchAborted("max_nodes", self.nodes_visited)
        if self.deadline is not None and time.monotonic() > self.deadline:
            raise SearchAborted("time_limit", self.nodes_visited)

        self.nodes_visited += 1
        if self.nodes_visited % SEARCH_LOG_INTERVAL == 0:
            logger.info(
                "[search] nodes_visited = %d, solutions = %d",
                self.nodes_visited,
                len(self.solutions),
            )


@dataclass
class SearchResult:
    """
    backtracking_search() の結果です。

    Attributes
    ----------
    solutions : list of numpy.ndarray
        見つかった解（shape = (H, W) の CellState 配列）。最大 limit 個。
    nodes_visited : int
        訪問した探索ノード数。
    aborted : bool
        ノード数上限・制限時間で打ち切った場合に True。
    abort_reason : str or None
        打ち切りの理由（"max_nodes" または "time_limit"）。
    """

    solutions: List[np.ndarray]
    nodes_visited: int = 0
    aborted: bool = False
    abort_reason: Optional[str] = None

    @property
    def found(self) -> bool:
        return bool(self.solutions)


def choose_branch_line(board: Board) -> Optional[BranchChoice]:
    """
    次に分岐するラインを選びます。

    - 配置候補が 0 個のラインがあれば、即座にそのラインを返す（行き止まり）
    - そうでなければ、候補数が 2 以上で最小のラインを返す
      （同数なら先に見つかったもの = 行が列より先、番号の小さい順）
    - 候補が 2 個以上のラインが無ければ None
    """
    best: Optional[BranchChoice] = None

    for ref, clue, view in iter_lines(board):
        configs = line_configurations(len(view), clue, view)
        if not configs:
            return BranchChoice(line=ref, configs=[])
        if len(configs) > 1 and (best is None or len(configs) < best.count):
            best = BranchChoice(line=ref, configs=configs)

    return best


def _search(ctx: SearchContext, board: Board, depth: int = 0) -> None:
    """深さ優先探索の本体です。見つかった解は ctx.solutions に追加します。"""
    ctx.tick()

    # 1) 制約伝播
    if not propagate(board).success:
        return

    # 2) 全セル確定 -> 解の候補
    if board.is_complete():
        if is_solved(board):
            ctx.solutions.append(board.snapshot())
        else:
            logger.warning("complete grid does not match its clues; discarded (depth=%d)", depth)
        return

    # 3) 分岐するラインを選ぶ
    choice = choose_branch_line(board)
    if choice is None or choice.count == 0:
        return

    logger.debug("branch on %s (%d candidates, depth=%d)", choice.line, choice.count, depth)

    # 4) 候補を 1 つずつ試す。試すたびにスナップショットへ戻す
    snapshot = board.snapshot()
    for config in choice.configs:
        set_line(board, choice.line, config)
        _search(ctx, board, depth + 1)
        board.restore(snapshot)
        if ctx.done:
            return


def backtracking_search(
    board: Board,
    limit: int = DEFAULT_SOLUTION_LIMIT,
    max_nodes: Optional[int] = None,
    time_limit: Optional[float] = None,
) -> SearchResult:
    """
    バックトラック探索のエントリポイントです。

    board 自体は書き換えず、コピーの上で探索します。

    Parameters
    ----------
    board : Board
        解きたい盤面。確定済みのセルは前提として使います。
    limit : int
        最大何個の解を求めるか。
    max_nodes : int, optional
        探索ノード数の上限。None なら上限なし。
    time_limit : float, optional
        制限時間（秒）。None なら時間では打ち切らない。

    Returns
    -------
    SearchResult
        解が見つからなければ solutions は空リスト（例外ではありません）。
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    work = board.copy()
    ctx = SearchContext(
        limit=limit,
        max_nodes=max_nodes,
        deadline=time.monotonic() + time_limit if time_limit is not None else None,
    )

    logger.info(
        "Search start: %dx%d, unknown=%d, limit=%d",
        board.width,
        board.height,
        board.unknown_count(),
        limit,
    )

    aborted = False
    abort_reason = None
    try:
        _search(ctx, work)
    except SearchAborted as exc:
        aborted = True
        abort_reason = exc.reason
        logger.warning("Search aborted: %s", exc)

    logger.info(
        "Search end: solutions=%d, nodes_visited=%d, aborted=%s",
        len(ctx.solutions),
        ctx.nodes_visited,
        aborted,
    )

    return SearchResult(
        solutions=ctx.solutions,
        nodes_visited=ctx.nodes_visited,
        aborted=aborted,
        abort_reason=abort_reason,
    )
