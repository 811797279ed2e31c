# -*- coding: utf-8 -*-
"""
nonogram パッケージで使う例外クラスをまとめたモジュールです。

初学者向けポイント:
- 「矛盾（contradiction）」は探索中に普通に起こる出来事なので、
  最終的には例外ではなく戻り値（success=False や空リスト）として呼び出し側に返します。
- 入力データそのものが壊れている場合（MalformedPuzzleInput）だけは、
  盤面を作る前の入口で例外として弾きます。
"""

from __future__ import annotations

from typing import Any, Optional


class NonogramError(Exception):
    """nonogram パッケージ共通の基底例外です。"""


class ContradictionError(NonogramError):
    """
    あるライン（行または列）に、有効な配置が 1 つも存在しないことを表します。

    Attributes
    ----------
    line : LineRef or None
        矛盾が見つかったライン。分からない場合は None。
    """

    def __init__(self, line: Optional[Any] = None, message: str = "") -> None:
        self.line = line
        if not message:
            message = f"no valid configuration for {line}" if line is not None else "contradiction"
        super().__init__(message)


class MalformedPuzzleInput(NonogramError, ValueError):
    """
    パズル定義（ヒント・盤面サイズ・グリッド）の構造が不正な場合に送出します。

    Board を作る前の入口（parser / Clue.of / Board の初期化）でのみ使います。
    """


class SearchAborted(NonogramError):
    """
    探索ノード数の上限や制限時間に達したことを表す、探索内部用の例外です。

    backtracking_search() の中で捕捉され、SearchResult.aborted=True に変換されます。
    """

    def __init__(self, reason: str, nodes_visited: int = 0) -> None:
        self.reason = reason
        self.nodes_visited = nodes_visited
        super().__init__(f"search aborted ({reason}) after {nodes_visited} nodes")
