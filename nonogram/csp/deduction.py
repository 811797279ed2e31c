# -*- coding: utf-8 -*-
"""
1 ライン分の推論（line solving）を行うモジュールです。

考え方はシンプルで、
「ありうる配置をすべて列挙し、全配置で一致しているセルは確定できる」
というものです（配置の共通部分 = intersection）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..errors import ContradictionError
from ..types import CellState
from .configurations import ClueLike, line_configurations, normalize_partial


@dataclass
class LineDeduction:
    """
    deduce_line() の結果です。

    Attributes
    ----------
    result : tuple of CellState or None
        推論後のライン。矛盾した場合は None。
    changed : bool
        result が入力の partial と 1 マスでも違えば True。
    contradiction : bool
        有効な配置が 1 つも無かった場合に True。
    config_count : int
        有効な配置の個数。
    """

    result: Optional[Tuple[CellState, ...]]
    changed: bool
    contradiction: bool
    config_count: int = 0

    def raise_for_contradiction(self, line=None) -> None:
        """矛盾していれば ContradictionError を送出します。"""
        if self.contradiction:
            raise ContradictionError(line)


def deduce_line(
    length: int,
    clue: ClueLike,
    partial: Optional[Sequence] = None,
) -> LineDeduction:
    """
    配置候補の共通部分から、確定できるセルを求めます。

    - 全候補が FILLED で一致 -> FILLED
    - 全候補が BLOCKED で一致 -> BLOCKED
    - それ以外 -> UNKNOWN

    すでに確定しているセルは、構成上すべての候補と一致するので、
    そのまま残ります（確定 -> 未確定に戻ることはありません）。
    """
    cells = normalize_partial(length, partial)
    configs = line_configurations(length, clue, cells)
    if not configs:
        return LineDeduction(result=None, changed=False, contradiction=True, config_count=0)

    result = []
    for i in range(length):
        first = configs[0][i]
        if all(conf[i] is first for conf in configs):
            result.append(first)
        else:
            result.append(CellState.UNKNOWN)

    out = tuple(result)
    changed = any(a is not b for a, b in zip(out, cells))
    return LineDeduction(result=out, changed=changed, contradiction=False, config_count=len(configs))
