# -*- coding: utf-8 -*-
"""
1 ライン分の「配置候補（configuration）」を列挙するモジュールです。

ヒント [3, 1] と長さ 7 のラインであれば、
    ###.#..
    ###..#.
    ###...#
    .###.#.
    ...
のように、ヒントを満たす塗り方をすべて列挙します。

さらに、すでに確定しているセル（partial）と矛盾する配置は除外します。
- partial が FILLED のセルは、必ず塗りのまま
- partial が BLOCKED のセルは、必ず空白のまま

列挙は「ブロックを左から順に置いていく再帰（深さ優先）」で行います。
1 本の作業バッファを使い回しますが、出力するときは毎回 tuple にコピーします。
"""

from __future__ import annotations

from math import comb
from typing import List, Optional, Sequence, Union

from ..types import CellState, Clue, LineConfig

ClueLike = Union[Clue, Sequence[int]]


def as_clue(clue: ClueLike) -> Clue:
    return clue if isinstance(clue, Clue) else Clue.of(clue)


def normalize_partial(length: int, partial: Optional[Sequence]) -> List[CellState]:
    """
    partial を CellState のリストにそろえます。None なら全セル UNKNOWN。
    """
    if partial is None:
        return [CellState.UNKNOWN] * length
    cells = [CellState.from_value(v) for v in partial]
    if len(cells) != length:
        raise ValueError(f"partial line has {len(cells)} cells, expected {length}")
    return cells


def _suffix_min_lengths(blocks: Sequence[int]) -> List[int]:
    """
    need[i] = ブロック i..k-1 を最小間隔（1 マス）で並べたときの長さ。

    need[k] = 0 を番兵として末尾に持ちます。
    """
    k = len(blocks)
    need = [0] * (k + 1)
    for i in range(k - 1, -1, -1):
        sep = 1 if i < k - 1 else 0
        need[i] = blocks[i] + sep + need[i + 1]
    return need


def line_configurations(
    length: int,
    clue: ClueLike,
    partial: Optional[Sequence] = None,
) -> List[LineConfig]:
    """
    ヒントと確定セルの両方を満たす配置をすべて返します。

    Parameters
    ----------
    length : int
        ラインの長さ N。
    clue : Clue or sequence of int
        ヒント。[] と [0] はどちらも「全部空白」。
    partial : sequence of CellState (or -1/0/1), optional
        現在のラインの状態。None なら全セル UNKNOWN とみなします。

    Returns
    -------
    list of tuple of CellState
        各要素は FILLED / BLOCKED だけからなる長さ N の tuple。
        空リストなら、このラインは現状では満たせない（矛盾）ことを意味します。
        順序は「前のブロックほど左に置いたもの」が先です。
    """
    clue = as_clue(clue)
    cells = normalize_partial(length, partial)

    # 空ヒント: 全部空白の 1 通りだけ（塗り確定セルがあれば 0 通り）
    if clue.is_empty:
        if any(cell is CellState.FILLED for cell in cells):
            return []
        return [(CellState.BLOCKED,) * length]

    if clue.min_length > length:
        return []

    blocks = clue.blocks
    k = len(blocks)
    need = _suffix_min_lengths(blocks)

    buf: List[CellState] = [CellState.BLOCKED] * length
    results: List[LineConfig] = []

    def place(i: int, start: int) -> None:
        # すべてのブロックを置き終えた -> 残りを空白で埋めて出力
        if i == k:
            for z in range(start, length):
                if not cells[z].allows_blocked():
                    return
                buf[z] = CellState.BLOCKED
            results.append(tuple(buf))
            return

        b = blocks[i]
        is_last = i == k - 1

        for pos in range(start, length - need[i] + 1):
            # 1) [start, pos) は空白。塗り確定セルを飛び越えることはできないので、
            #    それ以降の pos もすべて不可能 -> ループ終了
            if pos > start and not cells[pos - 1].allows_blocked():
                break
            for z in range(start, pos):
                buf[z] = CellState.BLOCKED

            # 2) [pos, pos+b) を塗る
            if not all(cells[j].allows_filled() for j in range(pos, pos + b)):
                continue
            for j in range(pos, pos + b):
                buf[j] = CellState.FILLED

            # 3) 最後のブロックでなければ、直後の 1 マスは区切りの空白
            next_start = pos + b
            if not is_last:
                if not cells[next_start].allows_blocked():
                    continue
                buf[next_start] = CellState.BLOCKED
                next_start += 1

            # 4) 次のブロックへ
            place(i + 1, next_start)

    place(0, 0)
    return results


def count_line_configurations(length: int, clue: ClueLike) -> int:
    """
    全セル UNKNOWN のラインについて、配置の個数を組合せ公式で返します。

    空きマス数を s = N - (S + k - 1) とすると、
    k 個のブロックの前後 k+1 か所に s 個の空きを配る方法の数 C(s + k, k) です。
    """
    clue = as_clue(clue)
    if clue.is_empty:
        return 1
    slack = length - clue.min_length
    if slack < 0:
        return 0
    k = len(clue)
    return comb(slack + k, k)
