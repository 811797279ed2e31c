# -*- coding: utf-8 -*-
"""
ノノグラム solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass と Enum を使うことで、
「この構造体はどんなフィールドを持っているのか」
「セルはどんな値を取り得るのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .errors import MalformedPuzzleInput


class CellState(Enum):
    """
    セルの 3 状態を表す列挙型です。

    値 (-1, 0, 1) は、外部とやり取りする JSON 形式の
    「X（空白確定）/ 未確定 / 塗り」にそのまま対応しています。
    """

    BLOCKED = -1
    UNKNOWN = 0
    FILLED = 1

    def allows_filled(self) -> bool:
        """このセルを「塗り」にしても矛盾しないかどうか。"""
        return self is not CellState.BLOCKED

    def allows_blocked(self) -> bool:
        """このセルを「空白」にしても矛盾しないかどうか。"""
        return self is not CellState.FILLED

    @property
    def is_known(self) -> bool:
        return self is not CellState.UNKNOWN

    @classmethod
    def from_value(cls, value) -> "CellState":
        """-1 / 0 / 1（または CellState 自身）から CellState を作ります。"""
        if isinstance(value, cls):
            return value
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise MalformedPuzzleInput(f"invalid cell value: {value!r}") from None


# 1 ライン分の配置（塗り / 空白のみからなる）
LineConfig = Tuple[CellState, ...]


@dataclass(frozen=True)
class Clue:
    """
    1 ライン分のヒント（連続する塗りマスの長さの並び）です。

    空のヒント () と [0] はどちらも「このラインは全部空白」を意味し、
    :meth:`of` で同じ空ヒントに正規化されます。

    Attributes
    ----------
    blocks : tuple of int
        各ブロックの長さ。すべて 1 以上。
    """

    blocks: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        for b in self.blocks:
            if isinstance(b, bool) or not isinstance(b, int) or b < 1:
                raise MalformedPuzzleInput(f"invalid run length in clue: {b!r}")

    @classmethod
    def of(cls, values: Optional[Iterable] = None) -> "Clue":
        """
        数値の並びから Clue を作ります。

        - None / [] / [0] / [0, 0] -> 空ヒント
        - 負の値、整数でない値、0 と正の値の混在 -> MalformedPuzzleInput
        """
        if values is None:
            return cls()
        if isinstance(values, Clue):
            return values
        if isinstance(values, (str, bytes)):
            raise MalformedPuzzleInput(f"clue must be a sequence of integers: {values!r}")

        try:
            raw = list(values)
        except TypeError:
            raise MalformedPuzzleInput(f"clue must be a sequence of integers: {values!r}") from None

        blocks: List[int] = []
        for v in raw:
            if isinstance(v, bool):
                raise MalformedPuzzleInput(f"invalid run length in clue: {v!r}")
            if isinstance(v, float) and v.is_integer():
                v = int(v)
            if isinstance(v, np.integer):
                v = int(v)
            if not isinstance(v, int):
                raise MalformedPuzzleInput(f"invalid run length in clue: {v!r}")
            if v < 0:
                raise MalformedPuzzleInput(f"negative run length in clue: {v}")
            blocks.append(v)

        if all(b == 0 for b in blocks):
            return cls()
        if any(b == 0 for b in blocks):
            raise MalformedPuzzleInput(f"zero mixed with runs in clue: {raw}")
        return cls(tuple(blocks))

    @property
    def is_empty(self) -> bool:
        return not self.blocks

    @property
    def total(self) -> int:
        """塗りマスの合計数。"""
        return sum(self.blocks)

    @property
    def min_length(self) -> int:
        """ブロックと最低限の区切り（1 マス）を並べたときの長さ。"""
        if not self.blocks:
            return 0
        return self.total + len(self.blocks) - 1

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)

    def __getitem__(self, i: int) -> int:
        return self.blocks[i]

    def to_list(self) -> List[int]:
        return list(self.blocks)


@dataclass(frozen=True, order=True)
class LineRef:
    """
    行または列を指し示す参照です。

    order=True なので、ソートすると「行が列より先・番号が小さい順」になります。
    （axis の並び順 "col" < "row" を避けるため、rank を先頭フィールドにしています）
    """

    rank: int = field(repr=False)
    axis: str
    index: int

    @classmethod
    def row(cls, index: int) -> "LineRef":
        return cls(0, "row", index)

    @classmethod
    def col(cls, index: int) -> "LineRef":
        return cls(1, "col", index)

    def __str__(self) -> str:
        return f"{self.axis} {self.index}"


def _is_cell_array(grid) -> bool:
    """dtype=object の ndarray で、全要素が CellState なら True。"""
    return (
        isinstance(grid, np.ndarray)
        and grid.dtype == object
        and all(isinstance(cell, CellState) for cell in grid.flat)
    )


@dataclass
class Board:
    """
    パズル 1 問分の状態です。エンジンが扱う唯一の「可変な状態」です。

    Attributes
    ----------
    width : int
        列数 W。
    height : int
        行数 H。
    row_clues : tuple of Clue
        各行のヒント（長さ H）。
    col_clues : tuple of Clue
        各列のヒント（長さ W）。
    grid : numpy.ndarray
        shape = (H, W), dtype=object の配列。各要素は CellState。
        リストや -1 / 0 / 1 の整数配列を渡した場合は、初期化時に変換します。
    """

    width: int
    height: int
    row_clues: Tuple[Clue, ...]
    col_clues: Tuple[Clue, ...]
    grid: np.ndarray = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise MalformedPuzzleInput(
                f"board dimensions must be positive: {self.width}x{self.height}"
            )
        self.row_clues = tuple(Clue.of(c) for c in self.row_clues)
        self.col_clues = tuple(Clue.of(c) for c in self.col_clues)
        if len(self.row_clues) != self.height:
            raise MalformedPuzzleInput(
                f"expected {self.height} row clues, got {len(self.row_clues)}"
            )
        if len(self.col_clues) != self.width:
            raise MalformedPuzzleInput(
                f"expected {self.width} column clues, got {len(self.col_clues)}"
            )

        if self.grid is None:
            self.grid = np.full((self.height, self.width), CellState.UNKNOWN, dtype=object)
        elif _is_cell_array(self.grid):
            if self.grid.shape != (self.height, self.width):
                raise MalformedPuzzleInput(
                    f"grid shape {self.grid.shape} does not match {self.height}x{self.width}"
                )
        else:
            # リストや -1/0/1 の整数配列は CellState 配列に変換する
            from .grid.parser import normalize_grid

            self.grid = normalize_grid(self.grid, self.width, self.height)

    # ---- 参照・スナップショット ------------------------------------------

    def clue_for(self, line: LineRef) -> Clue:
        if line.axis == "row":
            return self.row_clues[line.index]
        return self.col_clues[line.index]

    def snapshot(self) -> np.ndarray:
        """現在のグリッドの完全なコピーを返します。"""
        return self.grid.copy()

    def restore(self, snapshot: np.ndarray) -> None:
        """:meth:`snapshot` で取ったコピーの内容にグリッドを戻します。"""
        self.grid[...] = snapshot

    def copy(self) -> "Board":
        return Board(
            width=self.width,
            height=self.height,
            row_clues=self.row_clues,
            col_clues=self.col_clues,
            grid=self.grid.copy(),
        )

    def reset(self) -> None:
        """すべてのセルを UNKNOWN に戻します。"""
        self.grid[...] = CellState.UNKNOWN

    # ---- 状態の問い合わせ -----------------------------------------------

    def unknown_count(self) -> int:
        return sum(1 for cell in self.grid.flat if cell is CellState.UNKNOWN)

    def is_complete(self) -> bool:
        """未確定セルが 1 つも残っていなければ True。"""
        return self.unknown_count() == 0

    def to_int_grid(self) -> List[List[int]]:
        """グリッドを -1 / 0 / 1 の 2 次元リストに変換します。"""
        return [[cell.value for cell in row] for row in self.grid]
