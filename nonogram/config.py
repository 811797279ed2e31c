# -*- coding: utf-8 -*-
"""
nonogram 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 探索の深さ（ノード数上限）や制限時間
- 一度に求める解の個数
- ログの出力レベル
- 盤面のテキスト表示に使う記号
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import Optional

# ==== 探索関連 =============================================================

# solve() がデフォルトで求める解の個数。
# 2 にすると「解が一意かどうか」の確認にも使えます。
DEFAULT_SOLUTION_LIMIT: int = 1

# バックトラック探索で、何ノードまで探索するかの上限。
# ノノグラムは NP 困難なので、意地悪な盤面では探索が爆発します。
# API（api_proto/local_api.py）の既定値です。エンジンの solve() は既定で上限なし。
MAX_SEARCH_NODES: Optional[int] = 200000

# 探索の制限時間（秒）。None なら時間では打ち切らない。
SEARCH_TIME_LIMIT_SEC: Optional[float] = None

# 探索中の進捗ログを何ノードごとに出すか。
SEARCH_LOG_INTERVAL: int = 1000

# ==== 制約伝播関連 =========================================================

# 1 回の propagate() で行う「全行+全列スイープ」の最大回数。
# None なら理論上の上限（W*H + 1 回）を使います。
MAX_PROPAGATION_PASSES: Optional[int] = None

# ==== 入力チェック関連 =====================================================

# 1 辺の最大サイズ。API 経由で巨大な盤面が来たときの安全弁です。
MAX_BOARD_SIDE: int = 100

# ==== ログ関連 =============================================================

# nonogram ロガーの初期レベル
LOG_LEVEL: str = "INFO"

# ==== 表示関連 =============================================================

# render_text() / grid_to_frame() で使う記号
FILLED_SYMBOL: str = "#"
BLOCKED_SYMBOL: str = "x"
UNKNOWN_SYMBOL: str = "."
