# -*- coding: utf-8 -*-
"""
nonogram.csp パッケージ

制約充足（ヒントを満たす塗り方の探索）に関する処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- configurations.py : 1 ライン分の配置候補の列挙
- deduction.py      : 配置候補の共通部分による 1 ライン推論
- propagation.py    : 全ラインへの推論を不動点まで繰り返す制約伝播
- consistency.py    : 列挙なしの軽い整合性チェックと、完成判定
- search.py         : 制約伝播つきバックトラック探索
"""
