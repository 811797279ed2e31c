# -*- coding: utf-8 -*-
"""
nonogram.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- parser.py : dict / DataFrame などから Board への変換と入力チェック
- line_extractor.py : 行・列を共通の「ライン」として取り出す
"""
