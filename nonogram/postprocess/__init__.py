# -*- coding: utf-8 -*-
"""
nonogram.postprocess パッケージ

探索結果を UI / API 向けの形（dict, DataFrame, テキスト）に変換します。
"""
