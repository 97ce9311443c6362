"""Kana-adjacent marks (long vowel, middle dot, iteration marks, rare small kana).

General Japanese punctuation lives in `punctuation.py`.
"""
from __future__ import annotations
from typing import Tuple

from ..core.models import KanaMark

MARKS: Tuple[KanaMark, ...] = (
    KanaMark("marks:dash", "-", "ー", "ー",
             notes="chōonpu (long vowel mark; mainly katakana, sometimes hiragana)"),
    KanaMark("marks:dot", "·", "・", "・",
             notes="nakaguro (middle dot; separator in foreign names/loanwords)"),
    KanaMark("marks:iteration", "repeat", "ゝ", "ヽ",
             notes="kana iteration mark (repeats previous kana)"),
    KanaMark("marks:iteration-dakuten", "repeat-voiced", "ゞ", "ヾ",
             notes="voiced kana iteration mark"),
    KanaMark("marks:small-ka", "ka", "ゕ", "",
             notes="small ka (historical/rare hiragana; appears in some fixed spellings)"),
    KanaMark("marks:small-ke", "ke", "ゖ", "",
             notes="small ke (historical/rare hiragana; appears in some fixed spellings)"),
)
