"""General Japanese punctuation, brackets and repetition symbols.

Paired brackets and quotes are listed as separate open/close entries.
"""
from __future__ import annotations
from typing import Tuple

from ..core.models import JapanesePunctuation

P = JapanesePunctuation

PUNCTUATION: Tuple[JapanesePunctuation, ...] = (
    # sentence punctuation
    P("punctuation:maru", ".", "。", notes="kuten (Japanese full stop)"),
    P("punctuation:ten", ",", "、", notes="tōten (Japanese comma)"),

    # corner bracket quotes
    P("punctuation:quote-open", "quote-open", "「", notes="corner bracket quote (open)"),
    P("punctuation:quote-close", "quote-close", "」", notes="corner bracket quote (close)"),
    P("punctuation:double-quote-open", "double-quote-open", "『",
      notes="double corner bracket quote (open; quotes within quotes, titles)"),
    P("punctuation:double-quote-close", "double-quote-close", "』",
      notes="double corner bracket quote (close)"),

    # full-width brackets
    P("punctuation:paren-open", "paren-open", "（", notes="full-width parenthesis (open)"),
    P("punctuation:paren-close", "paren-close", "）", notes="full-width parenthesis (close)"),
    P("punctuation:square-open", "square-open", "［", notes="full-width square bracket (open)"),
    P("punctuation:square-close", "square-close", "］", notes="full-width square bracket (close)"),
    P("punctuation:curly-open", "curly-open", "｛", notes="full-width curly bracket (open)"),
    P("punctuation:curly-close", "curly-close", "｝", notes="full-width curly bracket (close)"),

    # publishing brackets 〈〉 《》 【】 〔〕
    P("punctuation:angle-open", "angle-open", "〈", notes="angle bracket (open)"),
    P("punctuation:angle-close", "angle-close", "〉", notes="angle bracket (close)"),
    P("punctuation:double-angle-open", "double-angle-open", "《", notes="double angle bracket (open)"),
    P("punctuation:double-angle-close", "double-angle-close", "》", notes="double angle bracket (close)"),
    P("punctuation:lenticular-open", "lenticular-open", "【", notes="lenticular bracket (open)"),
    P("punctuation:lenticular-close", "lenticular-close", "】", notes="lenticular bracket (close)"),
    P("punctuation:tortoise-open", "tortoise-open", "〔", notes="tortoise shell bracket (open)"),
    P("punctuation:tortoise-close", "tortoise-close", "〕", notes="tortoise shell bracket (close)"),

    # ellipsis
    P("punctuation:ellipsis", "...", "…", notes="ellipsis"),
    P("punctuation:two-dot-leader", "..", "‥", notes="two-dot leader (less common than …)"),

    # modern full-width
    P("punctuation:question", "?", "？", notes="full-width question mark (modern usage)"),
    P("punctuation:exclamation", "!", "！", notes="full-width exclamation mark (modern usage)"),
    P("punctuation:colon", ":", "：", notes="full-width colon"),
    P("punctuation:semicolon", ";", "；", notes="full-width semicolon"),

    P("punctuation:wave-dash", "~", "〜",
      notes="wave dash (ranges, casual elongation; distinct from chōonpu ー)"),

    # repetition symbols seen with kanji
    P("punctuation:odoriji-kanji", "repeat-kanji", "々",
      notes="kanji iteration mark (repeats previous kanji)"),
    P("punctuation:ditto", "ditto", "〃", notes="ditto mark (repeats previous entry; less common)"),
)

del P
