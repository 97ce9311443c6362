"""Page payloads handed to the presentation layer.

Importing this module registers the built-in pages on `PAGE_REGISTRY`.
"""
from __future__ import annotations

from ..core.registry import PAGE_REGISTRY
from ..tables import KANA, MARKS, PUNCTUATION
from .dictionary.kanji_catalog import load_kanji_page
from .dictionary.kanji_levels import load_kanji_levels_page


@PAGE_REGISTRY.page("kana")
def kana_page() -> dict:
    return {"items": [cell.to_dict() for cell in KANA]}


@PAGE_REGISTRY.page("marks")
def marks_page() -> dict:
    return {"items": [mark.to_dict() for mark in MARKS]}


@PAGE_REGISTRY.page("punctuation")
def punctuation_page() -> dict:
    return {"items": [p.to_dict() for p in PUNCTUATION]}


@PAGE_REGISTRY.page("kanji-levels")
def kanji_levels_page() -> dict:
    return load_kanji_levels_page()


@PAGE_REGISTRY.page("kanji")
def kanji_page() -> dict:
    return load_kanji_page()
