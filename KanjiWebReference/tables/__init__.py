"""Static reference tables: kana, kana-adjacent marks and punctuation."""
from .kana import KANA, KANA_BY_ID
from .marks import MARKS
from .punctuation import PUNCTUATION
from .lookup import kana_by_id, kana_of_kind, kana_grid, base_of

__all__ = [
    "KANA", "KANA_BY_ID", "MARKS", "PUNCTUATION",
    "kana_by_id", "kana_of_kind", "kana_grid", "base_of",
]
