"""JLPT level grouping for the kanji listing page.

Buckets are processed in priority order (n5, n4, n3, n2, n1, other). A
character is attributed to the first bucket that contains it; later
occurrences are dropped. Each group is then sorted by `freq`, with entries
lacking a numeric frequency placed last and ties kept in source order.
"""
from __future__ import annotations
import logging
import math
from typing import Iterable, List, Optional, Tuple

from ...core.config import AppConfig, load_config
from ...core.models import KanjiDb, KanjiEntry, KanjiGroup, KanjiItem
from ..data_prep.kanji_sources import load_level_sources

logger = logging.getLogger(__name__)


def frequency_key(entry: KanjiEntry) -> float:
    freq = entry.freq
    # bool is an int subclass; treat it like any other non-rank value
    if isinstance(freq, bool) or not isinstance(freq, (int, float)):
        return math.inf
    # NaN compares false both ways and would scramble the whole bucket
    if isinstance(freq, float) and math.isnan(freq):
        return math.inf
    return freq


def group_kanji_by_level(sources: Iterable[Tuple[str, KanjiDb]]) -> List[KanjiGroup]:
    seen = set()
    groups: List[KanjiGroup] = []

    for level, db in sources:
        bucket: List[KanjiItem] = []
        skipped = 0
        for kanji, info in db.items():
            if not kanji or kanji in seen:
                skipped += 1
                continue
            seen.add(kanji)
            bucket.append(KanjiItem(kanji=kanji, info=info))

        bucket.sort(key=lambda it: frequency_key(it.info))
        if skipped:
            logger.debug('Level %s: kept %d, skipped %d duplicate/empty keys', level, len(bucket), skipped)
        groups.append(KanjiGroup(level=level, items=tuple(bucket)))

    return groups


def load_kanji_levels_page(cfg: Optional[AppConfig] = None) -> dict:
    """Build the `{"groups": [...]}` payload from the bucket files on disk."""
    cfg = cfg or load_config()
    groups = group_kanji_by_level(load_level_sources(cfg.paths.kanji_levels_dir))
    return {'groups': [g.to_dict() for g in groups]}
