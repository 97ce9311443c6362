"""Kanji dictionary JSON sources.

Each JLPT bucket is a JSON object keyed by character:

    {"日": {"strokes": 4, "freq": 1, "jlpt_new": 5, "meanings": ["Day", ...]}, ...}

Buckets live in one directory as `n5.json` ... `n1.json` plus `other.json`.
Entries are loaded as-is; nothing is validated or rejected here.
"""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from ...core.models import KanjiDb, KanjiEntry, KanjiGroup, KANJI_LEVELS

logger = logging.getLogger(__name__)


def load_json(path: str | Path) -> Any:
    p = Path(path)
    with p.open('r', encoding='utf8') as fh:
        return json.load(fh)


def kanji_db_from_mapping(raw: Dict[str, Any]) -> KanjiDb:
    """Wrap each raw record in a KanjiEntry, keeping key order."""
    return {ch: KanjiEntry.from_dict(info) for ch, info in raw.items()}


def load_kanji_db(path: str | Path) -> KanjiDb:
    """Load one bucket file into a character -> KanjiEntry mapping."""
    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object keyed by character in {path}")
    db = kanji_db_from_mapping(data)
    logger.debug('Loaded %d kanji from %s', len(db), path)
    return db


def load_level_sources(directory: str | Path) -> List[Tuple[str, KanjiDb]]:
    """Load the six level buckets in priority order.

    A missing bucket file is treated as an empty bucket.
    """
    root = Path(directory)
    sources: List[Tuple[str, KanjiDb]] = []
    for level in KANJI_LEVELS:
        path = root / f"{level}.json"
        if not path.exists():
            logger.warning('Kanji bucket %s missing at %s; using empty bucket', level, path)
            sources.append((level, {}))
            continue
        sources.append((level, load_kanji_db(path)))
    return sources


def save_kanji_db(path: str | Path, db: KanjiDb) -> None:
    """Write a bucket back in the same shape `load_kanji_db` reads."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    out = {ch: entry.to_dict() for ch, entry in db.items()}
    with p.open('w', encoding='utf8') as fh:
        json.dump(out, fh, ensure_ascii=False, indent=2)


def compute_level_stats(groups: Sequence[KanjiGroup]) -> dict:
    """Per-level counts plus how many entries carry `freq` and `strokes`."""
    levels = {}
    total = 0
    for group in groups:
        n = len(group.items)
        total += n
        has_freq = sum(1 for it in group.items if it.info.freq is not None)
        has_strokes = sum(1 for it in group.items if it.info.strokes is not None)
        levels[group.level] = {
            'count': n,
            'freq_count': has_freq,
            'strokes_count': has_strokes,
            'strokes_pct': (has_strokes / n * 100) if n else 0.0,
        }
    return {'total': total, 'levels': levels}


__all__ = [
    'load_json', 'kanji_db_from_mapping', 'load_kanji_db', 'load_level_sources',
    'save_kanji_db', 'compute_level_stats',
]
