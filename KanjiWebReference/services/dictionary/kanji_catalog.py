"""Flat kanji catalog for the single kanji page.

The catalog is keyed by KanjiVG id rather than by character and is read
independently of the JLPT buckets; the two are not reconciled. Every key
produces one item, so a character stored under two ids shows up twice.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.config import AppConfig, load_config
from ...core.models import KanjiPageItem
from ..data_prep.kanji_sources import load_json

logger = logging.getLogger(__name__)

JLPT_LEVELS = (1, 2, 3, 4, 5)


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _as_jlpt(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value not in JLPT_LEVELS:
        return None
    return int(value)


def load_kanji_catalog(path: str | Path) -> Dict[str, Dict[str, Any]]:
    data = load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object keyed by kanji id in {path}")
    logger.debug('Loaded %d catalog records from %s', len(data), path)
    return data


def project_kanji_catalog(catalog: Dict[str, Dict[str, Any]]) -> List[KanjiPageItem]:
    """One complete-shape item per catalog key; absent fields become None/[]."""
    items: List[KanjiPageItem] = []
    for kvg_id, record in catalog.items():
        record = record if isinstance(record, dict) else {}
        items.append(KanjiPageItem(
            kvg_id=kvg_id,
            symbol=record.get('symbol'),
            jlpt=_as_jlpt(record.get('jlpt_new')),
            meanings=_as_list(record.get('meanings')),
            readings_on=_as_list(record.get('readings_on')),
            readings_kun=_as_list(record.get('readings_kun')),
            strokes=record.get('strokes'),
        ))
    return items


def load_kanji_page(cfg: Optional[AppConfig] = None) -> dict:
    """Build the `{"items": [...]}` payload from the catalog file."""
    cfg = cfg or load_config()
    catalog = load_kanji_catalog(cfg.paths.kanji_catalog_path)
    return {'items': [it.to_dict() for it in project_kanji_catalog(catalog)]}
