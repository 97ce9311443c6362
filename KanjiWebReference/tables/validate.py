"""Authoring checks for the static tables.

Returns problem dicts instead of raising so every issue is reported at once:
    {"type": "duplicate_id" | "bad_base_key" | "kind_prefix", "id": ..., "detail": ...}
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Sequence

from .kana import KANA
from .lookup import find_parent
from .marks import MARKS
from .punctuation import PUNCTUATION

logger = logging.getLogger(__name__)


def validate_tables(
    kana: Sequence = KANA,
    marks: Sequence = MARKS,
    punctuation: Sequence = PUNCTUATION,
    max_errors: Optional[int] = None,
) -> List[dict]:
    problems: List[dict] = []
    seen = set()

    def _records() -> Iterable:
        yield from kana
        yield from marks
        yield from punctuation

    for rec in _records():
        if rec.id in seen:
            problems.append({"type": "duplicate_id", "id": rec.id, "detail": "id appears more than once"})
        seen.add(rec.id)

        prefix = rec.id.split(":", 1)[0]
        if prefix != rec.kind:
            problems.append({"type": "kind_prefix", "id": rec.id,
                             "detail": f"id prefix {prefix!r} != kind {rec.kind!r}"})

        base_key = getattr(rec, "base_key", None)
        if base_key is not None and find_parent(base_key, kana) is None:
            problems.append({"type": "bad_base_key", "id": rec.id,
                             "detail": f"base key {base_key!r} does not resolve"})

        if max_errors is not None and len(problems) >= max_errors:
            break

    if problems:
        logger.warning("Table validation found %d problem(s)", len(problems))
    return problems
