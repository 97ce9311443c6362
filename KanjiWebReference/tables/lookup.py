"""Lookup and layout helpers over the static kana table."""
from __future__ import annotations
from typing import Dict, List, Optional, Sequence

from ..core.errors import InvalidInputError, NotFoundError
from ..core.models import KanaCell, KANA_KINDS
from .kana import KANA, KANA_BY_ID

# parent forms a base_key may name: base cells by key, voiced cells by reading
_VOICED_KINDS = ("dakuten", "handakuten")


def kana_by_id(cell_id: str) -> KanaCell:
    try:
        return KANA_BY_ID[cell_id]
    except KeyError:
        raise NotFoundError(f"Unknown kana id: {cell_id!r}") from None


def kana_of_kind(kind: str) -> List[KanaCell]:
    if kind not in KANA_KINDS:
        raise InvalidInputError(f"Unknown kana kind: {kind!r}")
    return [cell for cell in KANA if cell.kind == kind]


def find_parent(base_key: str, cells: Sequence[KanaCell] = KANA) -> Optional[KanaCell]:
    """Return the cell a `base_key` refers to, or None if nothing matches."""
    for cell in cells:
        if cell.kind == "base" and cell.key == base_key:
            return cell
    for cell in cells:
        if cell.kind in _VOICED_KINDS and cell.romaji == base_key:
            return cell
    return None


def base_of(cell: KanaCell) -> Optional[KanaCell]:
    """Resolve `cell.base_key` to its parent cell (None for cells without one)."""
    if cell.base_key is None:
        return None
    parent = find_parent(cell.base_key)
    if parent is None:
        raise NotFoundError(f"{cell.id}: base key {cell.base_key!r} does not resolve")
    return parent


def kana_grid(kind: str) -> Dict[str, Dict[str, KanaCell]]:
    """Lay out one kind as row -> column -> cell, rows in table order.

    Cells in the `none` column (small kana) have no vowel position, so they
    are keyed by their id key instead.
    """
    grid: Dict[str, Dict[str, KanaCell]] = {}
    for cell in kana_of_kind(kind):
        slot = cell.key if cell.col == "none" else cell.col
        grid.setdefault(cell.row, {})[slot] = cell
    return grid
