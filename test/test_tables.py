import sys
from pathlib import Path

import pytest

# Add the project root (one level up from 'test') to sys.path
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from KanjiWebReference.core.errors import InvalidInputError, NotFoundError
from KanjiWebReference.core.models import KanaCell, KANA_COLS, KANA_ROWS
from KanjiWebReference.tables import (
    KANA,
    MARKS,
    PUNCTUATION,
    base_of,
    kana_by_id,
    kana_grid,
    kana_of_kind,
)
from KanjiWebReference.tables.validate import validate_tables


def test_table_sizes():
    counts = {kind: len(kana_of_kind(kind)) for kind in ("base", "dakuten", "handakuten", "yoon", "small")}
    assert counts == {"base": 46, "dakuten": 20, "handakuten": 5, "yoon": 33, "small": 9}
    assert len(MARKS) == 6
    assert len(PUNCTUATION) == 29


def test_shipped_tables_validate_clean():
    assert validate_tables() == []


def test_rows_and_cols_are_known():
    for cell in KANA:
        assert cell.row in KANA_ROWS
        assert cell.col in KANA_COLS


def test_validate_reports_duplicates_and_bad_base_key():
    extra = (
        KanaCell("base:ka", "base", "k", "a", "ka", "か", "カ"),
        KanaCell("yoon:xx+ya", "yoon", "k", "a", "xya", "?", "?", base_key="xx"),
        KanaCell("small:q", "base", "small", "none", "q", "?", "?"),
    )
    problems = validate_tables(kana=KANA + extra)
    types = sorted(p["type"] for p in problems)
    assert types == ["bad_base_key", "duplicate_id", "kind_prefix"]


def test_lookup_and_glyphs():
    ga = kana_by_id("dakuten:ka")
    assert (ga.hira, ga.kata, ga.romaji) == ("が", "ガ", "ga")
    assert ga.glyph("katakana") == "ガ"
    with pytest.raises(InvalidInputError):
        ga.glyph("romaji")
    with pytest.raises(NotFoundError):
        kana_by_id("base:xx")


def test_base_of_resolves_parents():
    assert base_of(kana_by_id("dakuten:ka")).id == "base:ka"
    assert base_of(kana_by_id("yoon:shi+ya")).id == "base:shi"
    assert base_of(kana_by_id("yoon:gi+ya")).id == "dakuten:ki"
    assert base_of(kana_by_id("yoon:pi+yo")).id == "handakuten:hi"
    assert base_of(kana_by_id("base:a")) is None


def test_kana_grid_layout():
    grid = kana_grid("base")
    assert list(grid)[:3] == ["v", "k", "s"]
    assert grid["k"]["o"].hira == "こ"
    assert set(grid["y"]) == {"a", "u", "o"}
    small = kana_grid("small")
    assert small["small"]["tsu"].hira == "っ"


def test_marks_and_punctuation_shapes():
    assert all(m.kind == "marks" and m.col == "none" for m in MARKS)
    assert kana_of_kind("marks") == []
    small_ke = [m for m in MARKS if m.id == "marks:small-ke"][0]
    assert small_ke.kata == ""
    chars = [p.char for p in PUNCTUATION]
    assert "。" in chars and "々" in chars
    assert PUNCTUATION[0].to_dict()["kind"] == "punctuation"
