import json
import sys
from pathlib import Path

import pytest

# Add the project root (one level up from 'test') to sys.path
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from KanjiWebReference.services.data_prep.kanji_sources import (
    compute_level_stats,
    load_kanji_db,
    load_level_sources,
    save_kanji_db,
)
from KanjiWebReference.services.dictionary.kanji_levels import group_kanji_by_level


def _write(path, obj):
    path.write_text(json.dumps(obj, ensure_ascii=False), encoding="utf-8")


def test_missing_bucket_is_empty(tmp_path):
    _write(tmp_path / "n5.json", {"日": {"freq": 1}})
    sources = load_level_sources(tmp_path)
    assert [level for level, _ in sources] == ["n5", "n4", "n3", "n2", "n1", "other"]
    assert list(sources[0][1]) == ["日"]
    assert all(db == {} for _, db in sources[1:])


def test_save_keeps_shape_and_order(tmp_path):
    raw = {"月": {"freq": 23, "wk_level": 2}, "日": {"strokes": 4, "note": "kept"}}
    _write(tmp_path / "in.json", raw)
    save_kanji_db(tmp_path / "out" / "n5.json", load_kanji_db(tmp_path / "in.json"))
    saved = json.loads((tmp_path / "out" / "n5.json").read_text(encoding="utf-8"))
    assert saved == raw
    assert list(saved) == ["月", "日"]


def test_non_object_bucket_rejected(tmp_path):
    _write(tmp_path / "n5.json", ["日"])
    with pytest.raises(ValueError):
        load_kanji_db(tmp_path / "n5.json")


def test_level_stats(tmp_path):
    _write(tmp_path / "n5.json", {"日": {"freq": 1, "strokes": 4}, "月": {}})
    _write(tmp_path / "n4.json", {"日": {"freq": 9}})
    stats = compute_level_stats(group_kanji_by_level(load_level_sources(tmp_path)))
    assert stats["total"] == 2
    assert stats["levels"]["n5"] == {"count": 2, "freq_count": 1, "strokes_count": 1, "strokes_pct": 50.0}
    assert stats["levels"]["n4"]["count"] == 0


def test_non_object_entries_written_back_unchanged(tmp_path):
    raw = {"日": None, "月": "see 日", "火": {"freq": 574}}
    _write(tmp_path / "in.json", raw)
    db = load_kanji_db(tmp_path / "in.json")
    assert db["日"].freq is None
    save_kanji_db(tmp_path / "out.json", db)
    assert json.loads((tmp_path / "out.json").read_text(encoding="utf-8")) == raw
