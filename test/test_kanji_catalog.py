import sys
from pathlib import Path

# Add the project root (one level up from 'test') to sys.path
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from KanjiWebReference.services.dictionary.kanji_catalog import (
    load_kanji_page,
    project_kanji_catalog,
)


def test_absent_fields_get_defaults():
    items = project_kanji_catalog({"kvg:06f22": {"symbol": "漢"}})
    assert items[0].to_dict() == {
        "kvgId": "kvg:06f22",
        "symbol": "漢",
        "jlpt": None,
        "meanings": [],
        "readings_on": [],
        "readings_kun": [],
        "strokes": None,
    }


def test_same_symbol_under_two_ids_is_not_merged():
    record = {"symbol": "字", "jlpt_new": 4, "strokes": 6}
    items = project_kanji_catalog({"kvg:05b57": record, "kvg:05b57-Kaisho": record})
    assert [it.kvg_id for it in items] == ["kvg:05b57", "kvg:05b57-Kaisho"]
    assert [it.symbol for it in items] == ["字", "字"]


def test_jlpt_outside_range_is_none():
    items = project_kanji_catalog({
        "a": {"jlpt_new": 0},
        "b": {"jlpt_new": 3},
        "c": {"jlpt_new": True},
    })
    assert [it.jlpt for it in items] == [None, 3, None]


def test_bundled_catalog_page():
    payload = load_kanji_page()
    ids = [it["kvgId"] for it in payload["items"]]
    assert "kvg:065e5" in ids
    for item in payload["items"]:
        assert set(item) == {"kvgId", "symbol", "jlpt", "meanings", "readings_on", "readings_kun", "strokes"}
        assert isinstance(item["readings_kun"], list)
