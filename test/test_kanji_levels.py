import json
import sys
from pathlib import Path

# Add the project root (one level up from 'test') to sys.path
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from KanjiWebReference.core.models import KanjiEntry, KANJI_LEVELS
from KanjiWebReference.services.data_prep.kanji_sources import kanji_db_from_mapping
from KanjiWebReference.services.dictionary.kanji_levels import (
    frequency_key,
    group_kanji_by_level,
    load_kanji_levels_page,
)


def _sources(**buckets):
    return [(level, kanji_db_from_mapping(buckets.get(level, {}))) for level in KANJI_LEVELS]


def test_first_bucket_wins_duplicate():
    groups = group_kanji_by_level(_sources(
        n5={"日": {"freq": 1}},
        n3={"日": {"freq": 5}, "月": {"freq": 2}},
    ))
    by_level = {g.level: g for g in groups}
    assert by_level["n5"].characters == ["日"]
    assert by_level["n5"].items[0].info.freq == 1
    assert by_level["n3"].characters == ["月"]
    assert by_level["n3"].items[0].info.freq == 2


def test_groups_emitted_in_priority_order_even_when_empty():
    groups = group_kanji_by_level(_sources())
    assert [g.level for g in groups] == ["n5", "n4", "n3", "n2", "n1", "other"]
    assert all(g.items == () for g in groups)


def test_empty_key_is_skipped():
    groups = group_kanji_by_level(_sources(n5={"": {"freq": 1}, "一": {"freq": 2}}))
    assert groups[0].characters == ["一"]


def test_sorted_by_freq_missing_last_and_stable():
    groups = group_kanji_by_level(_sources(n4={
        "a": {},
        "b": {"freq": 3},
        "c": {"freq": None},
        "d": {"freq": 1},
        "e": {"freq": 3},
        "f": {"freq": "junk"},
    }))
    n4 = groups[1]
    assert n4.characters == ["d", "b", "e", "a", "c", "f"]


def test_union_without_overlap():
    buckets = dict(
        n5={"日": {}, "一": {}},
        n4={"一": {}, "会": {}},
        n2={"憲": {}, "日": {}},
        other={"凪": {}, "": {}},
    )
    groups = group_kanji_by_level(_sources(**buckets))
    all_chars = [c for g in groups for c in g.characters]
    assert len(all_chars) == len(set(all_chars))
    expected = {k for b in buckets.values() for k in b if k}
    assert set(all_chars) == expected
    assert groups[1].characters == ["会"]
    assert groups[3].characters == ["憲"]


def test_grouping_is_idempotent():
    sources = _sources(n5={"日": {"freq": 1}, "月": {"freq": 23}}, n1={"鬱": {}})
    first = [g.to_dict() for g in group_kanji_by_level(sources)]
    second = [g.to_dict() for g in group_kanji_by_level(sources)]
    assert first == second


def test_entries_pass_through_unchanged():
    raw = {"freq": 4, "meanings": ["Meeting"], "custom_field": {"x": 1}}
    groups = group_kanji_by_level(_sources(n4={"会": raw}))
    assert groups[1].items[0].info.to_dict() == raw


def test_frequency_key_rejects_bool():
    assert frequency_key(KanjiEntry(freq=True)) == float("inf")
    assert frequency_key(KanjiEntry(freq=7)) == 7


def test_bundled_levels_page():
    payload = load_kanji_levels_page()
    levels = [g["level"] for g in payload["groups"]]
    assert levels == list(KANJI_LEVELS)
    n5 = payload["groups"][0]["items"]
    assert n5[0]["kanji"] == "日"
    freqs = [it["info"]["freq"] for it in n5]
    assert freqs == sorted(freqs)


def test_nan_freq_sorts_last_without_disturbing_ranked_entries():
    raw = json.loads('{"a": {"freq": 3}, "b": {"freq": NaN}, "c": {"freq": 1}, "d": {"freq": 2}}')
    groups = group_kanji_by_level(_sources(n5=raw))
    assert groups[0].characters == ["c", "d", "a", "b"]
