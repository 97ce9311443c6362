"""Core data model schema.

Kana/mark/punctuation records are frozen: they are authored once as static
tables and never change at runtime. Kanji records come from loosely typed
JSON, so every field is optional and `None` means "absent in the source".
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Tuple

from .errors import InvalidInputError

# ---- Kana / Marks / Punctuation ----
KANA_KINDS = ("base", "dakuten", "handakuten", "yoon", "small", "marks")
KANA_ROWS = (
    "v", "k", "s", "t", "n", "h", "m", "y", "r", "w",
    "g", "z", "d", "b", "p", "yoon", "small", "marks", "other",
)
KANA_COLS = ("a", "i", "u", "e", "o", "none")
KANA_SCRIPTS = ("hiragana", "katakana")


def _id_key(record_id: str) -> str:
    return record_id.split(":", 1)[1] if ":" in record_id else record_id


@dataclass(frozen=True)
class KanaCell:
    id: str  # "base:ka", "dakuten:ka", "yoon:ki+ya"
    kind: str
    row: str
    col: str
    romaji: str
    hira: str
    kata: str
    base_key: Optional[str] = None  # parent form, e.g. "ka" for ga, "ki" for kya
    notes: Optional[str] = None

    @property
    def key(self) -> str:
        return _id_key(self.id)

    def glyph(self, script: str) -> str:
        if script == "hiragana":
            return self.hira
        if script == "katakana":
            return self.kata
        raise InvalidInputError(f"Unknown kana script: {script!r}")

    def to_dict(self) -> Dict[str, Any]:
        out = {
            "id": self.id, "kind": self.kind, "row": self.row, "col": self.col,
            "romaji": self.romaji, "hira": self.hira, "kata": self.kata,
        }
        if self.base_key is not None:
            out["baseKey"] = self.base_key
        if self.notes is not None:
            out["notes"] = self.notes
        return out


@dataclass(frozen=True)
class KanaMark:
    id: str
    romaji: str
    hira: str
    kata: str  # empty when the mark has no katakana form
    notes: Optional[str] = None
    kind: str = "marks"
    row: str = "marks"
    col: str = "none"

    @property
    def key(self) -> str:
        return _id_key(self.id)

    def to_dict(self) -> Dict[str, Any]:
        out = {
            "id": self.id, "kind": self.kind, "row": self.row, "col": self.col,
            "romaji": self.romaji, "hira": self.hira, "kata": self.kata,
        }
        if self.notes is not None:
            out["notes"] = self.notes
        return out


@dataclass(frozen=True)
class JapanesePunctuation:
    id: str
    romaji: str
    char: str
    notes: Optional[str] = None
    kind: str = "punctuation"
    row: str = "punctuation"
    col: str = "none"

    @property
    def key(self) -> str:
        return _id_key(self.id)

    def to_dict(self) -> Dict[str, Any]:
        out = {
            "id": self.id, "kind": self.kind, "row": self.row, "col": self.col,
            "romaji": self.romaji, "char": self.char,
        }
        if self.notes is not None:
            out["notes"] = self.notes
        return out


# ---- Kanji ----
KANJI_LEVELS = ("n5", "n4", "n3", "n2", "n1", "other")

_KANJI_FIELDS = (
    "strokes", "grade", "freq", "jlpt_old", "jlpt_new",
    "meanings", "readings_on", "readings_kun",
    "wk_level", "wk_meanings", "wk_readings_on", "wk_readings_kun", "wk_radicals",
)

_NOT_SET = object()


@dataclass
class KanjiEntry:
    """One dictionary record. Values are kept exactly as the source had them."""
    strokes: Optional[int] = None
    grade: Optional[int] = None
    freq: Optional[int] = None
    jlpt_old: Optional[int] = None
    jlpt_new: Optional[int] = None
    meanings: Optional[List[str]] = None
    readings_on: Optional[List[str]] = None
    readings_kun: Optional[List[str]] = None
    wk_level: Optional[int] = None
    wk_meanings: Optional[List[str]] = None
    wk_readings_on: Optional[List[str]] = None
    wk_readings_kun: Optional[List[str]] = None
    wk_radicals: Optional[List[str]] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    # source value when it was not a JSON object (null, a string, ...)
    non_object: Any = field(default=_NOT_SET, repr=False)

    @classmethod
    def from_dict(cls, raw: Any) -> "KanjiEntry":
        """Wrap a raw record. Non-object values give an empty entry that
        still writes back the original value."""
        if not isinstance(raw, dict):
            return cls(non_object=raw)
        known = {k: raw[k] for k in _KANJI_FIELDS if k in raw}
        extra = {k: v for k, v in raw.items() if k not in _KANJI_FIELDS}
        return cls(**known, extra=extra)

    def to_dict(self) -> Any:
        if self.non_object is not _NOT_SET:
            return self.non_object
        out: Dict[str, Any] = {}
        for name in _KANJI_FIELDS:
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        out.update(self.extra)
        return out


KanjiDb = Dict[str, KanjiEntry]


@dataclass(frozen=True)
class KanjiItem:
    kanji: str
    info: KanjiEntry

    def to_dict(self) -> Dict[str, Any]:
        return {"kanji": self.kanji, "info": self.info.to_dict()}


@dataclass(frozen=True)
class KanjiGroup:
    level: str
    items: Tuple[KanjiItem, ...] = ()

    @property
    def characters(self) -> List[str]:
        return [it.kanji for it in self.items]

    def to_dict(self) -> Dict[str, Any]:
        return {"level": self.level, "items": [it.to_dict() for it in self.items]}


@dataclass
class KanjiPageItem:
    kvg_id: str
    symbol: Optional[str] = None
    jlpt: Optional[int] = None  # 1..5
    meanings: List[str] = field(default_factory=list)
    readings_on: List[str] = field(default_factory=list)
    readings_kun: List[str] = field(default_factory=list)
    strokes: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kvgId": self.kvg_id,
            "symbol": self.symbol,
            "jlpt": self.jlpt,
            "meanings": list(self.meanings),
            "readings_on": list(self.readings_on),
            "readings_kun": list(self.readings_kun),
            "strokes": self.strokes,
        }
