"""Kana table: gojūon, dakuten, handakuten, common yōon and small kana.

Ids are `<kind>:<key>`. Dakuten/handakuten ids reuse the unvoiced key
(`dakuten:ka` is が) and yōon ids join the parent key with the small
kana (`yoon:ki+ya` is きゃ). `base_key` points at the parent form.
"""
from __future__ import annotations
from typing import Dict, Tuple

from ..core.models import KanaCell

K = KanaCell

KANA: Tuple[KanaCell, ...] = (
    # ---- base (gojūon) ----
    K("base:a", "base", "v", "a", "a", "あ", "ア"),
    K("base:i", "base", "v", "i", "i", "い", "イ"),
    K("base:u", "base", "v", "u", "u", "う", "ウ"),
    K("base:e", "base", "v", "e", "e", "え", "エ"),
    K("base:o", "base", "v", "o", "o", "お", "オ"),

    K("base:ka", "base", "k", "a", "ka", "か", "カ"),
    K("base:ki", "base", "k", "i", "ki", "き", "キ"),
    K("base:ku", "base", "k", "u", "ku", "く", "ク"),
    K("base:ke", "base", "k", "e", "ke", "け", "ケ"),
    K("base:ko", "base", "k", "o", "ko", "こ", "コ"),

    K("base:sa", "base", "s", "a", "sa", "さ", "サ"),
    K("base:shi", "base", "s", "i", "shi", "し", "シ", notes="spelling: si → shi"),
    K("base:su", "base", "s", "u", "su", "す", "ス"),
    K("base:se", "base", "s", "e", "se", "せ", "セ"),
    K("base:so", "base", "s", "o", "so", "そ", "ソ"),

    K("base:ta", "base", "t", "a", "ta", "た", "タ"),
    K("base:chi", "base", "t", "i", "chi", "ち", "チ", notes="spelling: ti → chi"),
    K("base:tsu", "base", "t", "u", "tsu", "つ", "ツ", notes="spelling: tu → tsu"),
    K("base:te", "base", "t", "e", "te", "て", "テ"),
    K("base:to", "base", "t", "o", "to", "と", "ト"),

    K("base:na", "base", "n", "a", "na", "な", "ナ"),
    K("base:ni", "base", "n", "i", "ni", "に", "ニ"),
    K("base:nu", "base", "n", "u", "nu", "ぬ", "ヌ"),
    K("base:ne", "base", "n", "e", "ne", "ね", "ネ"),
    K("base:no", "base", "n", "o", "no", "の", "ノ"),

    K("base:ha", "base", "h", "a", "ha", "は", "ハ"),
    K("base:hi", "base", "h", "i", "hi", "ひ", "ヒ"),
    K("base:fu", "base", "h", "u", "fu", "ふ", "フ", notes="spelling: hu → fu"),
    K("base:he", "base", "h", "e", "he", "へ", "ヘ"),
    K("base:ho", "base", "h", "o", "ho", "ほ", "ホ"),

    K("base:ma", "base", "m", "a", "ma", "ま", "マ"),
    K("base:mi", "base", "m", "i", "mi", "み", "ミ"),
    K("base:mu", "base", "m", "u", "mu", "む", "ム"),
    K("base:me", "base", "m", "e", "me", "め", "メ"),
    K("base:mo", "base", "m", "o", "mo", "も", "モ"),

    K("base:ya", "base", "y", "a", "ya", "や", "ヤ"),
    K("base:yu", "base", "y", "u", "yu", "ゆ", "ユ"),
    K("base:yo", "base", "y", "o", "yo", "よ", "ヨ"),

    K("base:ra", "base", "r", "a", "ra", "ら", "ラ"),
    K("base:ri", "base", "r", "i", "ri", "り", "リ"),
    K("base:ru", "base", "r", "u", "ru", "る", "ル"),
    K("base:re", "base", "r", "e", "re", "れ", "レ"),
    K("base:ro", "base", "r", "o", "ro", "ろ", "ロ"),

    K("base:wa", "base", "w", "a", "wa", "わ", "ワ"),
    K("base:wo", "base", "w", "o", "wo", "を", "ヲ", notes='often pronounced "o"'),

    K("base:n", "base", "other", "a", "n", "ん", "ン"),

    # ---- dakuten ----
    K("dakuten:ka", "dakuten", "k", "a", "ga", "が", "ガ", base_key="ka"),
    K("dakuten:ki", "dakuten", "k", "i", "gi", "ぎ", "ギ", base_key="ki"),
    K("dakuten:ku", "dakuten", "k", "u", "gu", "ぐ", "グ", base_key="ku"),
    K("dakuten:ke", "dakuten", "k", "e", "ge", "げ", "ゲ", base_key="ke"),
    K("dakuten:ko", "dakuten", "k", "o", "go", "ご", "ゴ", base_key="ko"),

    K("dakuten:sa", "dakuten", "s", "a", "za", "ざ", "ザ", base_key="sa"),
    K("dakuten:shi", "dakuten", "s", "i", "ji", "じ", "ジ", base_key="shi", notes='also "zi" in some systems'),
    K("dakuten:su", "dakuten", "s", "u", "zu", "ず", "ズ", base_key="su"),
    K("dakuten:se", "dakuten", "s", "e", "ze", "ぜ", "ゼ", base_key="se"),
    K("dakuten:so", "dakuten", "s", "o", "zo", "ぞ", "ゾ", base_key="so"),

    K("dakuten:ta", "dakuten", "t", "a", "da", "だ", "ダ", base_key="ta"),
    K("dakuten:chi", "dakuten", "t", "i", "ji", "ぢ", "ヂ", base_key="chi", notes="rare; often same sound as じ"),
    K("dakuten:tsu", "dakuten", "t", "u", "zu", "づ", "ヅ", base_key="tsu", notes="rare; often same sound as ず"),
    K("dakuten:te", "dakuten", "t", "e", "de", "で", "デ", base_key="te"),
    K("dakuten:to", "dakuten", "t", "o", "do", "ど", "ド", base_key="to"),

    K("dakuten:ha", "dakuten", "h", "a", "ba", "ば", "バ", base_key="ha"),
    K("dakuten:hi", "dakuten", "h", "i", "bi", "び", "ビ", base_key="hi"),
    K("dakuten:fu", "dakuten", "h", "u", "bu", "ぶ", "ブ", base_key="fu"),
    K("dakuten:he", "dakuten", "h", "e", "be", "べ", "ベ", base_key="he"),
    K("dakuten:ho", "dakuten", "h", "o", "bo", "ぼ", "ボ", base_key="ho"),

    # ---- handakuten ----
    K("handakuten:ha", "handakuten", "h", "a", "pa", "ぱ", "パ", base_key="ha"),
    K("handakuten:hi", "handakuten", "h", "i", "pi", "ぴ", "ピ", base_key="hi"),
    K("handakuten:fu", "handakuten", "h", "u", "pu", "ぷ", "プ", base_key="fu"),
    K("handakuten:he", "handakuten", "h", "e", "pe", "ぺ", "ペ", base_key="he"),
    K("handakuten:ho", "handakuten", "h", "o", "po", "ぽ", "ポ", base_key="ho"),

    # ---- yōon (common) ----
    K("yoon:ki+ya", "yoon", "k", "a", "kya", "きゃ", "キャ", base_key="ki"),
    K("yoon:ki+yu", "yoon", "k", "u", "kyu", "きゅ", "キュ", base_key="ki"),
    K("yoon:ki+yo", "yoon", "k", "o", "kyo", "きょ", "キョ", base_key="ki"),

    K("yoon:shi+ya", "yoon", "s", "a", "sha", "しゃ", "シャ", base_key="shi"),
    K("yoon:shi+yu", "yoon", "s", "u", "shu", "しゅ", "シュ", base_key="shi"),
    K("yoon:shi+yo", "yoon", "s", "o", "sho", "しょ", "ショ", base_key="shi"),

    K("yoon:chi+ya", "yoon", "t", "a", "cha", "ちゃ", "チャ", base_key="chi"),
    K("yoon:chi+yu", "yoon", "t", "u", "chu", "ちゅ", "チュ", base_key="chi"),
    K("yoon:chi+yo", "yoon", "t", "o", "cho", "ちょ", "チョ", base_key="chi"),

    K("yoon:ni+ya", "yoon", "n", "a", "nya", "にゃ", "ニャ", base_key="ni"),
    K("yoon:ni+yu", "yoon", "n", "u", "nyu", "にゅ", "ニュ", base_key="ni"),
    K("yoon:ni+yo", "yoon", "n", "o", "nyo", "にょ", "ニョ", base_key="ni"),

    K("yoon:hi+ya", "yoon", "h", "a", "hya", "ひゃ", "ヒャ", base_key="hi"),
    K("yoon:hi+yu", "yoon", "h", "u", "hyu", "ひゅ", "ヒュ", base_key="hi"),
    K("yoon:hi+yo", "yoon", "h", "o", "hyo", "ひょ", "ヒョ", base_key="hi"),

    K("yoon:mi+ya", "yoon", "m", "a", "mya", "みゃ", "ミャ", base_key="mi"),
    K("yoon:mi+yu", "yoon", "m", "u", "myu", "みゅ", "ミュ", base_key="mi"),
    K("yoon:mi+yo", "yoon", "m", "o", "myo", "みょ", "ミョ", base_key="mi"),

    K("yoon:ri+ya", "yoon", "r", "a", "rya", "りゃ", "リャ", base_key="ri"),
    K("yoon:ri+yu", "yoon", "r", "u", "ryu", "りゅ", "リュ", base_key="ri"),
    K("yoon:ri+yo", "yoon", "r", "o", "ryo", "りょ", "リョ", base_key="ri"),

    # voiced yōon: base_key is the voiced parent's reading (gi -> ぎ)
    K("yoon:gi+ya", "yoon", "g", "a", "gya", "ぎゃ", "ギャ", base_key="gi"),
    K("yoon:gi+yu", "yoon", "g", "u", "gyu", "ぎゅ", "ギュ", base_key="gi"),
    K("yoon:gi+yo", "yoon", "g", "o", "gyo", "ぎょ", "ギョ", base_key="gi"),

    K("yoon:ji+ya", "yoon", "z", "a", "ja", "じゃ", "ジャ", base_key="ji"),
    K("yoon:ji+yu", "yoon", "z", "u", "ju", "じゅ", "ジュ", base_key="ji"),
    K("yoon:ji+yo", "yoon", "z", "o", "jo", "じょ", "ジョ", base_key="ji"),

    K("yoon:bi+ya", "yoon", "b", "a", "bya", "びゃ", "ビャ", base_key="bi"),
    K("yoon:bi+yu", "yoon", "b", "u", "byu", "びゅ", "ビュ", base_key="bi"),
    K("yoon:bi+yo", "yoon", "b", "o", "byo", "びょ", "ビョ", base_key="bi"),

    K("yoon:pi+ya", "yoon", "p", "a", "pya", "ぴゃ", "ピャ", base_key="pi"),
    K("yoon:pi+yu", "yoon", "p", "u", "pyu", "ぴゅ", "ピュ", base_key="pi"),
    K("yoon:pi+yo", "yoon", "p", "o", "pyo", "ぴょ", "ピョ", base_key="pi"),

    # ---- small ----
    K("small:a", "small", "small", "none", "a", "ぁ", "ァ"),
    K("small:i", "small", "small", "none", "i", "ぃ", "ィ"),
    K("small:u", "small", "small", "none", "u", "ぅ", "ゥ"),
    K("small:e", "small", "small", "none", "e", "ぇ", "ェ"),
    K("small:o", "small", "small", "none", "o", "ぉ", "ォ"),
    K("small:ya", "small", "small", "none", "ya", "ゃ", "ャ"),
    K("small:yu", "small", "small", "none", "yu", "ゅ", "ュ"),
    K("small:yo", "small", "small", "none", "yo", "ょ", "ョ"),
    K("small:tsu", "small", "small", "none", "tsu", "っ", "ッ", notes="sokuon (gemination)"),
)

del K

KANA_BY_ID: Dict[str, KanaCell] = {cell.id: cell for cell in KANA}
