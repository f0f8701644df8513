"""
Static Japanese romanization data.

The engine spells long vowels as doubled letters ("tarou", "yuuko"). The long
vowel tables turn those into macrons, or into plain vowels for the normalized
system; the macron table then reinstates marks on common names the engine reads
short. Every table runs in the order listed.
"""
from __future__ import annotations

from types import MappingProxyType

from latinym.tables.rules import literal_rules, pattern_rules, whole_word_rules

# ════════════════════════════════════════════════════════════════════════════════
# MACRON RULES
# ════════════════════════════════════════════════════════════════════════════════

MACRON_RESTORATION = whole_word_rules(
    "japanese-macron-restoration",
    "1",
    [
        # Common full names
        ("Taro", "Tarō"),
        ("Ichiro", "Ichirō"),
        ("Jiro", "Jirō"),
        ("Saburo", "Saburō"),
        ("Sato", "Satō"),
        ("Ito", "Itō"),
        ("Kato", "Katō"),
        ("Saito", "Saitō"),
        ("Yuko", "Yūko"),
        ("Shota", "Shōta"),
        ("Yota", "Yōta"),
        ("Sota", "Sōta"),
        ("Yoko", "Yōko"),
        ("Toyo", "Tōyō"),
    ],
)

# Runs on lower-case engine output. A doubled vowel followed by a, e or u spans
# two syllables (i-no-u-e), so it is left alone.
LONG_VOWEL_MACRONS = pattern_rules(
    "japanese-long-vowel-macrons",
    "1",
    [
        (r"o[ou](?![aeu])", "ō"),
        (r"uu(?![aeu])", "ū"),
    ],
)

LONG_VOWEL_COLLAPSE = pattern_rules(
    "japanese-long-vowel-collapse",
    "1",
    [
        (r"o[ou](?![aeu])", "o"),
        # Passport spelling of a long o (Satoh)
        (r"oh(?![aeiouy])", "o"),
        (r"uu(?![aeu])", "u"),
    ],
)

MACRON_STRIPPING = literal_rules(
    "japanese-macron-stripping",
    "1",
    [
        ("ō", "o"),
        ("ū", "u"),
        ("ē", "e"),
        ("ā", "a"),
        ("ī", "i"),
        ("Ō", "O"),
        ("Ū", "U"),
        ("Ē", "E"),
        ("Ā", "A"),
        ("Ī", "I"),
    ],
)

# ════════════════════════════════════════════════════════════════════════════════
# STATIC NAME FALLBACK
# ════════════════════════════════════════════════════════════════════════════════

JAPANESE_STATIC_NAMES = MappingProxyType(
    {
        # Surnames
        "田中": "Tanaka",
        "佐藤": "Satō",
        "鈴木": "Suzuki",
        "高橋": "Takahashi",
        "渡辺": "Watanabe",
        "伊藤": "Itō",
        "山本": "Yamamoto",
        "中村": "Nakamura",
        "小林": "Kobayashi",
        "加藤": "Katō",
        "吉田": "Yoshida",
        "山田": "Yamada",
        "佐々木": "Sasaki",
        "山口": "Yamaguchi",
        "松本": "Matsumoto",
        "井上": "Inoue",
        "木村": "Kimura",
        "林": "Hayashi",
        "斎藤": "Saitō",
        "清水": "Shimizu",
        # Given names
        "太郎": "Tarō",
        "花子": "Hanako",
        "一郎": "Ichirō",
        "次郎": "Jirō",
        "三郎": "Saburō",
        "美子": "Miko",
        "恵子": "Keiko",
        "由美": "Yumi",
        "直子": "Naoko",
        "裕子": "Yūko",
        "美穂": "Miho",
        "智子": "Tomoko",
        "恵美": "Emi",
        "麻美": "Asami",
        "美香": "Mika",
        "愛": "Ai",
        "優": "Yū",
        "翔": "Shō",
        "大輔": "Daisuke",
        "健太": "Kenta",
        "翔太": "Shōta",
        "大樹": "Daiki",
        "海斗": "Kaito",
        "陽太": "Yōta",
        "陸": "Riku",
        "颯太": "Sōta",
        "大和": "Yamato",
        "蓮": "Ren",
        "さくら": "Sakura",
        "直樹": "Naoki",
        "美咲": "Misaki",
        "翼": "Tsubasa",
        "あきら": "Akira",
        "春樹": "Haruki",
        "優子": "Yūko",
        "誠": "Makoto",
        "拓也": "Takuya",
        "真理": "Mari",
        "浩": "Hiroshi",
        "杏": "An",
        "亮": "Ryō",
    },
)

# ════════════════════════════════════════════════════════════════════════════════
# KANA
# ════════════════════════════════════════════════════════════════════════════════

_HIRAGANA = {
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    "わ": "wa", "ゐ": "i", "ゑ": "e", "を": "o", "ん": "n",
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    # Contracted sounds
    "きゃ": "kya", "きゅ": "kyu", "きょ": "kyo",
    "ぎゃ": "gya", "ぎゅ": "gyu", "ぎょ": "gyo",
    "しゃ": "sha", "しゅ": "shu", "しょ": "sho",
    "じゃ": "ja", "じゅ": "ju", "じょ": "jo",
    "ちゃ": "cha", "ちゅ": "chu", "ちょ": "cho",
    "にゃ": "nya", "にゅ": "nyu", "にょ": "nyo",
    "ひゃ": "hya", "ひゅ": "hyu", "ひょ": "hyo",
    "びゃ": "bya", "びゅ": "byu", "びょ": "byo",
    "ぴゃ": "pya", "ぴゅ": "pyu", "ぴょ": "pyo",
    "みゃ": "mya", "みゅ": "myu", "みょ": "myo",
    "りゃ": "rya", "りゅ": "ryu", "りょ": "ryo",
}

_KATAKANA_OFFSET = 0x60


def _to_katakana(hiragana: str) -> str:
    return "".join(chr(ord(ch) + _KATAKANA_OFFSET) for ch in hiragana)


KANA = MappingProxyType(
    {**_HIRAGANA, **{_to_katakana(k): v for k, v in _HIRAGANA.items()}, "ー": "", "・": " "},
)

# Small tsu doubles the next consonant
SOKUON = frozenset({"っ", "ッ"})
