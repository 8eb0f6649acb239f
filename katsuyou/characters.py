"""
Kana tables and character classification for katsuyou.

Provides the phonetic row/column position of every kana, shifting a kana
to another vowel column within its row, voicing (dakuten), and kana
script tests/conversion. These tables are the basis for every stem rule.
"""

import re
from typing import Dict, Optional, Tuple

from katsuyou.errors import NotShiftable

# ============================================================================
# Kana Character Tables
# ============================================================================

# Vowel columns in gojuon order
COLUMNS: Tuple[str, ...] = ("a", "i", "u", "e", "o")

# Consonant row -> cells per column, each cell a hiragana/katakana pair.
# The vowel-only row is keyed by "".
KANA_ROWS: Dict[str, Tuple[Optional[str], ...]] = {
    "":  ("あア", "いイ", "うウ", "えエ", "おオ"),
    "k": ("かカ", "きキ", "くク", "けケ", "こコ"),
    "g": ("がガ", "ぎギ", "ぐグ", "げゲ", "ごゴ"),
    "s": ("さサ", "しシ", "すス", "せセ", "そソ"),
    "z": ("ざザ", "じジ", "ずズ", "ぜゼ", "ぞゾ"),
    "t": ("たタ", "ちチ", "つツ", "てテ", "とト"),
    "d": ("だダ", "ぢヂ", "づヅ", "でデ", "どド"),
    "n": ("なナ", "にニ", "ぬヌ", "ねネ", "のノ"),
    "h": ("はハ", "ひヒ", "ふフ", "へヘ", "ほホ"),
    "b": ("ばバ", "びビ", "ぶブ", "べベ", "ぼボ"),
    "p": ("ぱパ", "ぴピ", "ぷプ", "ぺペ", "ぽポ"),
    "m": ("まマ", "みミ", "むム", "めメ", "もモ"),
    "y": ("やヤ", None,   "ゆユ", None,   "よヨ"),
    "r": ("らラ", "りリ", "るル", "れレ", "ろロ"),
    "w": ("わワ", "ゐヰ", None,   "ゑヱ", "をヲ"),
}

# Kana that have no row: moraic nasal, sokuon, small kana, marks
SPECIAL_CHARACTERS = {
    "n": "んン",
    "sokuon": "っッ",
    "+a": "ぁァ", "+i": "ぃィ", "+u": "ぅゥ", "+e": "ぇェ", "+o": "ぉォ",
    "+ya": "ゃャ", "+yu": "ゅュ", "+yo": "ょョ", "+wa": "ゎヮ",
    "iter": "ゝヽ", "iter_v": "ゞヾ",
    "vu": "ゔヴ",
}

# Unvoiced row -> voiced row
DAKUTEN_ROWS = {"k": "g", "s": "z", "t": "d", "h": "b"}

# ============================================================================
# Character -> Position Mapping
# ============================================================================

# char -> (row, column, script index: 0 hiragana / 1 katakana)
KANA_POSITION_HASH: Dict[str, Tuple[str, str, int]] = {}
for _row, _cells in KANA_ROWS.items():
    for _column, _cell in zip(COLUMNS, _cells):
        if _cell is None:
            continue
        for _script, _char in enumerate(_cell):
            KANA_POSITION_HASH[_char] = (_row, _column, _script)

# katakana -> hiragana for every paired character
_TO_HIRAGANA: Dict[str, str] = {}
for _pair in [c for cells in KANA_ROWS.values() for c in cells if c] + list(SPECIAL_CHARACTERS.values()):
    _TO_HIRAGANA[_pair[1]] = _pair[0]

# ============================================================================
# Regular Expressions
# ============================================================================

KATAKANA_REGEX = r"[ァ-ヺヽヾー]"
HIRAGANA_REGEX = r"[ぁ-ゔゝゞー]"
KANA_REGEX = f"({KATAKANA_REGEX}|{HIRAGANA_REGEX})"

_KATAKANA_WORD_PATTERN = re.compile(rf"^{KATAKANA_REGEX}+$")
_HIRAGANA_WORD_PATTERN = re.compile(rf"^{HIRAGANA_REGEX}+$")
_KANA_WORD_PATTERN = re.compile(rf"^{KANA_REGEX}+$")


def is_kana(word: str) -> bool:
    """Check if word consists entirely of kana (hiragana or katakana)."""
    return bool(word) and bool(_KANA_WORD_PATTERN.match(word))


def is_hiragana(word: str) -> bool:
    """Check if word consists entirely of hiragana."""
    return bool(word) and bool(_HIRAGANA_WORD_PATTERN.match(word))


def is_katakana(word: str) -> bool:
    """Check if word consists entirely of katakana."""
    return bool(word) and bool(_KATAKANA_WORD_PATTERN.match(word))


def as_hiragana(text: str) -> str:
    """
    Convert katakana to hiragana.

    Characters without a hiragana counterpart (ー, kanji, latin) are kept.
    """
    return "".join(_TO_HIRAGANA.get(char, char) for char in text)


# ============================================================================
# Row / Column Classification
# ============================================================================

def kana_position(char: str) -> Tuple[str, str]:
    """
    Get the (row, column) position of a kana.

    Args:
        char: A single kana character.

    Returns:
        Tuple of consonant row ("" for the vowel row) and vowel column.

    Raises:
        NotShiftable: If the character has no row (ん, っ, small kana, ...).

    Example:
        >>> kana_position("り")
        ('r', 'i')
    """
    position = KANA_POSITION_HASH.get(char)
    if position is None:
        raise NotShiftable(char, _rowless_reason(char))
    row, column, _ = position
    return row, column


def kana_row(char: str) -> str:
    """Consonant row of a kana; "" for あいうえお."""
    return kana_position(char)[0]


def kana_column(char: str) -> str:
    """Vowel column of a kana."""
    return kana_position(char)[1]


def in_column(char: str, *columns: str) -> bool:
    """True if char is a kana sitting in one of the given vowel columns."""
    position = KANA_POSITION_HASH.get(char)
    return position is not None and position[1] in columns


def shift(char: str, column: str) -> str:
    """
    Move a kana to another vowel column of the same row.

    The script of the input is preserved (ル -> ラ).

    Args:
        char: Kana to shift.
        column: Target column, one of "a", "i", "u", "e", "o".

    Returns:
        The kana at (row of char, column).

    Raises:
        NotShiftable: For pure vowels, rowless kana and row gaps (the や row
            has no i/e cells).

    Example:
        >>> shift("り", "a")
        'ら'
    """
    if column not in COLUMNS:
        raise ValueError(f"Unknown column: {column}")

    row, _, script = _lookup(char)
    if row == "":
        raise NotShiftable(char, "vowels have no consonant row")

    cell = KANA_ROWS[row][COLUMNS.index(column)]
    if cell is None:
        raise NotShiftable(char, f"row '{row}' has no '{column}' column")
    return cell[script]


def voice(char: str) -> str:
    """
    Return the voiced (dakuten) form of a kana, or the kana itself.

    Example:
        >>> voice("て")
        'で'
    """
    position = KANA_POSITION_HASH.get(char)
    if position is None:
        return char

    row, column, script = position
    voiced = DAKUTEN_ROWS.get(row)
    if voiced is None:
        return char
    return KANA_ROWS[voiced][COLUMNS.index(column)][script]


def _lookup(char: str) -> Tuple[str, str, int]:
    position = KANA_POSITION_HASH.get(char)
    if position is None:
        raise NotShiftable(char, _rowless_reason(char))
    return position


def _rowless_reason(char: str) -> str:
    if char in _TO_HIRAGANA or char in _TO_HIRAGANA.values():
        return "kana has no row"
    if char == "ー":
        return "prolonged sound mark has no row"
    return "not a kana"
