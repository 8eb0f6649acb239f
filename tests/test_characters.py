"""
Tests for kana tables and shifting (katsuyou/characters.py).
"""

import pytest

from katsuyou.characters import (
    as_hiragana,
    in_column,
    is_hiragana,
    is_kana,
    is_katakana,
    kana_column,
    kana_position,
    kana_row,
    shift,
    voice,
)
from katsuyou.errors import NotShiftable


class TestKanaPosition:

    @pytest.mark.parametrize("char,row,column", [
        ("あ", "", "a"),
        ("か", "k", "a"),
        ("ぎ", "g", "i"),
        ("す", "s", "u"),
        ("ぢ", "d", "i"),
        ("ね", "n", "e"),
        ("ぼ", "b", "o"),
        ("ゆ", "y", "u"),
        ("り", "r", "i"),
        ("を", "w", "o"),
        ("ル", "r", "u"),
    ])
    def test_row_and_column(self, char, row, column):
        assert kana_row(char) == row
        assert kana_column(char) == column
        assert kana_position(char) == (row, column)

    @pytest.mark.parametrize("char", ["ん", "っ", "ゃ", "ー", "a", "食"])
    def test_rowless_characters_raise(self, char):
        with pytest.raises(NotShiftable) as exc_info:
            kana_row(char)
        assert exc_info.value.char == char

    def test_in_column(self):
        assert in_column("べ", "e")
        assert in_column("き", "i", "e")
        assert not in_column("る", "i", "e")
        assert not in_column("ん", "u")


class TestShift:

    @pytest.mark.parametrize("char,column,expected", [
        ("る", "a", "ら"),
        ("る", "i", "り"),
        ("る", "e", "れ"),
        ("る", "o", "ろ"),
        ("つ", "a", "た"),
        ("つ", "i", "ち"),
        ("す", "i", "し"),
        ("ぐ", "e", "げ"),
        ("む", "o", "も"),
        ("ゆ", "a", "や"),
    ])
    def test_shift(self, char, column, expected):
        assert shift(char, column) == expected

    def test_preserves_katakana(self):
        assert shift("ル", "a") == "ラ"
        assert shift("ク", "i") == "キ"

    def test_vowel_row_not_shiftable(self):
        with pytest.raises(NotShiftable):
            shift("う", "a")

    @pytest.mark.parametrize("char,column", [("ゆ", "i"), ("ゆ", "e"), ("わ", "u")])
    def test_row_gaps(self, char, column):
        with pytest.raises(NotShiftable):
            shift(char, column)

    def test_rowless_not_shiftable(self):
        with pytest.raises(NotShiftable):
            shift("ん", "a")

    def test_unknown_column(self):
        with pytest.raises(ValueError):
            shift("か", "x")


class TestVoice:

    @pytest.mark.parametrize("char,expected", [
        ("て", "で"),
        ("た", "だ"),
        ("か", "が"),
        ("し", "じ"),
        ("ひ", "び"),
        ("テ", "デ"),
    ])
    def test_voiced(self, char, expected):
        assert voice(char) == expected

    @pytest.mark.parametrize("char", ["な", "ま", "ん", "で", "x"])
    def test_unchanged(self, char):
        assert voice(char) == char


class TestScripts:

    def test_is_kana(self):
        assert is_kana("たべる")
        assert is_kana("カタカナ")
        assert is_kana("ラーメン")
        assert is_kana("ひらがなカタカナ")
        assert not is_kana("食べる")
        assert not is_kana("abc")
        assert not is_kana("")

    def test_is_hiragana(self):
        assert is_hiragana("たべる")
        assert not is_hiragana("タベル")

    def test_is_katakana(self):
        assert is_katakana("タベル")
        assert not is_katakana("たべる")

    def test_as_hiragana(self):
        assert as_hiragana("カタカナ") == "かたかな"
        assert as_hiragana("ラーメン") == "らーめん"
        assert as_hiragana("食べる") == "食べる"
