"""
Tests for the Word value (katsuyou/word.py).
"""

import dataclasses
import logging

import pytest

from katsuyou import InvalidReading, UnsupportedForm, VerbType, Word, WordForm


class TestConstruction:

    def test_kana_only(self):
        word = Word("たべる")
        assert word.kana == "たべる"
        assert word.kanji is None

    def test_with_kanji(self):
        word = Word("たべる", "食べる")
        assert word.kanji == "食べる"

    @pytest.mark.parametrize("kana", ["", "abc", "食べる", "たべる!"])
    def test_invalid_reading(self, kana):
        with pytest.raises(InvalidReading):
            Word(kana)

    def test_empty_kanji(self):
        with pytest.raises(InvalidReading):
            Word("たべる", "")

    def test_frozen(self):
        word = Word("たべる")
        with pytest.raises(dataclasses.FrozenInstanceError):
            word.kana = "のむ"

    def test_equality(self):
        assert Word("たべる", "食べる") == Word("たべる", "食べる")
        assert Word("たべる") != Word("たべる", "食べる")


class TestAccessors:

    def test_reading_prefers_kanji(self):
        assert Word("たべる", "食べる").reading == "食べる"
        assert Word("たべる").reading == "たべる"
        assert str(Word("たべる", "食べる")) == "食べる"

    def test_ending(self):
        assert Word("たべる", "食べる").ending == "る"

    def test_is_verb(self):
        assert Word("のむ").is_verb()
        assert not Word("たかい").is_verb()
        assert not Word("ほん").is_verb()

    def test_has_reading(self):
        word = Word("する", "為る")
        assert word.has_reading("する")
        assert word.has_reading("くる", "為る")
        assert not word.has_reading("くる")

    def test_ends_with(self):
        word = Word("みみにする", "耳にする")
        assert word.ends_with("する")
        assert word.ends_with("くる", "にする")
        assert not word.ends_with("くる", "来る")


class TestTransformations:

    def test_replace_ending(self):
        result = Word("しる", "知る").replace_ending(1, "らない")
        assert result == Word("しらない", "知らない")

    def test_replace_ending_drops_mismatched_kanji(self, caplog):
        with caplog.at_level(logging.WARNING, logger="katsuyou.word"):
            result = Word("たべる", "食").replace_ending(1, "た")
        assert result == Word("たべた")
        assert "dropping" in caplog.text

    def test_append(self):
        assert Word("たべ", "食べ").append("ます") == Word("たべます", "食べます")

    def test_replace_suffix_kanji_tail(self):
        result = Word("あそびにくる", "遊びに来る").replace_suffix("くる", "き", "来る", "来")
        assert result == Word("あそびにき", "遊びに来")

    def test_replace_suffix_falls_back_to_kana_tail(self):
        result = Word("みみにする", "耳にする").replace_suffix("する", "して", "為る", "為て")
        assert result == Word("みみにして", "耳にして")

    def test_replace_suffix_requires_tail(self):
        with pytest.raises(UnsupportedForm):
            Word("たべる").replace_suffix("する", "して")

    def test_source_word_unchanged(self):
        word = Word("しる", "知る")
        word.replace_ending(1, "らない")
        assert word == Word("しる", "知る")


class TestClassification:

    def test_into_verb(self):
        verb = Word("ならう", "習う").into_verb(VerbType.GODAN)
        assert verb.past(WordForm.SHORT).kanji == "習った"
