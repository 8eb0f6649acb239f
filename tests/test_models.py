"""
Tests for the pydantic export models (katsuyou/models.py).
"""

from katsuyou import ConjType, ConjugatedForm, ConjugationTable, Word
from katsuyou.conjugations import VERB_RULES


class TestConjugationTableFromVerb:

    def test_header(self, shiru):
        table = ConjugationTable.from_verb(shiru)
        assert table.kana == "しる"
        assert table.kanji == "知る"
        assert table.word_class == "v5"
        assert len(table.forms) == len(VERB_RULES)

    def test_get(self, shiru):
        table = ConjugationTable.from_verb(shiru)
        assert table.get(ConjType.NON_PAST).kanji == "知る"
        assert table.get(ConjType.NON_PAST, formal=True).kanji == "知ります"
        assert table.get(ConjType.NON_PAST, negative=True).kanji == "知らない"
        assert table.get(ConjType.PAST).kanji == "知った"
        assert table.get(ConjType.PAST, negative=True, formal=True).kanji == "知りませんでした"
        assert table.get(ConjType.POTENTIAL).kanji == "知れる"

    def test_get_ignores_inapplicable_flags(self, shiru):
        table = ConjugationTable.from_verb(shiru)
        assert table.get(ConjType.CONJUNCTIVE).kanji == "知って"
        assert table.get(ConjType.CONJUNCTIVE, formal=True).kanji == "知って"
        assert table.get(ConjType.CONJUNCTIVE, negative=True).kanji == "知らなくて"

    def test_descriptions(self, shiru):
        form = ConjugationTable.from_verb(shiru).get(ConjType.CONJUNCTIVE)
        assert form.description == "Conjunctive (~te)"
        assert form.gloss == "and"

    def test_missing_forms_left_out(self, aru):
        table = ConjugationTable.from_verb(aru)
        assert table.get(ConjType.POTENTIAL) is None
        assert table.get(ConjType.NON_PAST, negative=True).kana == "ない"
        assert table.get(ConjType.NON_PAST, negative=True).kanji is None

    def test_irregular_word_class(self, kuru):
        assert ConjugationTable.from_verb(kuru).word_class == "irregular"


class TestConjugationTableFromAdjective:

    def test_i_adjective(self, takai):
        table = ConjugationTable.from_adjective(takai)
        assert table.word_class == "adj-i"
        assert table.get(ConjType.ADVERBIAL).kanji == "高く"
        assert table.get(ConjType.PAST, formal=True).kanji == "高かったです"
        assert table.get(ConjType.ADJ_STEM).kanji == "高"
        assert table.get(ConjType.ADJ_STEM).description == "Adjective Stem"

    def test_na_adjective(self, shizuka):
        table = ConjugationTable.from_adjective(shizuka)
        assert table.word_class == "adj-na"
        assert table.get(ConjType.NON_PAST).kanji == "静かだ"


class TestSerialization:

    def test_dump(self, shiru):
        data = ConjugationTable.from_verb(shiru).model_dump()
        assert data["kana"] == "しる"
        first = data["forms"][0]
        assert first["conj_type"] == int(ConjType.NON_PAST)
        assert first["kana"] == "しる"
        assert first["negative"] is False

    def test_round_trip(self, takai):
        table = ConjugationTable.from_adjective(takai)
        assert ConjugationTable.model_validate_json(table.model_dump_json()) == table

    def test_form_reading(self):
        form = ConjugatedForm.from_word(ConjType.PAST, Word("たべた"), False, False)
        assert form.reading == "たべた"
        assert form.description == "Past (~ta)"
