"""
Adjective conjugation engine for katsuyou.

I-adjectives conjugate on their stem (高い -> 高 + くない), na-adjectives
on the bare word with a copula (静か + じゃない). Each form is a suffix
looked up in a table keyed by (ConjType, negative, formal).
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from katsuyou.constants import AdjectiveType, ConjType
from katsuyou.errors import UnsupportedForm
from katsuyou.word import Word, WordForm

logger = logging.getLogger(__name__)

# (conj_type, negative, formal)
FormKey = Tuple[ConjType, bool, bool]

# Suffix appended to the stem of an i-adjective
I_ADJECTIVE_SUFFIXES: Dict[FormKey, str] = {
    (ConjType.NON_PAST, False, False): "い",
    (ConjType.NON_PAST, False, True): "いです",
    (ConjType.NON_PAST, True, False): "くない",
    (ConjType.NON_PAST, True, True): "くないです",
    (ConjType.PAST, False, False): "かった",
    (ConjType.PAST, False, True): "かったです",
    (ConjType.PAST, True, False): "くなかった",
    (ConjType.PAST, True, True): "くなかったです",
    (ConjType.CONJUNCTIVE, False, False): "くて",
    (ConjType.CONJUNCTIVE, True, False): "くなくて",
    (ConjType.ADVERBIAL, False, False): "く",
    (ConjType.PROVISIONAL, False, False): "ければ",
    (ConjType.PROVISIONAL, True, False): "くなければ",
    (ConjType.CONDITIONAL, False, False): "かったら",
    (ConjType.CONDITIONAL, True, False): "くなかったら",
    (ConjType.ADJ_STEM, False, False): "",
}

# Suffix appended to a na-adjective
NA_ADJECTIVE_SUFFIXES: Dict[FormKey, str] = {
    (ConjType.NON_PAST, False, False): "だ",
    (ConjType.NON_PAST, False, True): "です",
    (ConjType.NON_PAST, True, False): "じゃない",
    (ConjType.NON_PAST, True, True): "じゃないです",
    (ConjType.PAST, False, False): "だった",
    (ConjType.PAST, False, True): "でした",
    (ConjType.PAST, True, False): "じゃなかった",
    (ConjType.PAST, True, True): "じゃなかったです",
    (ConjType.CONJUNCTIVE, False, False): "で",
    (ConjType.CONJUNCTIVE, True, False): "じゃなくて",
    (ConjType.ADVERBIAL, False, False): "に",
    (ConjType.PROVISIONAL, False, False): "なら",
    (ConjType.PROVISIONAL, True, False): "じゃなければ",
    (ConjType.CONDITIONAL, False, False): "だったら",
    (ConjType.CONDITIONAL, True, False): "じゃなかったら",
    (ConjType.ADJ_STEM, False, False): "",
}

# Adjectives conjugating on よい while spelled いい (かわいい is regular)
YOI_ADJECTIVES = frozenset({
    "いい",
    "かっこいい",
    "きもちいい",
    "ちょうどいい",
    "なかのいい",
    "つごうのいい",
})

ADJECTIVE_SUFFIXES: Dict[AdjectiveType, Dict[FormKey, str]] = {
    AdjectiveType.I: I_ADJECTIVE_SUFFIXES,
    AdjectiveType.NA: NA_ADJECTIVE_SUFFIXES,
}


@dataclass(frozen=True)
class Adjective:
    """
    A classified adjective.

    Attributes:
        word: Dictionary form (高い) or, for na-adjectives, the bare word (静か).
        adjective_type: I or NA.
    """

    word: Word
    adjective_type: AdjectiveType

    def __str__(self) -> str:
        return self.word.reading

    @property
    def kana(self) -> str:
        return self.word.kana

    @property
    def kanji(self) -> Optional[str]:
        return self.word.kanji

    @property
    def reading(self) -> str:
        return self.word.reading

    def get_stem(self) -> Word:
        """
        Get the stem suffixes attach to.

        I-adjectives drop い; いい and its compounds (かっこいい) use よ.
        Na-adjectives are their own stem.
        """
        if self.adjective_type is AdjectiveType.NA:
            return self.word
        if self.word.kana in YOI_ADJECTIVES:
            return self._yoi_stem()
        return self.word.replace_ending(1, "")

    def _yoi_stem(self) -> Word:
        # いい -> よ, 良い -> 良, かっこいい -> かっこよ
        kanji = self.word.kanji
        if kanji is not None and not kanji.endswith("いい"):
            return self.word.replace_suffix("いい", "よ", kanji[-2:], kanji[-2])
        return self.word.replace_suffix("いい", "よ")

    def _conjugate(self, conj_type: ConjType, negative: bool = False, formal: bool = False) -> Word:
        suffix = ADJECTIVE_SUFFIXES[self.adjective_type].get((conj_type, negative, formal))
        if suffix is None:
            raise UnsupportedForm(self, conj_type)
        return self.get_stem().append(suffix)

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    def dictionary(self, form: WordForm) -> Word:
        """高い / 高いです, 静かだ / 静かです"""
        if self.adjective_type is AdjectiveType.I:
            return self.word if form is WordForm.SHORT else self.word.append("です")
        return self._conjugate(ConjType.NON_PAST, formal=form is WordForm.LONG)

    def negative(self, form: WordForm) -> Word:
        return self._conjugate(ConjType.NON_PAST, True, form is WordForm.LONG)

    def past(self, form: WordForm) -> Word:
        return self._conjugate(ConjType.PAST, False, form is WordForm.LONG)

    def negative_past(self, form: WordForm) -> Word:
        return self._conjugate(ConjType.PAST, True, form is WordForm.LONG)

    def te_form(self) -> Word:
        return self._conjugate(ConjType.CONJUNCTIVE)

    def negative_te_form(self) -> Word:
        return self._conjugate(ConjType.CONJUNCTIVE, True)

    def adverbial(self) -> Word:
        """高く, 静かに"""
        return self._conjugate(ConjType.ADVERBIAL)

    def provisional(self) -> Word:
        return self._conjugate(ConjType.PROVISIONAL)

    def negative_provisional(self) -> Word:
        return self._conjugate(ConjType.PROVISIONAL, True)

    def conditional(self) -> Word:
        return self._conjugate(ConjType.CONDITIONAL)

    def negative_conditional(self) -> Word:
        return self._conjugate(ConjType.CONDITIONAL, True)

    def prenominal(self) -> Word:
        """Form before a noun: 高い(本), 静かな(町)."""
        if self.adjective_type is AdjectiveType.I:
            return self.word
        return self.word.append("な")


def iter_conjugations(adjective: Adjective) -> List[Tuple[FormKey, Word]]:
    """
    Generate every form of an adjective.

    Returns:
        List of ((conj_type, negative, formal), word) tuples in table order.
    """
    results = []
    for key in ADJECTIVE_SUFFIXES[adjective.adjective_type]:
        conj_type, negative, formal = key
        if conj_type is ConjType.NON_PAST and not negative:
            form = WordForm.LONG if formal else WordForm.SHORT
            results.append((key, adjective.dictionary(form)))
        else:
            results.append((key, adjective._conjugate(conj_type, negative, formal)))
    logger.debug("Generated %d forms of %s", len(results), adjective.reading)
    return results
