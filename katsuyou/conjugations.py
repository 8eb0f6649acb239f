"""
Verb conjugation engine for katsuyou.

A Verb wraps a validated dictionary-form Word and produces every
conjugated form from five stems:

    negative (a-row)      しら-ない
    continuative (i-row)  しり-ます
    potential (e-row)     しれ-る
    provisional (e-row)   しれ-ば
    volitional (o-row)    しろ-う

plus the euphonic te/ta rule (しっ-て). Godan verbs build the stems by
shifting the final kana within its row, ichidan verbs by replacing る,
and the irregular verbs take them from their tables in irregular.py.

Verbs are created through the classifier:

    >>> verb = Word("しる", "知る").into_verb(VerbType.GODAN)
    >>> verb.negative(WordForm.SHORT).kanji
    '知らない'
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from katsuyou.characters import as_hiragana, shift, voice
from katsuyou.constants import (
    MASEN, MASEN_DESHITA, MASHITA, MASHOU, MASU,
    ConjType, VerbType,
)
from katsuyou.errors import UnsupportedForm
from katsuyou.irregular import IrregularKind, IrregularVerb
from katsuyou.word import Word, WordForm

logger = logging.getLogger(__name__)


# ============================================================================
# Stem Tables
# ============================================================================

# Stem -> vowel column of the godan stem
GODAN_STEM_COLUMNS: Dict[ConjType, str] = {
    ConjType.NEG_STEM: "a",
    ConjType.CONTINUATIVE: "i",
    ConjType.POTENTIAL: "e",
    ConjType.PROVISIONAL: "e",
    ConjType.VOLITIONAL: "o",
}

# Stem -> what replaces the final る of an ichidan verb
ICHIDAN_STEM_SUFFIXES: Dict[ConjType, str] = {
    ConjType.NEG_STEM: "",
    ConjType.CONTINUATIVE: "",
    ConjType.POTENTIAL: "られ",
    ConjType.PROVISIONAL: "れ",
    ConjType.VOLITIONAL: "よ",
}

# う sits in the vowel row; its a-column stem is わ (かう -> かわない)
U_STEMS = {
    "う": {"a": "わ", "i": "い", "e": "え", "o": "お"},
    "ウ": {"a": "ワ", "i": "イ", "e": "エ", "o": "オ"},
}

# Godan ending -> sound before て/た
GODAN_TE_TA: Dict[str, str] = {
    "う": "っ", "つ": "っ", "る": "っ",
    "く": "い", "ぐ": "い",
    "す": "し",
    "ぬ": "ん", "ぶ": "ん", "む": "ん",
}

# Endings that voice the following て/た (泳いで, 読んだ)
VOICING_ENDINGS = frozenset("ぐぬぶむ")


@dataclass(frozen=True)
class Verb:
    """
    A classified dictionary-form verb.

    Attributes:
        word: Dictionary form.
        verb_type: Conjugation class.
        irregular: Matched irregular entry, if any. Godan verbs may carry
            one too (行く, ある, honorific verbs).
    """

    word: Word
    verb_type: VerbType
    irregular: Optional[IrregularVerb] = None

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

    # ------------------------------------------------------------------
    # Stems
    # ------------------------------------------------------------------

    def get_stem(self, form: WordForm) -> Word:
        """
        Get the stem other forms are built on.

        SHORT gives the negative (a-row) stem used before ない, LONG the
        continuative (i-row) stem used before ます.

        Example:
            >>> verb.get_stem(WordForm.SHORT).kanji, verb.get_stem(WordForm.LONG).kanji
            ('知ら', '知り')
        """
        if form is WordForm.SHORT:
            return self._stem(ConjType.NEG_STEM)
        return self._stem(ConjType.CONTINUATIVE)

    def _stem(self, stem: ConjType) -> Word:
        if self.irregular is not None:
            irregular_stem = self.irregular.stem(self.word, stem)
            if irregular_stem is not None:
                return irregular_stem
            if stem is ConjType.CONTINUATIVE and self._is_honorific():
                return self.word.replace_ending(1, "い")

        if self.verb_type is VerbType.ICHIDAN:
            return self.word.replace_ending(1, ICHIDAN_STEM_SUFFIXES[stem])
        return self._godan_stem(GODAN_STEM_COLUMNS[stem])

    def _godan_stem(self, column: str) -> Word:
        ending = self.word.ending
        if ending in U_STEMS:
            return self.word.replace_ending(1, U_STEMS[ending][column])
        return self.word.replace_ending(1, shift(ending, column))

    def _is_honorific(self) -> bool:
        return self.irregular is not None and self.irregular.kind is IrregularKind.HONORIFIC

    def _irregular_form(self, conj_type: ConjType, negative: bool = False) -> Optional[Word]:
        if self.irregular is None:
            return None
        return self.irregular.form(self.word, conj_type, negative)

    def _require(self, conj_type: ConjType) -> None:
        if self.irregular is not None and conj_type in self.irregular.unsupported:
            raise UnsupportedForm(self, conj_type)

    def _euphonic(self, conj_type: ConjType, particle: str) -> Word:
        """Apply the te/ta sound change: かく -> かいて, よむ -> よんだ."""
        irregular = self._irregular_form(conj_type)
        if irregular is not None:
            return irregular

        if self.verb_type is VerbType.ICHIDAN:
            return self.word.replace_ending(1, particle)

        ending = as_hiragana(self.word.ending)
        sound = GODAN_TE_TA.get(ending)
        if sound is None:
            raise UnsupportedForm(self, conj_type, f"no euphonic change for {ending}")
        if ending in VOICING_ENDINGS:
            particle = voice(particle)
        return self.word.replace_ending(1, sound + particle)

    # ------------------------------------------------------------------
    # Core forms
    # ------------------------------------------------------------------

    def dictionary(self, form: WordForm) -> Word:
        """知る / 知ります"""
        if form is WordForm.SHORT:
            return self.word
        return self._stem(ConjType.CONTINUATIVE).append(MASU)

    def negative(self, form: WordForm) -> Word:
        """知らない / 知りません"""
        if form is WordForm.LONG:
            return self._stem(ConjType.CONTINUATIVE).append(MASEN)
        irregular = self._irregular_form(ConjType.NON_PAST, negative=True)
        if irregular is not None:
            return irregular
        return self._stem(ConjType.NEG_STEM).append("ない")

    def past(self, form: WordForm) -> Word:
        """知った / 知りました"""
        if form is WordForm.LONG:
            return self._stem(ConjType.CONTINUATIVE).append(MASHITA)
        return self._euphonic(ConjType.PAST, "た")

    def negative_past(self, form: WordForm) -> Word:
        """知らなかった / 知りませんでした"""
        if form is WordForm.LONG:
            return self._stem(ConjType.CONTINUATIVE).append(MASEN_DESHITA)
        irregular = self._irregular_form(ConjType.PAST, negative=True)
        if irregular is not None:
            return irregular
        return self._stem(ConjType.NEG_STEM).append("なかった")

    def te_form(self) -> Word:
        """知って"""
        return self._euphonic(ConjType.CONJUNCTIVE, "て")

    def negative_te_form(self) -> Word:
        """知らなくて"""
        return self.negative(WordForm.SHORT).replace_ending(1, "くて")

    def potential(self, form: WordForm) -> Word:
        """知れる / 知れます"""
        self._require(ConjType.POTENTIAL)
        return self._stem(ConjType.POTENTIAL).append("る" if form is WordForm.SHORT else MASU)

    def negative_potential(self, form: WordForm) -> Word:
        """知れない / 知れません"""
        self._require(ConjType.POTENTIAL)
        return self._stem(ConjType.POTENTIAL).append("ない" if form is WordForm.SHORT else MASEN)

    # ------------------------------------------------------------------
    # Imperative and volitional
    # ------------------------------------------------------------------

    def imperative(self) -> Word:
        """Command form: 守れ, 食べろ, しろ, こい, いらっしゃい."""
        irregular = self._irregular_form(ConjType.IMPERATIVE)
        if irregular is not None:
            return irregular
        if self._is_honorific():
            return self._stem(ConjType.CONTINUATIVE)
        if self.verb_type is VerbType.ICHIDAN:
            return self.word.replace_ending(1, "ろ")
        return self._godan_stem("e")

    def negative_imperative(self) -> Word:
        """Prohibitive: 知るな."""
        return self.word.append("な")

    def volitional(self, form: WordForm) -> Word:
        """Let's/will: 知ろう / 知りましょう."""
        if form is WordForm.LONG:
            return self._stem(ConjType.CONTINUATIVE).append(MASHOU)
        return self._stem(ConjType.VOLITIONAL).append("う")

    def negative_volitional(self) -> Word:
        """Will not / probably not: 知るまい."""
        return self.word.append("まい")

    # ------------------------------------------------------------------
    # Voice
    # ------------------------------------------------------------------

    def passive(self) -> Word:
        self._require(ConjType.PASSIVE)
        irregular = self._irregular_form(ConjType.PASSIVE)
        if irregular is not None:
            return irregular
        if self.verb_type is VerbType.ICHIDAN:
            return self.word.replace_ending(1, "られる")
        return self._stem(ConjType.NEG_STEM).append("れる")

    def negative_passive(self) -> Word:
        return self.passive().replace_ending(1, "ない")

    def causative(self) -> Word:
        self._require(ConjType.CAUSATIVE)
        irregular = self._irregular_form(ConjType.CAUSATIVE)
        if irregular is not None:
            return irregular
        if self.verb_type is VerbType.ICHIDAN:
            return self.word.replace_ending(1, "させる")
        return self._stem(ConjType.NEG_STEM).append("せる")

    def negative_causative(self) -> Word:
        return self.causative().replace_ending(1, "ない")

    def causative_passive(self) -> Word:
        """
        Made to do: 食べさせられる, 習わされる.

        Godan verbs use the contracted される, except after さ where it would
        repeat (話させられる).
        """
        self._require(ConjType.CAUSATIVE_PASSIVE)
        irregular = self._irregular_form(ConjType.CAUSATIVE_PASSIVE)
        if irregular is not None:
            return irregular
        if self.verb_type is VerbType.ICHIDAN:
            return self.word.replace_ending(1, "させられる")
        if as_hiragana(self.word.ending) == "す":
            return self._stem(ConjType.NEG_STEM).append("せられる")
        return self._stem(ConjType.NEG_STEM).append("される")

    def negative_causative_passive(self) -> Word:
        return self.causative_passive().replace_ending(1, "ない")

    # ------------------------------------------------------------------
    # Conditionals and other forms
    # ------------------------------------------------------------------

    def conditional(self) -> Word:
        """~たら: 知ったら."""
        return self.past(WordForm.SHORT).append("ら")

    def negative_conditional(self) -> Word:
        return self.negative_past(WordForm.SHORT).append("ら")

    def provisional(self) -> Word:
        """~ば: 知れば, すれば, くれば."""
        return self._stem(ConjType.PROVISIONAL).append("ば")

    def negative_provisional(self) -> Word:
        return self.negative(WordForm.SHORT).replace_ending(1, "ければ")

    def alternative(self) -> Word:
        """~たり: 知ったり."""
        return self.past(WordForm.SHORT).append("り")

    def zu_form(self) -> Word:
        """Literary negative: 知らず, せず."""
        irregular = self._irregular_form(ConjType.ZU)
        if irregular is not None:
            return irregular
        return self._stem(ConjType.NEG_STEM).append("ず")

    def desiderative(self) -> Word:
        return self._stem(ConjType.CONTINUATIVE).append("たい")

    def negative_desiderative(self) -> Word:
        return self._stem(ConjType.CONTINUATIVE).append("たくない")


# ============================================================================
# Conjugation Rules
# ============================================================================

@dataclass(frozen=True)
class ConjugationRule:
    """
    One row of a conjugation table.

    Attributes:
        conj_type: Conjugation type ID.
        neg: Negative form (None if not applicable).
        fml: Formal/polite form (None if not applicable).
        method: Name of the Verb/Adjective method producing the form.
        form: WordForm argument for methods that take one.
    """
    conj_type: ConjType
    neg: Optional[bool]
    fml: Optional[bool]
    method: str
    form: Optional[WordForm] = None

    def apply(self, target) -> Word:
        operation: Callable[..., Word] = getattr(target, self.method)
        if self.form is None:
            return operation()
        return operation(self.form)


def _paired(conj_type: ConjType, neg: bool, method: str) -> List[ConjugationRule]:
    return [
        ConjugationRule(conj_type, neg, False, method, WordForm.SHORT),
        ConjugationRule(conj_type, neg, True, method, WordForm.LONG),
    ]


VERB_RULES: List[ConjugationRule] = [
    *_paired(ConjType.NON_PAST, False, "dictionary"),
    *_paired(ConjType.NON_PAST, True, "negative"),
    *_paired(ConjType.PAST, False, "past"),
    *_paired(ConjType.PAST, True, "negative_past"),
    ConjugationRule(ConjType.CONJUNCTIVE, False, None, "te_form"),
    ConjugationRule(ConjType.CONJUNCTIVE, True, None, "negative_te_form"),
    ConjugationRule(ConjType.NEG_STEM, None, False, "get_stem", WordForm.SHORT),
    ConjugationRule(ConjType.CONTINUATIVE, None, True, "get_stem", WordForm.LONG),
    *_paired(ConjType.POTENTIAL, False, "potential"),
    *_paired(ConjType.POTENTIAL, True, "negative_potential"),
    ConjugationRule(ConjType.IMPERATIVE, False, None, "imperative"),
    ConjugationRule(ConjType.IMPERATIVE, True, None, "negative_imperative"),
    *_paired(ConjType.VOLITIONAL, False, "volitional"),
    ConjugationRule(ConjType.VOLITIONAL, True, False, "negative_volitional"),
    ConjugationRule(ConjType.PASSIVE, False, None, "passive"),
    ConjugationRule(ConjType.PASSIVE, True, None, "negative_passive"),
    ConjugationRule(ConjType.CAUSATIVE, False, None, "causative"),
    ConjugationRule(ConjType.CAUSATIVE, True, None, "negative_causative"),
    ConjugationRule(ConjType.CAUSATIVE_PASSIVE, False, None, "causative_passive"),
    ConjugationRule(ConjType.CAUSATIVE_PASSIVE, True, None, "negative_causative_passive"),
    ConjugationRule(ConjType.CONDITIONAL, False, None, "conditional"),
    ConjugationRule(ConjType.CONDITIONAL, True, None, "negative_conditional"),
    ConjugationRule(ConjType.PROVISIONAL, False, None, "provisional"),
    ConjugationRule(ConjType.PROVISIONAL, True, None, "negative_provisional"),
    ConjugationRule(ConjType.ALTERNATIVE, False, None, "alternative"),
    ConjugationRule(ConjType.ZU, True, None, "zu_form"),
    ConjugationRule(ConjType.DESIDERATIVE, False, None, "desiderative"),
    ConjugationRule(ConjType.DESIDERATIVE, True, None, "negative_desiderative"),
]


def iter_conjugations(verb: Verb) -> List[Tuple[ConjugationRule, Word]]:
    """
    Generate every form a verb supports.

    Forms the verb lacks (ある has no potential) are skipped.

    Returns:
        List of (rule, conjugated word) tuples in table order.

    Example:
        >>> [str(w) for r, w in iter_conjugations(verb)][:3]
        ['知る', '知ります', '知らない']
    """
    results = []
    for rule in VERB_RULES:
        try:
            results.append((rule, rule.apply(verb)))
        except UnsupportedForm as e:
            logger.debug("Skipping %s: %s", rule.method, e)
    return results
