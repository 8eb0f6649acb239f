"""
The closed set of irregular verbs.

Each entry names the dictionary ending it covers (する, くる, ...), the
kanji spellings of that ending, and the stems/forms that differ from the
regular rules. Compounds match on the ending: 耳にする conjugates like
する, 遊びに来る like 来る.

Kanji spellings of a replaced form are derived from the kanji of the
ending (来 + られる -> 来られる) unless the table spells them out.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

from katsuyou.constants import ConjType
from katsuyou.word import Word

logger = logging.getLogger(__name__)

# kana, explicit kanji spelling ("" drops the kanji spelling)
Replacement = Tuple[str, Optional[str]]


class IrregularKind(Enum):
    SURU = "suru"
    KURU = "kuru"
    IKU = "iku"
    ARU = "aru"
    HONORIFIC = "honorific"


@dataclass(frozen=True)
class IrregularVerb:
    """
    One irregular dictionary ending and its exceptions.

    Attributes:
        kind: Which irregular family this is.
        kana: Dictionary ending in kana (する).
        kanji: Kanji spellings of the ending (為る).
        exact: Match the whole reading instead of its ending.
        godan: Also applies to verbs declared godan (行く, ある, ...).
        stems: Stem replacements keyed by the stem's ConjType.
        forms: Full-form replacements keyed by (ConjType, negative).
        unsupported: Conjugations the verb does not have.
    """
    kind: IrregularKind
    kana: str
    kanji: Tuple[str, ...] = ()
    exact: bool = False
    godan: bool = False
    stems: Dict[ConjType, Replacement] = field(default_factory=dict, compare=False)
    forms: Dict[Tuple[ConjType, bool], Replacement] = field(default_factory=dict, compare=False)
    unsupported: FrozenSet[ConjType] = field(default_factory=frozenset, compare=False)

    def matches(self, word: Word) -> bool:
        """
        True if word ends with this verb, in kana and in its kanji spelling.

        The kanji spelling must end with one of our spellings (遊びに来る) or
        with the kana ending itself (耳にする); 作る does not match くる.
        """
        if self.exact:
            matched = word.kana == self.kana
        else:
            matched = word.kana.endswith(self.kana)
        if not matched or word.kanji is None:
            return matched
        return self.kanji_tail(word) is not None or word.kanji.endswith(self.kana)

    def kanji_tail(self, word: Word) -> Optional[str]:
        """The kanji spelling of our ending used by word, if any."""
        if word.kanji is None:
            return None
        for spelling in self.kanji:
            if word.kanji.endswith(spelling):
                return spelling
        return None

    def replace(self, word: Word, kana_new: str, kanji_new: Optional[str] = None) -> Word:
        """Replace the irregular ending of word with kana_new."""
        tail = self.kanji_tail(word)
        if tail is not None and kanji_new is None:
            kanji_new = tail[:-1] + kana_new[1:]
        return word.replace_suffix(self.kana, kana_new, tail, kanji_new)

    def stem(self, word: Word, conj_type: ConjType) -> Optional[Word]:
        replacement = self.stems.get(conj_type)
        if replacement is None:
            return None
        return self.replace(word, *replacement)

    def form(self, word: Word, conj_type: ConjType, negative: bool = False) -> Optional[Word]:
        replacement = self.forms.get((conj_type, negative))
        if replacement is None:
            return None
        logger.debug("Irregular %s form of %s", conj_type.name, word.reading)
        return self.replace(word, *replacement)


# ============================================================================
# Irregular Verb Tables
# ============================================================================

SURU = IrregularVerb(
    kind=IrregularKind.SURU,
    kana="する",
    kanji=("為る",),
    stems={
        ConjType.NEG_STEM: ("し", None),
        ConjType.CONTINUATIVE: ("し", None),
        ConjType.POTENTIAL: ("でき", "出来"),
        ConjType.PROVISIONAL: ("すれ", None),
        ConjType.VOLITIONAL: ("しよ", None),
    },
    forms={
        (ConjType.CONJUNCTIVE, False): ("して", None),
        (ConjType.PAST, False): ("した", None),
        (ConjType.PASSIVE, False): ("される", None),
        (ConjType.CAUSATIVE, False): ("させる", None),
        (ConjType.CAUSATIVE_PASSIVE, False): ("させられる", None),
        (ConjType.IMPERATIVE, False): ("しろ", None),
        (ConjType.ZU, False): ("せず", None),
    },
)

KURU = IrregularVerb(
    kind=IrregularKind.KURU,
    kana="くる",
    kanji=("来る",),
    stems={
        ConjType.NEG_STEM: ("こ", None),
        ConjType.CONTINUATIVE: ("き", None),
        ConjType.POTENTIAL: ("こられ", None),
        ConjType.PROVISIONAL: ("くれ", None),
        ConjType.VOLITIONAL: ("こよ", None),
    },
    forms={
        (ConjType.CONJUNCTIVE, False): ("きて", None),
        (ConjType.PAST, False): ("きた", None),
        (ConjType.PASSIVE, False): ("こられる", None),
        (ConjType.CAUSATIVE, False): ("こさせる", None),
        (ConjType.CAUSATIVE_PASSIVE, False): ("こさせられる", None),
        (ConjType.IMPERATIVE, False): ("こい", None),
    },
)


def _iku(kana: str) -> IrregularVerb:
    # 行く: euphonic っ instead of い before た/て; ゆく also reads いって
    return IrregularVerb(
        kind=IrregularKind.IKU,
        kana=kana,
        kanji=("行く", "逝く", "往く"),
        godan=True,
        forms={
            (ConjType.CONJUNCTIVE, False): ("いって", None),
            (ConjType.PAST, False): ("いった", None),
        },
    )


ARU = IrregularVerb(
    kind=IrregularKind.ARU,
    kana="ある",
    kanji=("有る", "在る"),
    exact=True,
    godan=True,
    forms={
        (ConjType.NON_PAST, True): ("ない", ""),
        (ConjType.PAST, True): ("なかった", ""),
    },
    unsupported=frozenset({
        ConjType.POTENTIAL, ConjType.PASSIVE,
        ConjType.CAUSATIVE, ConjType.CAUSATIVE_PASSIVE,
    }),
)

# Honorific verbs and their kanji spellings: continuative and imperative end
# in い (いらっしゃいます)
HONORIFIC_VERBS: Dict[str, Tuple[str, ...]] = {
    "いらっしゃる": (),
    "おっしゃる": ("仰る", "仰有る"),
    "くださる": ("下さる",),
    "ござる": ("御座る",),
    "なさる": ("為さる",),
}


def _honorific(kana: str, kanji: Tuple[str, ...]) -> IrregularVerb:
    forms: Dict[Tuple[ConjType, bool], Replacement] = {}
    if kana == "いらっしゃる":
        forms[(ConjType.CONJUNCTIVE, False)] = ("いらして", None)
    return IrregularVerb(
        kind=IrregularKind.HONORIFIC,
        kana=kana,
        kanji=kanji,
        godan=True,
        forms=forms,
        unsupported=frozenset({
            ConjType.POTENTIAL, ConjType.PASSIVE,
            ConjType.CAUSATIVE, ConjType.CAUSATIVE_PASSIVE,
        }),
    )


# Checked in order; the first match wins
IRREGULAR_VERBS: List[IrregularVerb] = [
    *(_honorific(kana, kanji) for kana, kanji in HONORIFIC_VERBS.items()),
    SURU,
    KURU,
    _iku("いく"),
    _iku("ゆく"),
    ARU,
]


def find_irregular(word: Word, godan_only: bool = False) -> Optional[IrregularVerb]:
    """
    Find the irregular entry covering a word.

    Args:
        word: Dictionary-form word.
        godan_only: Only consider entries that also apply to godan verbs.

    Returns:
        The matching IrregularVerb, or None.
    """
    for entry in IRREGULAR_VERBS:
        if godan_only and not entry.godan:
            continue
        if entry.matches(word):
            return entry
    return None
