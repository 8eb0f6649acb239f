"""
Word classification for katsuyou.

Checks that a dictionary-form Word really ends like the declared verb or
adjective class and wraps it into a Verb or Adjective. This is the only
place where a word's shape is validated; the conjugation engines trust
the result.
"""

import logging

from katsuyou import settings
from katsuyou.adjectives import Adjective
from katsuyou.characters import in_column
from katsuyou.constants import GODAN_ENDINGS, AdjectiveType, VerbType
from katsuyou.conjugations import Verb
from katsuyou.errors import InvalidEnding, NotAnAdjective, NotAVerb
from katsuyou.irregular import find_irregular
from katsuyou.word import Word

logger = logging.getLogger(__name__)

__all__ = ["VerbType", "AdjectiveType", "into_verb", "into_adjective"]

# Godan verbs spelled like ichidan verbs (kanji + じる)
GODAN_ICHIDAN_LOOKALIKES = frozenset({"混じる", "交じる", "雑じる", "捩じる"})

# Kanji spellings only ever used by the irregular verbs
IRREGULAR_KANJI_ENDINGS = ("来る", "為る")


# ============================================================================
# Verbs
# ============================================================================

def into_verb(word: Word, verb_type: VerbType) -> Verb:
    """
    Validate a dictionary-form word as a verb of the given type.

    Args:
        word: Dictionary form, e.g. Word("たべる", "食べる").
        verb_type: Declared conjugation class.

    Returns:
        Verb ready for conjugation.

    Raises:
        NotAVerb: If the word does not end in a u-column kana.
        InvalidEnding: If the ending does not fit verb_type.

    Example:
        >>> into_verb(Word("しる", "知る"), VerbType.GODAN).te_form().kanji
        '知って'
    """
    if not word.is_verb():
        raise NotAVerb(word, verb_type, "verbs end in a u-column kana")

    word = _check_kanji_ending(word, verb_type)

    if verb_type is VerbType.GODAN:
        _check_godan(word)
        irregular = find_irregular(word, godan_only=True)
    elif verb_type is VerbType.ICHIDAN:
        _check_ichidan(word)
        irregular = None
    else:
        irregular = find_irregular(word)
        if irregular is None:
            raise InvalidEnding(word, verb_type, "not one of the irregular verbs")

    if irregular is not None:
        logger.debug("%s matches irregular verb %s", word.reading, irregular.kana)
    return Verb(word, verb_type, irregular)


def _check_godan(word: Word) -> None:
    if word.ending not in GODAN_ENDINGS:
        raise InvalidEnding(word, VerbType.GODAN, f"godan verbs do not end in {word.ending}")

    kanji = word.kanji
    if kanji is None:
        return
    if kanji.endswith(IRREGULAR_KANJI_ENDINGS):
        raise InvalidEnding(word, VerbType.GODAN, f"{kanji[-2:]} is irregular")
    if (
        len(kanji) >= 2
        and kanji.endswith("る")
        and in_column(kanji[-2], "i", "e")
        and not any(kanji.endswith(lookalike) for lookalike in GODAN_ICHIDAN_LOOKALIKES)
    ):
        raise InvalidEnding(
            word, VerbType.GODAN, f"okurigana {kanji[-2:]} is the ichidan shape",
        )


def _check_ichidan(word: Word) -> None:
    if word.ending != "る" or len(word.kana) < 2 or not in_column(word.kana[-2], "i", "e"):
        raise InvalidEnding(word, VerbType.ICHIDAN, "ichidan verbs end in an i/e-column kana + る")
    if word.kanji is not None and word.kanji.endswith(IRREGULAR_KANJI_ENDINGS):
        raise InvalidEnding(word, VerbType.ICHIDAN, f"{word.kanji[-2:]} is irregular")


def _check_kanji_ending(word: Word, declared) -> Word:
    """Reject, or drop, a kanji spelling that ends differently from the kana."""
    if word.kanji is None or word.kanji[-1] == word.kana[-1]:
        return word
    if settings.STRICT_KANJI:
        raise InvalidEnding(
            word, declared,
            f"kanji spelling ends in {word.kanji[-1]} but the reading in {word.kana[-1]}",
        )
    logger.warning("Dropping kanji spelling %s of %s: endings differ", word.kanji, word.kana)
    return Word(word.kana)


# ============================================================================
# Adjectives
# ============================================================================

def into_adjective(word: Word, adjective_type: AdjectiveType) -> Adjective:
    """
    Validate a dictionary-form word as an adjective of the given type.

    I-adjectives are passed with their final い (高い); na-adjectives as the
    bare stem without な/だ (静か).

    Raises:
        NotAnAdjective: If an i-adjective does not end in い, or the word
            looks like a verb.
        InvalidEnding: If a na-adjective is passed with な/だ attached.
    """
    if adjective_type is AdjectiveType.I:
        if word.ending != "い" or len(word.kana) < 2:
            reason = "i-adjectives end in い"
            if word.is_verb():
                reason = "word ends like a verb"
            raise NotAnAdjective(word, adjective_type, reason)
        word = _check_kanji_ending(word, adjective_type)
    elif word.ending in ("な", "だ"):
        raise InvalidEnding(word, adjective_type, "pass na-adjectives without な/だ")

    return Adjective(word, adjective_type)

