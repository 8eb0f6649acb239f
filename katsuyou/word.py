"""
The Word value: a kana reading with an optional kanji spelling.

Every dictionary form, stem and conjugated form is a Word. Words are
immutable; each transformation returns a new Word with the kana and the
kanji spelling changed in parallel.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from katsuyou.characters import in_column, is_kana
from katsuyou.errors import InvalidReading, UnsupportedForm

if TYPE_CHECKING:
    from katsuyou.adjectives import Adjective
    from katsuyou.classifier import AdjectiveType, VerbType
    from katsuyou.conjugations import Verb

logger = logging.getLogger(__name__)


class WordForm(Enum):
    """Speech register: plain (dictionary) or polite (~ます)."""

    SHORT = "short"
    LONG = "long"


@dataclass(frozen=True)
class Word:
    """
    A single morphological form.

    Attributes:
        kana: Reading, hiragana and/or katakana only.
        kanji: Optional spelling of the same form with kanji.

    Raises:
        InvalidReading: If kana is empty or not kana, or kanji is empty.

    Example:
        >>> Word("しる", "知る").replace_ending(1, "らない")
        Word(kana='しらない', kanji='知らない')
    """

    kana: str
    kanji: Optional[str] = None

    def __post_init__(self):
        if not self.kana:
            raise InvalidReading(self.kana, "reading is empty")
        if not is_kana(self.kana):
            raise InvalidReading(self.kana, "reading must be written in kana")
        if self.kanji is not None and not self.kanji:
            raise InvalidReading(self.kanji, "kanji spelling is empty")

    def __str__(self) -> str:
        return self.reading

    @property
    def reading(self) -> str:
        """The kanji spelling if there is one, otherwise the kana."""
        return self.kanji if self.kanji is not None else self.kana

    @property
    def ending(self) -> str:
        """Last kana of the reading."""
        return self.kana[-1]

    def is_verb(self) -> bool:
        """True if the reading ends in a u-column kana, like every verb."""
        return in_column(self.ending, "u")

    def has_reading(self, kana: str, kanji: Optional[str] = None) -> bool:
        """True if the kana, or the kanji spelling when given, equals ours."""
        if self.kana == kana:
            return True
        return kanji is not None and self.kanji == kanji

    def ends_with(self, kana: str, kanji: Optional[str] = None) -> bool:
        """True if the kana, or the kanji spelling when given, ends like ours."""
        if self.kana.endswith(kana):
            return True
        return kanji is not None and self.kanji is not None and self.kanji.endswith(kanji)

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def replace_ending(self, count: int, suffix: str, kanji_suffix: Optional[str] = None) -> "Word":
        """
        Replace the last count kana with suffix.

        The kanji spelling gets the same treatment when it ends with the
        same kana; otherwise the result has no kanji spelling.

        Args:
            count: Number of trailing characters to remove.
            suffix: Kana to append.
            kanji_suffix: Text appended to the kanji spelling instead of suffix.

        Returns:
            New Word.
        """
        cut = len(self.kana) - count
        tail = self.kana[cut:]
        kana = self.kana[:cut] + suffix

        kanji = None
        if self.kanji is not None:
            if self.kanji.endswith(tail) and len(self.kanji) >= count:
                new_tail = suffix if kanji_suffix is None else kanji_suffix
                kanji = self.kanji[:len(self.kanji) - count] + new_tail or None
            else:
                logger.warning(
                    "Kanji spelling %s does not end with %s; dropping it from %s",
                    self.kanji, tail, kana,
                )

        return Word(kana, kanji)

    def replace_suffix(
        self,
        kana_tail: str,
        kana_new: str,
        kanji_tail: Optional[str] = None,
        kanji_new: Optional[str] = None,
    ) -> "Word":
        """
        Replace a known trailing string with another one.

        The kanji spelling is matched against kanji_tail first (e.g. 来る),
        then against kana_tail (e.g. する in 耳にする).

        Raises:
            UnsupportedForm: If the kana reading does not end with kana_tail.
        """
        if not self.kana.endswith(kana_tail):
            raise UnsupportedForm(self, kana_new, f"reading does not end with {kana_tail}")

        kana = self.kana[:len(self.kana) - len(kana_tail)] + kana_new

        kanji = None
        if self.kanji is not None:
            if kanji_tail and self.kanji.endswith(kanji_tail):
                replacement = kana_new if kanji_new is None else kanji_new
                kanji = self.kanji[:len(self.kanji) - len(kanji_tail)] + replacement
            elif self.kanji.endswith(kana_tail):
                kanji = self.kanji[:len(self.kanji) - len(kana_tail)] + kana_new
            else:
                logger.warning(
                    "Kanji spelling %s does not end with %s; dropping it from %s",
                    self.kanji, kanji_tail or kana_tail, kana,
                )

        return Word(kana, kanji or None)

    def append(self, suffix: str) -> "Word":
        """Append the same kana to the reading and the kanji spelling."""
        return self.replace_ending(0, suffix)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def into_verb(self, verb_type: "VerbType") -> "Verb":
        """
        Classify this word as a verb of the given type.

        Example:
            >>> Word("ならう", "習う").into_verb(VerbType.GODAN).past(WordForm.SHORT).kanji
            '習った'
        """
        from katsuyou.classifier import into_verb
        return into_verb(self, verb_type)

    def into_adjective(self, adjective_type: "AdjectiveType") -> "Adjective":
        """Classify this word as an adjective of the given type."""
        from katsuyou.classifier import into_adjective
        return into_adjective(self, adjective_type)
