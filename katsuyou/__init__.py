"""
Katsuyou: Japanese verb and adjective conjugation.

Build a Word from a dictionary form, classify it, then ask for a form:

    >>> from katsuyou import Word, WordForm, VerbType
    >>> verb = Word("しる", "知る").into_verb(VerbType.GODAN)
    >>> verb.negative(WordForm.SHORT).kanji
    '知らない'
"""

import logging

from katsuyou import settings
from katsuyou.adjectives import Adjective
from katsuyou.classifier import into_adjective, into_verb
from katsuyou.constants import AdjectiveType, ConjType, VerbType, get_conj_description
from katsuyou.conjugations import Verb, iter_conjugations
from katsuyou.errors import (
    InvalidEnding,
    InvalidReading,
    KatsuyouError,
    NotAnAdjective,
    NotAVerb,
    NotShiftable,
    UnsupportedForm,
)
from katsuyou.models import ConjugatedForm, ConjugationTable
from katsuyou.word import Word, WordForm

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
if settings.DEBUG:
    logger.setLevel(logging.DEBUG)

__all__ = [
    "Word",
    "WordForm",
    "Verb",
    "VerbType",
    "Adjective",
    "AdjectiveType",
    "ConjType",
    "ConjugatedForm",
    "ConjugationTable",
    "KatsuyouError",
    "InvalidReading",
    "InvalidEnding",
    "NotAVerb",
    "NotAnAdjective",
    "UnsupportedForm",
    "NotShiftable",
    "get_conj_description",
    "into_verb",
    "into_adjective",
    "iter_conjugations",
]
