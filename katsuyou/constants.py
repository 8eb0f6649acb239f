"""
Consolidated constants for katsuyou.

Single source of truth for conjugation type IDs, their human-readable
names and short English glosses.
"""

from enum import Enum, IntEnum
from typing import Dict


# ============================================================================
# Word Classes
# ============================================================================

class VerbType(Enum):
    """Conjugation class of a verb."""
    GODAN = "v5"
    ICHIDAN = "v1"
    IRREGULAR = "irregular"  # する, 来る, 行く, ある, honorific verbs


class AdjectiveType(Enum):
    """Conjugation class of an adjective."""
    I = "adj-i"
    NA = "adj-na"


# ============================================================================
# Conjugation Type Constants
# ============================================================================

class ConjType(IntEnum):
    """Conjugation type IDs, numbered as in JMdict-based analyzers."""
    NON_PAST = 1
    PAST = 2
    CONJUNCTIVE = 3  # te-form
    PROVISIONAL = 4  # eba-form
    POTENTIAL = 5
    PASSIVE = 6
    CAUSATIVE = 7
    CAUSATIVE_PASSIVE = 8
    VOLITIONAL = 9
    IMPERATIVE = 10
    CONDITIONAL = 11  # tara-form
    ALTERNATIVE = 12  # tari-form
    CONTINUATIVE = 13  # stem/masu-stem
    ADVERBIAL = 50  # adjective ku-form
    ADJ_STEM = 51
    NEG_STEM = 52
    DESIDERATIVE = 55  # ~たい (want to)
    ZU = 56  # ~ず (literary negative)


# Conjugation type names mapping
CONJ_DESCRIPTIONS: Dict[int, str] = {
    ConjType.NON_PAST: "Non-past",
    ConjType.PAST: "Past (~ta)",
    ConjType.CONJUNCTIVE: "Conjunctive (~te)",
    ConjType.PROVISIONAL: "Provisional (~eba)",
    ConjType.POTENTIAL: "Potential",
    ConjType.PASSIVE: "Passive",
    ConjType.CAUSATIVE: "Causative",
    ConjType.CAUSATIVE_PASSIVE: "Causative-Passive",
    ConjType.VOLITIONAL: "Volitional",
    ConjType.IMPERATIVE: "Imperative",
    ConjType.CONDITIONAL: "Conditional (~tara)",
    ConjType.ALTERNATIVE: "Alternative (~tari)",
    ConjType.CONTINUATIVE: "Continuative (~i)",
    ConjType.ADVERBIAL: "Adverbial (~ku)",
    ConjType.ADJ_STEM: "Adjective Stem",
    ConjType.NEG_STEM: "Negative Stem (~nai)",
    ConjType.DESIDERATIVE: "Desiderative (~tai)",
    ConjType.ZU: "Negative Continuative (~zu)",
}

# English glosses for each conjugation
CONJ_GLOSSES: Dict[int, str] = {
    ConjType.NON_PAST: "does/is",
    ConjType.PAST: "did/was",
    ConjType.CONJUNCTIVE: "and",
    ConjType.PROVISIONAL: "if",
    ConjType.POTENTIAL: "can do",
    ConjType.PASSIVE: "is done (to)",
    ConjType.CAUSATIVE: "makes do",
    ConjType.CAUSATIVE_PASSIVE: "is made to do",
    ConjType.VOLITIONAL: "let's/will",
    ConjType.IMPERATIVE: "do!",
    ConjType.CONDITIONAL: "if/when",
    ConjType.ALTERNATIVE: "doing things like",
    ConjType.CONTINUATIVE: "and (stem)",
    ConjType.ADVERBIAL: "adverbially",
    ConjType.ADJ_STEM: "stem",
    ConjType.NEG_STEM: "not (stem)",
    ConjType.DESIDERATIVE: "wants to",
    ConjType.ZU: "without doing",
}


def get_conj_description(conj_type: int) -> str:
    """Get human-readable description of conjugation type."""
    return CONJ_DESCRIPTIONS.get(conj_type, f"Type {conj_type}")


def get_conj_gloss(conj_type: int) -> str:
    """Get the short English gloss of a conjugation type."""
    return CONJ_GLOSSES.get(conj_type, "")


# ============================================================================
# Verb Endings
# ============================================================================

# Dictionary-form endings of godan verbs
GODAN_ENDINGS = frozenset("うくぐすつぬぶむる")

# Polite-register suffixes
MASU = "ます"
MASEN = "ません"
MASHITA = "ました"
MASEN_DESHITA = "ませんでした"
MASHOU = "ましょう"
