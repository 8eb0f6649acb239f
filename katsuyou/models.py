"""
Pydantic models for exporting conjugation tables.

These models turn a Verb or Adjective into plain, JSON-serializable data:
one ConjugatedForm per generated form, collected in a ConjugationTable.

Usage:
    from katsuyou import ConjType, VerbType, Word
    from katsuyou.models import ConjugationTable

    verb = Word("しる", "知る").into_verb(VerbType.GODAN)
    table = ConjugationTable.from_verb(verb)
    table.get(ConjType.PAST).kanji          # '知った'
    table.model_dump_json()
"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field

from katsuyou.adjectives import iter_conjugations as iter_adjective_conjugations
from katsuyou.constants import get_conj_description, get_conj_gloss
from katsuyou.conjugations import iter_conjugations as iter_verb_conjugations
from katsuyou.word import Word


class ConjugatedForm(BaseModel):
    """
    A single conjugated form.

    negative/formal are None where the distinction does not apply
    (the te-form has no polite variant, for instance).
    """
    conj_type: int = Field(..., description="Conjugation type ID (see ConjType)")
    description: str = Field(..., description="Human-readable conjugation name")
    gloss: str = Field("", description="Short English gloss")
    negative: Optional[bool] = Field(None, description="True if negative form")
    formal: Optional[bool] = Field(None, description="True if polite (~ます/です) form")
    kana: str = Field(..., description="Conjugated form in kana")
    kanji: Optional[str] = Field(None, description="Conjugated form with kanji, if any")

    @classmethod
    def from_word(
        cls,
        conj_type: int,
        word: Word,
        negative: Optional[bool] = None,
        formal: Optional[bool] = None,
    ) -> "ConjugatedForm":
        return cls(
            conj_type=int(conj_type),
            description=get_conj_description(conj_type),
            gloss=get_conj_gloss(conj_type),
            negative=negative,
            formal=formal,
            kana=word.kana,
            kanji=word.kanji,
        )

    @property
    def reading(self) -> str:
        return self.kanji if self.kanji is not None else self.kana


class ConjugationTable(BaseModel):
    """
    Every conjugated form of one verb or adjective.
    """
    kana: str = Field(..., description="Dictionary form in kana")
    kanji: Optional[str] = Field(None, description="Dictionary form with kanji")
    word_class: str = Field(..., description="Word class tag (v5, v1, irregular, adj-i, adj-na)")
    forms: List[ConjugatedForm] = Field(default_factory=list, description="Generated forms")

    @classmethod
    def from_verb(cls, verb: Any) -> "ConjugationTable":
        """
        Create a table from a classified Verb.

        Forms the verb does not have are left out.
        """
        forms = [
            ConjugatedForm.from_word(rule.conj_type, word, rule.neg, rule.fml)
            for rule, word in iter_verb_conjugations(verb)
        ]
        return cls(
            kana=verb.kana,
            kanji=verb.kanji,
            word_class=verb.verb_type.value,
            forms=forms,
        )

    @classmethod
    def from_adjective(cls, adjective: Any) -> "ConjugationTable":
        """Create a table from a classified Adjective."""
        forms = [
            ConjugatedForm.from_word(conj_type, word, negative, formal)
            for (conj_type, negative, formal), word in iter_adjective_conjugations(adjective)
        ]
        return cls(
            kana=adjective.kana,
            kanji=adjective.kanji,
            word_class=adjective.adjective_type.value,
            forms=forms,
        )

    def get(
        self,
        conj_type: int,
        negative: Optional[bool] = False,
        formal: Optional[bool] = False,
    ) -> Optional[ConjugatedForm]:
        """
        Look up a form.

        A form whose negative/formal flag is None matches any value asked
        for, so get(ConjType.CONJUNCTIVE) finds the te-form.

        Returns:
            The first matching form, or None.
        """
        for form in self.forms:
            if form.conj_type != conj_type:
                continue
            if form.negative is not None and form.negative != negative:
                continue
            if form.formal is not None and form.formal != formal:
                continue
            return form
        return None
