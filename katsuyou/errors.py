"""
Error types raised by katsuyou.

Every fallible operation raises a subclass of KatsuyouError carrying the
offending input, so callers can catch the whole family or a single kind.
"""

from typing import Any, Optional


class KatsuyouError(Exception):
    """Base class for all katsuyou errors."""


class InvalidReading(KatsuyouError):
    """Raised when a reading is empty or contains non-kana characters."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"'{text}' is not a valid reading: {reason}")


class InvalidEnding(KatsuyouError):
    """Raised when a word's ending does not fit its declared class."""

    def __init__(self, word: Any, declared: Any, reason: str):
        self.word = word
        self.declared = declared
        self.reason = reason
        super().__init__(f"'{_reading_of(word)}' cannot be {_name_of(declared)}: {reason}")


class NotAVerb(InvalidEnding):
    """Raised when a word does not end like any verb."""


class NotAnAdjective(InvalidEnding):
    """Raised when a word does not end like any adjective."""


class UnsupportedForm(KatsuyouError):
    """Raised when no conjugation rule exists for the requested form."""

    def __init__(self, word: Any, form: Any, reason: Optional[str] = None):
        self.word = word
        self.form = form
        self.reason = reason
        message = f"'{_reading_of(word)}' has no {_name_of(form)} form"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class NotShiftable(KatsuyouError):
    """Raised when a kana has no row to shift within."""

    def __init__(self, char: str, reason: str):
        self.char = char
        self.reason = reason
        super().__init__(f"'{char}' cannot be shifted: {reason}")


def _reading_of(word: Any) -> str:
    return getattr(word, "reading", None) or str(word)


def _name_of(value: Any) -> str:
    return getattr(value, "name", None) or str(value)
