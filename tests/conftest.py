"""
Shared fixtures for the katsuyou test suite.
"""

import pytest

from katsuyou import AdjectiveType, VerbType, Word


@pytest.fixture
def shiru():
    """知る: regular godan verb."""
    return Word("しる", "知る").into_verb(VerbType.GODAN)


@pytest.fixture
def taberu():
    """食べる: regular ichidan verb."""
    return Word("たべる", "食べる").into_verb(VerbType.ICHIDAN)


@pytest.fixture
def suru():
    return Word("する").into_verb(VerbType.IRREGULAR)


@pytest.fixture
def kuru():
    return Word("くる", "来る").into_verb(VerbType.IRREGULAR)


@pytest.fixture
def aru():
    return Word("ある").into_verb(VerbType.GODAN)


@pytest.fixture
def takai():
    return Word("たかい", "高い").into_adjective(AdjectiveType.I)


@pytest.fixture
def shizuka():
    return Word("しずか", "静か").into_adjective(AdjectiveType.NA)
