from pathlib import Path

import pytest

from spellfix import SpellChecker, FrequencyDictionary, ConfigurationError, ENGLISH

FIXTURES = Path(__file__).parent.parent / 'fixtures'


@pytest.fixture
def checker():
    return SpellChecker.from_file(str(FIXTURES / 'frequencies.txt'))


def test_correct_word(checker):
    assert checker.correct_word('wrold') == 'world'
    assert checker.correct_word('world') == 'world'
    assert checker.correct_word('helo') == 'hello'


def test_suggest_words(checker):
    assert checker.suggest_words('helo') == ['hello', 'help', 'held']
    assert checker.suggest_words('helo', max=1) == ['hello']
    assert checker.suggest_words('helo', max=0) == []


def test_correct_text(checker):
    assert checker.correct_text('Helo, wrold!') == 'Hello, world!'


def test_from_text():
    checker = SpellChecker.from_text('the cat sat on the mat with the other cat')

    assert checker.correct_word('teh') == 'the'
    assert checker.correct_word('caat') == 'cat'
    assert checker.suggest_words('xat', max=3) == ['cat', 'mat', 'sat']


def test_alphabet():
    checker = SpellChecker(FrequencyDictionary([('cat', 1)]), 'aabbcc')

    assert list(checker.alphabet) == ['a', 'b', 'c']


def test_empty_alphabet():
    # Only deletions and transpositions are possible
    checker = SpellChecker(FrequencyDictionary([('cat', 1)]), '')

    assert checker.correct_word('cta') == 'cat'
    assert checker.correct_word('cot') == 'cot'


@pytest.mark.parametrize(
    ['dictionary', 'alphabet'],
    [
        (None, ENGLISH),
        (FrequencyDictionary(), None),
    ]
)
def test_construction(dictionary, alphabet):
    with pytest.raises(ConfigurationError):
        SpellChecker(dictionary, alphabet)


def test_independent_instances():
    first = SpellChecker(FrequencyDictionary([('cat', 1)]), ENGLISH)
    second = SpellChecker(FrequencyDictionary([('bat', 1)]), ENGLISH)

    assert first.correct_word('xat') == 'cat'
    assert second.correct_word('xat') == 'bat'


def test_clock():
    dictionary = FrequencyDictionary([('world', 10)])
    checker = SpellChecker(dictionary, ENGLISH, clock=lambda: 5.0)

    # constant clock: zero timeout is expired right away, any other never expires
    assert checker.correct_word('xorlx', timeout=0) == 'xorlx'
    assert checker.correct_word('xorlx', timeout=1) == 'world'
