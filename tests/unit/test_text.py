import pytest

from spellfix.data import Alphabet, FrequencyDictionary, ENGLISH
from spellfix.algo.correct import CorrectionEngine
from spellfix.algo.text import TextCorrector
from spellfix.algo.tokenize import Token, Tokenizer


@pytest.fixture
def corrector():
    dictionary = FrequencyDictionary([('hello', 50), ('world', 10), ('i', 100), ('have', 20), ('cats', 5)])
    return TextCorrector(CorrectionEngine(dictionary, Alphabet(ENGLISH)), Tokenizer())


@pytest.mark.parametrize(
    ['text', 'corrected'],
    [
        ('helo wrold', 'hello world'),
        ('Helo, wrold!', 'Hello, world!'),
        ('HELO WROLD', 'HELLO WORLD'),
        ('I have 2 catts.', 'I have 2 cats.'),
        ('  hello\n\tworld  ', '  hello\n\tworld  '),
        ('qqqqq', 'qqqqq'),
        ('', ''),
    ]
)
def test_correct(corrector, text, corrected):
    assert corrector(text, timeout=500) == corrected


def test_known_words_keep_case(corrector):
    assert corrector('Hello WORLD', timeout=500) == 'Hello WORLD'


def test_tokens():
    tokens = list(Tokenizer().tokens("Don't panic, 42 times!"))

    assert tokens == [
        Token("Don't", is_word=True),
        Token(' ', is_word=False),
        Token('panic', is_word=True),
        Token(', 42 ', is_word=False),
        Token('times', is_word=True),
        Token('!', is_word=False),
    ]


@pytest.mark.parametrize('text', ['', ' ', 'word', '...word...', 'два слова', 'snake_case x2'])
def test_tokens_cover_text(text):
    assert ''.join(token.text for token in Tokenizer().tokens(text)) == text


def test_words():
    assert list(Tokenizer().words('The cat and THE hat, über alles')) == [
        'the', 'cat', 'and', 'the', 'hat', 'über', 'alles'
    ]


def test_capitalized_dictionary_words():
    dictionary = FrequencyDictionary([('Paris', 10), ('pairs', 5)])
    corrector = TextCorrector(CorrectionEngine(dictionary, Alphabet(ENGLISH)), Tokenizer())

    assert corrector('Paris', timeout=500) == 'Paris'
    assert corrector('I love Paris', timeout=500) == 'I love Paris'
    assert corrector('Piars', timeout=500) == 'Pairs'
