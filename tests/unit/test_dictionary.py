import pytest

from spellfix.data import Alphabet, Dictionary, FrequencyDictionary
from spellfix.errors import ConfigurationError


def test_train():
    dictionary = FrequencyDictionary()
    dictionary.train('cat')
    dictionary.train('cat')
    dictionary.train('dog', 5)

    assert dictionary.popularity('cat') == 2
    assert dictionary.popularity('dog') == 5
    assert dictionary.popularity('cow') == 0
    assert len(dictionary) == 2


def test_lookup_does_not_add_words():
    dictionary = FrequencyDictionary()
    dictionary.popularity('cat')

    assert len(dictionary) == 0
    assert 'cat' not in dictionary


def test_exists():
    dictionary = FrequencyDictionary([('cat', 1)])

    assert dictionary.exists('cat')
    assert not dictionary.exists('dog')
    assert 'cat' in dictionary


@pytest.mark.parametrize('count', [0, -1])
def test_train_non_positive(count):
    with pytest.raises(ValueError):
        FrequencyDictionary().train('cat', count)


def test_train_empty_word():
    dictionary = FrequencyDictionary()
    dictionary.train('')

    assert len(dictionary) == 0


def test_from_words():
    dictionary = FrequencyDictionary.from_words(['the', 'cat', 'the'])

    assert dictionary.most_common() == [('the', 2), ('cat', 1)]
    assert sorted(dictionary.words()) == ['cat', 'the']


def test_from_text():
    dictionary = FrequencyDictionary.from_text('The cat and the hat. The end!')

    assert dictionary.popularity('the') == 3
    assert dictionary.popularity('The') == 0
    assert dictionary.most_common(1) == [('the', 3)]


def test_base_interface():
    class Nothing(Dictionary):
        pass

    with pytest.raises(NotImplementedError):
        Nothing().exists('cat')


def test_alphabet():
    alphabet = Alphabet('abcabd')

    assert list(alphabet) == ['a', 'b', 'c', 'd']
    assert len(alphabet) == 4
    assert 'c' in alphabet
    assert 'x' not in alphabet
    assert alphabet == Alphabet('dcba')
    assert len(Alphabet('')) == 0


def test_alphabet_required():
    with pytest.raises(ConfigurationError):
        Alphabet(None)
