"""
Dictionaries: where the knowledge of "which words exist, and how popular they are" lives.

Correction algorithms only need two questions answered, so they depend on the
:class:`Dictionary` interface only:

* does the word exist?
* how popular is it (a non-negative integer, ``0`` means "unknown word")?

:class:`FrequencyDictionary` is the default in-memory implementation, that can be trained from
word lists, raw texts, or frequency list files (see :mod:`readers <spellfix.readers>`).

.. autoclass:: Dictionary
    :members:

.. autoclass:: FrequencyDictionary
    :members:
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, List, Optional, Tuple

from spellfix.algo.tokenize import Tokenizer


class Dictionary:
    """
    Read interface that correction algorithms consume. Implementations are expected to be safe for
    concurrent reading; spellfix never writes to the dictionary while correcting.

    Subclasses must redefine :meth:`popularity`; :meth:`exists` by default is just
    "popularity is above zero".
    """

    def exists(self, word: str) -> bool:
        return self.popularity(word) > 0

    def popularity(self, word: str) -> int:
        raise NotImplementedError

    def __contains__(self, word) -> bool:
        return self.exists(word)


class FrequencyDictionary(Dictionary):
    """
    Trainable dictionary, where popularity of the word is the number of times it was seen in
    training data::

        >>> dictionary = FrequencyDictionary.from_text('the cat and the hat')
        >>> dictionary.popularity('the')
        2
        >>> dictionary.popularity('dog')
        0

    Args:
        counts: Initial word counts
    """

    def __init__(self, counts: Optional[Iterable[Tuple[str, int]]] = None):
        self.counts: Counter = Counter()
        if counts:
            for word, count in counts:
                self.train(word, count)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> FrequencyDictionary:
        """
        Each occurrence of the word in ``words`` increases its popularity by one.
        """
        dictionary = cls()
        dictionary.train_words(words)
        return dictionary

    @classmethod
    def from_text(cls, text: str, tokenizer: Optional[Tokenizer] = None) -> FrequencyDictionary:
        """
        Splits raw text into words with the ``tokenizer`` (default :class:`Tokenizer
        <spellfix.algo.tokenize.Tokenizer>`) and counts them.
        """
        dictionary = cls()
        dictionary.train_text(text, tokenizer)
        return dictionary

    @classmethod
    def from_file(cls, path: str, encoding: str = 'utf-8') -> FrequencyDictionary:
        """
        Reads frequency list (``word count`` per line), see
        :meth:`read_frequencies <spellfix.readers.frequencies.read_frequencies>`.
        """
        from spellfix import readers   # pylint: disable=import-outside-toplevel

        return readers.read_frequencies(readers.FileReader(path, encoding=encoding))

    def train(self, word: str, count: int = 1) -> None:
        if count <= 0:
            raise ValueError(f'Training count should be positive, got {count} for {word!r}')
        if not word:
            return
        self.counts[word] += count

    def train_words(self, words: Iterable[str]) -> None:
        for word in words:
            self.train(word)

    def train_text(self, text: str, tokenizer: Optional[Tokenizer] = None) -> None:
        self.train_words((tokenizer or Tokenizer()).words(text))

    def popularity(self, word: str) -> int:
        return self.counts[word]

    def words(self) -> Iterator[str]:
        return iter(self.counts)

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        return self.counts.most_common(n)

    def __len__(self) -> int:
        return len(self.counts)

    def __repr__(self):
        return f'FrequencyDictionary({len(self)} words)'
