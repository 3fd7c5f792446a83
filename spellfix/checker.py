from __future__ import annotations

import time

from typing import List, Optional

from spellfix.data import Alphabet, Dictionary, FrequencyDictionary, ENGLISH
from spellfix.errors import ConfigurationError
from spellfix.algo.correct import CorrectionEngine
from spellfix.algo.deadline import Clock
from spellfix.algo.suggest import SuggestionRanker
from spellfix.algo.text import TextCorrector
from spellfix.algo.tokenize import Tokenizer


DEFAULT_CORRECT_TIMEOUT = 500
DEFAULT_SUGGEST_TIMEOUT = 1000
DEFAULT_MAX_SUGGESTIONS = 3


class SpellChecker:
    """
    The main interface to ``spellfix`` as a library.

    Usage::

        from spellfix import SpellChecker, FrequencyDictionary

        # from frequency list file, "word count" per line
        checker = SpellChecker.from_file('/path/to/frequencies.txt')
        # or, from raw text
        checker = SpellChecker.from_text(open('/path/to/corpus.txt').read())
        # or, from any dictionary and alphabet
        checker = SpellChecker(FrequencyDictionary([('hello', 50), ('help', 30)]), 'abcdefghijklmnopqrstuvwxyz')

        print(checker.correct_word('helo'))
        # hello
        print(checker.suggest_words('helo', max=2))
        # ['hello', 'help']
        print(checker.correct_text('Helo, wrold!'))
        # Hello, world!

    All correction methods are bounded by a timeout (milliseconds): when it is out, they return
    the best result found so far. No method raises if nothing is found: ``correct_word`` returns the
    word unchanged, and ``suggest_words`` returns a shorter list (or empty).

    Internal algorithm implementations :attr:`corrector`, :attr:`suggester` and :attr:`text_corrector`
    are exposed in order to allow experimenting with the implementation.

    **Checker creation**

    .. automethod:: from_file
    .. automethod:: from_text

    **Checker usage**

    .. automethod:: correct_word
    .. automethod:: correct_text
    .. automethod:: suggest_words

    **Algorithms**

    .. autoattribute:: corrector
    .. autoattribute:: suggester
    .. autoattribute:: text_corrector

    Args:
        dictionary: Any :class:`Dictionary <spellfix.data.dictionary.Dictionary>` implementation
        alphabet: String of characters to try substituting and inserting; deduplicated
        tokenizer: Tokenization policy for :meth:`correct_text`
        clock: Time source for deadlines, in seconds

    Raises:
        ConfigurationError: if dictionary or alphabet is missing
    """

    #: Instance of ``CorrectionEngine``, see :mod:`algo.correct <spellfix.algo.correct>`.
    corrector: CorrectionEngine
    #: Instance of ``SuggestionRanker``, see :mod:`algo.suggest <spellfix.algo.suggest>`.
    suggester: SuggestionRanker
    #: Instance of ``TextCorrector``, see :mod:`algo.text <spellfix.algo.text>`.
    text_corrector: TextCorrector

    @classmethod
    def from_file(cls, path: str, alphabet: str = ENGLISH, *, encoding: str = 'utf-8') -> SpellChecker:
        """
        Read dictionary from frequency list file, see :mod:`readers.frequencies <spellfix.readers.frequencies>`
        for the format.

        Args:
            path: Path to the file
            alphabet: Characters to try on substitution/insertion
        """
        return cls(FrequencyDictionary.from_file(path, encoding=encoding), alphabet)

    @classmethod
    def from_text(cls, text: str, alphabet: str = ENGLISH, *,
                  tokenizer: Optional[Tokenizer] = None) -> SpellChecker:
        """
        Train dictionary on raw text: every word's popularity is the number of its occurrences.

        Args:
            text: Corpus
            alphabet: Characters to try on substitution/insertion
            tokenizer: Defines what is a word, used both for training and for :meth:`correct_text`
        """
        return cls(FrequencyDictionary.from_text(text, tokenizer), alphabet, tokenizer=tokenizer)

    def __init__(self, dictionary: Dictionary, alphabet: str, *,
                 tokenizer: Optional[Tokenizer] = None, clock: Clock = time.monotonic):
        if dictionary is None:
            raise ConfigurationError('dictionary is required')

        self.dictionary = dictionary
        self.alphabet = Alphabet(alphabet)
        self.tokenizer = tokenizer or Tokenizer()

        self.corrector = CorrectionEngine(self.dictionary, self.alphabet, clock=clock)
        self.suggester = SuggestionRanker(self.dictionary, self.alphabet, clock=clock)
        self.text_corrector = TextCorrector(self.corrector, self.tokenizer)

    def correct_word(self, word: str, timeout: int = DEFAULT_CORRECT_TIMEOUT) -> str:
        """
        The most probable correction of the word (or the word itself, if it is correct, or nothing
        better was found in time).

        ::

            >>> checker.correct_word('wrold')
            'world'
            >>> checker.correct_word('world')
            'world'
            >>> checker.correct_word('xyzzy')
            'xyzzy'

        Args:
            word: Word to correct
            timeout: Time budget, milliseconds
        """
        return self.corrector(word, timeout)

    def correct_text(self, text: str, timeout: int = DEFAULT_CORRECT_TIMEOUT) -> str:
        """
        Corrects each word of the text, keeping everything else intact.

        ::

            >>> checker.correct_text('Helo, wrold!')
            'Hello, world!'

        Args:
            text: Text to correct
            timeout: Time budget for each word, milliseconds
        """
        return self.text_corrector(text, timeout)

    def suggest_words(self, word: str, max: int = DEFAULT_MAX_SUGGESTIONS,  # pylint: disable=redefined-builtin
                      timeout: int = DEFAULT_SUGGEST_TIMEOUT) -> List[str]:
        """
        Up to ``max`` suggestions for the word, most popular first.

        ::

            >>> checker.suggest_words('helo', max=3)
            ['hello', 'help', 'held']

        Args:
            word: Misspelled word
            max: Maximum number of suggestions
            timeout: Time budget, milliseconds
        """
        return self.suggester(word, max, timeout)
