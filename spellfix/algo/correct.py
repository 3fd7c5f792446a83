"""
The "give me the single best correction" algorithm.

On a bird-eye view level:

* if the word is known to dictionary, it is returned as is
* otherwise, all one-edit candidates (see :mod:`edits <spellfix.algo.edits>`) are checked against
  dictionary, and the most popular one wins
* only if no one-edit candidate is known, two-edit candidates (edits of edits) are checked the same
  way
* if nothing is known, or the time is out, the word is returned unchanged

To follow algorithm details, start reading from :meth:`CorrectionEngine.__call__`

.. autoclass:: CorrectionEngine
    :members:
"""

import logging
import time

from typing import Iterable, Optional, Tuple

from spellfix.data import Alphabet, Dictionary
from spellfix.errors import ConfigurationError
from spellfix.algo.deadline import Clock, Deadline
from spellfix.algo.edits import generate_edits


LOGGER = logging.getLogger(__name__)


class CorrectionEngine:
    """
    ``CorrectionEngine`` is created by :class:`SpellChecker <spellfix.SpellChecker>`. Typically, you
    would not use it directly, but you might want for experiments::

        >>> checker = SpellChecker(FrequencyDictionary.from_words(['world']), ENGLISH)
        >>> checker.corrector('wrold', timeout=500)
        'world'

    Args:
        dictionary: Source of word popularity
        alphabet: Characters for substitution and insertion edits
        clock: Time source for deadlines, in seconds (redefined in tests)
    """

    def __init__(self, dictionary: Dictionary, alphabet: Alphabet, *, clock: Clock = time.monotonic):
        if dictionary is None:
            raise ConfigurationError('dictionary is required')
        if alphabet is None:
            raise ConfigurationError('alphabet is required')

        self.dictionary = dictionary
        self.alphabet = alphabet
        self.clock = clock

    def __call__(self, word: str, timeout: int) -> str:
        """
        Returns the most popular known word among one-edit candidates, or (if there are none) among
        two-edit candidates. Ties are resolved in favor of the candidate produced first.

        Never raises on "nothing found" or "time is out": the unchanged word is returned then.

        Args:
            word: Word to correct
            timeout: Time budget, milliseconds
        """

        if self.is_known(word):
            return word

        deadline = Deadline.after(timeout, clock=self.clock)

        first_edits = generate_edits(word, self.alphabet, deadline)
        candidate, popularity = self.best(first_edits)

        # Any known one-edit candidate is better than any two-edit one
        if popularity > 0:
            return candidate

        if deadline.expired():
            LOGGER.debug('Correction of %r: deadline expired after %d one-edit candidates', word, len(first_edits))
            return word

        candidate, popularity = None, 0
        for idx, edit in enumerate(first_edits):
            if deadline.expired():
                LOGGER.debug('Correction of %r: deadline expired after %d of %d two-edit batches',
                             word, idx, len(first_edits))
                break

            second_candidate, second_popularity = self.best(generate_edits(edit, self.alphabet, deadline))
            if second_popularity > popularity:
                candidate, popularity = second_candidate, second_popularity

        return candidate if popularity > 0 else word

    def is_known(self, word: str) -> bool:
        return self.dictionary.exists(word) or self.dictionary.popularity(word) > 0

    def best(self, candidates: Iterable[str]) -> Tuple[Optional[str], int]:
        """
        The most popular of candidates (the first one of equally popular), and its popularity.
        ``(None, 0)`` if none of them is known.
        """
        best_candidate, best_popularity = None, 0
        for candidate in candidates:
            popularity = self.dictionary.popularity(candidate)
            if popularity > best_popularity:
                best_candidate, best_popularity = candidate, popularity

        return best_candidate, best_popularity
