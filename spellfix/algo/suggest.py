"""
The "suggest several corrections for this misspelling" algorithm.

Unlike :mod:`correct <spellfix.algo.correct>`, which needs only the best candidate, suggestions
are a ranked list:

* all one-edit candidates that are known to the dictionary are ranked by popularity
* if there are less of them than requested, two-edit candidates are ranked the same way and
  appended after them (a two-edit candidate never outranks a one-edit one, however popular)

Ranking is a *stable* sort by popularity: of equally popular candidates, the one produced first
goes first. That's important (and not just an implementation detail), because dictionaries
might assign the same popularity to lots of words.

To follow algorithm details, start reading from :meth:`SuggestionRanker.__call__`

.. autoclass:: SuggestionRanker
    :members:

.. autoclass:: Suggestion
"""

import logging
import time

from dataclasses import dataclass
from typing import Iterable, List, Set

from spellfix.data import Alphabet, Dictionary
from spellfix.errors import ConfigurationError
from spellfix.algo.deadline import Clock, Deadline
from spellfix.algo.edits import generate_edits


LOGGER = logging.getLogger(__name__)


@dataclass
class Suggestion:
    """
    Known candidate with its popularity, used while ranking.
    """

    text: str
    popularity: int

    def __repr__(self):
        return f"Suggestion[{self.popularity}]({self.text})"


class SuggestionRanker:
    """
    ``SuggestionRanker`` is created by :class:`SpellChecker <spellfix.SpellChecker>`, and is exposed
    as its ``suggester`` attribute for experimenting::

        >>> dictionary = FrequencyDictionary([('hello', 50), ('help', 30), ('held', 10)])
        >>> checker = SpellChecker(dictionary, ENGLISH)
        >>> checker.suggester('helo', 3, timeout=1000)
        ['hello', 'help', 'held']

        >>> checker.suggester.rank(['held', 'hello', 'help', 'hello'])
        [Suggestion[50](hello), Suggestion[50](hello), Suggestion[30](help), Suggestion[10](held)]

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

    def __call__(self, word: str, max: int, timeout: int) -> List[str]:   # pylint: disable=redefined-builtin
        """
        Up to ``max`` known words, most popular first, without duplicates. Might return less (or
        none) if there are not enough known candidates, or time is out.

        Note that the search for two-edit candidates is started even when the deadline is already
        expired: the edit generation itself stops early then, so the result is just the best effort
        with what was generated.

        Args:
            word: Misspelled word
            max: Maximum number of suggestions
            timeout: Time budget, milliseconds
        """

        if max <= 0:
            return []

        deadline = Deadline.after(timeout, clock=self.clock)

        first_edits = generate_edits(word, self.alphabet, deadline)
        result = self.unique(suggestion.text for suggestion in self.rank(first_edits))

        if len(result) >= max:
            return result[:max]

        # This set gathers all two-edit candidates already looked at: edits of different one-edit
        # candidates repeat each other a lot, and there is no need to rank them twice
        seen: Set[str] = set(result)
        second_edits: List[str] = []
        for edit in first_edits:
            for candidate in generate_edits(edit, self.alphabet, deadline):
                if candidate not in seen:
                    seen.add(candidate)
                    second_edits.append(candidate)

        if deadline.expired():
            LOGGER.debug('Suggestions for %r: deadline expired, %d two-edit candidates ranked',
                         word, len(second_edits))

        for suggestion in self.rank(second_edits):
            result.append(suggestion.text)
            if len(result) >= max:
                break

        return result[:max]

    def rank(self, candidates: Iterable[str]) -> List[Suggestion]:
        """
        Known candidates (popularity above zero), sorted by popularity from most to least popular.
        The sort is stable: equally popular candidates keep the order they were produced in.
        Duplicates are not removed.
        """
        suggestions = []
        for candidate in candidates:
            popularity = self.dictionary.popularity(candidate)
            if popularity > 0:
                suggestions.append(Suggestion(candidate, popularity))

        # list.sort is guaranteed to be stable, including with reverse=True
        suggestions.sort(key=lambda suggestion: suggestion.popularity, reverse=True)
        return suggestions

    @staticmethod
    def unique(words: Iterable[str]) -> List[str]:
        """Drops repeated words, preserving the order of first appearance."""
        return list(dict.fromkeys(words))
