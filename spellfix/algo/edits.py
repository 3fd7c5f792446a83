"""
Producing all words that are one "edit" away from the given one.

For each character position of the word (Python strings are indexed by code points, so
multi-byte characters are one position), in this order:

* deletion of the character: "cat" => "at"
* transposition with the next character: "cat" => "act"
* for each character of the alphabet, in alphabet order:

  * substitution of the character: "cat" => "bat"
  * insertion before the character: "cat" => "bcat"

Notes on the result:

* it is not deduplicated ("hello" produces "helo" by deleting either "l")
* transposition at the last position has no next character to swap with, so it produces the word
  itself
* insertion *after* the last character is never produced ("cat" => "cats" is not one edit away);
  that's a known limitation of the algorithm, kept as is for compatibility of results
* after each position, the deadline is checked, and if it is expired, generation stops

.. autoclass:: Edit

.. autofunction:: edits
.. autofunction:: generate_edits
"""

import logging

from typing import Iterator, List, Optional

from dataclasses import dataclass

from spellfix.data.alphabet import Alphabet
from spellfix.algo.deadline import Deadline


LOGGER = logging.getLogger(__name__)


@dataclass
class Edit:
    """
    One candidate produced by :func:`edits`.
    """

    #: Resulting word
    text: str
    #: How it was produced: "deletion", "transposition", "substitution" or "insertion"
    kind: str

    def __repr__(self):
        return f"Edit[{self.kind}]({self.text})"


def edits(word: str, alphabet: Alphabet, deadline: Optional[Deadline] = None) -> Iterator[Edit]:
    """
    Lazily produces all one-edit candidates of the word, see module docs for the order.

    Args:
        word: Word to mutate
        alphabet: Characters to substitute and insert
        deadline: When expired, generation stops after the current position
    """

    for i, char in enumerate(word):
        before = word[:i]
        after = word[i+1:]

        yield Edit(before + after, 'deletion')
        yield Edit(before + after[:1] + char + after[1:], 'transposition')

        for c in alphabet:
            yield Edit(before + c + after, 'substitution')
            yield Edit(before + c + char + after, 'insertion')

        if deadline is not None and deadline.expired():
            if i < len(word) - 1:
                LOGGER.debug('Edits of %r: deadline expired after position %d of %d', word, i + 1, len(word))
            return


def generate_edits(word: str, alphabet: Alphabet, deadline: Optional[Deadline] = None) -> List[str]:
    """
    All one-edit candidates as a list of strings (with duplicates, in generation order)::

        >>> len(generate_edits('cat', Alphabet(ENGLISH)))
        162
    """
    return [edit.text for edit in edits(word, alphabet, deadline)]
