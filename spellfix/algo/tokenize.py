"""
Splitting text into words. Used twice: when dictionary is trained from raw text
(:meth:`Tokenizer.words`), and when the text is corrected word-by-word (:meth:`Tokenizer.tokens`).

.. autoclass:: Token
.. autoclass:: Tokenizer
    :members:

.. autodata:: WORD_REGEXP
"""

import re

from dataclasses import dataclass, field
from typing import Iterator, Pattern

from spellfix.algo.capitalization import Casing


#: Runs of letters (any script, no digits or underscores), possibly with inner apostrophes: "don't"
WORD_REGEXP = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")


@dataclass
class Token:
    """
    Piece of the text: either a word, or whatever is between words (spaces, punctuation, numbers).
    """

    #: Token text, exactly as in source
    text: str
    #: Whether it is a word that should be spellchecked
    is_word: bool


@dataclass
class Tokenizer:
    """
    Tokenization policy: what is a word (``pattern``), and how it is normalized before looking up
    in dictionary (``casing``)::

        >>> [*Tokenizer().tokens("Helo, wrold!")]
        [Token(text='Helo', is_word=True), Token(text=', ', is_word=False),
         Token(text='wrold', is_word=True), Token(text='!', is_word=False)]

        >>> [*Tokenizer().words("Helo, wrold!")]
        ['helo', 'wrold']
    """

    pattern: Pattern = WORD_REGEXP
    casing: Casing = field(default_factory=Casing)

    def tokens(self, text: str) -> Iterator[Token]:
        """
        Covers the whole text with tokens, so ``''.join(t.text for t in tokens(text)) == text``.
        """
        pos = 0
        for match in self.pattern.finditer(text):
            if match.start() > pos:
                yield Token(text[pos:match.start()], is_word=False)
            if match.end() > match.start():
                yield Token(match.group(), is_word=True)
            pos = match.end()

        if pos < len(text):
            yield Token(text[pos:], is_word=False)

    def words(self, text: str) -> Iterator[str]:
        """
        Normalized words of the text, in order, with repetitions.
        """
        return (self.normalize(token.text) for token in self.tokens(text) if token.is_word)

    def normalize(self, word: str) -> str:
        return self.casing.lower(word)

