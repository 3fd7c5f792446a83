"""
Correcting running text word by word.

.. autoclass:: TextCorrector
    :members:
"""

from spellfix.algo.correct import CorrectionEngine
from spellfix.algo.tokenize import Tokenizer


class TextCorrector:
    """
    Splits the text into tokens with :class:`Tokenizer <spellfix.algo.tokenize.Tokenizer>`, corrects
    every word with :class:`CorrectionEngine <spellfix.algo.correct.CorrectionEngine>`, and glues
    the text back::

        >>> checker.text_corrector('Helo, wrold!', timeout=500)
        'Hello, world!'

    Words are looked up normalized (lowercased by the tokenizer's casing), and corrections are given
    the capitalization of the original word. Everything that is not a word (spaces, punctuation,
    numbers) is kept as is.
    """

    def __init__(self, corrector: CorrectionEngine, tokenizer: Tokenizer):
        self.corrector = corrector
        self.tokenizer = tokenizer

    def __call__(self, text: str, timeout: int) -> str:
        """
        Args:
            text: Text to correct
            timeout: Time budget for *each* word, milliseconds
        """
        return ''.join(
            self.correct_token(token.text, timeout) if token.is_word else token.text
            for token in self.tokenizer.tokens(text)
        )

    def correct_token(self, word: str, timeout: int) -> str:
        # Dictionary might have capitalized entries ("Paris"): those are correct exactly as typed
        if self.corrector.is_known(word):
            return word

        normalized = self.tokenizer.normalize(word)
        correction = self.corrector(normalized, timeout)
        if correction == normalized:
            return word

        casing = self.tokenizer.casing
        return casing.coerce(correction, casing.guess(word))
