"""
Errors raised by spellfix.

Note that "no correction found" and "ran out of time" are *not* errors: correction methods just
return the word unchanged (or a shorter list of suggestions) in those cases. Errors are raised
only when the checker can't be built at all, or when dictionary data can't be read.

.. autoclass:: SpellfixError
.. autoclass:: ConfigurationError
.. autoclass:: DictionaryFormatError
"""


class SpellfixError(Exception):
    """Base class for all spellfix errors."""


class ConfigurationError(SpellfixError, ValueError):
    """
    Checker (or one of its parts) was constructed with missing mandatory arguments, like
    ``SpellChecker(None, 'abc')``.
    """


class DictionaryFormatError(SpellfixError, ValueError):
    """
    Frequency list can't be parsed. Carries the line number (1-based) of the offending line.
    """

    def __init__(self, message: str, line_no: int):
        super().__init__(f'{message} (line {line_no})')
        self.line_no = line_no
