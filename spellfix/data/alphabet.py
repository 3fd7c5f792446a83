"""
Set of characters used to produce substitution and insertion edits.

.. autoclass:: Alphabet
    :members:

.. autodata:: ENGLISH
"""

from typing import Iterator, Optional

from spellfix.errors import ConfigurationError


#: Lowercase latin letters, the most common alphabet for English dictionaries
ENGLISH = 'abcdefghijklmnopqrstuvwxyz'


class Alphabet:
    """
    Deduplicated characters of the string passed on construction. The order of characters is the
    order of their first appearance, and that's the order edits are produced in::

        >>> list(Alphabet('abca'))
        ['a', 'b', 'c']

    Empty alphabet is allowed: it just means no substitutions or insertions would be tried.
    ``None`` is not allowed.
    """

    def __init__(self, chars: Optional[str]):
        if chars is None:
            raise ConfigurationError('alphabet is required')

        self._chars = tuple(dict.fromkeys(chars))
        self._set = frozenset(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __contains__(self, char) -> bool:
        return char in self._set

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._set == other._set

    def __hash__(self):
        return hash(self._set)

    def __repr__(self):
        return f"Alphabet({''.join(self._chars)!r})"
