"""
Casing policy used when correcting running text: words are looked up in lowercase, and the
correction is given back the capitalization the user typed.

.. autoclass:: Type

.. autoclass:: Casing
    :members:

.. autoclass:: TurkicCasing
"""

from enum import Enum


Type = Enum('Type', 'NO INIT ALL HUHINIT HUH')
"""
Type of capitalization, detected by :meth:`Casing.guess`:

* ``NO``: all lowercase ("foo"), also words without cased letters at all
* ``INIT``: titlecase, only initial letter is capitalized ("Foo")
* ``ALL``: all uppercase ("FOO")
* ``HUH``: mixed capitalization ("fooBar")
* ``HUHINIT``: mixed capitalization, first letter is capitalized ("FooBar")
"""


class Casing:
    """
    Casing algorithms for the dictionary's language. It is a class, not a set of functions, because
    some languages need only some aspects redefined (see :class:`TurkicCasing`).
    """

    def guess(self, word: str) -> Type:     # pylint: disable=no-self-use
        """
        Guess word's capitalization.
        """

        if word.islower() or not any(c.isupper() for c in word):
            return Type.NO
        if word.isupper():
            return Type.ALL
        if word[:1].isupper():
            return Type.INIT if word[1:].islower() or len(word) == 1 else Type.HUHINIT
        return Type.HUH

    def lower(self, word: str) -> str:  # pylint: disable=no-self-use
        """
        Lowercases the word (that's how words are expected to be stored in dictionary).

        Args:
            word:
        """

        # turkic "lowercase dot i" to latinic "i", just in case
        return word.lower().replace('i̇', 'i')

    def upper(self, word: str) -> str:   # pylint: disable=no-self-use
        """
        Uppercase the word.

        Args:
            word:
        """
        return word.upper()

    def coerce(self, word: str, cap: Type) -> str:
        """
        By the correction found (in dictionary's lowercase) and the misspelled word's capitalization,
        produce the proper capitalization of correction. E.g. if the misspelling was "Wrold" (INIT
        capitalization), and the correction is "world", this method makes it "World".

        Mixed capitalizations (``HUH``) are left as they are in the dictionary: there is no way to
        guess where the user wanted the capitals to be in a different word.
        """
        if not word:
            return word
        if cap in (Type.INIT, Type.HUHINIT):
            return self.upper(word[0]) + word[1:]
        if cap == Type.ALL:
            return self.upper(word)
        return word


class TurkicCasing(Casing):
    """
    Redefines :meth:`Casing.upper` and :meth:`Casing.lower`, because in Turkic languages lowercase
    "i" is uppercased as "İ", and uppercase "I" is downcased as "ı"::

        >>> turkic = TurkicCasing()
        >>> turkic.lower('Izmir')
        'ızmir'
        >>> turkic.upper('Izmir')
        'IZMİR'

    """

    U2L = str.maketrans('İI', 'iı')
    L2U = str.maketrans('iı', 'İI')

    def lower(self, word):
        return super().lower(word.translate(self.U2L))

    def upper(self, word):
        return super().upper(word.translate(self.L2U))
