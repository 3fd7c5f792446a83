"""
Reading frequency lists into :class:`FrequencyDictionary <spellfix.data.dictionary.FrequencyDictionary>`.

The format is plain text, one word per line:

.. code-block:: text

    # comments start with "#"
    the 23135851162
    of 13151942776
    spellfix

Each line is a word, optionally followed by its count (whitespace-separated). Word without count
is counted once; the same word on several lines is counted several times.

.. autofunction:: read_frequencies
"""

import logging
import re

from spellfix.data.dictionary import FrequencyDictionary
from spellfix.errors import DictionaryFormatError
from spellfix.readers.file_reader import FileReader


LOGGER = logging.getLogger(__name__)

SPACES_REGEXP = re.compile(r'\s+')


def read_frequencies(source: FileReader) -> FrequencyDictionary:
    """
    Reads source and creates dictionary from it.

    Args:
        source: "Reader" (thin wrapper around opened file, targeting line-by-line reading);
                closed after reading, even if reading fails

    Raises:
        DictionaryFormatError: if the count is not a number
    """
    result = FrequencyDictionary()

    with source:
        for num, line in source:
            if line.startswith('#'):
                continue

            word, *rest = SPACES_REGEXP.split(line, maxsplit=1)

            if rest:
                try:
                    count = int(rest[0])
                except ValueError:
                    raise DictionaryFormatError(f"Can't parse count {rest[0]!r} of {word!r}", num) from None
            else:
                count = 1

            if count <= 0:
                LOGGER.warning('Skipping %r with non-positive count %d (line %d)', word, count, num)
                continue

            result.train(word, count)

    LOGGER.debug('Read %d words from %s', len(result), source.path or 'IO')

    return result
