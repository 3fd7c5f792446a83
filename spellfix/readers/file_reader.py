"""
.. autoclass:: FileReader
"""

import io

from typing import Iterator, Tuple, Union


class FileReader:
    """
    Very thin wrapper around file (or already opened ``IO``-alike object), to read it line by line and:

    * strip lines transparently
    * skip empty lines
    * ignore BOM (byte-order mark) at the beginning
    * yield line with its number (1-based)

    ::

        with FileReader('words.txt') as reader:
            for line_no, line in reader:
                ...

    File opened by the reader itself is closed when it is read to the end, or on leaving the
    ``with`` block; IO objects passed from outside are never closed.

    Args:
        source: Path to file, or text IO (like ``io.StringIO``)
        encoding: Encoding to open the path with, ignored for IO objects
    """

    def __init__(self, source: Union[str, io.TextIOBase], encoding: str = 'utf-8'):
        if isinstance(source, str):
            self.path = source
            self.io = self._open(source, encoding)
        elif hasattr(source, 'readline'):
            self.path = None
            self.io = source
        else:
            raise ValueError(f"Expected path or IO, got {type(source)}")

        self.line_no = 0
        self.iter = filter(lambda l: l[1] != '', self.readlines())

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self.path is not None:
            self.io.close()

    def __iter__(self):
        return self

    def __next__(self) -> Tuple[int, str]:
        return self.iter.__next__()

    def readlines(self) -> Iterator[Tuple[int, str]]:
        ln = self.io.readline()
        while ln != '':
            self.line_no += 1
            if self.line_no == 1 and ln.startswith('\ufeff'):
                ln = ln[1:]
            yield (self.line_no, ln.strip())
            ln = self.io.readline()

        self.close()

    def _open(self, path, encoding):  # pylint: disable=no-self-use
        return open(path, 'r', encoding=encoding)
