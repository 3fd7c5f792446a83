from .file_reader import FileReader
from .frequencies import read_frequencies

__all__ = [
    "FileReader",
    "read_frequencies"
]
