from .alphabet import Alphabet, ENGLISH
from .dictionary import Dictionary, FrequencyDictionary

__all__ = [
    "Alphabet",
    "ENGLISH",
    "Dictionary",
    "FrequencyDictionary"
]
