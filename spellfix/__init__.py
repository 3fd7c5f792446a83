from .checker import SpellChecker
from .data import Alphabet, Dictionary, FrequencyDictionary, ENGLISH
from .errors import SpellfixError, ConfigurationError, DictionaryFormatError

__all__ = [
    "SpellChecker",
    "Alphabet",
    "Dictionary",
    "FrequencyDictionary",
    "ENGLISH",
    "SpellfixError",
    "ConfigurationError",
    "DictionaryFormatError"
]
