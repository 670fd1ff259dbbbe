"""
passgen
Random password generation over uppercase, lowercase, digit and symbol classes.
"""

from .charsets import CHARACTER_CLASSES, CharacterClass, DIGITS, LOWERCASE, SYMBOLS, UPPERCASE
from .entropy import EntropySource, ReaderEntropySource, SystemEntropySource
from .errors import ConfigError, EntropyError, InvalidLengthError, NoCategoriesError, PassgenError
from .generator import GenerationRequest, Generator, generate, must_generate

__version__ = "1.0.0"

__all__ = [
    "CHARACTER_CLASSES",
    "CharacterClass",
    "UPPERCASE",
    "LOWERCASE",
    "DIGITS",
    "SYMBOLS",
    "EntropySource",
    "ReaderEntropySource",
    "SystemEntropySource",
    "PassgenError",
    "InvalidLengthError",
    "NoCategoriesError",
    "EntropyError",
    "ConfigError",
    "GenerationRequest",
    "Generator",
    "generate",
    "must_generate",
]
