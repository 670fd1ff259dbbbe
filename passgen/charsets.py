"""
passgen.charsets
The four fixed character classes a password can draw from.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CharacterClass:
    name: str
    characters: str

    def __len__(self) -> int:
        return len(self.characters)

    def __contains__(self, ch: str) -> bool:
        return ch in self.characters

    def __getitem__(self, index: int) -> str:
        return self.characters[index]


UPPERCASE = CharacterClass("uppercase", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
LOWERCASE = CharacterClass("lowercase", "abcdefghijklmnopqrstuvwxyz")
DIGITS = CharacterClass("digits", "0123456789")
# no backtick: 31 characters
SYMBOLS = CharacterClass("symbols", r"""!"#$%&'()*+,-./:;<=>?@[\]^_{|}~""")

# canonical order; class-balanced selection indexes into this
CHARACTER_CLASSES: Tuple[CharacterClass, ...] = (UPPERCASE, LOWERCASE, DIGITS, SYMBOLS)
