"""
passgen.generator
Secure password generator with pluggable entropy.

Generation is class-balanced: for every position a character class is picked
uniformly among the enabled classes, then a character uniformly within that
class. Each enabled class therefore contributes about 1/k of the characters,
whatever its size (digits are as frequent as symbols). Characters are emitted
in draw order, no shuffling.
"""

import io
from dataclasses import dataclass
from typing import Optional, Tuple

from .charsets import CHARACTER_CLASSES, CharacterClass, DIGITS, LOWERCASE, SYMBOLS, UPPERCASE
from .entropy import EntropySource, ReaderEntropySource, SystemEntropySource
from .errors import ConfigError, EntropyError, InvalidLengthError, NoCategoriesError, PassgenError


@dataclass(frozen=True)
class GenerationRequest:
    """
    Input to one generation call. Every field is required so the enabled
    classes are always spelled out by the caller.
    """

    length: int
    include_uppercase: bool
    include_lowercase: bool
    include_digits: bool
    include_symbols: bool

    @classmethod
    def all_classes(cls, length: int) -> "GenerationRequest":
        return cls(
            length=length,
            include_uppercase=True,
            include_lowercase=True,
            include_digits=True,
            include_symbols=True,
        )

    def enabled_classes(self) -> Tuple[CharacterClass, ...]:
        flags = {
            UPPERCASE: self.include_uppercase,
            LOWERCASE: self.include_lowercase,
            DIGITS: self.include_digits,
            SYMBOLS: self.include_symbols,
        }
        return tuple(c for c in CHARACTER_CLASSES if flags[c] and len(c) > 0)


class Generator:
    """Password generator bound to one entropy source for its lifetime."""

    def __init__(self, source: Optional[EntropySource] = None):
        if source is None:
            source = SystemEntropySource()
        elif not callable(getattr(source, "randbelow", None)):
            raise ConfigError(f"entropy source {source!r} has no randbelow(n) method")
        self._source = source

    @classmethod
    def from_reader(cls, reader) -> "Generator":
        """
        Build a generator that draws from a binary stream, e.g.
        Generator.from_reader(io.BytesIO(b"...")) for reproducible output.
        """
        if reader is None or not callable(getattr(reader, "read", None)):
            raise ConfigError("reader must be a binary stream with a read() method")
        if isinstance(reader, io.TextIOBase):
            raise ConfigError(f"reader {reader!r} is a text stream, expected binary")
        # a zero-length read consumes nothing but shows what the stream yields
        try:
            sample = reader.read(0)
        except (OSError, ValueError) as e:
            raise ConfigError(f"reader is not readable: {e}") from e
        if not isinstance(sample, (bytes, bytearray)):
            raise ConfigError(
                f"reader must yield bytes, got {type(sample).__name__}"
            )
        return cls(ReaderEntropySource(reader))

    @property
    def source(self) -> EntropySource:
        return self._source

    def _draw(self, n: int) -> int:
        try:
            return self._source.randbelow(n)
        except EntropyError:
            raise
        except Exception as e:
            raise EntropyError(f"error selecting character: {e}") from e

    def generate(self, request: GenerationRequest) -> str:
        """
        Return a random password for `request`.

        Raises InvalidLengthError, NoCategoriesError (both before any entropy
        is consumed) or EntropyError.
        """
        if request.length < 1:
            raise InvalidLengthError(request.length)

        classes = request.enabled_classes()
        if not classes:
            raise NoCategoriesError()

        password_chars = []
        for _ in range(request.length):
            chosen = classes[self._draw(len(classes))]
            password_chars.append(chosen[self._draw(len(chosen))])
        return "".join(password_chars)

    def __repr__(self) -> str:
        return f"Generator(source={self._source!r})"


def generate(request: GenerationRequest, source: Optional[EntropySource] = None) -> str:
    """One-shot generation with a fresh Generator."""
    return Generator(source).generate(request)


def must_generate(request: GenerationRequest, source: Optional[EntropySource] = None) -> str:
    """
    Like generate(), but any passgen error aborts with SystemExit.
    Only for scripts and tests where the request is known to be valid.
    """
    try:
        return generate(request, source)
    except PassgenError as e:
        raise SystemExit(f"passgen: {e}") from e
