"""
passgen.entropy
Sources of unbiased random integers in [0, n).

- SystemEntropySource: the default, backed by the OS CSPRNG via `secrets`.
- ReaderEntropySource: reads bytes from a binary stream. Meant for tests that
  need a fixed, reproducible stream instead of real randomness.

Both use rejection sampling; an index is never reduced with a modulo.
"""

import secrets
from typing import BinaryIO, Protocol, runtime_checkable
from .errors import EntropyError


@runtime_checkable
class EntropySource(Protocol):
    def randbelow(self, n: int) -> int:
        """Return a uniformly distributed integer in [0, n)."""
        ...


def _check_bound(n: int) -> None:
    if n < 1:
        raise ValueError("n must be positive")


class SystemEntropySource:
    """Cryptographically secure default. Safe to share between threads."""

    def randbelow(self, n: int) -> int:
        _check_bound(n)
        return secrets.randbelow(n)

    def __repr__(self) -> str:
        return "SystemEntropySource()"


class ReaderEntropySource:
    """
    Draw indices from the bytes of a binary stream.

    Bytes map to integers the same way Go's crypto/rand.Int does, so a stream
    produces the same indices here as it does there:

    - n == 1 returns 0 without reading anything.
    - Read ceil(bits / 8) bytes big-endian, where bits = (n - 1).bit_length(),
      and mask the first byte down to the excess bits.
    - Reject values >= n and read again.

    Not thread-safe.
    """

    def __init__(self, reader: BinaryIO):
        self._reader = reader

    def _read_exact(self, k: int) -> bytes:
        buf = b""
        while len(buf) < k:
            try:
                chunk = self._reader.read(k - len(buf))
            except OSError as e:
                raise EntropyError(f"error reading entropy: {e}") from e
            if not chunk:
                raise EntropyError(
                    f"entropy stream exhausted (wanted {k} bytes, got {len(buf)})"
                )
            buf += chunk
        return buf

    def randbelow(self, n: int) -> int:
        _check_bound(n)
        bits = (n - 1).bit_length()
        if bits == 0:
            return 0
        k = (bits + 7) // 8
        top = bits % 8 or 8
        while True:
            raw = bytearray(self._read_exact(k))
            raw[0] &= (1 << top) - 1
            value = int.from_bytes(raw, "big")
            if value < n:
                return value
