"""64-bit word helpers.

Python ints are unbounded, so every result is masked back to 64 bits.
"""

from __future__ import annotations

import struct

MASK64 = 0xFFFFFFFFFFFFFFFF

_WORDS16 = struct.Struct("<16Q")


def add64(*words: int) -> int:
    """Sum ``words`` modulo 2**64."""

    return sum(words) & MASK64


def rotr64(x: int, n: int) -> int:
    """Rotate the 64-bit word ``x`` right by ``n`` bits."""

    n %= 64
    if n == 0:
        return x & MASK64
    return ((x >> n) | (x << (64 - n))) & MASK64


def load64(data: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read one little-endian word at ``offset``."""

    if offset < 0 or offset + 8 > len(data):
        raise ValueError("load64 needs 8 bytes at offset")
    return int.from_bytes(bytes(data[offset : offset + 8]), "little")


def store64(word: int) -> bytes:
    """Serialize one word as 8 little-endian bytes."""

    return (word & MASK64).to_bytes(8, "little")


def block_words(block: bytes | bytearray | memoryview) -> tuple[int, ...]:
    """Split a 128-byte block into 16 little-endian words."""

    return _WORDS16.unpack(bytes(block))


def state_bytes(h: list[int]) -> bytes:
    """Serialize the 8 chained state words into 64 bytes."""

    return b"".join(store64(w) for w in h)
