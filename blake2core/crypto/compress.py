"""BLAKE2b compression function F.

``compress`` folds one 128-byte block into the chained state. It is a pure
state transform and never raises for well-formed arguments.
"""

from __future__ import annotations

from collections.abc import Sequence

from .constants import BLOCKBYTES, IV, ROUNDS, SIGMA
from .words import add64, block_words, rotr64

# Four column steps followed by four diagonal steps.
_LANES: tuple[tuple[int, int, int, int], ...] = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


def mix(v: list[int], a: int, b: int, c: int, d: int, x: int, y: int) -> None:
    """The G mixing function, applied to ``v`` in place.

    Rotation amounts are 32, 24, 16 and 63.
    """

    v[a] = add64(v[a], v[b], x)
    v[d] = rotr64(v[d] ^ v[a], 32)
    v[c] = add64(v[c], v[d])
    v[b] = rotr64(v[b] ^ v[c], 24)
    v[a] = add64(v[a], v[b], y)
    v[d] = rotr64(v[d] ^ v[a], 16)
    v[c] = add64(v[c], v[d])
    v[b] = rotr64(v[b] ^ v[c], 63)


def compress(
    h: list[int],
    block: bytes | bytearray | memoryview,
    t: Sequence[int],
    f: Sequence[int],
) -> None:
    """Compress ``block`` into the state words ``h`` (mutated in place).

    Args:
        h: Eight chained state words.
        block: Exactly 128 bytes of message data.
        t: Byte counter as ``(low, high)`` words.
        f: Finalization flags as ``(last_block, last_node)`` words.
    """

    if len(block) != BLOCKBYTES:
        raise ValueError("compress expects a 128-byte block")

    m = block_words(block)

    v = list(h) + list(IV[:4])
    v.append(t[0] ^ IV[4])
    v.append(t[1] ^ IV[5])
    v.append(f[0] ^ IV[6])
    v.append(f[1] ^ IV[7])

    for r in range(ROUNDS):
        s = SIGMA[r]
        for i, (a, b, c, d) in enumerate(_LANES):
            mix(v, a, b, c, d, m[s[2 * i]], m[s[2 * i + 1]])

    for i in range(8):
        h[i] ^= v[i] ^ v[i + 8]
