"""Incremental BLAKE2b hashing sessions.

A :class:`Blake2bContext` is created by :func:`create_context`, fed any number
of byte strings through :func:`update` and consumed by :func:`finalize`::

    ctx = create_context(32)
    update(ctx, b"Hello, ")
    update(ctx, b"world!")
    digest = finalize(ctx)

The last block of input is always kept in the buffer until :func:`finalize`,
because only finalization knows which block is final and must raise the
finalization flag before compressing it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .compress import compress
from .constants import BLOCKBYTES, IV, KEYBYTES, OUTBYTES
from .errors import ContextFinalizedError, InvalidParameter
from .words import MASK64, load64, state_bytes

_FANOUT = 1
_DEPTH = 1


@dataclass(slots=True)
class Blake2bContext:
    """Mutable state of one hash computation.

    Args:
        h: Eight chained state words.
        t: Input byte counter as ``[low, high]``.
        f: Finalization flags; ``f[0]`` is all-ones for the last block,
            ``f[1]`` (last node) stays zero outside tree mode.
        buffer: One block of not-yet-compressed input.
        buflen: Number of valid bytes in ``buffer``.
        digest_length: Output size in bytes.
        key_length: Size of the key folded into the first block.
        finalized: Set once :func:`finalize` has run.
    """

    digest_length: int
    key_length: int = 0
    h: list[int] = field(default_factory=lambda: list(IV))
    t: list[int] = field(default_factory=lambda: [0, 0])
    f: list[int] = field(default_factory=lambda: [0, 0])
    buffer: bytearray = field(default_factory=lambda: bytearray(BLOCKBYTES))
    buflen: int = 0
    finalized: bool = False

    def copy(self) -> "Blake2bContext":
        """Return an independent clone of this context."""

        return Blake2bContext(
            digest_length=self.digest_length,
            key_length=self.key_length,
            h=list(self.h),
            t=list(self.t),
            f=list(self.f),
            buffer=bytearray(self.buffer),
            buflen=self.buflen,
            finalized=self.finalized,
        )


def _parameter_block(digest_length: int, key_length: int) -> bytes:
    p = bytearray(64)
    p[0] = digest_length
    p[1] = key_length
    p[2] = _FANOUT
    p[3] = _DEPTH
    return bytes(p)


def as_bytes(data: object, what: str) -> bytes | bytearray | memoryview:
    if isinstance(data, str):
        raise TypeError(f"{what} must be bytes, not str; encode it first")
    if isinstance(data, (bytes, bytearray)):
        return data
    return memoryview(data).cast("B")  # type: ignore[arg-type]


def create_context(digest_length: int = OUTBYTES, key: bytes | None = None) -> Blake2bContext:
    """Start a new hash computation.

    Args:
        digest_length: Output size in bytes (1..64).
        key: Optional key (up to 64 bytes) for keyed hashing.

    Returns:
        A fresh :class:`Blake2bContext`.

    Raises:
        InvalidParameter: If ``digest_length`` or the key length is out of range.
    """

    if isinstance(digest_length, bool) or not isinstance(digest_length, int):
        raise InvalidParameter("digest_length must be an int")
    if not (1 <= digest_length <= OUTBYTES):
        raise InvalidParameter(f"digest_length must be in range 1..{OUTBYTES}")

    if key is None:
        key = b""
    try:
        key = bytes(as_bytes(key, "key"))
    except TypeError as e:
        raise InvalidParameter("key must be bytes-like") from e
    if len(key) > KEYBYTES:
        raise InvalidParameter(f"key must be at most {KEYBYTES} bytes")

    ctx = Blake2bContext(digest_length=digest_length, key_length=len(key))
    # Only the first parameter word is non-zero without salt/personalization.
    ctx.h[0] ^= load64(_parameter_block(digest_length, len(key)), 0)

    if key:
        update(ctx, key + bytes(BLOCKBYTES - len(key)))
    return ctx


def _increment_counter(ctx: Blake2bContext, inc: int) -> None:
    t0 = ctx.t[0] + inc
    ctx.t[0] = t0 & MASK64
    if t0 > MASK64:
        ctx.t[1] = (ctx.t[1] + 1) & MASK64


def _ensure_open(ctx: Blake2bContext) -> None:
    if ctx.finalized:
        raise ContextFinalizedError("context has already been finalized")


def update(ctx: Blake2bContext, data: bytes) -> None:
    """Absorb ``data`` into ``ctx``.

    A full buffer is compressed only once more input arrives, so the most
    recent bytes are always still buffered when :func:`finalize` runs.
    """

    _ensure_open(ctx)
    data = as_bytes(data, "data")

    offset = 0
    remaining = len(data)
    while remaining > 0:
        left = ctx.buflen
        fill = BLOCKBYTES - left
        if remaining > fill:
            ctx.buffer[left:] = data[offset : offset + fill]
            ctx.buflen = BLOCKBYTES
            _increment_counter(ctx, BLOCKBYTES)
            compress(ctx.h, ctx.buffer, ctx.t, ctx.f)
            ctx.buflen = 0
            offset += fill
            remaining -= fill
        else:
            ctx.buffer[left : left + remaining] = data[offset : offset + remaining]
            ctx.buflen += remaining
            offset += remaining
            remaining = 0


def finalize(ctx: Blake2bContext) -> bytes:
    """Pad and compress the last block, returning ``digest_length`` bytes.

    The context is consumed; reusing it raises :class:`ContextFinalizedError`.
    """

    _ensure_open(ctx)

    _increment_counter(ctx, ctx.buflen)
    ctx.f[0] = MASK64
    ctx.buffer[ctx.buflen :] = bytes(BLOCKBYTES - ctx.buflen)
    compress(ctx.h, ctx.buffer, ctx.t, ctx.f)
    ctx.finalized = True

    return state_bytes(ctx.h)[: ctx.digest_length]
