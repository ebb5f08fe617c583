"""Digest primitives."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import BLOCKBYTES, OUTBYTES
from .context import Blake2bContext, create_context, finalize, update
from .errors import InvalidParameter

if TYPE_CHECKING:
    from ..config import Config

DEFAULT_DIGEST_SIZE = 32


def hash(data: bytes, digest_length: int = OUTBYTES) -> bytes:
    """Unkeyed one-shot BLAKE2b of ``data``."""

    ctx = create_context(digest_length)
    update(ctx, data)
    return finalize(ctx)


def blake2b_digest(data: bytes, *, digest_size: int = DEFAULT_DIGEST_SIZE, key: bytes | None = None) -> bytes:
    """Compute a BLAKE2b digest.

    Args:
        data: Data to hash.
        digest_size: Output size (1..64). 32 bytes is typical for identifiers.
        key: Optional key for keyed BLAKE2b (MAC-like usage).

    Returns:
        Digest bytes.
    """

    ctx = create_context(digest_size, key)
    update(ctx, data)
    return finalize(ctx)


class Blake2b:
    """Streaming BLAKE2b with a :mod:`hashlib`-like interface.

    Unlike a bare :class:`~blake2core.crypto.context.Blake2bContext`, the
    object can be read repeatedly: :meth:`digest` finalizes a copy of the
    running state, so more data may be added afterwards.
    """

    name = "blake2b"
    block_size = BLOCKBYTES

    def __init__(self, data: bytes = b"", *, digest_size: int | None = None, key: bytes = b"") -> None:
        if digest_size is None:
            digest_size = DEFAULT_DIGEST_SIZE
        self._ctx: Blake2bContext = create_context(digest_size, key)
        update(self._ctx, data)

    @classmethod
    def from_config(cls, config: Config, data: bytes = b"") -> "Blake2b":
        """Build a hasher from a :class:`~blake2core.config.Config`.

        Raises:
            InvalidParameter: If ``config.validate()`` reports any problem.
        """

        errors = config.validate()
        if errors:
            raise InvalidParameter("; ".join(errors))
        return cls(data, digest_size=config.get("digest_size"), key=config.get("key"))

    @property
    def digest_size(self) -> int:
        return self._ctx.digest_length

    def update(self, data: bytes) -> None:
        update(self._ctx, data)

    def digest(self) -> bytes:
        return finalize(self._ctx.copy())

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> "Blake2b":
        clone = object.__new__(type(self))
        clone._ctx = self._ctx.copy()
        return clone

    def __repr__(self) -> str:
        return f"<{self.name} digest_size={self.digest_size}>"
