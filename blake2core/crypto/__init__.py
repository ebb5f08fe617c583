"""BLAKE2b hashing primitives.

The engine is split the way the algorithm is described in RFC 7693:
word arithmetic, constants, the compression function F, and the
init/update/final session API built on top of it.
"""

from __future__ import annotations

from .constants import BLOCKBYTES, IV, KEYBYTES, OUTBYTES, ROUNDS, SIGMA
from .context import Blake2bContext, create_context, finalize, update
from .errors import (
    AuthenticationError,
    ContextFinalizedError,
    CryptoError,
    InvalidParameter,
)
from .hashes import DEFAULT_DIGEST_SIZE, Blake2b, blake2b_digest, hash
from .mac import blake2b_mac, verify_mac

__all__ = [
    "AuthenticationError",
    "BLOCKBYTES",
    "Blake2b",
    "Blake2bContext",
    "ContextFinalizedError",
    "CryptoError",
    "DEFAULT_DIGEST_SIZE",
    "IV",
    "InvalidParameter",
    "KEYBYTES",
    "OUTBYTES",
    "ROUNDS",
    "SIGMA",
    "blake2b_digest",
    "blake2b_mac",
    "create_context",
    "finalize",
    "hash",
    "update",
    "verify_mac",
]
