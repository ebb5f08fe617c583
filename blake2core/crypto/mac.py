"""Keyed BLAKE2b message authentication.

BLAKE2b with a secret key is a MAC on its own; no HMAC wrapping is needed.
Tags are compared with :func:`cryptography.hazmat.primitives.constant_time.bytes_eq`.
"""

from __future__ import annotations

from cryptography.hazmat.primitives import constant_time

from .constants import KEYBYTES, OUTBYTES
from .errors import AuthenticationError, InvalidParameter
from .context import as_bytes
from .hashes import DEFAULT_DIGEST_SIZE, blake2b_digest


def blake2b_mac(key: bytes, data: bytes, *, digest_size: int = DEFAULT_DIGEST_SIZE) -> bytes:
    """Return the BLAKE2b tag of ``data`` under ``key``.

    Raises:
        InvalidParameter: If ``key`` is empty or longer than 64 bytes.
    """

    if not (1 <= len(key) <= KEYBYTES):
        raise InvalidParameter(f"MAC key must be 1..{KEYBYTES} bytes")
    return blake2b_digest(data, digest_size=digest_size, key=key)


def verify_mac(key: bytes, data: bytes, tag: bytes) -> None:
    """Check ``tag`` against ``data`` under ``key``.

    The tag length selects the digest size.

    Raises:
        InvalidParameter: If the tag is not bytes-like, or the key or tag
            length is out of range.
        AuthenticationError: If the tag does not match.
    """

    try:
        tag = bytes(as_bytes(tag, "tag"))
    except TypeError as e:
        raise InvalidParameter("tag must be bytes-like") from e
    if not (1 <= len(tag) <= OUTBYTES):
        raise InvalidParameter(f"tag must be 1..{OUTBYTES} bytes")

    expected = blake2b_mac(key, data, digest_size=len(tag))
    if not constant_time.bytes_eq(expected, tag):
        raise AuthenticationError("MAC tag mismatch")
