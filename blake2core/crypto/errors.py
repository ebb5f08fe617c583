"""Shared exceptions for :mod:`blake2core.crypto`.

The library raises a small set of domain-specific exceptions so callers can
tell a bad argument apart from misuse of a hashing session.
"""

from __future__ import annotations


class CryptoError(Exception):
    """Base error for hashing operations."""


class InvalidParameter(CryptoError, ValueError):
    """Raised when a digest length, key, or argument type is out of range."""


class ContextFinalizedError(CryptoError):
    """Raised when a context is used again after :func:`finalize`."""


class AuthenticationError(CryptoError):
    """Raised when a MAC tag does not match the recomputed value."""
