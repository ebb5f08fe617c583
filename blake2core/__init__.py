"""blake2core: a pure-Python BLAKE2b hash engine."""

__version__ = "0.1.0"

from .config import Config, HashConfig
from .crypto import (
    Blake2b,
    InvalidParameter,
    blake2b_digest,
    create_context,
    finalize,
    hash,
    update,
)

__all__ = [
    "Blake2b",
    "Config",
    "HashConfig",
    "InvalidParameter",
    "blake2b_digest",
    "create_context",
    "finalize",
    "hash",
    "update",
]
