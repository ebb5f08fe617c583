"""Configuration management for blake2core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional
import os

from .crypto.constants import KEYBYTES, OUTBYTES
from .crypto.errors import InvalidParameter
from .crypto.hashes import DEFAULT_DIGEST_SIZE

ENV_DIGEST_SIZE = "BLAKE2CORE_DIGEST_SIZE"
ENV_KEY_HEX = "BLAKE2CORE_KEY_HEX"


@dataclass
class HashConfig:
    """Default hashing parameters."""

    digest_size: int = DEFAULT_DIGEST_SIZE
    key: bytes = b""


class Config:
    """
    Hashing defaults shared by :class:`~blake2core.crypto.hashes.Blake2b`.

    The values read by :meth:`get` are the same ones checked by
    :meth:`validate` and used by ``Blake2b.from_config``.
    """

    def __init__(self, hash_config: Optional[HashConfig] = None) -> None:
        """
        Args:
            hash_config: Hash defaults. If None, library defaults are used.
        """
        self.hash = hash_config or HashConfig()

    @classmethod
    def from_environment(cls) -> Config:
        """
        Build configuration from environment variables.

        ``BLAKE2CORE_DIGEST_SIZE`` holds a decimal digest size and
        ``BLAKE2CORE_KEY_HEX`` a hex-encoded key. Unset variables keep the
        library defaults.

        Raises:
            InvalidParameter: If a variable is set but cannot be parsed.
        """
        hash_config = HashConfig()

        digest_size = os.getenv(ENV_DIGEST_SIZE)
        if digest_size is not None:
            try:
                hash_config.digest_size = int(digest_size)
            except ValueError as e:
                raise InvalidParameter(f"{ENV_DIGEST_SIZE} is not an integer: {digest_size!r}") from e

        key_hex = os.getenv(ENV_KEY_HEX)
        if key_hex:
            try:
                hash_config.key = bytes.fromhex(key_hex)
            except ValueError as e:
                raise InvalidParameter(f"{ENV_KEY_HEX} is not valid hex") from e

        return cls(hash_config)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the hash setting named ``key``, or ``default`` if unknown."""
        return getattr(self.hash, key, default)

    def validate(self) -> List[str]:
        """
        Check the hash settings.

        Returns:
            List of problems. Empty if the settings can build a hasher.
        """
        errors = []
        digest_size = self.get("digest_size")
        key = self.get("key", b"")

        if isinstance(digest_size, bool) or not isinstance(digest_size, int) or not (1 <= digest_size <= OUTBYTES):
            errors.append(f"digest_size must be in range 1..{OUTBYTES}")

        if len(key) > KEYBYTES:
            errors.append(f"key must be at most {KEYBYTES} bytes")

        return errors
