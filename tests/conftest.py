"""Test configuration for blake2core package."""

import pytest


@pytest.fixture
def sample_data():
    """Ten thousand bytes: 78 full blocks plus a partial final block."""
    return bytes((i * 31 + 7) & 0xFF for i in range(10_000))


@pytest.fixture
def sample_key():
    """A full-length 64-byte key."""
    return bytes(range(64))


@pytest.fixture
def sample_config():
    """Provide a sample configuration for testing."""
    from blake2core.config import Config, HashConfig
    return Config(HashConfig(digest_size=48, key=b"config key"))
