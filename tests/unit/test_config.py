"""Unit tests for blake2core.config module."""

import pytest

from blake2core.config import Config, ENV_DIGEST_SIZE, ENV_KEY_HEX, HashConfig
from blake2core.crypto import InvalidParameter


class TestHashConfig:
    """Test HashConfig dataclass."""

    def test_defaults(self):
        """Test default hash configuration."""
        config = HashConfig()

        assert config.digest_size == 32
        assert config.key == b""

    def test_custom_values(self):
        """Test custom hash configuration."""
        config = HashConfig(digest_size=64, key=b"k")

        assert config.digest_size == 64
        assert config.key == b"k"


class TestConfig:
    """Test Config manager."""

    def test_default_initialization(self):
        """Test default configuration."""
        config = Config()

        assert config.get("digest_size") == 32
        assert config.get("key") == b""
        assert config.validate() == []

    def test_get_reads_hash_config(self, sample_config):
        """Test get returns the hash config values."""
        assert sample_config.get("digest_size") == 48
        assert sample_config.get("key") == b"config key"

        sample_config.hash.digest_size = 16
        assert sample_config.get("digest_size") == 16

    def test_get_falls_back_to_default(self):
        """Test unknown keys."""
        config = Config()

        assert config.get("nonexistent") is None
        assert config.get("nonexistent", "fallback") == "fallback"

    def test_from_environment(self, monkeypatch):
        """Test building configuration from environment variables."""
        monkeypatch.setenv(ENV_DIGEST_SIZE, "64")
        monkeypatch.setenv(ENV_KEY_HEX, "00ff")

        config = Config.from_environment()

        assert config.hash.digest_size == 64
        assert config.hash.key == b"\x00\xff"

    def test_from_environment_unset(self, monkeypatch):
        """Test defaults when nothing is set."""
        monkeypatch.delenv(ENV_DIGEST_SIZE, raising=False)
        monkeypatch.delenv(ENV_KEY_HEX, raising=False)

        config = Config.from_environment()

        assert config.hash == HashConfig()

    def test_from_environment_bad_digest_size(self, monkeypatch):
        """Test an unparsable digest size raises."""
        monkeypatch.delenv(ENV_KEY_HEX, raising=False)
        monkeypatch.setenv(ENV_DIGEST_SIZE, "big")

        with pytest.raises(InvalidParameter, match=ENV_DIGEST_SIZE):
            Config.from_environment()

    @pytest.mark.parametrize("key_hex", ["zz", "abc", "0x00"])
    def test_from_environment_bad_key_hex(self, monkeypatch, key_hex):
        """Test an unparsable hex key raises."""
        monkeypatch.delenv(ENV_DIGEST_SIZE, raising=False)
        monkeypatch.setenv(ENV_KEY_HEX, key_hex)

        with pytest.raises(InvalidParameter, match=ENV_KEY_HEX):
            Config.from_environment()

    def test_from_environment_errors_are_value_errors(self, monkeypatch):
        """Test parse failures stay catchable as ValueError."""
        monkeypatch.setenv(ENV_DIGEST_SIZE, "big")

        with pytest.raises(ValueError):
            Config.from_environment()

    @pytest.mark.parametrize("digest_size", [0, 65, True])
    def test_validate_digest_size(self, digest_size):
        """Test digest size validation."""
        config = Config(HashConfig(digest_size=digest_size))

        errors = config.validate()
        assert any("digest_size" in e for e in errors)

    def test_validate_key_length(self):
        """Test key length validation."""
        config = Config(HashConfig(key=bytes(65)))

        errors = config.validate()
        assert errors == ["key must be at most 64 bytes"]
