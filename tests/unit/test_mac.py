"""Unit tests for blake2core.crypto.mac."""

import hashlib

import pytest

from blake2core.crypto import AuthenticationError, InvalidParameter, blake2b_mac, verify_mac


def test_mac_matches_keyed_blake2b() -> None:
    key = b"k" * 32
    assert blake2b_mac(key, b"msg") == hashlib.blake2b(b"msg", digest_size=32, key=key).digest()


def test_verify_accepts_valid_tag() -> None:
    key = b"secret key"
    tag = blake2b_mac(key, b"payload", digest_size=16)
    verify_mac(key, b"payload", tag)


def test_verify_rejects_tampered_tag() -> None:
    key = b"secret key"
    tag = bytearray(blake2b_mac(key, b"payload"))
    tag[0] ^= 0x01
    with pytest.raises(AuthenticationError):
        verify_mac(key, b"payload", bytes(tag))


def test_verify_rejects_wrong_key() -> None:
    tag = blake2b_mac(b"key one", b"payload")
    with pytest.raises(AuthenticationError):
        verify_mac(b"key two", b"payload", tag)


@pytest.mark.parametrize("key", [b"", bytes(65)])
def test_mac_key_length(key: bytes) -> None:
    with pytest.raises(InvalidParameter):
        blake2b_mac(key, b"payload")


@pytest.mark.parametrize("tag", [b"", bytes(65)])
def test_verify_tag_length(tag: bytes) -> None:
    with pytest.raises(InvalidParameter):
        verify_mac(b"key", b"payload", tag)


@pytest.mark.parametrize("tag", ["a" * 32, 12345])
def test_verify_rejects_non_bytes_tag(tag) -> None:
    with pytest.raises(InvalidParameter, match="bytes-like"):
        verify_mac(b"key", b"payload", tag)


def test_verify_accepts_bytearray_tag() -> None:
    key = b"secret key"
    tag = bytearray(blake2b_mac(key, b"payload"))
    verify_mac(key, b"payload", tag)
