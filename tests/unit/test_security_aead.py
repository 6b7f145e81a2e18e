"""Unit tests for the ChaCha20-Poly1305 layer."""

import os

import pytest
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from sqeplite.core.exceptions import AuthenticationFailureError
from sqeplite.security.aead import seal, open_sealed, NONCE_LEN, TAG_LEN


@pytest.fixture
def key():
    return os.urandom(32)


@pytest.fixture
def nonce():
    return os.urandom(NONCE_LEN)


def test_output_length_is_input_plus_tag(key, nonce):
    for n in (0, 1, 100):
        assert len(seal(key, nonce, b"\x00" * n)) == n + TAG_LEN


def test_round_trip(key, nonce):
    data = os.urandom(1000)
    assert open_sealed(key, nonce, seal(key, nonce, data)) == data


def test_empty_round_trip(key, nonce):
    sealed = seal(key, nonce, b"")
    assert len(sealed) == 16
    assert open_sealed(key, nonce, sealed) == b""


def test_no_associated_data(key, nonce):
    data = b"interop"
    assert seal(key, nonce, data) == ChaCha20Poly1305(key).encrypt(nonce, data, None)


def test_tampered_tag_fails(key, nonce):
    sealed = bytearray(seal(key, nonce, b"payload"))
    sealed[-1] ^= 0x80
    with pytest.raises(AuthenticationFailureError, match="verification failed"):
        open_sealed(key, nonce, bytes(sealed))


def test_wrong_key_fails(key, nonce):
    sealed = seal(key, nonce, b"payload")
    with pytest.raises(AuthenticationFailureError):
        open_sealed(os.urandom(32), nonce, sealed)


def test_wrong_nonce_fails(key, nonce):
    sealed = seal(key, nonce, b"payload")
    with pytest.raises(AuthenticationFailureError):
        open_sealed(key, os.urandom(NONCE_LEN), sealed)


@pytest.mark.parametrize("length", [0, 1, 15])
def test_shorter_than_tag_fails(key, nonce, length):
    with pytest.raises(AuthenticationFailureError, match="too short"):
        open_sealed(key, nonce, b"\x00" * length)


def test_bad_nonce_length_is_caller_error(key):
    with pytest.raises(ValueError, match="12 bytes"):
        seal(key, b"\x00" * 8, b"x")
    with pytest.raises(ValueError, match="12 bytes"):
        open_sealed(key, b"\x00" * 16, b"\x00" * 16)
