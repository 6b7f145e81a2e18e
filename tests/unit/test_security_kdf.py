"""Unit tests for the keystream seed derivation (HKDF-SHA256)."""

import hashlib
import hmac
import os

from sqeplite.security.kdf import derive_keystream_seed, QT_DOMAIN, SEED_LEN


def _hkdf_reference(salt: bytes, ikm: bytes, info: bytes, length: int) -> bytes:
    # RFC 5869, written out by hand
    prk = hmac.new(salt, ikm, hashlib.sha256).digest()
    okm = b""
    previous = b""
    for i in range(1, (length + 31) // 32 + 1):
        previous = hmac.new(prk, previous + info + bytes([i]), hashlib.sha256).digest()
        okm += previous
    return okm[:length]


def test_domain_string():
    assert QT_DOMAIN == b"SQEP:LITE:QT:v1"


def test_seed_is_32_bytes():
    seed = derive_keystream_seed(os.urandom(32), os.urandom(12))
    assert isinstance(seed, bytes)
    assert len(seed) == SEED_LEN == 32


def test_matches_rfc5869_with_nonce_as_salt():
    key = bytes(range(32))
    nonce = bytes(range(100, 112))
    expected = _hkdf_reference(salt=nonce, ikm=key, info=QT_DOMAIN, length=32)
    assert derive_keystream_seed(key, nonce) == expected


def test_deterministic_for_same_inputs():
    key, nonce = os.urandom(32), os.urandom(12)
    assert derive_keystream_seed(key, nonce) == derive_keystream_seed(key, nonce)


def test_nonce_changes_seed():
    key = os.urandom(32)
    assert derive_keystream_seed(key, b"\x00" * 12) != derive_keystream_seed(key, b"\x01" + b"\x00" * 11)


def test_key_changes_seed():
    nonce = os.urandom(12)
    assert derive_keystream_seed(b"\x00" * 32, nonce) != derive_keystream_seed(b"\x01" * 32, nonce)


def test_info_string_separates_domains():
    key, nonce = os.urandom(32), os.urandom(12)
    assert derive_keystream_seed(key, nonce) != derive_keystream_seed(key, nonce, info=b"other-domain")
