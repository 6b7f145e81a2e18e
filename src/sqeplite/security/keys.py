"""Key material for the SQEP Lite cipher.

A key is exactly 32 raw bytes. It is held in an immutable ``bytes`` object,
owned by one cipher instance and never written anywhere by this module.
Exporting (Base64) hands responsibility for secure storage to the caller.
"""
from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import os

from sqeplite.core.exceptions import InvalidKeyLengthError


KEY_LEN = 32
FINGERPRINT_LEN = 6  # bytes of SHA-256 kept, rendered as 12 hex chars


class KeyMaterial:
    """Immutable 32-byte secret key."""

    __slots__ = ("_key",)

    def __init__(self, key: bytes):
        if not isinstance(key, (bytes, bytearray, memoryview)):
            raise InvalidKeyLengthError(f"key must be bytes, got {type(key).__name__}")
        key = bytes(key)
        if len(key) != KEY_LEN:
            raise InvalidKeyLengthError(f"key must be exactly {KEY_LEN} bytes, got {len(key)}")
        self._key = key

    @classmethod
    def generate(cls) -> "KeyMaterial":
        return cls(os.urandom(KEY_LEN))

    @classmethod
    def from_bytes(cls, key: bytes) -> "KeyMaterial":
        return cls(key)

    @classmethod
    def from_base64(cls, encoded: str | bytes) -> "KeyMaterial":
        """Rebuild a key from the output of :meth:`export_base64`."""
        try:
            if isinstance(encoded, str):
                encoded = encoded.strip().encode("ascii")
            raw = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            # UnicodeEncodeError is a ValueError too
            raise InvalidKeyLengthError(f"key is not valid Base64: {e}") from e
        return cls(raw)

    @property
    def raw(self) -> bytes:
        return self._key

    def fingerprint(self) -> str:
        # one-way and truncated: safe to put in logs
        return hashlib.sha256(self._key).digest()[:FINGERPRINT_LEN].hex()

    def export_base64(self) -> str:
        return base64.b64encode(self._key).decode("ascii")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyMaterial):
            return NotImplemented
        return hmac.compare_digest(self._key, other._key)

    def __hash__(self) -> int:
        return hash(self.fingerprint())

    def __repr__(self) -> str:
        return f"KeyMaterial(fingerprint={self.fingerprint()!r})"
