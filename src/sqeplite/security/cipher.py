"""ZeroshieldCipher: the seal/unseal facade over the SQEP Lite pipeline.

Seal runs a fixed sequence:

1. fresh 12-byte nonce from the OS CSPRNG
2. keystream seed = HKDF-SHA256(key, salt=nonce, info=b"SQEP:LITE:QT:v1")
3. plaintext XOR keystream (self-inverse mask)
4. ChaCha20-Poly1305 over the masked bytes, no associated data
5. frame = MAGIC || nonce || ciphertext+tag
6. metadata = (timestamp, sha256(frame))

Unseal is the reverse, and the tag is verified before anything is unmasked.
The cipher holds nothing but its :class:`KeyMaterial`, so one instance can be
shared between threads.
"""
from __future__ import annotations

import logging
import os
import warnings
from pathlib import Path
from typing import Optional, Tuple

from sqeplite.core.exceptions import DecryptionError, InvalidEncodingError
from sqeplite.core.metadata import SealMeta, compute_seal_meta
from . import aead
from .files import encrypt_file, decrypt_file
from .framing import decode_frame, encode_frame
from .kdf import derive_keystream_seed
from .keys import KeyMaterial
from .mask import mask


logger = logging.getLogger(__name__)


def generate_nonce() -> bytes:
    return os.urandom(aead.NONCE_LEN)


class ZeroshieldCipher:
    """Single-key authenticated cipher producing self-describing frames."""

    def __init__(self, key: Optional[KeyMaterial] = None):
        self._key = key if key is not None else KeyMaterial.generate()

    @classmethod
    def generate(cls) -> "ZeroshieldCipher":
        return cls(KeyMaterial.generate())

    @classmethod
    def from_key(cls, key: bytes) -> "ZeroshieldCipher":
        return cls(KeyMaterial.from_bytes(key))

    @classmethod
    def from_base64(cls, encoded: str) -> "ZeroshieldCipher":
        return cls(KeyMaterial.from_base64(encoded))

    @property
    def key(self) -> KeyMaterial:
        return self._key

    def fingerprint(self) -> str:
        return self._key.fingerprint()

    def export_key_base64(self) -> str:
        return self._key.export_base64()

    # ------------------------------------------------------------------
    # Sealing
    # ------------------------------------------------------------------

    def seal(self, plaintext: bytes) -> Tuple[bytes, SealMeta]:
        """Seal ``plaintext`` under a fresh nonce and return ``(frame, meta)``."""
        return self._seal_with_nonce(bytes(plaintext), generate_nonce())

    def _seal_with_nonce(self, plaintext: bytes, nonce: bytes) -> Tuple[bytes, SealMeta]:
        key = self._key.raw
        seed = derive_keystream_seed(key, nonce)
        masked = mask(plaintext, seed)
        sealed = aead.seal(key, nonce, masked)
        frame = encode_frame(nonce, sealed)
        meta = compute_seal_meta(frame)
        logger.debug(
            "sealed %d bytes into %d-byte frame (key %s, sha256 %s)",
            len(plaintext), len(frame), self.fingerprint(), meta.hash,
        )
        return frame, meta

    def unseal(self, frame: bytes) -> bytes:
        """
        Recover the plaintext of ``frame``.

        Raises:
            MalformedFrameError: short frame or wrong magic (no crypto attempted)
            AuthenticationFailureError: tag did not verify
        """
        try:
            nonce, sealed = decode_frame(frame)
            key = self._key.raw
            masked = aead.open_sealed(key, nonce, sealed)
        except DecryptionError as e:
            logger.warning("unseal rejected %d-byte frame: %s", len(frame), e)
            raise
        seed = derive_keystream_seed(key, nonce)
        return mask(masked, seed)

    def unseal_text(self, frame: bytes) -> str:
        data = self.unseal(frame)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncodingError(f"decrypted payload is not valid UTF-8: {e}") from e

    # names used by earlier releases
    encrypt_with_meta = seal
    decrypt = unseal
    decrypt_utf8 = unseal_text

    # ------------------------------------------------------------------
    # Whole-file helpers
    # ------------------------------------------------------------------

    def encrypt_file(self, input_path: str | Path, output_path: str | Path) -> SealMeta:
        return encrypt_file(self, input_path, output_path)

    def decrypt_file(self, input_path: str | Path, output_path: str | Path) -> None:
        decrypt_file(self, input_path, output_path)

    def __repr__(self) -> str:
        return f"ZeroshieldCipher(fingerprint={self.fingerprint()!r})"


# ---------------------------------------------------------------------
# Deprecated helpers, kept so old call sites keep importing.
# Both are identity functions and are not used by ZeroshieldCipher.
# ---------------------------------------------------------------------

def qt_forward(data: bytes) -> bytes:
    """Deprecated no-op. Returns ``data`` unchanged."""
    warnings.warn("qt_forward is a deprecated no-op", DeprecationWarning, stacklevel=2)
    return bytes(data)


def qt_inverse(data: bytes) -> bytes:
    """Deprecated no-op. Returns ``data`` unchanged."""
    warnings.warn("qt_inverse is a deprecated no-op", DeprecationWarning, stacklevel=2)
    return bytes(data)
