"""Security helpers: the SQEP Lite sealing pipeline.

This package provides:
- 32-byte key material with fingerprinting and Base64 export
- HKDF-SHA256 keystream seed derivation, domain separated per message nonce
- a keyed, self-inverse ChaCha20 XOR mask
- ChaCha20-Poly1305 AEAD and the MAGIC || nonce || ciphertext+tag frame
- the ZeroshieldCipher facade and whole-file helpers
"""

from .keys import KeyMaterial, KEY_LEN
from .kdf import derive_keystream_seed, QT_DOMAIN
from .mask import expand_keystream, apply_mask, mask
from .aead import seal, open_sealed, NONCE_LEN, TAG_LEN
from .framing import encode_frame, decode_frame, MAGIC, MIN_FRAME_LEN
from .cipher import ZeroshieldCipher, qt_forward, qt_inverse
from .files import encrypt_file, decrypt_file

__all__ = [
    "KeyMaterial",
    "KEY_LEN",
    "derive_keystream_seed",
    "QT_DOMAIN",
    "expand_keystream",
    "apply_mask",
    "mask",
    "seal",
    "open_sealed",
    "NONCE_LEN",
    "TAG_LEN",
    "encode_frame",
    "decode_frame",
    "MAGIC",
    "MIN_FRAME_LEN",
    "ZeroshieldCipher",
    "qt_forward",
    "qt_inverse",
    "encrypt_file",
    "decrypt_file",
]
