"""
Authenticated encryption using ChaCha20-Poly1305.

No associated data is bound. Nonces are always supplied by the caller.
"""

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from sqeplite.core.exceptions import AuthenticationFailureError


NONCE_LEN = 12
TAG_LEN = 16


def _check_nonce(nonce: bytes) -> None:
    if len(nonce) != NONCE_LEN:
        raise ValueError(f"nonce must be {NONCE_LEN} bytes, got {len(nonce)}")


def seal(key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
    """
    Encrypt and authenticate ``plaintext``.

    Returns ciphertext || 16-byte tag (``len(plaintext) + 16`` bytes).
    """
    _check_nonce(nonce)
    return ChaCha20Poly1305(key).encrypt(nonce, plaintext, None)


def open_sealed(key: bytes, nonce: bytes, ciphertext_with_tag: bytes) -> bytes:
    """
    Verify the trailing tag and decrypt.

    Raises:
        AuthenticationFailureError: tag mismatch, or input shorter than a tag
    """
    _check_nonce(nonce)
    if len(ciphertext_with_tag) < TAG_LEN:
        raise AuthenticationFailureError(
            f"ciphertext too short: {len(ciphertext_with_tag)} bytes (minimum {TAG_LEN})"
        )
    try:
        return ChaCha20Poly1305(key).decrypt(nonce, ciphertext_with_tag, None)
    except InvalidTag:
        # corruption, wrong key or tampering
        raise AuthenticationFailureError("Authentication tag verification failed") from None
