"""Frame assembly and parsing for sealed payloads.

Frame layout (no length field, total length defines the ciphertext size):
- 12 bytes: magic b'SQEP4.0-LITE'
- 12 bytes: nonce
- n + 16 bytes: ciphertext followed by the Poly1305 tag

The magic doubles as the format version; a new layout gets a new magic.
"""
from typing import Tuple

from sqeplite.core.exceptions import MalformedFrameError
from .aead import NONCE_LEN, TAG_LEN


MAGIC = b"SQEP4.0-LITE"
HEADER_LEN = len(MAGIC) + NONCE_LEN
MIN_FRAME_LEN = HEADER_LEN + TAG_LEN  # 40: empty plaintext


def encode_frame(nonce: bytes, ciphertext_with_tag: bytes) -> bytes:
    if len(nonce) != NONCE_LEN:
        raise ValueError(f"nonce must be {NONCE_LEN} bytes, got {len(nonce)}")
    return b"".join((MAGIC, nonce, ciphertext_with_tag))


def decode_frame(frame: bytes) -> Tuple[bytes, bytes]:
    """
    Split a frame into ``(nonce, ciphertext_with_tag)``.

    Only length and magic are checked here; nothing cryptographic happens.
    """
    if len(frame) < MIN_FRAME_LEN:
        raise MalformedFrameError(
            f"Frame too short: {len(frame)} bytes (minimum {MIN_FRAME_LEN})"
        )
    frame = bytes(frame)
    if frame[: len(MAGIC)] != MAGIC:
        raise MalformedFrameError("Invalid frame format (magic mismatch)")
    return frame[len(MAGIC):HEADER_LEN], frame[HEADER_LEN:]
