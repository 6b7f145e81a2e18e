"""Keyed, self-inverse XOR mask.

The keystream is the raw ChaCha20 block output for ``seed`` with an all-zero
nonce and block counter starting at zero. This matches the byte stream of a
ChaCha20 RNG seeded with the same 32 bytes, so frames stay interoperable with
other implementations of the format.

The mask is a pure function of (seed, data): every call to
:func:`expand_keystream` starts a fresh stream, so masking twice with the
same seed returns the original bytes.
"""
from __future__ import annotations

from typing import Iterator

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms


BLOCK_SIZE = 64
# cryptography's ChaCha20 takes 16 bytes: 4-byte LE counter || 12-byte nonce
_ZERO_COUNTER_AND_NONCE = b"\x00" * 16


def expand_keystream(seed: bytes, block_size: int = BLOCK_SIZE) -> Iterator[bytes]:
    """Return an endless iterator of ``block_size``-byte keystream chunks.

    The seed is checked here, at call time, not on the first ``next()``.
    """
    if len(seed) != 32:
        raise ValueError(f"keystream seed must be 32 bytes, got {len(seed)}")
    encryptor = Cipher(algorithms.ChaCha20(seed, _ZERO_COUNTER_AND_NONCE), mode=None).encryptor()
    return _keystream_blocks(encryptor, b"\x00" * block_size)


def _keystream_blocks(encryptor, zeros: bytes) -> Iterator[bytes]:
    while True:
        yield encryptor.update(zeros)


def take_keystream(stream: Iterator[bytes], length: int) -> bytes:
    """Draw exactly ``length`` bytes from ``stream``."""
    out = bytearray()
    while len(out) < length:
        out += next(stream)
    return bytes(out[:length])


def apply_mask(data: bytes, stream: Iterator[bytes]) -> bytes:
    """XOR ``data`` with the first ``len(data)`` bytes of ``stream``."""
    if not data:
        return b""
    ks = take_keystream(stream, len(data))
    n = len(data)
    return (int.from_bytes(data, "little") ^ int.from_bytes(ks, "little")).to_bytes(n, "little")


def mask(data: bytes, seed: bytes) -> bytes:
    # applying twice with the same seed is the identity
    return apply_mask(data, expand_keystream(seed))
