"""Whole-file helpers around a cipher's seal/unseal.

Inputs are read completely into memory and outputs are written in one go to
a temporary file beside the destination, then moved into place. A failed
decrypt therefore never leaves a partial plaintext behind. OSError from the
filesystem propagates unchanged; crypto failures keep their own types.
"""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqeplite.core.metadata import SealMeta
    from .cipher import ZeroshieldCipher


logger = logging.getLogger(__name__)


def _write_atomic(out_path: Path, data: bytes) -> None:
    with tempfile.NamedTemporaryFile(dir=out_path.parent,prefix=f".{out_path.name}.", delete=False) as tmpf:
        tmp_path = Path(tmpf.name)
        try:
            tmpf.write(data)
            tmpf.flush()
            os.fsync(tmpf.fileno())
        except BaseException:
            tmpf.close()
            tmp_path.unlink(missing_ok=True)
            raise
    try:
        os.replace(tmp_path, out_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def encrypt_file(cipher: "ZeroshieldCipher", in_path: str | Path, out_path: str | Path) -> "SealMeta":
    """Seal the whole of ``in_path`` into a frame at ``out_path`` and return its metadata."""
    data = Path(in_path).read_bytes()
    frame, meta = cipher.seal(data)
    _write_atomic(Path(out_path), frame)
    logger.info("encrypted %s -> %s (%d bytes, sha256 %s)", in_path, out_path, len(frame), meta.hash)
    return meta


def decrypt_file(cipher: "ZeroshieldCipher", in_path: str | Path, out_path: str | Path) -> None:
    """Unseal the frame stored at ``in_path`` and write the plaintext to ``out_path``."""
    frame = Path(in_path).read_bytes()
    plaintext = cipher.unseal(frame)
    _write_atomic(Path(out_path), plaintext)
    logger.info("decrypted %s -> %s (%d bytes)", in_path, out_path, len(plaintext))
