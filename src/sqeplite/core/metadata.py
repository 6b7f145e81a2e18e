"""Seal metadata: a timestamp and SHA-256 digest of a produced frame.

The metadata is computed from the frame but never embedded in it. Losing it
has no effect on decryptability; it exists for audit trails, replay-log
correlation and comparing a stored frame against a recorded digest.
"""

from __future__ import annotations

import hmac
import time
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict

from .hashing import calculate_sha256, calculate_sha256_bytes


@dataclass(frozen=True)
class SealMeta:
    """Observational record produced alongside every sealed frame."""

    timestamp: int
    hash: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SealMeta":
        return cls(timestamp=int(data["timestamp"]), hash=str(data["hash"]).lower())

    def matches(self, frame: bytes) -> bool:
        """Return True if ``frame`` hashes to the recorded digest."""
        return hmac.compare_digest(calculate_sha256_bytes(frame), self.hash)

    def matches_file(self, frame_path: str | Path) -> bool:
        """Same check as :meth:`matches` for a frame stored on disk."""
        return hmac.compare_digest(calculate_sha256(Path(frame_path)), self.hash)


def compute_seal_meta(frame: bytes) -> SealMeta:
    # wall clock seconds since epoch; hash covers the whole frame
    return SealMeta(timestamp=int(time.time()), hash=calculate_sha256_bytes(frame))
