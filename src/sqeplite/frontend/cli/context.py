"""Small helper to build an SQEP Lite app context for the command line."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os

from sqeplite.security.cipher import ZeroshieldCipher


ENV_KEY = "SQEP_KEY"
ENV_LOG_LEVEL = "SQEP_LOG_LEVEL"


@dataclass
class AppContext:
    """Container for runtime objects the commands need."""

    cipher: ZeroshieldCipher | None
    log_level: str = "INFO"
    key_source: str | None = None


def _read_key_file(path: str | Path) -> str:
    # Key files hold the Base64 export, optionally followed by a newline.
    return Path(path).read_text(encoding="ascii").strip()


def build_context(
    key: Optional[str] = None,
    key_file: Optional[str | Path] = None,
    log_level: Optional[str] = None,
) -> AppContext:
    """
    Resolve the key and settings for one CLI invocation.

    Key resolution order:

    - ``key`` (Base64 string given with ``--key``)
    - ``key_file`` (file containing the Base64 string, ``--key-file``)
    - the environment variable ``SQEP_KEY``

    When none is set the context carries ``cipher=None``; commands that need
    a key report that themselves. A key that is present but malformed raises
    :class:`~sqeplite.core.exceptions.InvalidKeyLengthError` right here.

    The log level comes from ``log_level`` or ``SQEP_LOG_LEVEL`` (default
    ``INFO``).
    """
    level = (log_level or os.getenv(ENV_LOG_LEVEL) or "INFO").upper()

    encoded: str | None = None
    source: str | None = None
    if key:
        encoded, source = key, "argument"
    elif key_file:
        encoded, source = _read_key_file(key_file), f"file:{key_file}"
    else:
        env_key = os.getenv(ENV_KEY)
        if env_key:
            encoded, source = env_key, f"env:{ENV_KEY}"

    cipher = ZeroshieldCipher.from_base64(encoded) if encoded else None
    return AppContext(cipher=cipher, log_level=level, key_source=source)
