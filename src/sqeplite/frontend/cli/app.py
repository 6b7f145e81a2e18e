"""Command line front end for SQEP Lite.

Usage:

    sqeplite keygen --out my.key
    sqeplite --key-file my.key encrypt notes.txt notes.sqep
    sqeplite --key-file my.key decrypt notes.sqep notes.txt
    sqeplite verify notes.sqep notes.meta.json
    SQEP_KEY=... sqeplite fingerprint
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from sqeplite.core.exceptions import SqepError
from sqeplite.core.metadata import SealMeta
from sqeplite.frontend.cli.context import AppContext, build_context
from sqeplite.frontend.cli.logging_config import configure_logging
from sqeplite.security.cipher import ZeroshieldCipher


logger = logging.getLogger(__name__)


def _require_cipher(ctx: AppContext) -> ZeroshieldCipher:
    if ctx.cipher is None:
        raise SqepError("no key configured; pass --key, --key-file or set SQEP_KEY")
    return ctx.cipher


def cmd_keygen(ctx: AppContext, args: argparse.Namespace) -> int:
    cipher = ZeroshieldCipher.generate()
    encoded = cipher.export_key_base64()
    if args.out:
        out = Path(args.out)
        # owner-only permissions before the secret is written; the open() mode
        # only applies to new files, so an existing file is tightened too
        fd = os.open(out, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        if hasattr(os, "fchmod"):
            os.fchmod(fd, 0o600)
        with os.fdopen(fd, "w", encoding="ascii") as f:
            f.write(encoded + "\n")
        logger.info("wrote new key %s to %s", cipher.fingerprint(), out)
        print(cipher.fingerprint())
    else:
        logger.info("generated new key %s", cipher.fingerprint())
        print(encoded)
    return 0


def cmd_fingerprint(ctx: AppContext, args: argparse.Namespace) -> int:
    cipher = _require_cipher(ctx)
    print(cipher.fingerprint())
    return 0


def cmd_encrypt(ctx: AppContext, args: argparse.Namespace) -> int:
    cipher = _require_cipher(ctx)
    meta = cipher.encrypt_file(args.input, args.output)
    payload = json.dumps(meta.to_dict())
    if args.meta:
        Path(args.meta).write_text(payload + "\n", encoding="utf-8")
    print(payload)
    return 0


def cmd_decrypt(ctx: AppContext, args: argparse.Namespace) -> int:
    cipher = _require_cipher(ctx)
    cipher.decrypt_file(args.input, args.output)
    return 0


def cmd_verify(ctx: AppContext, args: argparse.Namespace) -> int:
    # no key needed: compares the frame file against recorded metadata only
    try:
        meta = SealMeta.from_dict(json.loads(Path(args.meta).read_text(encoding="utf-8")))
    except (ValueError, KeyError, TypeError) as e:
        raise SqepError(f"unreadable metadata file {args.meta}: {e!r}") from e
    if meta.matches_file(args.frame):
        print("OK")
        return 0
    logger.error("%s does not match sha256 %s recorded in %s", args.frame, meta.hash, args.meta)
    print("MISMATCH")
    return 1


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqeplite",
        description="Seal and unseal files with the SQEP Lite cipher.",
    )
    parser.add_argument("--key", default=None, help="Base64 key (default: $SQEP_KEY)")
    parser.add_argument("--key-file", default=None, help="File containing the Base64 key")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level name (default: $SQEP_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("keygen", help="Generate a new random key")
    p.add_argument("--out", default=None, help="Write the key here instead of stdout")
    p.set_defaults(func=cmd_keygen)

    p = sub.add_parser("fingerprint", help="Print the fingerprint of the configured key")
    p.set_defaults(func=cmd_fingerprint)

    p = sub.add_parser("encrypt", help="Seal a file into a frame")
    p.add_argument("input")
    p.add_argument("output")
    p.add_argument("--meta", default=None, help="Also write the metadata JSON to this path")
    p.set_defaults(func=cmd_encrypt)

    p = sub.add_parser("decrypt", help="Unseal a frame file")
    p.add_argument("input")
    p.add_argument("output")
    p.set_defaults(func=cmd_decrypt)

    p = sub.add_parser("verify", help="Check a frame file against metadata written by encrypt --meta")
    p.add_argument("frame")
    p.add_argument("meta")
    p.set_defaults(func=cmd_verify)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    try:
        ctx = build_context(key=args.key, key_file=args.key_file, log_level=args.log_level)
    except (SqepError, OSError) as e:
        configure_logging(args.log_level or "INFO")
        logger.error("could not load key: %s", e)
        return 1

    configure_logging(ctx.log_level)
    if ctx.key_source:
        logger.debug("using key %s from %s", ctx.cipher.fingerprint(), ctx.key_source)

    try:
        return args.func(ctx, args)
    except (SqepError, OSError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
