"""Convenience entry point to run the SQEP Lite command line.

Allows running the tool with `python main.py ...` from the project root.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the src/ directory is on sys.path so `import sqeplite` works
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sqeplite.frontend.cli.app import main as cli_main


def main() -> None:
    """Run the SQEP Lite command line and exit with its status."""
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
