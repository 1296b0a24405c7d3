#!/usr/bin/env python3
"""
Buttondown CLI Entry Point.

Runs the CLI from a source checkout:

    python cli.py --help
    python cli.py list --status draft

Installed packages expose the same app as the ``buttondown`` command.
"""

import sys
from pathlib import Path

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from buttondown_cli.cli.app import app  # noqa: E402

if __name__ == "__main__":
    app()
