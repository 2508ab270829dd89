#!/usr/bin/env python3
"""``layerconf`` runner for a source checkout.

Usage:
    python scripts/run_layerconf.py scripts/example_fields.py
    python scripts/run_layerconf.py scripts/example_fields.py --mode env-only
    python scripts/run_layerconf.py scripts/example_fields.py --markdown CONFIG.md

Installed packages get the same behaviour from the ``layerconf`` command.
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from layerconf.cli import main


if __name__ == "__main__":
    sys.exit(main())
