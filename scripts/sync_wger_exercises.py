#!/usr/bin/env python3
"""
WGER → Postgres Exercise Sync

Fetches exercises from the WGER API and upserts them by name into the
exercises table.

Usage:
    python scripts/sync_wger_exercises.py                 # Sync
    python scripts/sync_wger_exercises.py --dry-run       # Preview without writing
    python scripts/sync_wger_exercises.py --init-schema   # Create table first
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from wger_sync.cli import main


if __name__ == "__main__":
    sys.exit(main())
