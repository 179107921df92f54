"""
WGER Exercise Sync

Fetches exercise definitions from the WGER API, classifies them into the
application's categories and upserts them by name into Postgres.

Usage:
    python scripts/sync_wger_exercises.py --dry-run
    python -m wger_sync

Public API:
    - sync_exercises: Run the fetch -> transform -> upsert pipeline
    - transform_exercises: Filter and classify raw WGER records
    - Settings: Environment-driven configuration
"""

from .config import Settings
from .sync import sync_exercises
from .transform import transform_exercises
from .types import Exercise, SyncResult, WgerExercise

__all__ = [
    # Primary API
    'sync_exercises',
    'transform_exercises',
    # Types
    'Settings',
    'Exercise',
    'SyncResult',
    'WgerExercise',
]
