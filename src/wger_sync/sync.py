"""
WGER Exercise Sync - Pipeline

fetch -> filter by language -> classify/translate -> upsert by name
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from .config import Settings
from .exceptions import ExerciseWriteError
from .persistence import get_db_connection, upsert_exercise, INSERTED
from .transform import transform_exercises
from .types import SyncResult
from .wger_api import fetch_exercises

logger = logging.getLogger(__name__)


def sync_exercises(
    settings: Settings,
    translations: Optional[Dict[str, str]] = None,
    dry_run: bool = False,
    conn=None,
) -> SyncResult:
    """
    Import one page of WGER exercises into the exercises table.

    Fetch errors propagate. Write errors are logged per exercise and the
    sync carries on with the next one.

    Args:
        settings: Runtime settings
        translations: Name translations (defaults to the built-in table)
        dry_run: Log the rows that would be written without touching the database
        conn: Existing connection; one is opened (and closed) from settings if omitted
    """
    logger.info("Starting exercise import...")
    result = SyncResult(dry_run=dry_run)

    records = fetch_exercises(settings)
    result.fetched = len(records)
    logger.info(f"{len(records)} exercises fetched from WGER")

    exercises = transform_exercises(records, language=settings.language, translations=translations)
    result.filtered = len(exercises)
    logger.info(f"{len(exercises)} exercises in language '{settings.language}'")

    if dry_run:
        for exercise in exercises:
            logger.info(
                f"[DRY RUN] {exercise.name}: {exercise.category}, "
                f"{exercise.muscle_group}, {exercise.equipment}"
            )
        return result

    owns_conn = conn is None
    if owns_conn:
        conn = get_db_connection(settings)

    try:
        for exercise in exercises:
            try:
                action = upsert_exercise(conn, exercise)
            except ExerciseWriteError as e:
                logger.error(f"Failed to write exercise {exercise.name}: {e.cause}")
                result.failed += 1
                result.failed_names.append(exercise.name)
                continue

            if action == INSERTED:
                result.inserted += 1
                logger.info(f"New exercise added: {exercise.name}")
            else:
                result.updated += 1
                logger.info(f"Exercise updated: {exercise.name}")
    finally:
        if owns_conn:
            conn.close()

    logger.info("Import complete")
    return result
