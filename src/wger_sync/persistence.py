"""
WGER Exercise Sync - Database Persistence

Name-keyed upsert of exercise rows into Postgres.
"""
from __future__ import annotations

import logging
from typing import Optional

import psycopg2

from .config import Settings
from .exceptions import ExerciseWriteError
from .types import Exercise

logger = logging.getLogger(__name__)

INSERTED = 'inserted'
UPDATED = 'updated'


# =============================================================================
# Database Connection
# =============================================================================

def get_db_connection(settings: Settings):
    """Get connection to the application database."""
    return psycopg2.connect(settings.database_uri)


def ensure_schema(conn) -> None:
    """Create the exercises table if it does not exist."""
    with conn.cursor() as cur:
        cur.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id SERIAL PRIMARY KEY,
                name TEXT NOT NULL UNIQUE,
                description TEXT,
                category TEXT NOT NULL,
                muscle_group TEXT NOT NULL,
                equipment TEXT NOT NULL,
                updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
            )
        """)
    conn.commit()
    logger.info("Ensured exercises table exists")


# =============================================================================
# Exercise Writes
# =============================================================================

def find_exercise_id(cur, name: str) -> Optional[int]:
    cur.execute("SELECT id FROM exercises WHERE name = %s LIMIT 1", (name,))
    row = cur.fetchone()
    return row[0] if row else None


def update_exercise(cur, exercise_id: int, exercise: Exercise) -> None:
    params = exercise.as_row()
    params['id'] = exercise_id
    cur.execute("""
        UPDATE exercises
        SET name = %(name)s,
            description = %(description)s,
            category = %(category)s,
            muscle_group = %(muscle_group)s,
            equipment = %(equipment)s,
            updated_at = now()
        WHERE id = %(id)s
    """, params)


def insert_exercise(cur, exercise: Exercise) -> None:
    cur.execute("""
        INSERT INTO exercises (name, description, category, muscle_group, equipment)
        VALUES (%(name)s, %(description)s, %(category)s, %(muscle_group)s, %(equipment)s)
    """, exercise.as_row())


def upsert_exercise(conn, exercise: Exercise) -> str:
    """
    Update the exercise with the same name, or insert it.

    Each call commits on success. On a database error the transaction is
    rolled back and ExerciseWriteError is raised.

    Returns:
        'inserted' or 'updated'
    """
    try:
        with conn.cursor() as cur:
            existing_id = find_exercise_id(cur, exercise.name)
            if existing_id is not None:
                update_exercise(cur, existing_id, exercise)
                action = UPDATED
            else:
                insert_exercise(cur, exercise)
                action = INSERTED
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        raise ExerciseWriteError(exercise.name, e) from e

    return action
