"""
WGER Exercise Sync - Transformation

Turns raw WGER records into application exercise rows.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from .mappings import (
    CATEGORY_MAPPING, MUSCLE_MAPPING, EQUIPMENT_MAPPING, EXERCISE_TRANSLATIONS,
    DEFAULT_CATEGORY, DEFAULT_MUSCLE_GROUP, NO_EQUIPMENT, UNKNOWN_EQUIPMENT,
)
from .types import Exercise, WgerExercise

logger = logging.getLogger(__name__)


def translate_exercise_name(name: str, translations: Optional[Dict[str, str]] = None) -> str:
    if translations is None:
        translations = EXERCISE_TRANSLATIONS
    return translations.get(name) or name


def determine_category(exercise: WgerExercise) -> str:
    return CATEGORY_MAPPING.get(exercise.category_id, DEFAULT_CATEGORY)


def determine_muscle_group(exercise: WgerExercise) -> str:
    """Muscle group of the first listed muscle."""
    if not exercise.muscles:
        return DEFAULT_MUSCLE_GROUP
    return MUSCLE_MAPPING.get(exercise.muscles[0].id, DEFAULT_MUSCLE_GROUP)


def determine_equipment(exercise: WgerExercise) -> str:
    """Equipment of the first listed item; no equipment means bodyweight."""
    if not exercise.equipment:
        return NO_EQUIPMENT
    return EQUIPMENT_MAPPING.get(exercise.equipment[0].id, UNKNOWN_EQUIPMENT)


def transform_exercise(exercise: WgerExercise, translations: Optional[Dict[str, str]] = None) -> Exercise:
    return Exercise(
        name=translate_exercise_name(exercise.name, translations),
        description=exercise.description,
        category=determine_category(exercise),
        muscle_group=determine_muscle_group(exercise),
        equipment=determine_equipment(exercise),
    )


def transform_exercises(
    records: Iterable[Dict[str, Any]],
    language: str = 'en',
    translations: Optional[Dict[str, str]] = None,
) -> List[Exercise]:
    """
    Parse raw API records, keep those in `language`, and transform them.

    Input order is preserved. Records that are not objects or have no
    name are skipped.
    """
    exercises = []
    for record in records:
        if not isinstance(record, dict):
            logger.warning(f"Skipping malformed WGER record: {record!r}")
            continue

        parsed = WgerExercise.from_api(record)

        if parsed.language != language:
            continue

        if not parsed.name:
            logger.warning(f"Skipping WGER exercise {parsed.id}: no name")
            continue

        exercises.append(transform_exercise(parsed, translations))

    return exercises
