"""
WGER Exercise Sync - Lookup Tables

Maps WGER category, muscle and equipment ids onto the application's
vocabulary, and holds the built-in exercise name translations.

Extra translations can be supplied in YAML:

    # config/exercise_translations.yaml
    translations:
      Romanian Deadlift: Soulevé de terre roumain
      Hip Thrust: Hip thrust
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_TRANSLATIONS_PATH = Path(__file__).parent.parent.parent / 'config' / 'exercise_translations.yaml'


CATEGORIES = ('strength', 'cardio', 'flexibility', 'bodyweight')
MUSCLE_GROUPS = ('chest', 'back', 'shoulders', 'biceps', 'triceps', 'legs', 'abs', 'full_body')
EQUIPMENT_TYPES = ('none', 'dumbbells', 'barbell', 'kettlebell', 'resistance_bands', 'machine', 'bodyweight')

DEFAULT_CATEGORY = 'strength'
DEFAULT_MUSCLE_GROUP = 'full_body'
NO_EQUIPMENT = 'bodyweight'
UNKNOWN_EQUIPMENT = 'none'


# WGER exercise category id -> category
CATEGORY_MAPPING: Dict[int, str] = {
    8: 'strength',      # Arms
    9: 'strength',      # Legs
    10: 'strength',     # Abs
    11: 'strength',     # Chest
    12: 'strength',     # Back
    13: 'strength',     # Shoulders
    14: 'cardio',       # Calves
    15: 'flexibility',  # Stretching
}

# WGER muscle id -> muscle group
MUSCLE_MAPPING: Dict[int, str] = {
    1: 'biceps',
    2: 'triceps',
    4: 'chest',
    5: 'back',
    6: 'abs',
    7: 'legs',
    8: 'legs',
    9: 'shoulders',
    10: 'chest',
    11: 'back',
    12: 'shoulders',
    13: 'biceps',
    14: 'triceps',
    15: 'abs',
}

# WGER equipment id -> equipment
EQUIPMENT_MAPPING: Dict[int, str] = {
    1: 'barbell',
    2: 'machine',
    3: 'dumbbells',
    4: 'bodyweight',
    5: 'none',
    6: 'resistance_bands',
    7: 'kettlebell',
}

# English WGER name -> name stored in the application
EXERCISE_TRANSLATIONS: Dict[str, str] = {
    'Bench Press': 'Développé couché',
    'Squat': 'Squat',
    'Deadlift': 'Soulevé de terre',
    'Pull-up': 'Traction',
    'Push-up': 'Pompe',
    'Dips': 'Dips',
    'Shoulder Press': 'Développé épaules',
    'Bicep Curl': 'Curl biceps',
    'Tricep Extension': 'Extension triceps',
    'Plank': 'Planche',
    'Crunch': 'Crunch',
    'Lunge': 'Fente',
}


def load_translations(path: Optional[Path] = None) -> Dict[str, str]:
    """Built-in translations merged with entries from a YAML file.

    With no path, config/exercise_translations.yaml is used if it exists.
    An explicit path that is not a readable YAML file is a ConfigError.
    """
    translations = dict(EXERCISE_TRANSLATIONS)

    if path is None:
        path = DEFAULT_TRANSLATIONS_PATH
        if not path.is_file():
            return translations
    else:
        path = Path(path)
        if not path.is_file():
            raise ConfigError(f"Translations file not found: {path}")

    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read translations file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid translations file {path}: {e}") from e

    extra = data.get('translations', data) if isinstance(data, dict) else None
    if not isinstance(extra, dict):
        raise ConfigError(f"Translations file must be a mapping of name -> translation: {path}")

    for source, target in extra.items():
        if not source or not target:
            logger.warning(f"Ignoring empty translation entry in {path}: {source!r} -> {target!r}")
            continue
        translations[str(source)] = str(target)

    logger.debug(f"Loaded {len(extra)} translations from {path}")
    return translations
