"""
WGER Exercise Sync - Type Definitions

Dataclasses for raw WGER records, application exercise rows and sync results.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any


# WGER language ids -> short names (https://wger.de/api/v2/language/)
WGER_LANGUAGES = {
    1: 'de',
    2: 'en',
    3: 'bg',
    4: 'es',
    5: 'ru',
    6: 'nl',
    7: 'pt',
    8: 'el',
    9: 'cs',
    10: 'sv',
    11: 'no',
    12: 'fr',
    13: 'it',
    14: 'pl',
    15: 'uk',
    16: 'tr',
}


# =============================================================================
# WGER records
# =============================================================================

@dataclass
class WgerMuscle:
    id: int
    name: str = ''
    is_front: bool = False


@dataclass
class WgerEquipment:
    id: int
    name: str = ''


def _ref_id(value: Any) -> Optional[int]:
    """Id of a nested reference that may be an object or a bare id."""
    if isinstance(value, dict):
        return value.get('id')
    return value


def _language_code(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        if value.get('short_name'):
            return value['short_name']
        value = value.get('id')
    return WGER_LANGUAGES.get(value)


@dataclass
class WgerExercise:
    """One exercise record as returned by the WGER API."""

    id: Optional[int]
    name: str
    description: str = ''
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    muscles: List[WgerMuscle] = field(default_factory=list)
    equipment: List[WgerEquipment] = field(default_factory=list)
    language: Optional[str] = None

    @classmethod
    def from_api(cls, record: Dict[str, Any]) -> 'WgerExercise':
        category = record.get('category')

        muscles = []
        for m in record.get('muscles') or []:
            if isinstance(m, dict):
                muscles.append(WgerMuscle(
                    id=m.get('id'),
                    name=m.get('name', ''),
                    is_front=bool(m.get('is_front', False)),
                ))
            else:
                muscles.append(WgerMuscle(id=m))

        equipment = []
        for eq in record.get('equipment') or []:
            if isinstance(eq, dict):
                equipment.append(WgerEquipment(id=eq.get('id'), name=eq.get('name', '')))
            else:
                equipment.append(WgerEquipment(id=eq))

        return cls(
            id=record.get('id'),
            name=(record.get('name') or '').strip(),
            description=record.get('description') or '',
            category_id=_ref_id(category),
            category_name=category.get('name') if isinstance(category, dict) else None,
            muscles=muscles,
            equipment=equipment,
            language=_language_code(record.get('language')),
        )


# =============================================================================
# Application rows
# =============================================================================

@dataclass
class Exercise:
    """Row of the application's exercises table."""

    name: str
    description: str
    category: str
    muscle_group: str
    equipment: str

    def as_row(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class SyncResult:
    """Counters for one sync run."""

    fetched: int = 0
    filtered: int = 0
    inserted: int = 0
    updated: int = 0
    failed: int = 0
    dry_run: bool = False
    failed_names: List[str] = field(default_factory=list)

    @property
    def written(self) -> int:
        return self.inserted + self.updated
