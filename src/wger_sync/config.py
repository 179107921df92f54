"""
WGER Exercise Sync - Configuration

Environment Variables:
  DATABASE_URI           - Postgres connection (defaults to local)
  WGER_API_URL           - API base (default https://wger.de/api/v2)
  WGER_LANGUAGE_ID       - Language id sent to the API (default 2, English)
  WGER_LANGUAGE          - Language short name records must carry (default en)
  WGER_LIMIT             - Page size requested from the API (default 200)
  WGER_TIMEOUT           - HTTP timeout in seconds (default 30)
  EXERCISE_TRANSLATIONS  - Optional YAML file with extra name translations
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .exceptions import ConfigError

PROJECT_ROOT = Path(__file__).parent.parent.parent
ENV_FILE = PROJECT_ROOT / '.env'

DEFAULT_DATABASE_URI = 'postgresql://postgres@localhost:5432/postgres'
DEFAULT_API_URL = 'https://wger.de/api/v2'


def _int_setting(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}")
    if value <= 0:
        raise ConfigError(f"{key} must be positive, got {value}")
    return value


@dataclass
class Settings:
    database_uri: str = DEFAULT_DATABASE_URI
    api_url: str = DEFAULT_API_URL
    language_id: int = 2
    language: str = 'en'
    limit: int = 200
    timeout: int = 30
    translations_path: Optional[Path] = None

    @property
    def exercises_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/exercise/"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Build settings from the environment, loading .env first."""
        if env is None:
            load_dotenv(ENV_FILE)
            env = os.environ

        translations = env.get('EXERCISE_TRANSLATIONS')

        return cls(
            database_uri=env.get('DATABASE_URI') or DEFAULT_DATABASE_URI,
            api_url=env.get('WGER_API_URL') or DEFAULT_API_URL,
            language_id=_int_setting(env, 'WGER_LANGUAGE_ID', 2),
            language=env.get('WGER_LANGUAGE') or 'en',
            limit=_int_setting(env, 'WGER_LIMIT', 200),
            timeout=_int_setting(env, 'WGER_TIMEOUT', 30),
            translations_path=Path(translations) if translations else None,
        )
