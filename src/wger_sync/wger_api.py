"""
WGER API client.

API: v2 (https://wger.de/api/v2/)
Only the first page of /exercise/ is requested; `limit` controls its size.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

import requests

from .config import Settings
from .exceptions import WgerAPIError

logger = logging.getLogger(__name__)


def fetch_exercises(settings: Settings) -> List[Dict[str, Any]]:
    """Fetch one page of exercise records from WGER."""
    params = {
        'language': settings.language_id,
        'limit': settings.limit,
    }

    logger.info(f"Fetching exercises from {settings.exercises_url}")

    try:
        response = requests.get(
            settings.exercises_url,
            params=params,
            headers={'Accept': 'application/json'},
            timeout=settings.timeout,
        )
    except requests.RequestException as e:
        logger.error(f"Failed to reach WGER: {e}")
        raise WgerAPIError(f"Failed to reach WGER: {e}") from e

    if not 200 <= response.status_code < 300:
        body = response.text[:200]
        logger.error(f"WGER API error: {response.status_code} - {body}")
        raise WgerAPIError(
            f"WGER API returned {response.status_code}: {body}",
            status_code=response.status_code,
            body=body,
        )

    try:
        data = response.json()
    except ValueError as e:
        raise WgerAPIError(f"WGER API returned invalid JSON: {e}") from e

    results = data.get('results') if isinstance(data, dict) else None
    if not isinstance(results, list):
        raise WgerAPIError("WGER API response has no 'results' list")

    if data.get('next'):
        logger.debug(f"More results available ({data.get('count')} total); only the first page is synced")

    return results
