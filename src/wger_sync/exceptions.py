"""
WGER Exercise Sync - Exceptions
"""
from typing import Optional


class WgerSyncError(Exception):
    """Base error for the sync pipeline."""


class ConfigError(WgerSyncError):
    """Missing or malformed configuration."""


class WgerAPIError(WgerSyncError):
    """The WGER API could not be reached or returned something unusable."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ExerciseWriteError(WgerSyncError):
    """A single exercise could not be written to the database."""

    def __init__(self, name: str, cause: Exception):
        super().__init__(f"{name}: {cause}")
        self.name = name
        self.cause = cause
