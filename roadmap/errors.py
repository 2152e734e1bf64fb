"""Error taxonomy for the CSV ingestion pipeline."""
from typing import List, Optional


class TimelineError(Exception):
    """Base class for every failure the page can surface."""


class ConfigurationError(TimelineError):
    """A required CSV source location is not configured."""

    def __init__(self, message: str, missing: Optional[List[str]] = None):
        super().__init__(message)
        self.missing = list(missing or [])


class TransportError(TimelineError):
    """Non-2xx response or a failed network call."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(TimelineError):
    """Malformed CSV structure under the strict parse policy."""

    def __init__(self, message: str, issues: Optional[List[str]] = None):
        super().__init__(message)
        self.issues = list(issues or [message])
