# src/codemmunity/db/time.py
"""Time utilities for database models."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime.

    MySQL ``DATETIME`` columns carry no zone, so rows are stored in UTC without one.
    """
    return datetime.now(UTC).replace(tzinfo=None)
