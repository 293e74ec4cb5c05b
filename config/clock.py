"""Timezone-aware time helpers."""

from datetime import datetime

import pytz

from config.settings import settings


def current_time(timezone: str | None = None) -> datetime:
    """Return the current time in ``timezone`` (default: ``settings.timezone``)."""
    return datetime.now(pytz.timezone(timezone or settings.timezone))


def as_aware(value: datetime, timezone: str | None = None) -> datetime:
    """Attach a timezone to a naive datetime.

    Client-supplied timestamps may arrive without an offset; they are read as
    local time in ``timezone`` (default: ``settings.timezone``) so they compare
    with server times.
    """
    if value.tzinfo is not None and value.utcoffset() is not None:
        return value
    return pytz.timezone(timezone or settings.timezone).localize(value)
