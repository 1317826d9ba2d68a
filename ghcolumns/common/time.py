"""Common time utilities."""

from __future__ import annotations

import datetime as dt


def as_utc(value: dt.datetime | None) -> dt.datetime | None:
    """Return ``value`` as an aware UTC timestamp.

    Naive timestamps are interpreted as UTC so that GitHub timestamps and
    user-supplied ``clearedAt`` values always compare safely.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.UTC)
    return value.astimezone(dt.UTC)
