"""Cleared, saved and inbox resolution shared by both column pipelines.

Each item lands in one of three buckets:

- *saved*: the user kept it for later;
- *cleared*: it is older than the column's ``clearedAt`` mark and nothing
  keeps it alive;
- *inbox*: everything else.

The column's ``saved`` filter picks which of the saved and inbox buckets are
shown. Cleared items are never shown by column filtering.
"""

from __future__ import annotations

import typing as typ

from ghcolumns.common.time import as_utc

if typ.TYPE_CHECKING:
    import datetime as dt

    from .models import ActivityColumnFilters, NotificationColumnFilters

# No column currently offers a cleared-items view.
SHOW_CLEARED: typ.Final = False


def is_cleared(timestamp: dt.datetime | None, cleared_at: dt.datetime | None) -> bool:
    """Return True when ``timestamp`` is at or before the ``cleared_at`` mark.

    Items without a timestamp are never considered cleared.
    """
    stamp = as_utc(timestamp)
    mark = as_utc(cleared_at)
    if stamp is None or mark is None:
        return False
    return stamp <= mark


def resolve_cleared_saved_inbox(
    *,
    saved: bool,
    cleared: bool,
    archivable: bool,
    filters: ActivityColumnFilters | NotificationColumnFilters,
) -> bool:
    """Return whether an item is visible given the column's saved filter.

    Parameters
    ----------
    saved
        Whether the user saved the item for later.
    cleared
        Whether the item falls at or before the column's ``clearedAt`` mark.
    archivable
        Whether clearing applies to the item at all. Unread notifications
        stay in the inbox even when cleared.
    filters
        Column filters providing the tri-state ``saved`` axis.

    """
    show_save_for_later = filters.saved is not False
    show_inbox = filters.saved is not True

    if cleared and archivable and not (show_save_for_later and saved):
        return SHOW_CLEARED

    if saved:
        return show_save_for_later

    return show_inbox
