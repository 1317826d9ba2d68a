"""Checks for whether a column's filters constrain anything at all."""

from __future__ import annotations

import typing as typ

from .records import filter_record_has_any_forced_value

if typ.TYPE_CHECKING:
    from .models import ActivityColumnFilters, NotificationColumnFilters


def _private_filter_applies(private: bool | None, *, has_private_access: bool) -> bool:
    # Without private access the view is already public-only, so only a
    # forced ``True`` narrows it further.
    if has_private_access:
        return isinstance(private, bool)
    return private is True


def _shared_axes_active(
    filters: ActivityColumnFilters | NotificationColumnFilters,
    *,
    has_private_access: bool,
) -> bool:
    return (
        filters.cleared_at is not None
        or _private_filter_applies(
            filters.private, has_private_access=has_private_access
        )
        or isinstance(filters.saved, bool)
    )


def activity_column_has_any_filter(
    filters: ActivityColumnFilters | None,
    has_private_access: bool,  # noqa: FBT001
) -> bool:
    """Return True when an activity column's filters would drop any event."""
    if filters is None:
        return False
    if _shared_axes_active(filters, has_private_access=has_private_access):
        return True
    return filters.activity is not None and filter_record_has_any_forced_value(
        filters.activity.types
    )


def notification_column_has_any_filter(
    filters: NotificationColumnFilters | None,
    has_private_access: bool,  # noqa: FBT001
) -> bool:
    """Return True when a notification column's filters would drop any item."""
    if filters is None:
        return False
    if _shared_axes_active(filters, has_private_access=has_private_access):
        return True
    if isinstance(filters.unread, bool):
        return True
    return filters.notifications is not None and filter_record_has_any_forced_value(
        filters.notifications.reasons
    )
