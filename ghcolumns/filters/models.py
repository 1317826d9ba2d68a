"""Column filter configuration structures.

Field names follow Python conventions; the encoded form keeps the dashboard's
wire keys (``clearedAt``) so stored column settings decode unchanged.
"""

from __future__ import annotations

import datetime as dt  # noqa: TC003

import msgspec

type FilterRecord = dict[str, bool | None]
"""Sparse allow/deny map keyed by event type or notification reason."""


class ActivityFilters(msgspec.Struct, kw_only=True, frozen=True):
    """Activity-specific filter axes.

    Attributes
    ----------
    types
        Filter record keyed by GitHub event type (``PushEvent``, ...).

    """

    types: FilterRecord | None = None


class NotificationFilters(msgspec.Struct, kw_only=True, frozen=True):
    """Notification-specific filter axes.

    Attributes
    ----------
    reasons
        Filter record keyed by notification reason (``mention``, ...).

    """

    reasons: FilterRecord | None = None


class ActivityColumnFilters(msgspec.Struct, kw_only=True, frozen=True):
    """Filters configured on an activity (events) column.

    Attributes
    ----------
    cleared_at
        Events created at or before this instant are archived unless saved.
    private
        ``True`` keeps only private events, ``False`` only public ones.
    saved
        ``True`` keeps only saved events, ``False`` hides saved events.
    activity
        Event type allow/deny record.

    """

    cleared_at: dt.datetime | None = msgspec.field(default=None, name="clearedAt")
    private: bool | None = None
    saved: bool | None = None
    activity: ActivityFilters | None = None


class NotificationColumnFilters(msgspec.Struct, kw_only=True, frozen=True):
    """Filters configured on a notifications column.

    Attributes
    ----------
    cleared_at
        Read notifications updated at or before this instant are archived
        unless saved.
    private
        ``True`` keeps only private notifications, ``False`` only public ones.
    saved
        ``True`` keeps only saved notifications, ``False`` hides them.
    unread
        ``True`` keeps only unread notifications, ``False`` only read ones.
    notifications
        Notification reason allow/deny record.

    """

    cleared_at: dt.datetime | None = msgspec.field(default=None, name="clearedAt")
    private: bool | None = None
    saved: bool | None = None
    unread: bool | None = None
    notifications: NotificationFilters | None = None


type ColumnFilters = ActivityColumnFilters | NotificationColumnFilters
