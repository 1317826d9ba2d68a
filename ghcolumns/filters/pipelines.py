"""Notification and activity column pipelines.

Both pipelines take the raw feed a column received (possibly duplicated and
in arbitrary order), de-duplicate it by item id keeping the first occurrence,
order it newest first, and then apply the column's filters. The event
pipeline finishes by grouping similar events.

Filtering is skipped when the column has no active filter, except when that
would leak private items into a view without private access: GitHub includes
private notifications and events in its feeds regardless of the repository
access the dashboard was granted. A column without any filter configuration
(``filters=None``) is never filtered.
"""

from __future__ import annotations

import typing as typ

from ghcolumns.common.time import as_utc
from ghcolumns.github.merge import merge_similar_events
from ghcolumns.github.privacy import is_event_private, is_notification_private
from ghcolumns.logging import get_logger, log_debug

from .ordering import order_by_desc, unique_by
from .presence import (
    activity_column_has_any_filter,
    notification_column_has_any_filter,
)
from .records import item_passes_filter_record
from .visibility import is_cleared, resolve_cleared_saved_inbox

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ghcolumns.github.merge import EventMerger
    from ghcolumns.github.models import (
        EnhancedGitHubEvent,
        EnhancedGitHubNotification,
    )
    from ghcolumns.github.privacy import (
        EventPrivacyPredicate,
        NotificationPrivacyPredicate,
    )

    from .models import (
        ActivityColumnFilters,
        FilterRecord,
        NotificationColumnFilters,
    )

logger = get_logger(__name__)


def _item_id(item: EnhancedGitHubEvent | EnhancedGitHubNotification) -> int | str:
    return item.id


_NOTIFICATION_SORT_KEYS: tuple[
    cabc.Callable[[EnhancedGitHubNotification], typ.Any], ...
] = (
    lambda notification: bool(notification.unread),
    lambda notification: as_utc(notification.updated_at),
    lambda notification: as_utc(notification.created_at),
)

_EVENT_SORT_KEYS: tuple[cabc.Callable[[EnhancedGitHubEvent], typ.Any], ...] = (
    lambda event: as_utc(event.updated_at),
    lambda event: as_utc(event.created_at),
)


def _notification_passes(
    notification: EnhancedGitHubNotification,
    filters: NotificationColumnFilters,
    reasons: FilterRecord | None,
    is_private: NotificationPrivacyPredicate,
) -> bool:
    if not item_passes_filter_record(reasons, notification.reason, True):  # noqa: FBT003
        return False

    if isinstance(filters.unread, bool) and filters.unread is not bool(
        notification.unread
    ):
        return False

    if isinstance(filters.private, bool) and (
        is_private(notification) is not filters.private
    ):
        return False

    return resolve_cleared_saved_inbox(
        saved=bool(notification.saved),
        cleared=is_cleared(notification.updated_at, filters.cleared_at),
        archivable=not notification.unread,
        filters=filters,
    )


def get_filtered_notifications(
    notifications: cabc.Iterable[EnhancedGitHubNotification],
    filters: NotificationColumnFilters | None,
    has_private_access: bool,  # noqa: FBT001
    *,
    is_private: NotificationPrivacyPredicate = is_notification_private,
) -> list[EnhancedGitHubNotification]:
    """Return the notifications a column shows, newest and unread first.

    Parameters
    ----------
    notifications
        Raw notification feed for the column.
    filters
        The column's filters. ``None`` disables filtering.
    has_private_access
        Whether the dashboard was granted private repository access.
    is_private
        Privacy predicate applied to each notification.

    Returns
    -------
    list[EnhancedGitHubNotification]
        De-duplicated, ordered and filtered notifications. The input is not
        modified.

    """
    received = list(notifications)
    ordered = order_by_desc(unique_by(received, _item_id), _NOTIFICATION_SORT_KEYS)

    if filters is None:
        log_debug(
            logger,
            "notification column: %d received, %d unique, no filters",
            len(received),
            len(ordered),
        )
        return ordered

    leaks_private = (
        not has_private_access
        and isinstance(filters.private, bool)
        and any(is_private(notification) for notification in ordered)
    )
    if not (
        notification_column_has_any_filter(filters, has_private_access)
        or leaks_private
    ):
        log_debug(
            logger,
            "notification column: %d received, %d unique, no active filter",
            len(received),
            len(ordered),
        )
        return ordered

    reasons = filters.notifications.reasons if filters.notifications else None
    shown = [
        notification
        for notification in ordered
        if _notification_passes(notification, filters, reasons, is_private)
    ]
    log_debug(
        logger,
        "notification column: %d received, %d unique, %d shown",
        len(received),
        len(ordered),
        len(shown),
    )
    return shown


def _event_passes(
    event: EnhancedGitHubEvent,
    filters: ActivityColumnFilters,
    types: FilterRecord | None,
    is_private: EventPrivacyPredicate,
    *,
    has_private_access: bool,
) -> bool:
    if not item_passes_filter_record(types, event.type, True):  # noqa: FBT003
        return False

    private = is_private(event)
    if not has_private_access and private:
        return False
    if isinstance(filters.private, bool) and private is not filters.private:
        return False

    return resolve_cleared_saved_inbox(
        saved=bool(event.saved),
        cleared=is_cleared(event.created_at, filters.cleared_at),
        archivable=True,
        filters=filters,
    )


def get_filtered_events(
    events: cabc.Iterable[EnhancedGitHubEvent],
    filters: ActivityColumnFilters | None,
    has_private_access: bool,  # noqa: FBT001
    *,
    is_private: EventPrivacyPredicate = is_event_private,
    merge: EventMerger = merge_similar_events,
) -> list[EnhancedGitHubEvent]:
    """Return the events an activity column shows, newest first and merged.

    Parameters
    ----------
    events
        Raw activity feed for the column.
    filters
        The column's filters. ``None`` disables filtering; the events are
        only de-duplicated, ordered and merged.
    has_private_access
        Whether the dashboard was granted private repository access.
    is_private
        Privacy predicate applied to each event.
    merge
        Grouping applied to the final list, whether or not it was filtered.

    Returns
    -------
    list[EnhancedGitHubEvent]
        De-duplicated, ordered, filtered and merged events. The input is not
        modified.

    """
    received = list(events)
    ordered = order_by_desc(unique_by(received, _item_id), _EVENT_SORT_KEYS)
    shown = ordered
    if filters is not None and (
        activity_column_has_any_filter(filters, has_private_access)
        or (
            not has_private_access and any(is_private(event) for event in ordered)
        )
    ):
        types = filters.activity.types if filters.activity else None
        shown = [
            event
            for event in ordered
            if _event_passes(
                event,
                filters,
                types,
                is_private,
                has_private_access=has_private_access,
            )
        ]

    merged = merge(shown)
    log_debug(
        logger,
        "activity column: %d received, %d unique, %d shown, %d after merge",
        len(received),
        len(ordered),
        len(shown),
        len(merged),
    )
    return merged
