"""Column filtering for GitHub notification and activity feeds."""

from __future__ import annotations

from .errors import ColumnFilterValidationError
from .models import (
    ActivityColumnFilters,
    ActivityFilters,
    FilterRecord,
    NotificationColumnFilters,
    NotificationFilters,
)
from .pipelines import get_filtered_events, get_filtered_notifications
from .presence import (
    activity_column_has_any_filter,
    notification_column_has_any_filter,
)
from .records import (
    filter_record_has_any_forced_value,
    filter_record_has_this_value,
    item_passes_filter_record,
)
from .visibility import SHOW_CLEARED, is_cleared, resolve_cleared_saved_inbox

__all__ = [
    "SHOW_CLEARED",
    "ActivityColumnFilters",
    "ActivityFilters",
    "ColumnFilterValidationError",
    "FilterRecord",
    "NotificationColumnFilters",
    "NotificationFilters",
    "activity_column_has_any_filter",
    "filter_record_has_any_forced_value",
    "filter_record_has_this_value",
    "get_filtered_events",
    "get_filtered_notifications",
    "is_cleared",
    "item_passes_filter_record",
    "notification_column_has_any_filter",
    "resolve_cleared_saved_inbox",
]
