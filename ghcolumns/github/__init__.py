"""GitHub feed item models and the strategies column filtering consumes."""

from __future__ import annotations

from .constants import EventType, NotificationReason
from .errors import FeedLoadError
from .loader import (
    convert_events,
    convert_notifications,
    decode_events,
    decode_notifications,
    encode_items,
    load_events,
    load_notifications,
)
from .merge import EventMerger, keep_events_unmerged, merge_similar_events
from .models import (
    EnhancedGitHubEvent,
    EnhancedGitHubNotification,
    GitHubActor,
    GitHubRepo,
    GitHubRepository,
    NotificationSubject,
)
from .privacy import (
    EventPrivacyPredicate,
    NotificationPrivacyPredicate,
    is_event_private,
    is_notification_private,
)

__all__ = [
    "EnhancedGitHubEvent",
    "EnhancedGitHubNotification",
    "EventMerger",
    "EventPrivacyPredicate",
    "EventType",
    "FeedLoadError",
    "GitHubActor",
    "GitHubRepo",
    "GitHubRepository",
    "NotificationPrivacyPredicate",
    "NotificationReason",
    "NotificationSubject",
    "convert_events",
    "convert_notifications",
    "decode_events",
    "decode_notifications",
    "encode_items",
    "is_event_private",
    "is_notification_private",
    "keep_events_unmerged",
    "load_events",
    "load_notifications",
    "merge_similar_events",
]
