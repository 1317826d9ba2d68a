"""Privacy predicates for GitHub feed items.

GitHub returns notifications for private repositories even when the
dashboard lacks private repository access, and events may be flagged
private either by GitHub (``public: false``) or by the dashboard's repository
enrichment. The pipelines take these predicates as injectable strategies.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from .models import EnhancedGitHubEvent, EnhancedGitHubNotification


class EventPrivacyPredicate(typ.Protocol):
    """Callable deciding whether an activity event is private."""

    def __call__(self, event: EnhancedGitHubEvent, /) -> bool: ...


class NotificationPrivacyPredicate(typ.Protocol):
    """Callable deciding whether a notification is private."""

    def __call__(self, notification: EnhancedGitHubNotification, /) -> bool: ...


def is_event_private(event: EnhancedGitHubEvent) -> bool:
    """Return True when the event is not public or its repository is private."""
    if event.public is False:
        return True
    return event.repo is not None and event.repo.private is True


def is_notification_private(notification: EnhancedGitHubNotification) -> bool:
    """Return True when the notification's repository is private."""
    repository = notification.repository
    return repository is not None and repository.private is True
