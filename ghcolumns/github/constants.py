"""Known GitHub discriminants used as filter record keys."""

from __future__ import annotations

import enum


class EventType(enum.StrEnum):
    """Activity event types published by the GitHub events API."""

    COMMIT_COMMENT = "CommitCommentEvent"
    CREATE = "CreateEvent"
    DELETE = "DeleteEvent"
    FORK = "ForkEvent"
    GOLLUM = "GollumEvent"
    ISSUE_COMMENT = "IssueCommentEvent"
    ISSUES = "IssuesEvent"
    MEMBER = "MemberEvent"
    PUBLIC = "PublicEvent"
    PULL_REQUEST = "PullRequestEvent"
    PULL_REQUEST_REVIEW = "PullRequestReviewEvent"
    PULL_REQUEST_REVIEW_COMMENT = "PullRequestReviewCommentEvent"
    PUSH = "PushEvent"
    RELEASE = "ReleaseEvent"
    WATCH = "WatchEvent"


class NotificationReason(enum.StrEnum):
    """Reasons GitHub attaches to a notification thread."""

    ASSIGN = "assign"
    AUTHOR = "author"
    CI_ACTIVITY = "ci_activity"
    COMMENT = "comment"
    INVITATION = "invitation"
    MANUAL = "manual"
    MENTION = "mention"
    REVIEW_REQUESTED = "review_requested"
    SECURITY_ALERT = "security_alert"
    STATE_CHANGE = "state_change"
    SUBSCRIBED = "subscribed"
    TEAM_MENTION = "team_mention"


KNOWN_EVENT_TYPES: frozenset[str] = frozenset(member.value for member in EventType)
KNOWN_NOTIFICATION_REASONS: frozenset[str] = frozenset(
    member.value for member in NotificationReason
)
