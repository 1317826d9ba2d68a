"""Typed GitHub feed items as delivered to dashboard columns.

The structs mirror the subset of the GitHub events and notifications REST
payloads that column filtering needs, plus the per-user flags (``saved``,
``unread``) the dashboard layers on top. Unknown payload fields are ignored
when decoding so raw API responses can be fed in directly.
"""

from __future__ import annotations

import datetime as dt  # noqa: TC003
import typing as typ

import msgspec


class GitHubActor(msgspec.Struct, kw_only=True, frozen=True):
    """User or bot that triggered an activity event."""

    id: int | str | None = None
    login: str
    display_login: str | None = None
    avatar_url: str | None = None


class GitHubRepo(msgspec.Struct, kw_only=True, frozen=True):
    """Repository reference carried by an activity event.

    Attributes
    ----------
    id
        GitHub repository identifier.
    name
        Repository slug in ``owner/name`` form.
    private
        Privacy flag when the dashboard enriched the event with it.

    """

    id: int | str | None = None
    name: str
    url: str | None = None
    private: bool | None = None


class GitHubRepository(msgspec.Struct, kw_only=True, frozen=True):
    """Repository object embedded in a notification thread."""

    id: int | str | None = None
    name: str | None = None
    full_name: str
    private: bool | None = None
    html_url: str | None = None


class NotificationSubject(msgspec.Struct, kw_only=True, frozen=True):
    """Subject (issue, pull request, release, ...) of a notification."""

    title: str
    type: str
    url: str | None = None
    latest_comment_url: str | None = None


class EnhancedGitHubEvent(msgspec.Struct, kw_only=True, frozen=True):
    """GitHub activity event enriched with dashboard state.

    Attributes
    ----------
    id
        GitHub event identifier. Identity for deduplication.
    type
        Event type discriminant (``PushEvent``, ``WatchEvent``, ...).
    actor
        Who triggered the event.
    repo
        Repository the event happened in.
    payload
        Raw type-specific payload, kept opaque.
    public
        GitHub's visibility flag for the event.
    created_at
        When GitHub recorded the event. Used for ``clearedAt`` comparisons.
    updated_at
        Dashboard-side update time, when known. Primary sort key.
    saved
        Whether the user saved the event for later.
    unread
        Dashboard read state. Not used by event filtering.
    merged
        Events folded into this one by the similar-event merge.

    """

    id: int | str
    type: str
    actor: GitHubActor | None = None
    repo: GitHubRepo | None = None
    payload: dict[str, typ.Any] = msgspec.field(default_factory=dict)
    public: bool = True
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    saved: bool = False
    unread: bool | None = None
    merged: tuple[EnhancedGitHubEvent, ...] = ()


class EnhancedGitHubNotification(msgspec.Struct, kw_only=True, frozen=True):
    """GitHub notification thread enriched with dashboard state."""

    id: int | str
    reason: str
    subject: NotificationSubject | None = None
    repository: GitHubRepository | None = None
    unread: bool = False
    saved: bool = False
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
    last_read_at: dt.datetime | None = None
    url: str | None = None


type FeedItem = EnhancedGitHubEvent | EnhancedGitHubNotification
