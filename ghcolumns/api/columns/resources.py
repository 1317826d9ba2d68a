"""Column filtering resources.

``POST /columns/notifications`` and ``POST /columns/events`` run a column's
raw feed through the matching pipeline. Both accept a JSON body::

    {
        "items": [...],
        "filters": {"clearedAt": "...", "saved": true, ...},
        "hasPrivateAccess": false
    }

and respond with ``{"items": [...], "count": n}``. When
``hasPrivateAccess`` is omitted the service-wide default from
:class:`ghcolumns.config.ColumnsConfig` applies.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import falcon
import msgspec

from ghcolumns.api.errors import InvalidInputError
from ghcolumns.filters.models import ActivityColumnFilters, NotificationColumnFilters
from ghcolumns.filters.pipelines import get_filtered_events, get_filtered_notifications
from ghcolumns.github.merge import merge_similar_events
from ghcolumns.github.models import EnhancedGitHubEvent, EnhancedGitHubNotification
from ghcolumns.github.privacy import is_event_private, is_notification_private

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from ghcolumns.github.merge import EventMerger
    from ghcolumns.github.privacy import (
        EventPrivacyPredicate,
        NotificationPrivacyPredicate,
    )

__all__ = [
    "ActivityColumnRequest",
    "ActivityColumnResource",
    "ColumnResourceDependencies",
    "NotificationColumnRequest",
    "NotificationColumnResource",
]


class NotificationColumnRequest(msgspec.Struct, kw_only=True):
    """Body of ``POST /columns/notifications``."""

    items: list[EnhancedGitHubNotification] = msgspec.field(default_factory=list)
    filters: NotificationColumnFilters | None = None
    has_private_access: bool | None = msgspec.field(
        default=None, name="hasPrivateAccess"
    )


class ActivityColumnRequest(msgspec.Struct, kw_only=True):
    """Body of ``POST /columns/events``."""

    items: list[EnhancedGitHubEvent] = msgspec.field(default_factory=list)
    filters: ActivityColumnFilters | None = None
    has_private_access: bool | None = msgspec.field(
        default=None, name="hasPrivateAccess"
    )


@dc.dataclass(frozen=True, slots=True)
class ColumnResourceDependencies:
    """Collaborators shared by the column resources.

    Attributes
    ----------
    has_private_access
        Default private access flag for requests that omit it.
    event_privacy
        Privacy predicate for activity events.
    notification_privacy
        Privacy predicate for notifications.
    merge_events
        Similar-event grouping applied by the event pipeline.

    """

    has_private_access: bool = False
    event_privacy: EventPrivacyPredicate = is_event_private
    notification_privacy: NotificationPrivacyPredicate = is_notification_private
    merge_events: EventMerger = merge_similar_events


async def _decode[T](req: Request, decoder: msgspec.json.Decoder[T]) -> T:
    body = await req.stream.read()
    if not body:
        msg = "request body must be a JSON object"
        raise InvalidInputError(msg)
    try:
        return decoder.decode(body)
    except msgspec.DecodeError as exc:
        raise InvalidInputError(str(exc)) from exc


def _respond(resp: Response, items: list[typ.Any]) -> None:
    resp.content_type = falcon.MEDIA_JSON
    resp.data = msgspec.json.encode({"items": items, "count": len(items)})
    resp.status = falcon.HTTP_200


class NotificationColumnResource:
    """Resource filtering a notifications column."""

    _decoder = msgspec.json.Decoder(NotificationColumnRequest)

    def __init__(self, dependencies: ColumnResourceDependencies) -> None:
        """Configure the resource with its dependencies."""
        self._dependencies = dependencies

    async def on_post(self, req: Request, resp: Response) -> None:
        """Handle POST /columns/notifications requests."""
        body = await _decode(req, self._decoder)
        has_private_access = (
            self._dependencies.has_private_access
            if body.has_private_access is None
            else body.has_private_access
        )
        shown = get_filtered_notifications(
            body.items,
            body.filters,
            has_private_access,
            is_private=self._dependencies.notification_privacy,
        )
        _respond(resp, shown)


class ActivityColumnResource:
    """Resource filtering an activity column."""

    _decoder = msgspec.json.Decoder(ActivityColumnRequest)

    def __init__(self, dependencies: ColumnResourceDependencies) -> None:
        """Configure the resource with its dependencies."""
        self._dependencies = dependencies

    async def on_post(self, req: Request, resp: Response) -> None:
        """Handle POST /columns/events requests."""
        body = await _decode(req, self._decoder)
        has_private_access = (
            self._dependencies.has_private_access
            if body.has_private_access is None
            else body.has_private_access
        )
        shown = get_filtered_events(
            body.items,
            body.filters,
            has_private_access,
            is_private=self._dependencies.event_privacy,
            merge=self._dependencies.merge_events,
        )
        _respond(resp, shown)
