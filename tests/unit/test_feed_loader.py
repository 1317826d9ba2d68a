"""Unit tests for GitHub feed decoding."""
# ruff: noqa: D103

from __future__ import annotations

import datetime as dt
import typing as typ

import msgspec
import pytest

from ghcolumns.github.errors import FeedLoadError
from ghcolumns.github.loader import (
    convert_events,
    convert_notifications,
    decode_events,
    encode_items,
    load_events,
    load_notifications,
)
from tests.helpers.feed_builders import build_notification

if typ.TYPE_CHECKING:
    from pathlib import Path

_RAW_EVENT = b"""
[
  {
    "id": "4200",
    "type": "PushEvent",
    "actor": {"id": 1, "login": "octocat", "gravatar_id": ""},
    "repo": {"id": 7, "name": "octo/widgets", "url": null},
    "payload": {"ref": "refs/heads/main", "size": 2},
    "public": false,
    "created_at": "2024-05-01T09:30:00Z"
  }
]
"""

_RAW_NOTIFICATION = b"""
[
  {
    "id": "1",
    "reason": "review_requested",
    "unread": true,
    "subject": {"title": "Fix it", "type": "PullRequest", "url": null},
    "repository": {"full_name": "octo/widgets", "private": true, "fork": false},
    "updated_at": "2024-05-02T10:00:00Z",
    "last_read_at": null
  }
]
"""


def test_decodes_raw_event_payload_ignoring_unknown_fields() -> None:
    events = decode_events(_RAW_EVENT)

    assert len(events) == 1
    event = events[0]
    assert event.id == "4200"
    assert event.actor is not None
    assert event.actor.login == "octocat"
    assert event.repo is not None
    assert event.repo.name == "octo/widgets"
    assert event.public is False
    assert event.payload == {"ref": "refs/heads/main", "size": 2}
    assert event.created_at == dt.datetime(2024, 5, 1, 9, 30, tzinfo=dt.UTC)
    assert event.saved is False
    assert event.merged == ()


def test_loads_notification_file(tmp_path: Path) -> None:
    path = tmp_path / "notifications.json"
    path.write_bytes(_RAW_NOTIFICATION)

    (notification,) = load_notifications(path)

    assert notification.reason == "review_requested"
    assert notification.unread is True
    assert notification.repository is not None
    assert notification.repository.private is True
    assert notification.last_read_at is None


@pytest.mark.parametrize(
    "raw",
    [
        pytest.param(b"{}", id="not_an_array"),
        pytest.param(b'[{"type": "PushEvent"}]', id="missing_id"),
        pytest.param(b"[", id="truncated"),
    ],
)
def test_invalid_event_feed_raises(raw: bytes) -> None:
    with pytest.raises(FeedLoadError, match="invalid feed <input>"):
        decode_events(raw)


def test_missing_feed_file_raises(tmp_path: Path) -> None:
    missing = tmp_path / "missing.json"

    with pytest.raises(FeedLoadError, match="failed to read feed"):
        load_events(missing)


def test_convert_parsed_items() -> None:
    events = convert_events([{"id": 1, "type": "WatchEvent"}])
    notifications = convert_notifications([{"id": "n", "reason": "mention"}])

    assert events[0].id == 1
    assert notifications[0].reason == "mention"

    with pytest.raises(FeedLoadError, match="invalid feed payload"):
        convert_notifications([{"id": "n"}])


def test_encode_items_writes_json_array() -> None:
    encoded = encode_items([build_notification("n1", unread=True)])

    decoded = msgspec.json.decode(encoded)
    assert isinstance(decoded, list)
    assert decoded[0]["id"] == "n1"
    assert decoded[0]["unread"] is True
    assert decoded[0]["repository"]["full_name"] == "octo/widgets"
