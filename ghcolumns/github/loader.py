"""JSON decoders for GitHub feed files and payloads."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec

from .errors import FeedLoadError
from .models import EnhancedGitHubEvent, EnhancedGitHubNotification

_EVENTS_DECODER = msgspec.json.Decoder(list[EnhancedGitHubEvent])
_NOTIFICATIONS_DECODER = msgspec.json.Decoder(list[EnhancedGitHubNotification])


def _read(path: Path | str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise FeedLoadError.unreadable(path, exc) from exc


def decode_events(
    raw: bytes | str, *, source: str = "<input>"
) -> list[EnhancedGitHubEvent]:
    """Decode a JSON array of activity events."""
    try:
        return _EVENTS_DECODER.decode(raw)
    except msgspec.DecodeError as exc:
        raise FeedLoadError.invalid(source, exc) from exc


def decode_notifications(
    raw: bytes | str, *, source: str = "<input>"
) -> list[EnhancedGitHubNotification]:
    """Decode a JSON array of notification threads."""
    try:
        return _NOTIFICATIONS_DECODER.decode(raw)
    except msgspec.DecodeError as exc:
        raise FeedLoadError.invalid(source, exc) from exc


def convert_events(items: typ.Any) -> list[EnhancedGitHubEvent]:  # noqa: ANN401
    """Convert already-parsed JSON data into activity events."""
    try:
        return msgspec.convert(items, type=list[EnhancedGitHubEvent])
    except msgspec.ValidationError as exc:
        raise FeedLoadError.invalid("payload", exc) from exc


def convert_notifications(
    items: typ.Any,  # noqa: ANN401
) -> list[EnhancedGitHubNotification]:
    """Convert already-parsed JSON data into notification threads."""
    try:
        return msgspec.convert(items, type=list[EnhancedGitHubNotification])
    except msgspec.ValidationError as exc:
        raise FeedLoadError.invalid("payload", exc) from exc


def load_events(path: Path | str) -> list[EnhancedGitHubEvent]:
    """Read and decode an activity event feed file."""
    return decode_events(_read(path), source=str(path))


def load_notifications(path: Path | str) -> list[EnhancedGitHubNotification]:
    """Read and decode a notification feed file."""
    return decode_notifications(_read(path), source=str(path))


def encode_items(
    items: typ.Sequence[EnhancedGitHubEvent | EnhancedGitHubNotification],
) -> bytes:
    """Encode feed items as a JSON array."""
    return msgspec.json.encode(list(items))
