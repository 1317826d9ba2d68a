"""YAML loaders for column filter configurations.

Filter documents use the dashboard's wire keys::

    clearedAt: 2024-05-01T09:30:00Z
    saved: false
    activity:
      types:
        PushEvent: false
        WatchEvent: false

JSON documents load as well, being a subset of YAML 1.2.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ghcolumns.github.constants import KNOWN_EVENT_TYPES, KNOWN_NOTIFICATION_REASONS
from ghcolumns.logging import get_logger, log_warning

from .errors import ColumnFilterValidationError
from .models import ActivityColumnFilters, NotificationColumnFilters

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import FilterRecord

YAML_VERSION = (1, 2)

logger = get_logger(__name__)


def _yaml() -> YAML:
    yaml = YAML(typ="safe")
    yaml.version = YAML_VERSION
    yaml.allow_duplicate_keys = False
    return yaml


def _read_document(path: Path | str) -> object:
    path_obj = Path(path)
    try:
        loaded = _yaml().load(path_obj.read_text(encoding="utf-8"))
    except (OSError, YAMLError) as exc:
        raise ColumnFilterValidationError([f"failed to parse YAML: {exc}"]) from exc
    # An empty document configures nothing.
    return {} if loaded is None else loaded


def _warn_unknown_keys(
    record: FilterRecord | None, known: cabc.Set[str], axis: str
) -> None:
    if not record:
        return
    for key in record:
        if key not in known:
            log_warning(logger, "Unknown %s %r in column filters", axis, key)


def convert_activity_filters(data: object) -> ActivityColumnFilters:
    """Convert parsed data into activity column filters."""
    try:
        filters = msgspec.convert(data, type=ActivityColumnFilters)
    except msgspec.ValidationError as exc:
        raise ColumnFilterValidationError([f"schema validation failed: {exc}"]) from exc

    if filters.activity is not None:
        _warn_unknown_keys(filters.activity.types, KNOWN_EVENT_TYPES, "event type")
    return filters


def convert_notification_filters(data: object) -> NotificationColumnFilters:
    """Convert parsed data into notification column filters."""
    try:
        filters = msgspec.convert(data, type=NotificationColumnFilters)
    except msgspec.ValidationError as exc:
        raise ColumnFilterValidationError([f"schema validation failed: {exc}"]) from exc

    if filters.notifications is not None:
        _warn_unknown_keys(
            filters.notifications.reasons,
            KNOWN_NOTIFICATION_REASONS,
            "notification reason",
        )
    return filters


def load_activity_filters(path: Path | str) -> ActivityColumnFilters:
    """Parse an activity column filter file."""
    return convert_activity_filters(_read_document(path))


def load_notification_filters(path: Path | str) -> NotificationColumnFilters:
    """Parse a notification column filter file."""
    return convert_notification_filters(_read_document(path))
