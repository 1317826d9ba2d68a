"""Command-line filtering of GitHub notification and activity feeds.

Usage:
    python -m ghcolumns.cli notifications feed.json --filters column.yaml
    python -m ghcolumns.cli events feed.json --no-private-access

Both commands print the filtered feed as a JSON array on stdout.

Environment variables:
    GHCOLUMNS_LOG_LEVEL           - Log level (default: INFO)
    GHCOLUMNS_HAS_PRIVATE_ACCESS  - Default for --private-access (default: false)
"""

from __future__ import annotations

import sys
from pathlib import Path  # noqa: TC003

from cyclopts import App

from ghcolumns.config import ColumnsConfig, ConfigError
from ghcolumns.filters.errors import ColumnFilterValidationError
from ghcolumns.filters.loader import load_activity_filters, load_notification_filters
from ghcolumns.filters.pipelines import get_filtered_events, get_filtered_notifications
from ghcolumns.github.errors import FeedLoadError
from ghcolumns.github.loader import encode_items, load_events, load_notifications
from ghcolumns.logging import configure_logging

app = App(
    name="ghcolumns",
    help="Filter GitHub notification and activity feeds like a dashboard column",
    version="0.1.0",
)


def _report_failure(subject: Path, exc: Exception) -> int:
    print(f"Column filtering failed for {subject}:", file=sys.stderr)
    issues = getattr(exc, "issues", None) or [str(exc)]
    for issue in issues:
        print(f"  - {issue}", file=sys.stderr)
    return 1


def _resolve_config() -> ColumnsConfig:
    config = ColumnsConfig.from_env()
    configure_logging(config.log_level)
    return config


@app.command
def notifications(
    feed: Path,
    *,
    filters: Path | None = None,
    private_access: bool | None = None,
) -> int:
    """Filter a notification feed.

    Args:
        feed: JSON file holding an array of notification threads.
        filters: YAML or JSON file holding the column's filters.
        private_access: Whether private repository access was granted.

    Returns:
        Exit code (0 for success, 1 when an input is invalid).

    """
    try:
        config = _resolve_config()
        items = load_notifications(feed)
    except (ConfigError, FeedLoadError) as exc:
        return _report_failure(feed, exc)
    column_filters = None
    if filters is not None:
        try:
            column_filters = load_notification_filters(filters)
        except ColumnFilterValidationError as exc:
            return _report_failure(filters, exc)

    shown = get_filtered_notifications(
        items,
        column_filters,
        config.has_private_access if private_access is None else private_access,
    )
    print(encode_items(shown).decode("utf-8"))
    return 0


@app.command
def events(
    feed: Path,
    *,
    filters: Path | None = None,
    private_access: bool | None = None,
) -> int:
    """Filter and merge an activity event feed.

    Args:
        feed: JSON file holding an array of activity events.
        filters: YAML or JSON file holding the column's filters.
        private_access: Whether private repository access was granted.

    Returns:
        Exit code (0 for success, 1 when an input is invalid).

    """
    try:
        config = _resolve_config()
        items = load_events(feed)
    except (ConfigError, FeedLoadError) as exc:
        return _report_failure(feed, exc)
    column_filters = None
    if filters is not None:
        try:
            column_filters = load_activity_filters(filters)
        except ColumnFilterValidationError as exc:
            return _report_failure(filters, exc)

    shown = get_filtered_events(
        items,
        column_filters,
        config.has_private_access if private_access is None else private_access,
    )
    print(encode_items(shown).decode("utf-8"))
    return 0


def main() -> int:
    """Entry point for the CLI."""
    return app()


if __name__ == "__main__":
    sys.exit(main())
