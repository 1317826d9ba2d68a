"""Errors raised while loading column filter configurations."""

from __future__ import annotations


class ColumnFilterValidationError(ValueError):
    """Raised when a column filter document cannot be loaded."""

    def __init__(self, issues: list[str]) -> None:
        """Capture validation issues whilst preserving the aggregated message."""
        super().__init__("\n".join(issues))
        self.issues = issues
