"""Errors raised while reading GitHub feed files."""

from __future__ import annotations


class FeedLoadError(ValueError):
    """Raised when a feed file cannot be read or decoded."""

    @classmethod
    def unreadable(cls, path: object, exc: BaseException) -> FeedLoadError:
        """Return an error for a feed file that could not be read."""
        return cls(f"failed to read feed {path}: {exc}")

    @classmethod
    def invalid(cls, source: object, exc: BaseException) -> FeedLoadError:
        """Return an error for feed content that does not match the item schema."""
        return cls(f"invalid feed {source}: {exc}")
