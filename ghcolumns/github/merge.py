"""Similar-event merging for activity columns.

Bursts of near-identical activity (a run of pushes to one repository, a user
starring the same repository twice) read better as a single row. The event
pipeline always hands its final list to an :class:`EventMerger`; the default
implementation folds runs of adjacent events that share a type, an actor and
a repository into the first event of the run.
"""

from __future__ import annotations

import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    from .models import EnhancedGitHubEvent


class EventMerger(typ.Protocol):
    """Callable grouping similar events of an ordered list."""

    def __call__(
        self, events: typ.Sequence[EnhancedGitHubEvent], /
    ) -> list[EnhancedGitHubEvent]: ...


def _merge_key(event: EnhancedGitHubEvent) -> tuple[str, str, str] | None:
    if event.actor is None or event.repo is None:
        return None
    return (event.type, event.actor.login, event.repo.name)


def _fold(run: list[EnhancedGitHubEvent]) -> EnhancedGitHubEvent:
    head, *rest = run
    if not rest:
        return head
    return msgspec.structs.replace(head, merged=(*head.merged, *rest))


def merge_similar_events(
    events: typ.Sequence[EnhancedGitHubEvent],
) -> list[EnhancedGitHubEvent]:
    """Fold adjacent events with the same type, actor and repository.

    The first event of each run is kept as the representative and the later
    ones are appended to its ``merged`` tuple, in order. Events without an
    actor or repository are never merged. The input is not modified.
    """
    result: list[EnhancedGitHubEvent] = []
    run: list[EnhancedGitHubEvent] = []
    run_key: tuple[str, str, str] | None = None

    for event in events:
        key = _merge_key(event)
        if run and key is not None and key == run_key:
            run.append(event)
            continue
        if run:
            result.append(_fold(run))
        run = [event]
        run_key = key

    if run:
        result.append(_fold(run))
    return result


def keep_events_unmerged(
    events: typ.Sequence[EnhancedGitHubEvent],
) -> list[EnhancedGitHubEvent]:
    """Return the events as a new list without grouping."""
    return list(events)
