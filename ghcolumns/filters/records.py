"""Evaluation of sparse allow/deny filter records.

A filter record maps a discriminant (event type, notification reason) to
``True``, ``False`` or ``None``. The same record shape serves as a deny-list
or an allow-list depending on its contents:

- When every forced value is the opposite of the default outcome, the record
  is a deny-list: only the marked discriminants flip.
- When at least one forced value equals the default outcome, the record is
  strict and acts as an allow-list: anything not explicitly marked with the
  default flips.

Examples
--------
>>> item_passes_filter_record({"PushEvent": False}, "WatchEvent", True)
True
>>> item_passes_filter_record({"PushEvent": True}, "WatchEvent", True)
False

"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def filter_record_has_any_forced_value(
    record: cabc.Mapping[str, bool | None] | None,
) -> bool:
    """Return True when the record holds at least one boolean value."""
    if not record:
        return False
    return any(isinstance(value, bool) for value in record.values())


def filter_record_has_this_value(
    record: cabc.Mapping[str, bool | None] | None,
    value_to_check: bool,  # noqa: FBT001
) -> bool:
    """Return True when any entry of the record is exactly ``value_to_check``."""
    if not record:
        return False
    return any(value is value_to_check for value in record.values())


def _lookup(record: cabc.Mapping[str, bool | None], value: object) -> bool | None:
    if not isinstance(value, str):
        return None
    forced = record.get(value)
    return forced if isinstance(forced, bool) else None


def item_passes_filter_record(
    record: cabc.Mapping[str, bool | None] | None,
    value: object,
    default_value: bool,  # noqa: FBT001
) -> bool:
    """Decide whether a discriminant passes a filter record.

    Parameters
    ----------
    record
        Sparse filter record, possibly ``None``.
    value
        The item's discriminant. Missing or non-string values never match
        an entry.
    default_value
        Outcome when the record exerts no constraint on ``value``.

    Returns
    -------
    bool
        ``default_value`` or its negation, per the deny/allow-list rules.

    """
    if record is None or not filter_record_has_any_forced_value(record):
        return default_value

    forced = _lookup(record, value)
    if forced is (not default_value):
        return not default_value

    is_strict = filter_record_has_this_value(record, default_value)
    if is_strict and forced is not default_value:
        return not default_value

    return default_value
