"""Stable de-duplication and ordering helpers for feed items."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def unique_by[T](
    items: cabc.Iterable[T], key: cabc.Callable[[T], cabc.Hashable]
) -> list[T]:
    """Return items in order, dropping later items whose key was already seen."""
    seen: set[cabc.Hashable] = set()
    result: list[T] = []
    for item in items:
        item_key = key(item)
        if item_key in seen:
            continue
        seen.add(item_key)
        result.append(item)
    return result


def _missing_first(value: object) -> tuple[bool, object]:
    # Missing values rank above every present value.
    return (value is None, value)


def order_by_desc[T](
    items: cabc.Iterable[T],
    keys: cabc.Sequence[cabc.Callable[[T], typ.Any]],
) -> list[T]:
    """Sort items descending by each key in turn, keeping ties in input order.

    ``None`` key values sort before every present value of the same key.
    """
    return sorted(
        items,
        key=lambda item: tuple(_missing_first(key(item)) for key in keys),
        reverse=True,
    )
