"""Helpers for sequences and for maps that index objects by the parts of their hash."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import TypeVar

__all__ = ["is_unique", "min_by", "max_by", "into_list", "into_map", "add", "sub"]

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

HashOf = Callable[[T], Iterable[K]]


def is_unique(items: Iterable[Hashable]) -> bool:
    """Check whether ``items`` holds no duplicate elements."""
    seen: set[Hashable] = set()
    for item in items:
        if item in seen:
            return False
        seen.add(item)
    return True


def _extremes(
    items: Iterable[T], get_value: Callable[[T, int], object], better: Callable[[object, object], bool]
) -> list[T]:
    best_value: object = None
    result: list[T] = []
    for index, item in enumerate(items):
        value = get_value(item, index)
        if not result or better(value, best_value):
            best_value = value
            result = [item]
        elif value == best_value:
            result.append(item)
    return result


def min_by(items: Iterable[T], get_value: Callable[[T, int], object]) -> list[T]:
    """Return every item whose value, from ``get_value(item, index)``, is the smallest."""
    return _extremes(items, get_value, lambda a, b: a < b)  # type: ignore[operator]


def max_by(items: Iterable[T], get_value: Callable[[T, int], object]) -> list[T]:
    """Return every item whose value, from ``get_value(item, index)``, is the largest."""
    return _extremes(items, get_value, lambda a, b: a > b)  # type: ignore[operator]


def into_list(mapping: Mapping[K, Sequence[T]], hash_of: HashOf) -> list[T]:
    """Flatten a map that may list an object under several keys into a list without duplicates."""
    result: list[T] = []
    seen: set[tuple] = set()
    for items in mapping.values():
        for item in items:
            key = tuple(hash_of(item))
            if key in seen:
                continue
            seen.add(key)
            result.append(item)
    return result


def _index(items: Iterable[T], hash_of: HashOf) -> dict[K, list[T]]:
    result: dict[K, list[T]] = {}
    for item in items:
        for part in hash_of(item):
            result.setdefault(part, []).append(item)
    return result


def into_map(items: Sequence[T], hash_of: HashOf) -> dict[K, list[T]]:
    """Index each item under every part of its hash.

    Raises ValueError when ``items`` holds duplicates.
    """
    if not is_unique(items):
        raise ValueError("items must not contain duplicate objects!")
    return _index(items, hash_of)


def add(
    am: Mapping[K, Sequence[T]], bm: Mapping[K, Sequence[T]], hash_of: HashOf
) -> dict[K, list[T]]:
    """Combine two indexed maps; objects of ``bm`` already in ``am`` are kept once."""
    first = into_list(am, hash_of)
    known = {tuple(hash_of(item)) for item in first}
    extra = [item for item in into_list(bm, hash_of) if tuple(hash_of(item)) not in known]
    return _index(first + extra, hash_of)


def sub(
    am: Mapping[K, Sequence[T]], bm: Mapping[K, Sequence[T]], hash_of: HashOf
) -> dict[K, list[T]]:
    """Return ``am`` re-indexed without the objects that also appear in ``bm``."""
    removed = {tuple(hash_of(item)) for item in into_list(bm, hash_of)}
    kept = [item for item in into_list(am, hash_of) if tuple(hash_of(item)) not in removed]
    return _index(kept, hash_of)