"""Linear and binary search over sequences, with an append-if-missing variant."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import MutableSequence, Sequence
from typing import Any


def linear_search(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of the first element equal to ``key``, or ``None``."""
    for index, item in enumerate(items):
        if item == key:
            return index
    return None


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Halve the range of a sorted sequence until ``key`` is found.

    Returns the index where the probe met ``key``, or ``None`` if it is absent.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        middle = (low + high) // 2
        value = items[middle]
        if key == value:
            return middle
        if key < value:
            high = middle - 1
        else:
            low = middle + 1
    return None


def lsearch(items: MutableSequence[Any], key: Any, capacity: int | None = None) -> int:
    """Find ``key`` in ``items``, appending it when it is missing.

    Returns the index of the existing or newly added element. When ``items``
    already holds ``capacity`` elements and ``key`` is absent, nothing is
    added and :class:`OverflowError` is raised.
    """
    found = linear_search(items, key)
    if found is not None:
        return found
    if capacity is not None and len(items) >= capacity:
        raise OverflowError(f"no room to add {key!r}: capacity {capacity} reached")
    items.append(key)
    return len(items) - 1


def bsearch(items: Sequence[Any], key: Any) -> int | None:
    """Look ``key`` up in a sorted sequence; return its index or ``None``."""
    index = bisect_left(items, key)
    if index < len(items) and items[index] == key:
        return index
    return None