"""Quicksort, radix sort and merge sort working in place on lists."""

from __future__ import annotations

import random
from collections.abc import Callable, MutableSequence
from itertools import accumulate

PartitionCallback = Callable[[int, int, int, int], None]
PassCallback = Callable[[int, list[int]], None]


def partition(values: MutableSequence[int], lower: int, upper: int) -> int:
    """Partition ``values[lower..upper]`` around ``values[lower]``.

    Afterwards the pivot sits at the returned index, with no larger value
    before it and no smaller-or-equal value after it.
    """
    if not 0 <= lower <= upper < len(values):
        raise IndexError(f"bounds {lower}..{upper} out of range")
    pivot = values[lower]
    down, up = lower, upper
    while down < up:
        while values[down] <= pivot and down < upper:
            down += 1
        while values[up] > pivot:
            up -= 1
        if down < up:
            values[down], values[up] = values[up], values[down]
    values[lower] = values[up]
    values[up] = pivot
    return up


def quicksort(
    values: MutableSequence[int], on_partition: PartitionCallback | None = None
) -> None:
    """Sort ``values`` in place.

    ``on_partition(level, pivot, left, right)`` is called for each partitioned
    range once both of its halves are sorted; the whole list is level 1.
    """
    stack: list[tuple[int, int, int, int | None]] = [(0, len(values) - 1, 1, None)]
    while stack:
        left, right, level, pivot = stack.pop()
        if pivot is not None:
            if on_partition is not None:
                on_partition(level, pivot, left, right)
            continue
        if left >= right:
            continue
        p = partition(values, left, right)
        stack.append((left, right, level, p))
        stack.append((p + 1, right, level + 1, None))
        stack.append((left, p - 1, level + 1, None))


def quicksort_stack(values: MutableSequence[int]) -> None:
    """Sort in place with an explicit stack, always taking the smaller part next."""
    stack = [(0, len(values) - 1)]
    while stack:
        left, right = stack.pop()
        if left >= right:
            continue
        i = partition(values, left, right)
        if i - left < right - i:
            stack.append((i + 1, right))
            stack.append((left, i - 1))
        else:
            stack.append((left, i - 1))
            stack.append((i + 1, right))


def radix_sort(values: list[int], on_pass: PassCallback | None = None) -> None:
    """Sort non-negative integers in place, one decimal digit per pass.

    ``on_pass(place, snapshot)`` is called after the pass on digit ``place``.
    """
    if any(value < 0 for value in values):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(values, default=0)
    place = 1
    while largest // place > 0:
        counts = [0] * 10
        for value in values:
            counts[value // place % 10] += 1
        ends = list(accumulate(counts))
        ordered = [0] * len(values)
        for value in reversed(values):
            digit = value // place % 10
            ends[digit] -= 1
            ordered[ends[digit]] = value
        values[:] = ordered
        if on_pass is not None:
            on_pass(place, list(values))
        place *= 10


def _merge_sort(values: MutableSequence[int], lb: int, ub: int, temp: list[int]) -> None:
    if lb >= ub:
        return
    centre = (lb + ub) // 2
    _merge_sort(values, lb, centre, temp)
    _merge_sort(values, centre + 1, ub, temp)
    temp[lb : centre + 1] = values[lb : centre + 1]
    temp[centre + 1 : ub + 1] = list(reversed(values[centre + 1 : ub + 1]))
    i, j = lb, ub
    for k in range(lb, ub + 1):
        if temp[i] <= temp[j]:
            values[k] = temp[i]
            i += 1
        else:
            values[k] = temp[j]
            j -= 1


def merge_sort(values: MutableSequence[int]) -> None:
    """Sort in place by merging halves, the second copied in reverse."""
    _merge_sort(values, 0, len(values) - 1, list(values))


def random_data(
    count: int, limit: int = 10_000_000, rng: random.Random | None = None
) -> list[int]:
    """Return ``count`` random integers in ``0 .. limit-1``."""
    if count < 0:
        raise ValueError("count must not be negative")
    if limit <= 0:
        raise ValueError("limit must be positive")
    rng = rng or random.Random()
    return [rng.randrange(limit) for _ in range(count)]