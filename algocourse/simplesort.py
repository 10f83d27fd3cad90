"""Quadratic sorting algorithms that can report every comparison step."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence
from functools import cmp_to_key

from algocourse.strings import compare

StepCallback = Callable[[int, int, list[int]], None]


def format_array(values: Iterable[int]) -> str:
    """Render values as ``"array: "`` followed by each value and a space."""
    return "array: " + "".join(f"{value} " for value in values)


def _swap(values: MutableSequence[int], a: int, b: int) -> None:
    values[a], values[b] = values[b], values[a]


def _report(on_step: StepCallback | None, i: int, j: int, values: MutableSequence[int]) -> None:
    if on_step is not None:
        on_step(i, j, list(values))


def bubble_sort(values: MutableSequence[int], on_step: StepCallback | None = None) -> None:
    """Sort ``values`` in place by bubbling the smallest value towards the front.

    ``on_step(i, j, snapshot)`` is called after every comparison.
    """
    n = len(values)
    for i in range(n - 1):
        for j in range(n - 1, i, -1):
            if values[j - 1] > values[j]:
                _swap(values, j, j - 1)
            _report(on_step, i, j, values)


def bubble_sort_early_exit(
    values: MutableSequence[int], on_step: StepCallback | None = None
) -> None:
    """Bubble sort in place, stopping after the first pass that swaps nothing."""
    n = len(values)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1, i, -1):
            if values[j - 1] > values[j]:
                _swap(values, j, j - 1)
                swapped = True
            _report(on_step, i, j, values)
        if not swapped:
            break


def selection_sort(values: MutableSequence[int], on_step: StepCallback | None = None) -> None:
    """Sort in place by moving the smallest remaining value to each position."""
    n = len(values)
    for i in range(n - 1):
        min_index = i
        for j in range(i + 1, n):
            if values[j] < values[min_index]:
                min_index = j
            _report(on_step, i, j, values)
        _swap(values, i, min_index)


def insertion_sort(values: MutableSequence[int], on_step: StepCallback | None = None) -> None:
    """Sort in place by sinking each value into the sorted prefix.

    ``on_step(i, j, snapshot)`` is called after every swap.
    """
    for i in range(1, len(values)):
        j = i
        while j >= 1 and values[j - 1] > values[j]:
            _swap(values, j, j - 1)
            j -= 1
            _report(on_step, i, j, values)


def int_compare(a: int, b: int) -> int:
    """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def sort_strings(values: Iterable[str]) -> list[str]:
    """Return the strings in lexicographic order."""
    return sorted(values, key=cmp_to_key(compare))