import random

import pytest

from algocourse.simplesort import (
    bubble_sort,
    bubble_sort_early_exit,
    format_array,
    insertion_sort,
    int_compare,
    selection_sort,
    sort_strings,
)


def test_format_array_matches_source_layout():
    assert format_array([30, 50, 20, 10, 40]) == "array: 30 50 20 10 40 "


def test_format_array_empty():
    assert format_array([]) == "array: "


@pytest.mark.parametrize(
    "data",
    [
        [30, 50, 20, 10, 40],
        [10, 20, 30, 40, 50],
        [50, 40, 30, 20, 10],
    ],
)
def test_source_arrays_sorted(data):
    expected = sorted(data)

    values = list(data)
    bubble_sort(values)
    assert values == expected

    values = list(data)
    bubble_sort_early_exit(values)
    assert values == expected

    values = list(data)
    selection_sort(values)
    assert values == expected

    values = list(data)
    insertion_sort(values)
    assert values == expected


def test_random_arrays_sorted():
    rng = random.Random(7)
    for _ in range(20):
        data = [rng.randrange(-50, 50) for _ in range(rng.randrange(0, 30))]
        expected = sorted(data)

        values = list(data)
        bubble_sort(values)
        assert values == expected

        values = list(data)
        bubble_sort_early_exit(values)
        assert values == expected

        values = list(data)
        selection_sort(values)
        assert values == expected

        values = list(data)
        insertion_sort(values)
        assert values == expected


def test_bubble_sort_reports_every_comparison():
    data = [30, 50, 20, 10, 40]
    steps = []
    bubble_sort(data, lambda i, j, snap: steps.append((i, j, snap)))
    n = len(data)
    assert len(steps) == n * (n - 1) // 2
    assert steps[-1][2] == data
    assert all(j > i for i, j, _ in steps)


def test_early_exit_stops_after_one_pass_on_sorted_input():
    data = [10, 20, 30, 40, 50]
    steps = []
    bubble_sort_early_exit(data, lambda i, j, snap: steps.append((i, j)))
    assert {i for i, _ in steps} == {0}
    assert len(steps) == len(data) - 1


def test_selection_sort_step_count():
    data = [30, 50, 20, 10, 40]
    steps = []
    selection_sort(data, lambda i, j, snap: steps.append((i, j)))
    n = len(data)
    assert len(steps) == n * (n - 1) // 2


def test_insertion_sort_no_steps_on_sorted_input():
    steps = []
    insertion_sort([10, 20, 30, 40, 50], lambda i, j, snap: steps.append((i, j)))
    assert steps == []


def test_insertion_sort_swaps_every_inversion_on_reversed_input():
    data = [50, 40, 30, 20, 10]
    steps = []
    insertion_sort(data, lambda i, j, snap: steps.append(snap))
    n = len(data)
    assert len(steps) == n * (n - 1) // 2
    assert steps[-1] == [10, 20, 30, 40, 50]


def test_snapshots_are_independent_copies():
    data = [3, 1, 2]
    snaps = []
    bubble_sort(data, lambda i, j, snap: snaps.append(snap))
    assert snaps[0] is not data
    assert snaps[-1] == data


@pytest.mark.parametrize("a, b, expected", [(1, 2, -1), (2, 1, 1), (5, 5, 0)])
def test_int_compare(a, b, expected):
    assert int_compare(a, b) == expected


def test_sort_strings_days():
    days = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
    assert sort_strings(days) == [
        "Friday",
        "Monday",
        "Saturday",
        "Sunday",
        "Thursday",
        "Tuesday",
        "Wednesday",
    ]


def test_sort_strings_leaves_input_untouched():
    words = ["b", "a", "c"]
    result = sort_strings(words)
    assert words == ["b", "a", "c"]
    assert result == ["a", "b", "c"]