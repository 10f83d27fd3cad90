import random
from collections import Counter

import pytest

from algocourse.slotarray import SlotArray


def test_find_empty_first_vacancy():
    array = SlotArray([3, SlotArray.EMPTY, 4, SlotArray.EMPTY])
    assert array.find_empty() == 1


def test_find_empty_none_when_full():
    assert SlotArray([1, 2, 3]).find_empty() is None


def test_delete_returns_value_and_vacates():
    array = SlotArray([7, 8, 9])
    assert array.delete(1) == 8
    assert list(array) == [7, SlotArray.EMPTY, 9]
    assert array.find_empty() == 1


def test_insert_shifts_left_towards_vacancy():
    array = SlotArray([1, 2, SlotArray.EMPTY, 4, 5])
    array.insert(4, 2, 9)
    assert list(array) == [1, 2, 4, 5, 9]


def test_insert_shifts_right_towards_vacancy():
    array = SlotArray([1, 2, 3, SlotArray.EMPTY, 5])
    array.insert(0, 3, 9)
    assert list(array) == [9, 1, 2, 3, 5]


def test_insert_into_vacancy_itself():
    array = SlotArray([1, SlotArray.EMPTY, 3])
    array.insert(1, 1, 6)
    assert list(array) == [1, 6, 3]


@pytest.mark.parametrize("index", [-1, 3])
def test_bad_index_raises(index):
    array = SlotArray([1, SlotArray.EMPTY, 3])
    with pytest.raises(IndexError):
        array.insert(index, 1, 4)
    with pytest.raises(IndexError):
        array.delete(index)


def test_churn_preserves_contents():
    rng = random.Random(42)
    size = 200
    values = [rng.randrange(100) for _ in range(size)]
    array = SlotArray(values)
    data = array.delete(size // 2)
    expected = Counter(values)
    for _ in range(300):
        empty = array.find_empty()
        array.insert(rng.randrange(size), empty, data)
        assert array.find_empty() is None
        data = array.delete(rng.randrange(size))
        held = Counter(v for v in array if v != SlotArray.EMPTY)
        held[data] += 1
        assert held == expected
        assert len(array) == size