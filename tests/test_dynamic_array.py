import pytest

from voidengine.dynamic_array import DEFAULT_CAPACITY, DynamicArray


def test_source_scenario_order_and_growth():
    arr = DynamicArray(4)
    assert arr.capacity == 4
    arr.push_back(10)
    arr.push_back(20)
    arr.insert(arr.find(10), 40)
    arr.insert(arr.find(20), 65)
    arr.push_back(284)
    assert list(arr) == [40, 10, 65, 20, 284]
    assert arr.capacity == 6


def test_default_capacity():
    assert DynamicArray().capacity == DEFAULT_CAPACITY


@pytest.mark.parametrize("capacity", [0, -3])
def test_non_positive_capacity_rejected(capacity):
    with pytest.raises(ValueError):
        DynamicArray(capacity)


def test_capacity_unchanged_until_full():
    arr = DynamicArray(4, [1, 2, 3, 4])
    assert arr.capacity == 4
    arr.push_back(5)
    assert arr.capacity == 6
    assert len(arr) == 5


def test_capacity_one_still_grows():
    arr = DynamicArray(1)
    arr.push_back("a")
    arr.push_back("b")
    assert list(arr) == ["a", "b"]
    assert arr.capacity >= 2


def test_insert_at_end_appends():
    arr = DynamicArray(4, [1, 2])
    arr.insert(len(arr), 3)
    assert list(arr) == [1, 2, 3]


def test_insert_out_of_range():
    arr = DynamicArray(4, [1])
    with pytest.raises(IndexError):
        arr.insert(5, 9)


def test_remove_shifts_tail():
    arr = DynamicArray(4, [1, 2, 3, 4])
    assert arr.remove(1) == 2
    assert list(arr) == [1, 3, 4]


def test_remove_out_of_range_is_ignored():
    arr = DynamicArray(4, [1, 2])
    assert arr.remove(2) is None
    assert list(arr) == [1, 2]


def test_find_missing_returns_none():
    arr = DynamicArray(4, [1, 2])
    assert arr.find(7) is None
    assert arr.find(2) == 1


def test_pop_back():
    arr = DynamicArray(4, [1, 2])
    assert arr.pop_back() == 2
    assert arr.pop_back() == 1
    assert arr.is_empty()
    assert arr.pop_back() is None
    assert len(arr) == 0


def test_indexing_and_assignment():
    arr = DynamicArray(4, [5, 6, 7])
    assert arr[0] == 5
    assert arr[-1] == 7
    arr[1] = 60
    assert list(arr) == [5, 60, 7]


def test_index_out_of_bounds():
    arr = DynamicArray(4, [5])
    with pytest.raises(IndexError):
        arr[1]
    with pytest.raises(IndexError):
        arr[1] = 3
    assert list(arr) == [5]
    assert len(arr) == 1