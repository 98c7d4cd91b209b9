import operator

import pytest

from sglib.sort import (
    PivotSelectionMode,
    get_pivot,
    insert_sort,
    median_of_three,
    merge,
    merge_sort,
    partition,
    quick_sort,
    stable_sort,
)
from sglib.testdata import DataType, create

TEST_DATA_SIZE = 1000

ALL_DATA_TYPES = [DataType.ASC_SORTED, DataType.DESC_SORTED, DataType.DISORDER]


@pytest.mark.parametrize("data_type", ALL_DATA_TYPES)
@pytest.mark.parametrize("mode", list(PivotSelectionMode))
def test_quick_sort_matches_builtin(data_type, mode):
    raw = create(data_type, TEST_DATA_SIZE)
    items = list(raw)
    quick_sort(items, mode)
    assert items == sorted(raw)


def test_quick_sort_default_mode_sorts():
    items = [5, 3, 9, 1, 1, 0, -4]
    quick_sort(items)
    assert items == [-4, 0, 1, 1, 3, 5, 9]


def test_quick_sort_handles_empty_and_single():
    empty = []
    quick_sort(empty)
    single = [7]
    quick_sort(single)
    assert empty == [] and single == [7]


def test_quick_sort_all_equal_values():
    items = [4] * 300
    quick_sort(items, PivotSelectionMode.FIRST)
    assert items == [4] * 300


@pytest.mark.parametrize("data_type", ALL_DATA_TYPES)
def test_stable_sort_matches_builtin(data_type):
    raw = create(data_type, TEST_DATA_SIZE)
    items = list(raw)
    stable_sort(items)
    assert items == sorted(raw)


@pytest.mark.parametrize("data_type", ALL_DATA_TYPES)
def test_insert_sort_matches_builtin(data_type):
    raw = create(data_type, TEST_DATA_SIZE)
    items = list(raw)
    insert_sort(items)
    assert items == sorted(raw)


def test_insert_sort_with_descending_predicate():
    items = [3, 1, 4, 1, 5, 9, 2, 6]
    insert_sort(items, operator.gt)
    assert items == [9, 6, 5, 4, 3, 2, 1, 1]


def test_merge_sort_with_descending_predicate():
    items = [3, 1, 4, 1, 5, 9, 2, 6]
    merge_sort(items, operator.gt)
    assert items == [9, 6, 5, 4, 3, 2, 1, 1]


def test_merge_sort_with_key_predicate():
    items = [(3, "c"), (1, "a"), (2, "b")]
    merge_sort(items, lambda a, b: a[0] < b[0])
    assert [key for key, _ in items] == [1, 2, 3]


def test_stable_sort_short_inputs_unchanged():
    empty = []
    stable_sort(empty)
    single = ["x"]
    stable_sort(single)
    assert empty == [] and single == ["x"]


def test_merge_combines_two_sorted_runs():
    items = [1, 3, 5, 2, 4, 6]
    merge(items, 0, 3, 6)
    assert items == [1, 2, 3, 4, 5, 6]


def test_median_of_three_picks_median_index():
    assert median_of_three([1, 5, 3], 0, 3) == 2
    assert median_of_three([1, 3, 5], 0, 3) == 1
    assert median_of_three([3, 1, 5], 0, 3) == 0


def test_median_of_three_single_element():
    assert median_of_three([10, 20, 30], 1, 2) == 1


def test_get_pivot_fixed_modes():
    items = list(range(10))
    assert get_pivot(items, 2, 8, PivotSelectionMode.FIRST) == 2
    assert get_pivot(items, 2, 8, PivotSelectionMode.LAST) == 7
    assert get_pivot(items, 2, 8, PivotSelectionMode.MIDDLE) == 5


def test_get_pivot_random_within_range():
    items = list(range(10))
    picks = {get_pivot(items, 2, 8, PivotSelectionMode.RANDOM) for _ in range(300)}
    assert picks <= set(range(2, 8))
    assert len(picks) > 1


def test_partition_places_pivot_correctly():
    items = [7, 2, 9, 4, 4, 1, 8, 3]
    original = sorted(items)
    index = partition(items, 0, len(items), PivotSelectionMode.MIDDLE)
    pivot_value = items[index]
    assert all(value <= pivot_value for value in items[:index])
    assert all(value > pivot_value for value in items[index + 1:])
    assert sorted(items) == original


def test_partition_rejects_empty_range():
    with pytest.raises(ValueError):
        partition([1, 2, 3], 1, 1, PivotSelectionMode.FIRST)