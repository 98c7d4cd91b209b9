"""In-place sorting algorithms: quick sort, merge sort and insertion sort."""

from __future__ import annotations

import operator
from enum import Enum, auto
from typing import Any, Callable, MutableSequence

from sglib.rng import range_int

Predicate = Callable[[Any, Any], bool]


class PivotSelectionMode(Enum):
    """Strategy used by quick sort to choose its pivot."""

    FIRST = auto()
    LAST = auto()
    MIDDLE = auto()
    RANDOM = auto()
    MEDIAN_OF_THREE = auto()


def median_of_three(items: MutableSequence, first: int, last: int) -> int:
    """Return the index of the median of the first, middle and last elements of items[first:last]."""
    half = (last - first) >> 1
    last -= 1
    if first < last:
        mid = first + half
        if (items[mid] > items[first]) != (items[mid] > items[last]):
            return mid
        if (items[last] > items[first]) != (items[last] > items[mid]):
            return last
    return first


def get_pivot(items: MutableSequence, first: int, last: int, mode: PivotSelectionMode) -> int:
    """Return the pivot index for items[first:last] according to mode."""
    if mode is PivotSelectionMode.FIRST:
        return first
    if mode is PivotSelectionMode.LAST:
        return last - 1
    if mode is PivotSelectionMode.MIDDLE:
        return first + ((last - first) >> 1)
    if mode is PivotSelectionMode.RANDOM:
        return first + range_int(0, last - 1 - first)
    if mode is PivotSelectionMode.MEDIAN_OF_THREE:
        return median_of_three(items, first, last)
    raise ValueError(f"unknown pivot selection mode: {mode!r}")


def partition(items: MutableSequence, first: int, last: int, mode: PivotSelectionMode) -> int:
    """Partition items[first:last] around a pivot and return the pivot's final index.

    Elements not greater than the pivot end up before it, the rest after it.
    """
    if first >= last:
        raise ValueError(f"cannot partition an empty range [{first}, {last})")
    pivot = get_pivot(items, first, last, mode)
    items[first], items[pivot] = items[pivot], items[first]
    pivot_value = items[first]

    left = first + 1
    for index in range(left, last):
        if items[index] <= pivot_value:
            items[index], items[left] = items[left], items[index]
            left += 1

    boundary = left - 1
    items[first], items[boundary] = items[boundary], items[first]
    return boundary


def quick_sort(items: MutableSequence, mode: PivotSelectionMode = PivotSelectionMode.MIDDLE) -> None:
    """Sort items in place with quick sort using the given pivot strategy."""
    pending = [(0, len(items))]
    while pending:
        first, last = pending.pop()
        if first >= last:
            continue
        pivot = partition(items, first, last, mode)
        pending.append((pivot + 1, last))
        pending.append((first, pivot))


def merge(
    items: MutableSequence,
    first: int,
    mid: int,
    last: int,
    pred: Predicate = operator.lt,
) -> None:
    """Merge the ordered runs items[first:mid] and items[mid:last] in place.

    An element from the left run is taken only when pred(left, right) holds.
    """
    left, right = first, mid
    merged = []
    for _ in range(last - first):
        if right == last or (left != mid and pred(items[left], items[right])):
            merged.append(items[left])
            left += 1
        else:
            merged.append(items[right])
            right += 1
    items[first:last] = merged


def _merge_sort_range(items: MutableSequence, first: int, last: int, pred: Predicate) -> None:
    if first + 1 >= last:
        return
    mid = first + ((last - first) >> 1)
    _merge_sort_range(items, first, mid, pred)
    _merge_sort_range(items, mid, last, pred)
    merge(items, first, mid, last, pred)


def merge_sort(items: MutableSequence, pred: Predicate = operator.lt) -> None:
    """Sort items in place with top-down merge sort ordered by pred."""
    _merge_sort_range(items, 0, len(items), pred)


def stable_sort(items: MutableSequence) -> None:
    """Sort items in place in ascending order with merge sort."""
    if len(items) < 2:
        return
    merge_sort(items, operator.lt)


def insert_sort(items: MutableSequence, pred: Predicate = operator.lt) -> None:
    """Sort items in place with insertion sort ordered by pred."""
    for index in range(1, len(items)):
        cur = index
        while cur > 0 and not pred(items[cur - 1], items[cur]):
            items[cur - 1], items[cur] = items[cur], items[cur - 1]
            cur -= 1