# sglib

A small toolkit for experimenting with sorting algorithms and timing how long
code takes to run.

## Modules

### `sglib.sort`

In-place sorting over mutable sequences. Nothing is returned; the sequence
itself is reordered.

- `quick_sort(items, mode=PivotSelectionMode.MIDDLE)`: quick sort. The pivot
  is chosen by a `PivotSelectionMode`: `FIRST`, `LAST`, `MIDDLE`, `RANDOM` or
  `MEDIAN_OF_THREE`.
- `stable_sort(items)`: ascending, stable merge sort.
- `merge_sort(items, pred=operator.lt)`: top-down merge sort. The order comes
  from a "less than" predicate.
- `insert_sort(items, pred=operator.lt)`: insertion sort with the same kind of
  predicate.
- Building blocks that work on the half-open range `items[first:last]`:
  - `median_of_three(items, first, last)` returns the index of the median of
    the first, middle and last elements.
  - `get_pivot(items, first, last, mode)` returns the pivot index for a mode.
  - `partition(items, first, last, mode)` partitions the range and returns the
    pivot's final index. It raises `ValueError` on an empty range.
  - `merge(items, first, mid, last, pred=operator.lt)` merges two ordered runs.

### `sglib.testdata`

Integer lists for exercising the sorts. A negative size raises `ValueError`.

- `create_asc_sorted(size)` returns `[0, 1, ..., size - 1]`.
- `create_desc_sorted(size)` returns `[size, size - 1, ..., 1]`.
- `create_disorder(size)` returns `size` random integers, each in `[0, size]`.
- `create(data_type, size=1000)` picks one of the above by its `DataType`:
  `ASC_SORTED`, `DESC_SORTED` or `DISORDER`.

### `sglib.rng`

Draws from one shared random generator.

- `range_int(low, high)` returns an integer in `[low, high]`, with both bounds
  included.
- `range_double(low, high)` returns a float in `[low, high)`.

Both functions raise `ValueError` when `low > high`.

### `sglib.timer`

- `TimerSpec(is_log=True, is_assert=False, assert_seconds=1.0)` is a frozen
  dataclass that says what to do with a measured duration.
- `ScopePerformanceTimer(spec=None)` is a context manager. It measures the
  wall-clock time from its construction to the end of the `with` block and
  stores it in seconds in `elapsed`. If `is_log` is set, it logs
  `elapsed ms: <value>` at INFO level through the shared logger. If
  `is_assert` is set, the block raised no exception, and the duration reached
  `assert_seconds`, it raises `AssertionError`.
- `invoke_with_timer(spec, function, *args, **kwargs)` calls `function` under a
  timer and returns its result.

### `sglib.logger`

- `Logger` is the process-wide logger. Get the single instance with
  `Logger.get()`. Constructing it directly raises `TypeError`.
- `Logger.set_log_prefix(prefix)` sets the name used when the instance is first
  created. The prefix names the logger, which writes to standard output and to
  `<prefix>.log`. That file is truncated when the logger is created. The level
  is set to `TRACE` (5), which is below DEBUG.
- `Logger.get().get_logger()` and the function `get_logger()` return the
  underlying `logging.Logger`.

## Example

```python
from sglib.logger import Logger
from sglib.sort import PivotSelectionMode, quick_sort, stable_sort
from sglib.testdata import DataType, create
from sglib.timer import TimerSpec, invoke_with_timer

Logger.set_log_prefix("demo")  # logs go to stdout and demo.log

data = create(DataType.DISORDER, 1000)
invoke_with_timer(TimerSpec(), quick_sort, data, PivotSelectionMode.MEDIAN_OF_THREE)
assert data == sorted(data)

values = create(DataType.DESC_SORTED, 10)
stable_sort(values)
print(values)  # [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
```

## What it does not do

The package is a library only. It has no command-line program and no benchmark
runner. To compare the sorts, time them yourself with `ScopePerformanceTimer`
or `invoke_with_timer`.

## Running the tests

Install the package with its `test` extra, then run `pytest`.