# gamecore

Building blocks for game servers, in plain Python with no third-party
dependencies:

- **Sorting algorithms** with custom comparators and statistics: bubble,
  selection, insertion, quick (Lomuto, optimised, three-way, iterative,
  pivot strategies) and merge sort (top-down, bottom-up, optimised,
  in-place, k-way), plus a factory that picks an algorithm from the shape
  of the data.
- **Byte-string helpers** modelled on the C string functions: `memcpy`,
  `memmove`, `strcpy`, `strncpy`, `strlen` and `strcmp`, working on
  `bytearray` buffers.
- **A hashed timer wheel** for scheduling one-shot callbacks after a delay.
- **A cached thread pool** that grows on demand and retires idle workers,
  with rejection policies and statistics.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Sorting

Every sort works in place on a list. The comparator is a "less than"
function that returns `True` when its first argument belongs before the
second; it defaults to ascending order (`operator.lt`).

Modules: `gamecore.bubble_sort`, `gamecore.selection_sort`,
`gamecore.insertion_sort`, `gamecore.quick_sort`, `gamecore.merge_sort`.
Each offers a plain sort, a `*_descending` variant, an `is_sorted` check
and a `*_with_stats` function returning a dataclass of counters
(`BubbleStats`, `SelectionStats`, `InsertionStats`, `QuickStats`,
`MergeStats`) with the elapsed time in `time_ms`.

```python
from gamecore.quick_sort import quick_sort, PivotStrategy, quick_sort_with_pivot_strategy
from gamecore.merge_sort import merge_sorted, k_way_merge_sort
from gamecore.bubble_sort import bubble_sort_with_stats

data = [64, 34, 25, 12, 22, 11, 90]
quick_sort(data)
# data == [11, 12, 22, 25, 34, 64, 90]

words = ["banana", "apple", "cherry", "date"]
quick_sort(words, lambda a, b: a > b)
# words == ["date", "cherry", "banana", "apple"]

values = [9, 4, 7, 1, 3]
quick_sort_with_pivot_strategy(values, PivotStrategy.MEDIAN_OF_THREE)

stats = bubble_sort_with_stats([3, 1, 2])
print(stats.comparisons, stats.swaps, stats.passes)

merge_sorted([1, 4, 7], [2, 3, 9])   # [1, 2, 3, 4, 7, 9]

items = [5, 2, 8, 1, 9, 3]
k_way_merge_sort(items, 3)
```

`gamecore.selection_sort.find_extremum_index` raises `ValueError` for a
range that is not `0 <= start < end < len(arr)`.

### The sort factory

`gamecore.sort_factory` runs an algorithm chosen by `SortType`, recommends
one from `DataCharacteristics`, and times algorithms against each other.

```python
from gamecore.sort_factory import (
    SortType, sort_with, auto_sort, benchmark, best_algorithm, analyze_data,
    algorithm_info, complexity_info, library_info,
)

values = [5, 3, 5, 3, 5, 3]
sort_with(values, SortType.THREE_WAY_QUICK_SORT)

chosen = auto_sort(list(range(100, 0, -1)))   # SortType.MERGE_SORT

best_algorithm(20)                            # SortType.INSERTION_SORT
best_algorithm(5000, has_duplicates=True)     # SortType.THREE_WAY_QUICK_SORT

for result in benchmark([9, 2, 7, 4, 1]):     # fastest first
    print(result.algorithm, result.time_ms, result.description)

print(complexity_info(SortType.MERGE_SORT))
print(library_info())                         # "Sorting Library v1.0.0"
```

`analyze_data` samples the data to estimate whether it is nearly sorted and
whether it holds many duplicates. Without an explicit list, `benchmark`
leaves out the quadratic algorithms for more than 1000 items. Test data can
be made with `random_data`, `sorted_data`, `reverse_sorted_data` and
`duplicate_data`.

## Byte-string helpers

`gamecore.string_utils` writes into `bytearray` (or writable `memoryview`)
buffers and reads strings from bytes-like objects or `str` (as UTF-8), up to
the first NUL byte. Out-of-range sizes raise `ValueError` instead of
overrunning the buffer.

```python
from gamecore.string_utils import memcpy, memmove, strcpy, strncpy, strlen, strcmp

buf = bytearray(b"1234567890")
memmove(buf, 2, 0, 8)          # overlapping move within one buffer
# buf == bytearray(b"1212345678")

dest = bytearray(10)
strncpy(dest, b"hello", 3)     # dest starts with b"hel"

strlen(b"test123")             # 7
strcmp(b"abc", b"abc")         # 0
strcmp(b"abc", b"abd")         # -1
strcmp(b"abd", b"abc")         # 1
```

## Timer wheel

`gamecore.timer_wheel.TimerWheel(slot_num=1024, tick_ms=100)` schedules
one-shot callbacks. `add_timer` returns an id that `cancel_timer` accepts;
`cancel_timer` returns whether a pending timer was removed.

```python
import time
from gamecore.timer_wheel import TimerType, create_timer

timer = create_timer(TimerType.WHEEL)
timer.run()
timer.add_timer(500, lambda: print("500ms timer!"))
timer.add_timer(1500, lambda: print("1500ms timer!"))
time.sleep(3)
timer.stop()
```

`run()` ticks in a background thread; `tick()` can also be driven by hand.
A timer works as a context manager that runs on entry and stops on exit.
`create_timer` only builds the wheel; other `TimerType` values raise
`ValueError`.

## Cached thread pool

`gamecore.cached_thread_pool.CachedThreadPool` takes a `ThreadPoolConfig`
(from `gamecore.thread_pool`), a thread count, or nothing for the defaults.
It starts `core_threads` workers and adds more, up to `max_threads`, when
all are busy; extra workers idle for `keep_alive_ms` exit on their own.

```python
from gamecore.cached_thread_pool import CachedThreadPool
from gamecore.thread_pool import RejectionPolicy, ThreadPoolConfig

config = ThreadPoolConfig(core_threads=2, max_threads=8, max_queue_size=100)
with CachedThreadPool(config) as pool:       # start() on entry, shutdown() on exit
    pool.rejection_policy = RejectionPolicy.CALLER_RUNS
    future = pool.submit_with_result(lambda x: x * x, 7)
    print(future.result())                   # 49
    pool.submit_batch([lambda: None] * 5)
    print(pool.stats())
```

`shutdown()` lets workers finish the queue; `shutdown_now()` drops it.
`await_termination(timeout)` waits in seconds. When a task cannot be
queued, `CALLER_RUNS` runs it on the submitting thread and
`DISCARD_OLDEST` replaces the oldest queued task; the other policies
decline it, so `submit` returns `False` and the future from
`submit_with_result` holds a `RuntimeError`.

## What this package does not do

There is only one thread pool: no fixed-size or priority-ordered pool and
no factory or benchmark for choosing between pool types. `TaskRejectedError`
and `ThreadPoolType` are defined in `gamecore.thread_pool`, but the cached
pool never raises the former. The package provides no command-line program.