# algocourse

The classic algorithms and data structures of an introductory programming
course, written as plain Python functions and classes. The package uses
only the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `algocourse.basics` | `celsius_to_fahrenheit`, `fahrenheit_to_celsius`, `integer_arithmetic` (division truncates toward zero), `grade_comment`, `classify_number`, `parity_labels`, `multiplication_table`, `format_table` |
| `algocourse.recursion` | `triangle_area`, `trapezoid_area`, `factorial`, `fibonacci`, `unwind_order`, `StudentRecord` and `initialize_student_record` |
| `algocourse.strings` | `compare` and `compare_prefix` (three-way results -1, 0, 1) and `comparison_report` |
| `algocourse.montecarlo` | `estimate_pi`, `pi_series` and the `PiEstimate` result |
| `algocourse.search` | `linear_search`, `binary_search`, `bsearch` (each returns an index or `None`) and `lsearch`, which appends a missing key |
| `algocourse.slotarray` | `SlotArray`, fixed slots where `-1` marks the vacant one, with `find_empty`, `insert` and `delete` |
| `algocourse.fixedqueues` | bounded `ArrayStack`, `LinearQueue` and `RingQueue`, and the errors they raise |
| `algocourse.life` | `LifeGrid`, Conway's Game of Life on a grid whose edges wrap |
| `algocourse.simplesort` | `bubble_sort`, `bubble_sort_early_exit`, `selection_sort`, `insertion_sort`, `int_compare`, `sort_strings`, `format_array` |
| `algocourse.fastsort` | `partition`, `quicksort`, `quicksort_stack`, `radix_sort`, `merge_sort`, `random_data` |
| `algocourse.linkedlist` | singly linked `LinkedList` and its `Node` |
| `algocourse.grids` | `random_grid`, `random_cube`, `format_grid`, `flatten` |
| `algocourse.linkedqueues` | `LinkedStack` and `LinkedQueue` built from nodes |
| `algocourse.doubly` | `DoublyLinkedList` and `CircularDoublyLinkedList` |
| `algocourse.iris` | `IrisSample`, `parse_iris`, `read_iris`, `iris_average` |
| `algocourse.pgm` | `PgmImage`, `parse_pgm`, `read_pgm`, `format_pgm`, `write_pgm`, `convolve` and the kernels `LAPLACIAN_8`, `SOBEL_DIAGONAL`, `GAUSSIAN_3` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Using the library

```python
from algocourse.recursion import factorial, fibonacci
from algocourse.search import binary_search, lsearch

factorial(5)     # 120
fibonacci(10)    # 55

data = [50, 80, 150, 210, 250, 280, 330, 470, 510, 530, 800, 900, 990]
binary_search(data, 800)   # 10
binary_search(data, 801)   # None

items = [10, 20, 30, 40, 50]
lsearch(items, 25, capacity=6)   # 5; items now ends with 25
```

`lsearch` raises `OverflowError` when the key is missing and the list
already holds `capacity` elements.

The sorting functions work in place. The simple sorts take an optional
`on_step(i, j, snapshot)` callback, so intermediate states can be collected
or printed:

```python
from algocourse.simplesort import bubble_sort, format_array

steps = []
values = [30, 50, 20, 10, 40]
bubble_sort(values, on_step=lambda i, j, snap: steps.append(format_array(snap)))
format_array(values)   # 'array: 10 20 30 40 50 '
```

`quicksort` takes `on_partition(level, pivot, left, right)` and
`radix_sort` (non-negative integers only) takes `on_pass(place, snapshot)`.

The bounded containers raise exceptions instead of returning status codes:
`StackOverflowError`, `StackEmptyError`, `QueueFullError` and
`QueueEmptyError`. A `LinearQueue` never reuses slots, so it accepts at most
`capacity` values over its whole life; a `RingQueue` holds at most
`capacity - 1` at a time. `LinkedStack` and `LinkedQueue` are unbounded and
raise the same empty errors.

Linked structures iterate like ordinary containers:

```python
from algocourse.linkedlist import LinkedList

numbers = LinkedList()
numbers.insert_head(300)
numbers.insert_tail(400)
numbers.search(400)    # 1
numbers.format()       # 'Linked_list [ 300 400 ]'
```

## Command-line tools

```
algocourse-pi [--points N] [--series N] [--seed S]
```

Estimates pi from `--points` random points in the unit square (1000 by
default). With `--series N` it prints one estimate each for 10, 100, ... up
to 10**N points, with the signed error against pi.

```
algocourse-life [--generations N] [--width W] [--height H] [--seed S] [--escape] [--delay SECONDS]
```

Runs the Game of Life from a random first generation (100 generations on a
40 by 20 grid by default) and prints each generation. `--escape` redraws in
place with terminal escape codes and waits one second between generations
unless `--delay` says otherwise.

```
algocourse-iris [PATH]
```

Reads comma-separated iris measurements (`iris.dat` by default) and prints
the number of samples and the average sepal and petal sizes. A file of 256
or more samples is rejected.

```
algocourse-pgm [INPUT] [OUTPUT] [--filter {gaussian,laplacian8,sobel-d}]
```

Reads a plain PGM (P2) image (`sample.pgm` by default), applies a 3x3
convolution filter (`laplacian8` by default) and writes the result, by
default to `<filter>.pgm`. Pixels on the border are set to zero.

## What it does not do

The package reads no data interactively, and the PGM functions handle only
the plain-text P2 form, not binary P5 images.