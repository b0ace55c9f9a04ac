# algokit

A small collection of classic algorithms and data structures. It is written in
plain Python and has no dependencies.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.sorting` provides `bubble_sort`, `bubble_sort_descending`,
  `shell_sort`, `insertion_sort`, `merge_sort`, `quick_sort`,
  `selection_sort` and `heap_sort`. Each one takes an iterable and returns a
  new list. The input is left unchanged.
- `algokit.arrays` provides `longest_unique_subarray`, `max_subarray_sum`,
  `max_subarray_sum_nonnegative`, `rotate_right`, `intersection`,
  `min_jumps`, `move_negatives_left`, `next_permutation`,
  `shortest_unsorted_length`, `spiral_order`, `largest_multiple_of_three`
  and `select_elements`.
- `algokit.linked` provides `Deque`, `LinkedList`, the `Underflow` error and
  `factorial_digits`.
- `algokit.misc` provides `digit_sum`, `card_winner`, `word_frequencies`,
  `DisjointSet`, `has_cycle` and `run_map_queries`.

## Examples

```python
from algokit.sorting import heap_sort
from algokit.arrays import max_subarray_sum, spiral_order
from algokit.linked import Deque, LinkedList, factorial_digits
from algokit.misc import word_frequencies, has_cycle

heap_sort([12, 11, 13, 5, 6, 7])           # [5, 6, 7, 11, 12, 13]
max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])   # 7
spiral_order([[1, 2, 3], [4, 5, 6]])       # [1, 2, 3, 6, 5, 4]
factorial_digits(5)                        # "120"
word_frequencies("My name sonu is sonu")   # {"My": 1, "is": 1, "name": 1, "sonu": 2}
has_cycle(3, [[1, 2], [0, 2], [0, 1]])     # True

dq = Deque()
dq.push_front(1)
dq.push_back(2)
dq.pop_front()                             # 1

items = LinkedList([7, 11, 41])
items.insert_after(1, 9)                   # positions are 1-based
list(items)                                # [7, 9, 11, 41]
```

## Errors

- `Deque.pop_front`, `Deque.pop_back`, `LinkedList.delete_start` and
  `LinkedList.delete_end` raise `Underflow` on an empty structure.
  `Underflow` is a subclass of `IndexError`.
- `LinkedList.insert_after` and `LinkedList.delete_position` raise
  `IndexError` for a position outside `1..len(list)`.
- `max_subarray_sum` raises `ValueError` for empty input.
  `largest_multiple_of_three` raises `ValueError` when no combination of
  digits exists.
- `min_jumps` returns `None` when the end cannot be reached.

## What it does not do

The package has no search functions. It offers neither binary search nor
linear search over lists. Use the standard library's `bisect` module or
`list.index` for that. It also has no command-line interface. Everything
is used by importing it.