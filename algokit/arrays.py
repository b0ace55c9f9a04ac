"""Algorithms over arrays, sequences and matrices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, chain
from typing import Any, TypeVar

T = TypeVar("T")

_DIGITS = "0123456789"


def longest_unique_subarray(values: Iterable[Any]) -> int:
    """Return the length of the longest contiguous run of pairwise distinct items."""
    best = 0
    start = 0
    last_seen: dict[Any, int] = {}
    for index, item in enumerate(values):
        previous = last_seen.get(item)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[item] = index
        best = max(best, index - start + 1)
    return best


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray (Kadane)."""
    best: int | None = None
    running = 0
    for item in values:
        running += item
        if best is None or best < running:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best


def max_subarray_sum_nonnegative(values: Iterable[int]) -> int:
    """Return the largest contiguous sum, counting the empty subarray as 0."""
    best = 0
    running = 0
    for item in values:
        running += item
        if best <= running:
            best = running
        elif running < 0:
            running = 0
    return best


def rotate_right(values: Iterable[T]) -> list[T]:
    """Rotate by one position clockwise: the last item moves to the front."""
    items = list(values)
    if not items:
        return items
    return [items[-1], *items[:-1]]


def intersection(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return items of ``first`` also found in ``second``, in order.

    The scan stops at the first item of ``first`` that repeats an earlier one.
    """
    lookup = set(second)
    seen: set[T] = set()
    common: list[T] = []
    for item in first:
        if item in seen:
            break
        seen.add(item)
        if item in lookup:
            common.append(item)
    return common


def min_jumps(values: Sequence[int]) -> int | None:
    """Count greedy jumps needed to pass the end of ``values``.

    Each item is the number of steps that may be taken from it. Returns None
    when a zero is met on the way, since the end cannot then be reached.
    """
    if any(step < 0 for step in values):
        raise ValueError("jump lengths must not be negative")
    if not values:
        return None
    count = 0
    index = 0
    while index < len(values):
        step = values[index]
        if step == 0:
            return None
        count += 1
        index += step + 1
    return count


def move_negatives_left(values: Iterable[int]) -> list[int]:
    """Move every negative item to the front, keeping negatives in order."""
    items = list(values)
    boundary = 0
    for index, item in enumerate(items):
        if item < 0:
            if index != boundary:
                items[index], items[boundary] = items[boundary], items[index]
            boundary += 1
    return items


def next_permutation(values: Iterable[T]) -> list[T]:
    """Return the lexicographically next permutation, wrapping to ascending order."""
    items = list(values)
    pivot = len(items) - 2
    while pivot >= 0 and not items[pivot] < items[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        items.reverse()
        return items
    successor = len(items) - 1
    while not items[pivot] < items[successor]:
        successor -= 1
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1 :] = reversed(items[pivot + 1 :])
    return items


def shortest_unsorted_length(values: Sequence[Any]) -> int:
    """Return the length of the shortest subarray whose sorting sorts everything."""
    n = len(values)
    if n <= 1:
        return 0
    prefix_max = list(accumulate(values, max))
    suffix_min = list(accumulate(reversed(values), min))[::-1]

    def out_of_place(i: int) -> bool:
        if i + 1 < n and values[i] > suffix_min[i + 1]:
            return True
        return i > 0 and values[i] < prefix_max[i - 1]

    misplaced = [i for i in range(n) if out_of_place(i)]
    if not misplaced:
        return 0
    return misplaced[-1] - misplaced[0] + 1


def spiral_order(matrix: Iterable[Iterable[T]]) -> list[T]:
    """Return the items of a rectangular matrix in clockwise spiral order."""
    rows = [list(row) for row in matrix]
    if not rows:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must all have the same length")
    height = len(rows)
    total = height * width
    if total == 0:
        return []

    directions = ((0, 1), (1, 0), (0, -1), (-1, 0))
    heading = 0
    i = j = 0
    visited = {(0, 0)}
    order = [rows[0][0]]
    while len(order) < total:
        di, dj = directions[heading]
        x, y = i + di, j + dj
        if 0 <= x < height and 0 <= y < width and (x, y) not in visited:
            visited.add((x, y))
            order.append(rows[x][y])
            i, j = x, y
        else:
            heading = (heading + 1) % 4
    return order


def largest_multiple_of_three(text: str) -> str:
    """Return the largest number divisible by three made of the digits in ``text``.

    Characters other than decimal digits are ignored. Raises ValueError when
    no combination exists.
    """
    digits = sorted((int(c) for c in text if c in _DIGITS), reverse=True)
    if digits == [0]:
        raise ValueError("no combination exists")

    buckets = {r: [d for d in digits if d % 3 == r] for r in range(3)}
    remainder = sum(digits) % 3
    if remainder:
        own = buckets[remainder]
        if own:
            own.pop()
        else:
            pool = buckets[3 - remainder]
            if len(pool) < 2:
                raise ValueError("no combination exists")
            del pool[-2:]
            if len(digits) == 2 and not pool:
                raise ValueError("no combination exists")

    kept = sorted(chain.from_iterable(buckets.values()), reverse=True)
    return "".join(map(str, kept))


def select_elements(
    rows: Iterable[Iterable[T]], queries: Iterable[tuple[int, int]]
) -> list[T]:
    """Answer each ``(row, column)`` query with the element stored there."""
    table = [list(row) for row in rows]

    def element(row: int, column: int) -> T:
        if not 0 <= row < len(table) or not 0 <= column < len(table[row]):
            raise IndexError(f"no element at ({row}, {column})")
        return table[row][column]

    return [element(row, column) for row, column in queries]