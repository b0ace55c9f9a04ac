"""Comparison sorts.

Every function takes an iterable of mutually comparable items and returns a
new list. The input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort ascending by repeatedly swapping adjacent out-of-order items."""
    items = list(values)
    n = len(items)
    for settled in range(n - 1):
        # The last `settled` items are already in their final places.
        for j in range(n - settled - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def bubble_sort_descending(values: Iterable[T]) -> list[T]:
    """Sort descending, bubbling larger items towards the front."""
    items = list(values)
    n = len(items)
    for _ in range(n):
        for j in range(n - 1, 0, -1):
            if items[j] > items[j - 1]:
                items[j], items[j - 1] = items[j - 1], items[j]
    return items


def shell_sort(values: Iterable[T]) -> list[T]:
    """Sort ascending with gapped insertion sorts, halving the gap each round."""
    items = list(values)
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort ascending by inserting each item into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge(first: list[Any], second: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(first) and j < len(second):
        left, right = first[i], second[j]
        if left < right:
            merged.append(left)
            i += 1
        elif left > right:
            merged.append(right)
            j += 1
        else:
            merged.append(left)
            merged.append(right)
            i += 1
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Sort ascending by splitting in halves and merging the sorted halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], start: int, end: int) -> int:
    """Place items[start] at its final index within [start, end] and return it."""
    pivot = items[start]
    index = start + sum(1 for item in items[start + 1 : end + 1] if item < pivot)
    items[start], items[index] = items[index], items[start]

    i, j = start, end
    while i < index and j > index:
        if items[i] < pivot:
            i += 1
        elif not items[j] < pivot:
            j -= 1
        else:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return index


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sort ascending by partitioning around the first item of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        p = _partition(items, start, end)
        pending.append((start, p - 1))
        pending.append((p + 1, end))
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort ascending by selecting the smallest remaining item each pass."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = i
        for j in range(i, n):
            if items[smallest] > items[j]:
                smallest = j
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Sort ascending by building a max-heap and extracting its root repeatedly."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, i)
    for end in range(n - 1, -1, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items