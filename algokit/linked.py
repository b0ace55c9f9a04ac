"""Linked structures: a double-ended queue, a singly linked list and big factorials."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Underflow(IndexError):
    """Raised when an item is removed from an empty structure."""


@dataclass
class _Node(Generic[T]):
    data: T
    next: _Node[T] | None = None


class Deque(Generic[T]):
    """A double-ended queue built from singly linked nodes."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._front: _Node[T] | None = None
        self._rear: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: T) -> None:
        """Add ``value`` before the first item."""
        node = _Node(value, self._front)
        self._front = node
        if self._rear is None:
            self._rear = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Add ``value`` after the last item."""
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first item."""
        if self._front is None:
            raise Underflow("pop from an empty deque")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def pop_back(self) -> T:
        """Remove and return the last item."""
        if self._front is None or self._rear is None:
            raise Underflow("pop from an empty deque")
        node = self._rear
        if self._front is node:
            self._front = self._rear = None
        else:
            before = self._front
            while before.next is not node:
                assert before.next is not None
                before = before.next
            before.next = None
            self._rear = before
        self._size -= 1
        return node.data

    def is_empty(self) -> bool:
        """Tell whether the deque holds no items."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"


class LinkedList(Generic[T]):
    """A singly linked list with 1-based positions."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._size = 0
        tail: _Node[T] | None = None
        for value in values:
            node = _Node(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _node_at(self, position: int) -> _Node[T]:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def _check_position(self, position: int) -> None:
        if not 1 <= position <= self._size:
            raise IndexError(f"{position} is not a valid position")

    def insert_start(self, data: T) -> None:
        """Insert ``data`` as the new first element."""
        self._head = _Node(data, self._head)
        self._size += 1

    def insert_last(self, data: T) -> None:
        """Append ``data`` as the new last element."""
        node = _Node(data)
        if self._head is None:
            self._head = node
        else:
            self._node_at(self._size).next = node
        self._size += 1

    def insert_after(self, position: int, data: T) -> None:
        """Insert ``data`` right after the element at 1-based ``position``."""
        self._check_position(position)
        before = self._node_at(position)
        before.next = _Node(data, before.next)
        self._size += 1

    def delete_start(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise Underflow("linked list is empty, nothing to delete")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def delete_end(self) -> T:
        """Remove and return the last element."""
        if self._head is None:
            raise Underflow("linked list is empty, nothing to delete")
        if self._size == 1:
            return self.delete_start()
        before = self._node_at(self._size - 1)
        node = before.next
        assert node is not None
        before.next = None
        self._size -= 1
        return node.data

    def delete_position(self, position: int) -> T:
        """Remove and return the element at 1-based ``position``."""
        self._check_position(position)
        if position == 1:
            return self.delete_start()
        before = self._node_at(position - 1)
        node = before.next
        assert node is not None
        before.next = node.next
        self._size -= 1
        return node.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def factorial_digits(n: int) -> str:
    """Return the decimal digits of ``n!`` using digit-by-digit multiplication."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    # Least significant digit first.
    digits: list[Any] = [int(c) for c in reversed(str(n))]
    for factor in range(n - 1, 0, -1):
        carry = 0
        for index, digit in enumerate(digits):
            value = digit * factor + carry
            carry, digits[index] = divmod(value, 10)
        while carry:
            carry, digit = divmod(carry, 10)
            digits.append(digit)
    return "".join(str(d) for d in reversed(digits))