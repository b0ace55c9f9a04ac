"""Assorted small problems: digit sums, card games, word counts, cycles and maps."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``; non-positive ``n`` gives 0."""
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit
    return total


def card_winner(pairs: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Score rounds by digit sum and return ``(winner, points)``.

    Each pair holds the two players' cards. The larger digit sum wins the
    round and a tie gives both a point. The winner is 0 for the first player,
    1 for the second and 2 for a draw.
    """
    first = second = 0
    for a, b in pairs:
        sum_a, sum_b = digit_sum(a), digit_sum(b)
        if sum_a >= sum_b:
            first += 1
        if sum_b >= sum_a:
            second += 1
    if first > second:
        return 0, first
    if second > first:
        return 1, second
    return 2, first


def word_frequencies(text: str) -> dict[str, int]:
    """Count whitespace-separated words, keyed in sorted order."""
    counts = Counter(text.split())
    return dict(sorted(counts.items()))


class DisjointSet:
    """Union-find over hashable elements; unseen elements are their own roots."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}

    def find(self, v: Hashable) -> Hashable:
        """Return the representative of the set holding ``v``."""
        while v in self._parent:
            v = self._parent[v]
        return v

    def union(self, a: Hashable, b: Hashable) -> None:
        """Merge the sets holding ``a`` and ``b``."""
        x, y = self.find(a), self.find(b)
        if x != y:
            self._parent[x] = y


def has_cycle(vertex_count: int, adjacency: Sequence[Iterable[int]]) -> bool:
    """Tell whether an undirected graph given by adjacency lists has a cycle."""
    sets = DisjointSet()
    for vertex in range(vertex_count):
        for neighbour in adjacency[vertex]:
            if vertex < neighbour:
                a, b = sets.find(vertex), sets.find(neighbour)
                if a == b:
                    return True
                sets.union(a, b)
    return False


def run_map_queries(queries: Iterable[Sequence[Any]]) -> list[int]:
    """Run map queries and return the answers to lookups.

    ``(1, name, amount)`` adds ``amount`` to ``name``, ``(2, name)`` removes
    ``name`` and ``(3, name)`` reports its value, 0 when absent.
    """
    totals: dict[str, int] = {}
    answers: list[int] = []
    for query in queries:
        kind, name, *rest = query
        if kind == 1:
            (amount,) = rest
            totals[name] = totals.get(name, 0) + amount
        elif kind == 2:
            totals.pop(name, None)
        elif kind == 3:
            answers.append(totals.get(name, 0))
        else:
            raise ValueError(f"unknown query type {kind!r}")
    return answers