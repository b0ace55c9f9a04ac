import pytest

from algokit.misc import (
    DisjointSet,
    card_winner,
    digit_sum,
    has_cycle,
    run_map_queries,
    word_frequencies,
)


@pytest.mark.parametrize("n", [0, 1, 7, 9])
def test_digit_sum_single_digit(n):
    assert digit_sum(n) == n


@pytest.mark.parametrize("n", [12, 345, 90817])
def test_digit_sum_ignores_trailing_zeros(n):
    assert digit_sum(n * 10) == digit_sum(n)
    assert digit_sum(n * 1000) == digit_sum(n)


def test_digit_sum_negative_is_zero():
    assert digit_sum(-123) == 0


def test_card_winner_first_player_sweeps():
    pairs = [(9, 1), (81, 10), (99, 100)]
    assert card_winner(pairs) == (0, len(pairs))


def test_card_winner_second_player_sweeps():
    pairs = [(1, 9), (10, 81)]
    assert card_winner(pairs) == (1, len(pairs))


def test_card_winner_all_ties_is_draw():
    pairs = [(12, 21), (30, 3), (5, 5)]
    assert card_winner(pairs) == (2, len(pairs))


def test_word_frequencies_source_example():
    assert word_frequencies("My name sonu is sonu") == {
        "My": 1,
        "is": 1,
        "name": 1,
        "sonu": 2,
    }


def test_word_frequencies_invariants():
    text = "b a c a b a  \n d"
    counts = word_frequencies(text)
    assert sum(counts.values()) == len(text.split())
    assert list(counts) == sorted(counts)
    assert set(counts) == set(text.split())


def test_disjoint_set_union_and_find():
    sets = DisjointSet()
    assert sets.find(4) == 4
    sets.union(1, 2)
    sets.union(3, 4)
    assert sets.find(1) == sets.find(2)
    assert sets.find(3) == sets.find(4)
    assert sets.find(1) != sets.find(3)
    sets.union(2, 4)
    assert sets.find(1) == sets.find(3)


def test_has_cycle_triangle():
    adjacency = [[1, 2], [0, 2], [0, 1]]
    assert has_cycle(3, adjacency) is True


def test_has_cycle_path_is_acyclic():
    adjacency = [[1], [0, 2], [1, 3], [2]]
    assert has_cycle(4, adjacency) is False


def test_has_cycle_disconnected_with_cycle():
    adjacency = [[1], [0], [3, 4], [2, 4], [2, 3]]
    assert has_cycle(5, adjacency) is True


def test_map_queries_accumulate_and_erase():
    queries = [
        (1, "alice", 3),
        (1, "alice", 4),
        (3, "alice"),
        (2, "alice"),
        (3, "alice"),
        (3, "bob"),
    ]
    assert run_map_queries(queries) == [sum([3, 4]), 0, 0]


def test_map_queries_erase_missing_is_harmless():
    assert run_map_queries([(2, "x"), (1, "x", 5), (3, "x")]) == [5]


def test_map_queries_unknown_type():
    with pytest.raises(ValueError):
        run_map_queries([(4, "x")])